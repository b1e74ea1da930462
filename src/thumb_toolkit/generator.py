"""
Module: generator

Purpose:
    Generate every configured thumbnail for one uploaded image. The source
    is decoded once and shared read-only; each spec is resolved to a
    CanvasPlan, composited, optionally watermarked and encoded.

Key Classes:
    - ThumbnailGenerator: Per-configuration generator
    - ThumbnailResult: Encoded thumbnail with its geometry
    - GenerationError: A spec failed in the backend

Dependencies:
    - concurrent.futures (std): One task per spec when max_workers > 1
    - geometry: resolve_plan, position
    - compositing: composite, get_backend

Used By:
    - Host application upload handling (stores ThumbnailResult.data)

Pipeline (per spec):
    1. resolve_plan(rule, source size) -> CanvasPlan
    2. composite() -> canvas raster (resample, fill, copy)
    3. position() + composite_overlay() when a watermark is configured
    4. encode() in the spec's format, else the source format
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Optional

from .compositing import composite, get_backend
from .compositing.backends import DecodedImage, RasterBackend
from .config import ConfigurationError, ThumbsConfig
from .core.models import CanvasPlan, Dimensions, ThumbnailSpec, WatermarkPlacement
from .geometry import position, resolve_plan

logger = logging.getLogger(__name__)

# Used when neither the spec nor the decoded source names a format
DEFAULT_FORMAT = "PNG"


class GenerationError(Exception):
    """Error while rendering a thumbnail."""
    
    def __init__(self, message: str, name: str = ""):
        super().__init__(message)
        self.name = name


@dataclass(frozen=True)
class ThumbnailResult:
    """
    One generated thumbnail (immutable).
    
    Attributes:
        name: Spec name
        plan: Geometry used to render it
        size: Final canvas size
        format: PIL format name the data is encoded in
        data: Encoded image bytes
        placement: Watermark position, None when no watermark was applied
    """
    name: str
    plan: CanvasPlan
    size: Dimensions
    format: str
    data: bytes
    placement: Optional[WatermarkPlacement] = None


class ThumbnailGenerator:
    """
    Generates the configured thumbnails of uploaded images.
    
    The backend and the watermark overlay are set up once and reused for
    every image.
    
    Example:
        >>> config = config_from_dict({"thumbs": {"small": {"width": 200}}})
        >>> generator = ThumbnailGenerator(config)
        >>> results = generator.generate(upload_bytes)
        >>> results[0].size
        Dimensions(200x100)
    """
    
    def __init__(
        self,
        config: ThumbsConfig,
        backend: Optional[RasterBackend] = None,
        watermark: Optional[bytes] = None,
    ) -> None:
        """
        Initialize generator.
        
        Args:
            config: Thumbnail configuration
            backend: Raster backend, defaults to get_backend(config.backend)
            watermark: Overlay image bytes, defaults to config.read_watermark()
            
        Raises:
            UnsupportedBackend: If config.backend is unknown
            BackendUnavailable: If the backend library is missing
            ConfigurationError: If the configured watermark cannot be read
        """
        self.config = config
        self.backend = backend if backend is not None else get_backend(config.backend)
        
        if watermark is None:
            watermark = config.read_watermark()
        self._overlay: Optional[DecodedImage] = None
        if watermark is not None:
            try:
                self._overlay = self.backend.decode(watermark)
            except (OSError, ValueError) as exc:
                raise ConfigurationError(f"Watermark image cannot be decoded: {exc}", path="watermark") from exc
        elif config.uses_watermark:
            logger.warning("Watermark anchors are configured but no watermark image is set; skipping watermarks")
    
    @property
    def overlay_size(self) -> Optional[Dimensions]:
        return self._overlay.size if self._overlay else None
    
    def plans(self, width: int, height: int) -> dict[str, CanvasPlan]:
        """
        Resolve every spec for a source size without touching pixels.
        
        Args:
            width: Source width in pixels
            height: Source height in pixels
            
        Returns:
            Dict mapping spec name to CanvasPlan, in configuration order
        """
        return {spec.name: resolve_plan(spec.rule, width, height) for spec in self.config.thumbs}
    
    def generate(self, data: bytes) -> list[ThumbnailResult]:
        """
        Generate all thumbnails of an encoded image.
        
        Args:
            data: Encoded source image bytes
            
        Returns:
            One ThumbnailResult per spec, in configuration order
            
        Raises:
            GenerationError: If the source cannot be decoded or a spec fails
        """
        try:
            source = self.backend.decode(data)
        except (OSError, ValueError) as exc:
            raise GenerationError(f"Source image cannot be decoded: {exc}") from exc
        return self.generate_from(source)
    
    def generate_from(self, source: DecodedImage) -> list[ThumbnailResult]:
        """
        Generate all thumbnails of an already decoded image.
        
        Args:
            source: Decoded source (shared read-only between specs)
            
        Returns:
            One ThumbnailResult per spec, in configuration order
            
        Raises:
            GenerationError: If a spec fails
        """
        start = time.perf_counter()
        specs = self.config.thumbs
        workers = min(self.config.max_workers, len(specs))
        
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = [pool.submit(self.render, spec, source) for spec in specs]
                results = [future.result() for future in futures]
        else:
            results = [self.render(spec, source) for spec in specs]
        
        elapsed = time.perf_counter() - start
        logger.info(
            f"Generated {len(results)} thumbnails from {source.width}x{source.height} "
            f"{source.format or 'image'} in {elapsed:.2f}s"
        )
        return results
    
    def render(self, spec: ThumbnailSpec, source: DecodedImage) -> ThumbnailResult:
        """
        Render a single spec.
        
        Args:
            spec: Thumbnail spec
            source: Decoded source
            
        Returns:
            ThumbnailResult
            
        Raises:
            GenerationError: If a backend call fails
        """
        plan = resolve_plan(spec.rule, source.width, source.height)
        logger.debug(f"Thumbnail {spec.name!r}: {plan.as_tuple()} -> {plan.canvas_width}x{plan.canvas_height}")
        
        fmt = spec.output_format or source.format or DEFAULT_FORMAT
        try:
            canvas = composite(self.backend, source.raster, plan, self.config.background)
            canvas, placement = self._apply_watermark(spec, plan, canvas)
            data = self.backend.encode(canvas, fmt, spec.quality)
        except (OSError, ValueError, KeyError) as exc:
            logger.error(f"Thumbnail {spec.name!r} failed: {exc}")
            raise GenerationError(f"Thumbnail {spec.name!r} failed: {exc}", name=spec.name) from exc
        
        return ThumbnailResult(
            name=spec.name,
            plan=plan,
            size=self.backend.size(canvas),
            format=fmt,
            data=data,
            placement=placement,
        )
    
    def _apply_watermark(
        self,
        spec: ThumbnailSpec,
        plan: CanvasPlan,
        canvas: Any,
    ) -> tuple[Any, Optional[WatermarkPlacement]]:
        if spec.watermark is None or self._overlay is None:
            return canvas, None
        
        canvas_size = self.backend.size(canvas)
        margin_x, margin_y = spec.watermark_offset
        placement = position(
            canvas_size.width,
            canvas_size.height,
            self._overlay.width,
            self._overlay.height,
            plan.offset_x + margin_x,
            plan.offset_y + margin_y,
            spec.watermark.anchor,
        )
        canvas = self.backend.composite_overlay(canvas, self._overlay.raster, placement.x, placement.y)
        return canvas, placement
