"""
Module: compositing.backends.pillow_backend

Purpose:
    Raster backend on Pillow image objects (the object/handle family).

Key Classes:
    - PillowBackend: RasterBackend over PIL.Image.Image handles

Dependencies:
    - PIL: Resampling, alpha compositing
    - compositing.backends.codec: Decode/encode

Used By:
    - compositing.backends.get_backend("pillow")
"""

from __future__ import annotations

import logging
from typing import Optional

from PIL import Image

from thumb_toolkit.core.models import Color, Dimensions

from .base import CopyRect, DecodedImage, RasterBackend, clip_overlay
from .codec import decode_image, encode_image

logger = logging.getLogger(__name__)

DEFAULT_RESAMPLING = Image.Resampling.LANCZOS


class PillowBackend(RasterBackend):
    """
    Backend operating on RGBA PIL images.
    
    Attributes:
        resampling: PIL resampling filter used by resample()
    
    Example:
        >>> backend = PillowBackend()
        >>> source = backend.decode(png_bytes)
        >>> small = backend.resample(source.raster, 100, 50)
    """
    
    name = "pillow"
    
    def __init__(self, resampling: Image.Resampling = DEFAULT_RESAMPLING) -> None:
        self.resampling = resampling
    
    def decode(self, data: bytes) -> DecodedImage:
        image, source_format = decode_image(data)
        logger.debug(f"Decoded {source_format} image {image.width}x{image.height}")
        return DecodedImage(image, image.width, image.height, source_format)
    
    def size(self, raster: Image.Image) -> Dimensions:
        return Dimensions(raster.width, raster.height)
    
    def resample(self, raster: Image.Image, width: int, height: int) -> Image.Image:
        if raster.size == (width, height):
            return raster.copy()
        return raster.resize((width, height), self.resampling)
    
    def new_canvas(self, width: int, height: int) -> Image.Image:
        return Image.new("RGBA", (width, height), (0, 0, 0, 0))
    
    def fill(self, canvas: Image.Image, color: Color) -> Image.Image:
        # New image rather than paste: fill replaces alpha instead of blending
        return Image.new("RGBA", canvas.size, color.as_tuple())
    
    def copy_rect(self, canvas: Image.Image, source: Image.Image, rect: CopyRect) -> Image.Image:
        result = canvas.copy()
        result.alpha_composite(
            _as_rgba(source),
            dest=(rect.dest_x, rect.dest_y),
            source=rect.source_box,
        )
        return result
    
    def composite_overlay(
        self,
        canvas: Image.Image,
        overlay: Image.Image,
        x: int,
        y: int,
    ) -> Image.Image:
        result = canvas.copy()
        rect = clip_overlay(self.size(canvas), self.size(overlay), x, y)
        if rect is None:
            logger.debug(f"Overlay at ({x}, {y}) lies outside {canvas.width}x{canvas.height} canvas")
            return result
        result.alpha_composite(
            _as_rgba(overlay),
            dest=(rect.dest_x, rect.dest_y),
            source=rect.source_box,
        )
        return result
    
    def encode(self, raster: Image.Image, format: str, quality: Optional[int] = None) -> bytes:
        return encode_image(raster, format, quality)


def _as_rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")
