"""
Module: compositing.backends.base

Purpose:
    The raster capability interface every backend implements, plus the
    small value types passed across it. The compositor and generator only
    ever talk to this interface, so they never branch on backend identity.

Key Classes:
    - RasterBackend: Abstract decode/resample/fill/copy/composite/encode
    - DecodedImage: Decoded source raster with its size and format
    - CopyRect: Source/destination rectangle of a copy
    - BackendError, BackendUnavailable, UnsupportedBackend: Errors

Key Functions:
    - clip_overlay(): Clip an overlay placement to the canvas

Dependencies:
    - abc (std)
    - core.models: Dimensions, Color

Used By:
    - compositing.backends.pillow_backend, numpy_backend: Implementations
    - compositing.canvas: Issues backend calls
    - generator: Decodes sources, composites watermarks, encodes output

Design Notes:
    Backends never mutate their inputs; every operation returns a new
    raster. A decoded source can therefore be shared by concurrent
    thumbnail tasks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from thumb_toolkit.core.models import Color, Dimensions


class BackendError(Exception):
    """Base class for raster backend errors."""
    pass


class BackendUnavailable(BackendError):
    """The library a backend needs cannot be imported in this runtime."""
    pass


class UnsupportedBackend(BackendError):
    """The configured backend name is not a known backend."""
    pass


@dataclass(frozen=True)
class DecodedImage:
    """
    A decoded source image.
    
    Attributes:
        raster: Backend-specific raster handle (treated as read-only)
        width: Width in pixels
        height: Height in pixels
        format: PIL format name of the encoded source ("JPEG", "PNG", ...),
            None when unknown
    """
    raster: Any
    width: int
    height: int
    format: Optional[str] = None
    
    @property
    def size(self) -> Dimensions:
        return Dimensions(self.width, self.height)


@dataclass(frozen=True)
class CopyRect:
    """
    Rectangle copied from a source raster onto a canvas.
    
    Attributes:
        src_x: Left edge in the source
        src_y: Top edge in the source
        dest_x: Left edge on the canvas
        dest_y: Top edge on the canvas
        width: Copied width
        height: Copied height
    """
    src_x: int
    src_y: int
    dest_x: int
    dest_y: int
    width: int
    height: int
    
    @property
    def source_box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) in the source, for PIL."""
        return (self.src_x, self.src_y, self.src_x + self.width, self.src_y + self.height)


def clip_overlay(
    canvas: Dimensions,
    overlay: Dimensions,
    x: int,
    y: int,
) -> Optional[CopyRect]:
    """
    Clip an overlay placed at (x, y) to the canvas.
    
    Args:
        canvas: Canvas size
        overlay: Overlay size
        x: Overlay left edge on the canvas (may be negative)
        y: Overlay top edge on the canvas (may be negative)
        
    Returns:
        Visible part of the overlay as a CopyRect, or None if nothing
        of the overlay lands on the canvas
        
    Example:
        >>> clip_overlay(Dimensions(100, 100), Dimensions(50, 50), -10, 80)
        CopyRect(src_x=10, src_y=0, dest_x=0, dest_y=80, width=40, height=20)
    """
    src_x = max(0, -x)
    src_y = max(0, -y)
    dest_x = max(0, x)
    dest_y = max(0, y)
    width = min(overlay.width - src_x, canvas.width - dest_x)
    height = min(overlay.height - src_y, canvas.height - dest_y)
    if width <= 0 or height <= 0:
        return None
    return CopyRect(src_x, src_y, dest_x, dest_y, width, height)


class RasterBackend(ABC):
    """
    Abstract raster capability.
    
    Implementations wrap one imaging library. Rasters are opaque handles
    owned by the backend that produced them.
    """
    
    name: str = ""
    
    @abstractmethod
    def decode(self, data: bytes) -> DecodedImage:
        """
        Decode encoded image bytes.
        
        Raises:
            OSError: If the data is not a decodable image
        """
    
    @abstractmethod
    def size(self, raster: Any) -> Dimensions:
        """Get the size of a raster."""
    
    @abstractmethod
    def resample(self, raster: Any, width: int, height: int) -> Any:
        """Scale a raster to width x height."""
    
    @abstractmethod
    def new_canvas(self, width: int, height: int) -> Any:
        """Allocate a fully transparent RGBA canvas."""
    
    @abstractmethod
    def fill(self, canvas: Any, color: Color) -> Any:
        """Flood-fill the whole canvas with a color (alpha replaces, no blending)."""
    
    @abstractmethod
    def copy_rect(self, canvas: Any, source: Any, rect: CopyRect) -> Any:
        """Copy a rectangle of source onto canvas, alpha-blended over it."""
    
    @abstractmethod
    def composite_overlay(self, canvas: Any, overlay: Any, x: int, y: int) -> Any:
        """Composite an overlay onto canvas at (x, y), clipped to the canvas."""
    
    @abstractmethod
    def encode(self, raster: Any, format: str, quality: Optional[int] = None) -> bytes:
        """
        Encode a raster.
        
        Args:
            raster: Raster to encode
            format: PIL format name
            quality: Quality for lossy formats
            
        Raises:
            ValueError: If the format is unknown or cannot hold the raster
        """
