"""
Module: plans

Purpose:
    Provides the per-image geometry results: CanvasPlan (resample size plus
    padding and crop offsets) and WatermarkPlacement. Both are computed per
    (source size, rule) pair and consumed immediately; never persisted.

Key Classes:
    - CanvasPlan: Resample size with padding/crop offsets
    - WatermarkPlacement: Top-left coordinate of an overlay

Dependencies:
    - dataclasses (std)
    - core.models.dimensions: Dimensions

Used By:
    - geometry.fitting: Returns CanvasPlan
    - geometry.watermark: Returns WatermarkPlacement
    - compositing.canvas: Turns a plan into backend instructions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dimensions import Dimensions


@dataclass(frozen=True, slots=True)
class CanvasPlan:
    """
    Geometry of a single thumbnail.
    
    The source is first resampled to resample_width x resample_height and
    then copied onto the canvas: padding offsets shift the paste target
    right/down, crop offsets shift the read origin right/down. Per axis at
    most one of offset/crop is non-zero.
    
    Without a box the canvas is ``resample + 2*offset - 2*crop`` per axis.
    Box-fitted plans (fit, square) carry the requested box and the canvas is
    exactly that box; the two agree except for an odd remainder, where the
    formula would come out one pixel off the box.
    
    Attributes:
        resample_width: Width of the intermediate scaled copy
        resample_height: Height of the intermediate scaled copy
        offset_x: Horizontal padding on the left (and right)
        offset_y: Vertical padding on the top (and bottom)
        crop_x: Horizontal crop on the left (and right)
        crop_y: Vertical crop on the top (and bottom)
        box_width: Requested box width for box-fitted plans (None otherwise)
        box_height: Requested box height for box-fitted plans (None otherwise)
    
    Example:
        >>> plan = CanvasPlan(500, 281, offset_y=109)
        >>> plan.canvas_size
        Dimensions(500x499)
        >>> CanvasPlan(500, 281, offset_y=109, box_width=500, box_height=500).canvas_size
        Dimensions(500x500)
    """
    
    resample_width: int
    resample_height: int
    offset_x: int = 0
    offset_y: int = 0
    crop_x: int = 0
    crop_y: int = 0
    box_width: Optional[int] = None
    box_height: Optional[int] = None
    
    def __post_init__(self) -> None:
        """Validate plan on construction."""
        if self.resample_width <= 0 or self.resample_height <= 0:
            raise ValueError(
                f"resample size must be positive: "
                f"{self.resample_width}x{self.resample_height}"
            )
        for name in ("offset_x", "offset_y", "crop_x", "crop_y"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0: {getattr(self, name)}")
        if (self.box_width is None) != (self.box_height is None):
            raise ValueError("box_width and box_height must be set together")
        if self.box_width is not None and (self.box_width <= 0 or self.box_height <= 0):
            raise ValueError(f"box must be positive: {self.box_width}x{self.box_height}")
    
    def __iter__(self):
        """Unpack like the six-tuple: ``w, h, ox, oy, cx, cy = plan``."""
        return iter(self.as_tuple())
    
    def __eq__(self, other: object) -> bool:
        """Compare equal to another CanvasPlan or the equivalent six-tuple."""
        if isinstance(other, CanvasPlan):
            return (self.as_tuple(), self.box) == (other.as_tuple(), other.box)
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented
    
    def __hash__(self) -> int:
        return hash(self.as_tuple())
    
    # ─────────────────────────────────────────────────────────────────────────
    # Derived geometry
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def box(self) -> Optional[Dimensions]:
        """Requested box, or None for plans that are not box-fitted."""
        if self.box_width is None:
            return None
        return Dimensions(self.box_width, self.box_height)
    
    @property
    def canvas_width(self) -> int:
        if self.box_width is not None:
            return self.box_width
        return self.resample_width + 2 * self.offset_x - 2 * self.crop_x
    
    @property
    def canvas_height(self) -> int:
        if self.box_height is not None:
            return self.box_height
        return self.resample_height + 2 * self.offset_y - 2 * self.crop_y
    
    @property
    def resample_size(self) -> Dimensions:
        return Dimensions(self.resample_width, self.resample_height)
    
    @property
    def canvas_size(self) -> Dimensions:
        return Dimensions(self.canvas_width, self.canvas_height)
    
    @property
    def is_padded(self) -> bool:
        return self.offset_x > 0 or self.offset_y > 0
    
    @property
    def is_cropped(self) -> bool:
        return self.crop_x > 0 or self.crop_y > 0
    
    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        """Get as (resample_w, resample_h, offset_x, offset_y, crop_x, crop_y)."""
        return (
            self.resample_width,
            self.resample_height,
            self.offset_x,
            self.offset_y,
            self.crop_x,
            self.crop_y,
        )
    
    @classmethod
    def unpadded(cls, size: Dimensions) -> CanvasPlan:
        """Plan whose canvas is exactly the resample size."""
        return cls(size.width, size.height)


@dataclass(frozen=True, slots=True)
class WatermarkPlacement:
    """
    Top-left coordinate of a watermark overlay on the canvas.
    
    Coordinates may be negative when the overlay is larger than the canvas;
    backends clip the overlay to the canvas.
    """
    
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WatermarkPlacement):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
