"""
Module: dimensions

Purpose:
    Provides the Dimensions and Color value types shared by the geometry
    resolvers, the canvas compositor and the raster backends.

Key Classes:
    - Dimensions: Strictly positive (width, height) pair in pixels
    - Color: RGBA fill color with 0..255 channels

Dependencies:
    - dataclasses (std)

Used By:
    - geometry.dimensions: Resolver return type
    - compositing.canvas: Canvas and resample sizes, background fill
    - config: Background color parsing
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Dimensions:
    """
    Size of a raster in pixels.
    
    Attributes:
        width: Width in pixels
        height: Height in pixels
    
    Invariants:
        - width > 0
        - height > 0
    
    Example:
        >>> size = Dimensions(200, 100)
        >>> size.is_landscape
        True
        >>> width, height = size
    """
    
    width: int
    height: int
    
    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0: {self.height}")
    
    def __iter__(self):
        """Allow tuple unpacking: ``width, height = size``."""
        yield self.width
        yield self.height

    def __eq__(self, other: object) -> bool:
        """Compare equal to another Dimensions or a (width, height) tuple."""
        if isinstance(other, Dimensions):
            return self.as_tuple() == other.as_tuple()
        if isinstance(other, tuple):
            return self.as_tuple() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    @property
    def is_square(self) -> bool:
        return self.width == self.height
    
    @property
    def is_landscape(self) -> bool:
        return self.width > self.height
    
    @property
    def is_portrait(self) -> bool:
        return self.width < self.height
    
    def as_tuple(self) -> tuple[int, int]:
        """Get as (width, height) tuple for PIL."""
        return (self.width, self.height)
    
    def __repr__(self) -> str:
        return f"Dimensions({self.width}x{self.height})"


@dataclass(frozen=True, slots=True)
class Color:
    """
    RGBA color used to flood-fill a canvas before copying.
    
    Alpha follows the PIL convention: 255 is opaque, 0 fully transparent.
    
    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
        alpha: Alpha channel (0-255, default opaque)
    """
    
    red: int
    green: int
    blue: int
    alpha: int = 255
    
    def __post_init__(self) -> None:
        """Validate channel ranges on construction."""
        for channel in ("red", "green", "blue", "alpha"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{channel} must be an integer: {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{channel} must be in 0..255: {value}")
    
    @property
    def is_transparent(self) -> bool:
        return self.alpha < 255
    
    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get as (r, g, b, a) tuple for PIL and numpy."""
        return (self.red, self.green, self.blue, self.alpha)
    
    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """
        Build a color from 3 or 4 channel values.
        
        Args:
            values: (r, g, b) or (r, g, b, a)
            
        Returns:
            Color instance (alpha defaults to 255)
            
        Raises:
            ValueError: If the sequence has the wrong length or bad values
        """
        if len(values) not in (3, 4):
            raise ValueError(f"color needs 3 or 4 channels, got {len(values)}")
        return cls(*values)
