"""
Module: specs

Purpose:
    Provides ThumbnailSpec - one named thumbnail definition created once at
    setup and reused for every processed image.

Key Classes:
    - WatermarkSettings: Anchor (1-9) and margin of a watermark overlay
    - ThumbnailSpec: Name, layout rule, optional watermark and output options

Dependencies:
    - dataclasses (std)
    - core.models.rules: LayoutRule

Used By:
    - config: Builds specs from configuration mappings
    - generator: Iterates specs per upload
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .rules import RULE_TYPES, LayoutRule

ANCHOR_MIN = 1
ANCHOR_MAX = 9


@dataclass(frozen=True, slots=True)
class WatermarkSettings:
    """
    Where to place the watermark overlay.
    
    Anchors map onto a 3x3 grid, row-major:
    
        1 2 3
        4 5 6
        7 8 9
    
    Attributes:
        anchor: Grid position 1..9
        offset: (x, y) margin from the anchored edges in pixels
    """
    
    anchor: int = 1
    offset: tuple[int, int] = (0, 0)
    
    def __post_init__(self) -> None:
        """Validate settings on construction."""
        if isinstance(self.anchor, bool) or not isinstance(self.anchor, int):
            raise ValueError(f"anchor must be an integer: {self.anchor!r}")
        if not ANCHOR_MIN <= self.anchor <= ANCHOR_MAX:
            raise ValueError(
                f"anchor must be in {ANCHOR_MIN}..{ANCHOR_MAX}: {self.anchor}"
            )
        if len(self.offset) != 2:
            raise ValueError(f"offset must be an (x, y) pair: {self.offset!r}")
    
    def to_dict(self) -> dict[str, Any]:
        return {"anchor": self.anchor, "offset": list(self.offset)}


@dataclass(frozen=True, slots=True)
class ThumbnailSpec:
    """
    Named thumbnail definition (immutable).
    
    Attributes:
        name: Thumbnail name, unique within a configuration
        rule: Layout rule deriving the thumbnail size
        watermark: Optional watermark placement
        output_format: PIL format name to encode with (None = source format)
        quality: Encoder quality for lossy formats (None = backend default)
    
    Example:
        >>> spec = ThumbnailSpec("small", ByWidth(200))
        >>> spec.watermark_anchor is None
        True
    """
    
    name: str
    rule: LayoutRule
    watermark: Optional[WatermarkSettings] = None
    output_format: Optional[str] = None
    quality: Optional[int] = None
    
    def __post_init__(self) -> None:
        """Validate spec on construction."""
        if not self.name or not isinstance(self.name, str):
            raise ValueError(f"name must be a non-empty string: {self.name!r}")
        if not isinstance(self.rule, RULE_TYPES):
            raise ValueError(f"rule must be a LayoutRule: {self.rule!r}")
        if self.quality is not None and not 1 <= self.quality <= 100:
            raise ValueError(f"quality must be in 1..100: {self.quality}")
    
    @property
    def watermark_anchor(self) -> Optional[int]:
        return self.watermark.anchor if self.watermark else None
    
    @property
    def watermark_offset(self) -> tuple[int, int]:
        return self.watermark.offset if self.watermark else (0, 0)
    
    def to_dict(self) -> dict[str, Any]:
        """
        Serialize back to the configuration shape.
        
        Returns:
            Dict with the rule key and optional watermark/format/quality
        """
        d = self.rule.to_dict()
        if self.watermark is not None:
            d["watermark"] = self.watermark.to_dict()
        if self.output_format is not None:
            d["format"] = self.output_format
        if self.quality is not None:
            d["quality"] = self.quality
        return d
