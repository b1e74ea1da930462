"""
Core Models Package

Immutable, validated data models shared by the geometry resolvers, the
canvas compositor and the generator.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while thumbnails are generated
2. Safe to share between worker threads
3. Can be used as dict keys or in sets
"""

from .dimensions import Color, Dimensions
from .plans import CanvasPlan, WatermarkPlacement
from .rules import (
    RULE_KEYS,
    ByHeight,
    ByLongerSide,
    ByShorterSide,
    ByWidth,
    Fit,
    LayoutRule,
    Square,
)
from .specs import ThumbnailSpec, WatermarkSettings

__all__ = [
    "Color",
    "Dimensions",
    "CanvasPlan",
    "WatermarkPlacement",
    "RULE_KEYS",
    "ByWidth",
    "ByHeight",
    "ByShorterSide",
    "ByLongerSide",
    "Fit",
    "Square",
    "LayoutRule",
    "ThumbnailSpec",
    "WatermarkSettings",
]
