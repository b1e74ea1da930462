"""
Thumb Toolkit Core Package

Shared data models and schema validation. These models are the single
source of truth passed between configuration, geometry and compositing.
"""

from .models import (
    ByHeight,
    ByLongerSide,
    ByShorterSide,
    ByWidth,
    CanvasPlan,
    Color,
    Dimensions,
    Fit,
    LayoutRule,
    Square,
    ThumbnailSpec,
    WatermarkPlacement,
    WatermarkSettings,
)

__all__ = [
    "ByHeight",
    "ByLongerSide",
    "ByShorterSide",
    "ByWidth",
    "CanvasPlan",
    "Color",
    "Dimensions",
    "Fit",
    "LayoutRule",
    "Square",
    "ThumbnailSpec",
    "WatermarkPlacement",
    "WatermarkSettings",
]
