"""
Module: geometry.resolver

Purpose:
    Dispatch a LayoutRule onto the matching resolver and return a
    CanvasPlan. The simple rules produce unpadded plans; Fit and Square
    produce box-fitted plans.

Key Functions:
    - resolve_plan(): CanvasPlan for a rule and a source size

Dependencies:
    - geometry.dimensions, geometry.fitting
    - core.models: LayoutRule variants, CanvasPlan

Used By:
    - generator: One plan per ThumbnailSpec per upload
"""

from __future__ import annotations

from thumb_toolkit.core.models import (
    ByHeight,
    ByLongerSide,
    ByShorterSide,
    ByWidth,
    CanvasPlan,
    Fit,
    LayoutRule,
    Square,
)

from .dimensions import by_height, by_longer_side, by_shorter_side, by_width
from .fitting import fit, fit_to_square


def resolve_plan(rule: LayoutRule, width: int, height: int) -> CanvasPlan:
    """
    Resolve the canvas plan of a rule for a source of width x height.
    
    Args:
        rule: Layout rule of a ThumbnailSpec
        width: Source width in pixels (> 0)
        height: Source height in pixels (> 0)
        
    Returns:
        CanvasPlan for the thumbnail
        
    Raises:
        TypeError: If rule is not a LayoutRule variant
        
    Example:
        >>> resolve_plan(ByWidth(200), 1000, 500).as_tuple()
        (200, 100, 0, 0, 0, 0)
    """
    if isinstance(rule, ByWidth):
        return CanvasPlan.unpadded(by_width(width, height, rule.width))
    if isinstance(rule, ByHeight):
        return CanvasPlan.unpadded(by_height(width, height, rule.height))
    if isinstance(rule, ByShorterSide):
        return CanvasPlan.unpadded(by_shorter_side(width, height, rule.width, rule.height))
    if isinstance(rule, ByLongerSide):
        return CanvasPlan.unpadded(by_longer_side(width, height, rule.width, rule.height))
    if isinstance(rule, Fit):
        return fit(width, height, rule.width, rule.height, rule.keep_aspect)
    if isinstance(rule, Square):
        return fit_to_square(width, height, rule.side, rule.keep_aspect)
    raise TypeError(f"Not a layout rule: {rule!r}")
