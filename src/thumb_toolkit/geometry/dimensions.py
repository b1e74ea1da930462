"""
Module: geometry.dimensions

Purpose:
    Pure functions computing the resampled size of an image for the four
    simple rule shapes. Every result keeps the source aspect ratio and is
    never larger than the source.

Key Functions:
    - by_width(): Scale to a target width
    - by_height(): Scale to a target height
    - by_shorter_side(): Map the shorter source side onto its target
    - by_longer_side(): Map the longer source side onto its target

Dependencies:
    - core.models.dimensions: Dimensions

Used By:
    - geometry.fitting: Building blocks of box fitting
    - geometry.resolver: Direct rule resolution

Design Notes:
    Arithmetic is exact integer arithmetic: the scaled side is
    ``floor(target * other / side)``, truncated, never rounded. A scaled
    side that truncates to 0 (extreme aspect ratios) is clamped to 1 so a
    resolved size is always a valid raster size.
"""

from __future__ import annotations

from thumb_toolkit.core.models import Dimensions


def _scale(target: int, other: int, side: int) -> int:
    return max(1, target * other // side)


def by_width(
    original_width: int,
    original_height: int,
    new_width: int,
) -> Dimensions:
    """
    Resolve size for a target width.
    
    Args:
        original_width: Source width in pixels (> 0)
        original_height: Source height in pixels (> 0)
        new_width: Requested width
        
    Returns:
        Scaled Dimensions, or the source size when new_width exceeds it
        
    Example:
        >>> by_width(1000, 500, 200)
        Dimensions(200x100)
        >>> by_width(1000, 500, 1500)  # never upscales
        Dimensions(1000x500)
    """
    if new_width > original_width:
        return Dimensions(original_width, original_height)
    return Dimensions(new_width, _scale(new_width, original_height, original_width))


def by_height(
    original_width: int,
    original_height: int,
    new_height: int,
) -> Dimensions:
    """
    Resolve size for a target height.
    
    Mirror of by_width() on the vertical axis.
    
    Example:
        >>> by_height(1000, 500, 250)
        Dimensions(500x250)
    """
    if new_height > original_height:
        return Dimensions(original_width, original_height)
    return Dimensions(_scale(new_height, original_width, original_height), new_height)


def by_shorter_side(
    original_width: int,
    original_height: int,
    new_width: int,
    new_height: int,
) -> Dimensions:
    """
    Resolve size by mapping the source's shorter side onto its target.
    
    Portrait sources are resolved by width, everything else (landscape and
    square) by height. The other side of the result ends up >= its target,
    which is what cover-fitting needs.
    
    Example:
        >>> by_shorter_side(1920, 1080, 500, 500)
        Dimensions(888x500)
    """
    if original_width < original_height:
        return by_width(original_width, original_height, new_width)
    return by_height(original_width, original_height, new_height)


def by_longer_side(
    original_width: int,
    original_height: int,
    new_width: int,
    new_height: int,
) -> Dimensions:
    """
    Resolve size by mapping the source's longer side onto its target.
    
    Landscape sources are resolved by width, everything else (portrait and
    square) by height. The other side of the result ends up <= its target,
    which is what contain-fitting needs.
    
    Example:
        >>> by_longer_side(1920, 1080, 500, 500)
        Dimensions(500x281)
    """
    if original_width > original_height:
        return by_width(original_width, original_height, new_width)
    return by_height(original_width, original_height, new_height)
