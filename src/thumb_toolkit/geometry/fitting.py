"""
Module: geometry.fitting

Purpose:
    Box fitting on top of the dimension resolvers. Produces a CanvasPlan
    with the resample size and the padding (contain) or crop (cover)
    offsets that center the image in the requested box.

Key Functions:
    - fit(): Fit into a width x height box
    - fit_to_square(): Fit into a side x side box

Dependencies:
    - geometry.dimensions: by_shorter_side, by_longer_side
    - core.models.plans: CanvasPlan

Used By:
    - geometry.resolver: Fit and Square rules

Design Notes:
    Contain (keep_aspect=True) keeps the whole image and pads the rest.
    Cover (keep_aspect=False) fills the whole box and crops the rest.
    Offsets are computed per axis independently and truncated. Every plan
    carries the requested box, so the canvas is exactly the box even when
    an odd remainder leaves one more pixel of padding or crop on the
    right/bottom edge.
"""

from __future__ import annotations

from thumb_toolkit.core.models import CanvasPlan, Dimensions

from .dimensions import by_longer_side, by_shorter_side


def _center(requested: int, resampled: int) -> tuple[int, int]:
    """
    Split the difference on one axis.
    
    Returns:
        (offset, crop): offset pads a smaller resample, crop trims a larger one
    """
    if requested < resampled:
        return 0, (resampled - requested) // 2
    return (requested - resampled) // 2, 0


def _plan(size: Dimensions, box_width: int, box_height: int) -> CanvasPlan:
    offset_x, crop_x = _center(box_width, size.width)
    offset_y, crop_y = _center(box_height, size.height)
    return CanvasPlan(
        resample_width=size.width,
        resample_height=size.height,
        offset_x=offset_x,
        offset_y=offset_y,
        crop_x=crop_x,
        crop_y=crop_y,
        box_width=box_width,
        box_height=box_height,
    )


def _contain_size(ow: int, oh: int, nw: int, nh: int) -> Dimensions:
    if ow == oh:
        side = min(nw, nh)
        return by_longer_side(ow, oh, side, side)
    size = by_longer_side(ow, oh, nw, nh)
    if nw < size.width or nh < size.height:
        # Longer side fits but the other axis still overflows the box
        size = by_shorter_side(ow, oh, nw, nh)
    return size


def _cover_size(ow: int, oh: int, nw: int, nh: int) -> Dimensions:
    if ow == oh:
        side = max(nw, nh)
        return by_shorter_side(ow, oh, side, side)
    size = by_shorter_side(ow, oh, nw, nh)
    if nw > size.width or nh > size.height:
        # Shorter side fills but the other axis still leaves a gap
        size = by_longer_side(ow, oh, nw, nh)
    return size


def fit(
    original_width: int,
    original_height: int,
    new_width: int,
    new_height: int,
    keep_aspect: bool = False,
) -> CanvasPlan:
    """
    Fit an image into a new_width x new_height box.
    
    Args:
        original_width: Source width in pixels (> 0)
        original_height: Source height in pixels (> 0)
        new_width: Box width
        new_height: Box height
        keep_aspect: True = contain (pad), False = cover (crop). Defaults to False.
        
    Returns:
        CanvasPlan with resample size and offsets
        
    Example:
        >>> fit(1920, 1080, 500, 500).as_tuple()  # cover
        (888, 500, 0, 0, 194, 0)
        >>> fit(1920, 1080, 500, 500, keep_aspect=True).as_tuple()  # contain
        (500, 281, 0, 109, 0, 0)
    """
    if keep_aspect:
        size = _contain_size(original_width, original_height, new_width, new_height)
    else:
        size = _cover_size(original_width, original_height, new_width, new_height)
    return _plan(size, new_width, new_height)


def fit_to_square(
    original_width: int,
    original_height: int,
    side: int,
    keep_aspect: bool = False,
) -> CanvasPlan:
    """
    Fit an image into a side x side square.
    
    Contain resolves by the longer side and only pads. Cover resolves by
    the shorter side, crops the overflowing axis and pads an axis that
    still falls short (a source smaller than the square is never upscaled).
    
    Args:
        original_width: Source width in pixels (> 0)
        original_height: Source height in pixels (> 0)
        side: Square side length
        keep_aspect: True = contain (pad), False = cover (crop). Defaults to False.
        
    Returns:
        CanvasPlan with resample size and offsets
        
    Example:
        >>> plan = fit_to_square(800, 600, 400)
        >>> plan.as_tuple()
        (533, 400, 0, 0, 66, 0)
        >>> plan.canvas_size
        Dimensions(400x400)
    """
    if keep_aspect:
        size = by_longer_side(original_width, original_height, side, side)
        offset_x = (side - size.width) // 2 if side > size.width else 0
        offset_y = (side - size.height) // 2 if side > size.height else 0
        return CanvasPlan(
            size.width,
            size.height,
            offset_x=offset_x,
            offset_y=offset_y,
            box_width=side,
            box_height=side,
        )
    
    size = by_shorter_side(original_width, original_height, side, side)
    return _plan(size, side, side)


square = fit_to_square
