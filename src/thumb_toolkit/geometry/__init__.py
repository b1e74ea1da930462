"""
Module: geometry

Purpose:
    Pure, stateless thumbnail geometry. Nothing here touches pixels; every
    function maps integer sizes to integer sizes and offsets, so calls are
    safe from any thread.

Key Functions:
    - by_width(), by_height(), by_shorter_side(), by_longer_side()
    - fit(), fit_to_square() / square()
    - position(): Watermark anchor placement
    - resolve_plan(): Rule dispatch

Used By:
    - compositing.canvas: Consumes CanvasPlan
    - generator: Resolves every ThumbnailSpec
"""

from .dimensions import by_height, by_longer_side, by_shorter_side, by_width
from .fitting import fit, fit_to_square, square
from .resolver import resolve_plan
from .watermark import position

__all__ = [
    "by_width",
    "by_height",
    "by_shorter_side",
    "by_longer_side",
    "fit",
    "fit_to_square",
    "square",
    "position",
    "resolve_plan",
]
