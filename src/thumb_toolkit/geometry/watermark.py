"""
Module: geometry.watermark

Purpose:
    Resolve where a watermark overlay goes on a thumbnail canvas from one
    of nine anchors on a 3x3 grid.

Key Functions:
    - position(): Top-left coordinate of the overlay for an anchor

Dependencies:
    - core.models.plans: WatermarkPlacement

Used By:
    - generator: Places the configured watermark on every thumbnail
"""

from __future__ import annotations

from thumb_toolkit.core.models import WatermarkPlacement

# Anchor grid (row-major)
TOP_LEFT = 1
TOP_CENTER = 2
TOP_RIGHT = 3
MIDDLE_LEFT = 4
CENTER = 5
MIDDLE_RIGHT = 6
BOTTOM_LEFT = 7
BOTTOM_CENTER = 8
BOTTOM_RIGHT = 9


def _centered(canvas: int, overlay: int) -> int:
    """(canvas / 2) - (overlay / 2), truncated toward zero."""
    diff = canvas - overlay
    return diff // 2 if diff >= 0 else -(-diff // 2)


def position(
    canvas_width: int,
    canvas_height: int,
    overlay_width: int,
    overlay_height: int,
    offset_x: int = 0,
    offset_y: int = 0,
    anchor: int = TOP_LEFT,
) -> WatermarkPlacement:
    """
    Calculate the overlay position for an anchor.
    
    Edge anchors keep ``offset_x``/``offset_y`` away from the anchored
    edges; centered axes ignore the offset. Passing a plan's padding
    offsets anchors the overlay to the visible image instead of the
    padded canvas.
    
    Args:
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        overlay_width: Overlay width in pixels
        overlay_height: Overlay height in pixels
        offset_x: Horizontal distance from the anchored edge
        offset_y: Vertical distance from the anchored edge
        anchor: Grid position 1..9 (1 = top-left, 5 = center, 9 = bottom-right).
            Any other value places the overlay at (offset_x, offset_y).
        
    Returns:
        WatermarkPlacement with the overlay's top-left corner
        
    Example:
        >>> position(500, 500, 100, 50, 10, 10, anchor=BOTTOM_RIGHT)
        WatermarkPlacement(x=390, y=440)
    """
    column = (anchor - 1) % 3 if TOP_LEFT <= anchor <= BOTTOM_RIGHT else 0
    row = (anchor - 1) // 3 if TOP_LEFT <= anchor <= BOTTOM_RIGHT else 0
    
    if column == 0:
        x = offset_x
    elif column == 1:
        x = _centered(canvas_width, overlay_width)
    else:
        x = canvas_width - overlay_width - offset_x
    
    if row == 0:
        y = offset_y
    elif row == 1:
        y = _centered(canvas_height, overlay_height)
    else:
        y = canvas_height - overlay_height - offset_y
    
    return WatermarkPlacement(x, y)
