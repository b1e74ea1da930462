"""
Module: compositing.canvas

Purpose:
    Canvas compositor. Turns a CanvasPlan into a concrete description of
    the backend work (canvas allocation, optional background fill, one
    rectangle copy) and executes it.

Key Classes:
    - CompositeInstructions: Canvas/resample sizes, fill and copy rectangle

Key Functions:
    - plan_composite(): CanvasPlan -> CompositeInstructions (pure)
    - composite(): Execute instructions against a RasterBackend

Dependencies:
    - core.models: CanvasPlan, Color, Dimensions
    - compositing.backends: RasterBackend, CopyRect

Used By:
    - generator: One composite per thumbnail
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from thumb_toolkit.core.models import CanvasPlan, Color, Dimensions

from .backends import CopyRect, RasterBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeInstructions:
    """
    Backend work for one thumbnail (immutable).
    
    Attributes:
        canvas: Size of the allocated canvas
        resample: Size the source is scaled to before copying
        copy: Rectangle read from the resample and written to the canvas
        background: Fill applied to the canvas before copying (None = transparent)
    """
    canvas: Dimensions
    resample: Dimensions
    copy: CopyRect
    background: Optional[Color] = None


def plan_composite(
    plan: CanvasPlan,
    background: Optional[Color] = None,
) -> CompositeInstructions:
    """
    Describe the backend work for a plan.
    
    Padding shifts the paste target right/down; cropping shifts the read
    origin right/down while pasting at the canvas origin. The copied size
    is whatever of the resample fits on the canvas from those origins.
    
    Args:
        plan: Resolved canvas plan
        background: Optional canvas fill
        
    Returns:
        CompositeInstructions for the backend
        
    Example:
        >>> plan_composite(CanvasPlan(888, 500, crop_x=194, box_width=500, box_height=500)).copy
        CopyRect(src_x=194, src_y=0, dest_x=0, dest_y=0, width=500, height=500)
    """
    canvas = plan.canvas_size
    copy = CopyRect(
        src_x=plan.crop_x,
        src_y=plan.crop_y,
        dest_x=plan.offset_x,
        dest_y=plan.offset_y,
        width=min(plan.resample_width - plan.crop_x, canvas.width - plan.offset_x),
        height=min(plan.resample_height - plan.crop_y, canvas.height - plan.offset_y),
    )
    return CompositeInstructions(
        canvas=canvas,
        resample=plan.resample_size,
        copy=copy,
        background=background,
    )


def composite(
    backend: RasterBackend,
    source: Any,
    plan: CanvasPlan,
    background: Optional[Color] = None,
) -> Any:
    """
    Render a plan with a backend.
    
    Resamples the source, allocates the canvas, fills it when a background
    is given and copies the resampled image onto it.
    
    Args:
        backend: Raster backend
        source: Backend raster of the decoded source (not modified)
        plan: Resolved canvas plan
        background: Optional canvas fill (alpha supported)
        
    Returns:
        Backend raster of the finished canvas
    """
    instructions = plan_composite(plan, background)
    
    resampled = backend.resample(
        source,
        instructions.resample.width,
        instructions.resample.height,
    )
    canvas = backend.new_canvas(instructions.canvas.width, instructions.canvas.height)
    if instructions.background is not None:
        canvas = backend.fill(canvas, instructions.background)
    canvas = backend.copy_rect(canvas, resampled, instructions.copy)
    
    logger.debug(
        f"Composited {instructions.resample.width}x{instructions.resample.height} "
        f"onto {instructions.canvas.width}x{instructions.canvas.height} canvas "
        f"(copy {instructions.copy})"
    )
    return canvas
