"""
Module: compositing

Purpose:
    Canvas composition and raster backends.

Key Functions:
    - plan_composite(), composite(): Canvas compositor
    - get_backend(): Backend selection

Used By:
    - generator
"""

from .backends import (
    BackendError,
    BackendUnavailable,
    RasterBackend,
    UnsupportedBackend,
    get_backend,
)
from .canvas import CompositeInstructions, composite, plan_composite

__all__ = [
    "BackendError",
    "BackendUnavailable",
    "CompositeInstructions",
    "RasterBackend",
    "UnsupportedBackend",
    "composite",
    "get_backend",
    "plan_composite",
]
