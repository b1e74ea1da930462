"""
Module: formats

Purpose:
    Canonical image format names. Kept free of any imaging library so
    configuration can be parsed without a raster backend installed.

Key Functions:
    - normalize_format(): Canonical PIL format name for a configured alias

Used By:
    - config: ThumbnailSpec.output_format
    - compositing.backends.codec: Encoder lookup
"""

from __future__ import annotations

# Format aliases accepted in configuration
_FORMAT_ALIASES = {
    "JPG": "JPEG",
    "PJPEG": "JPEG",
    "PJPG": "JPEG",
    "TIF": "TIFF",
}


def normalize_format(name: str) -> str:
    """
    Canonical PIL format name.
    
    Example:
        >>> normalize_format("jpg")
        'JPEG'
    """
    upper = name.strip().upper()
    return _FORMAT_ALIASES.get(upper, upper)
