"""
Module: compositing.backends.codec

Purpose:
    Bytes <-> PIL image conversion shared by every backend. Decoding
    normalizes to RGBA so backends composite in one pixel format;
    encoding drops alpha for formats that cannot store it.

Key Functions:
    - decode_image(): Bytes to RGBA PIL image plus source format
    - encode_image(): PIL image to bytes in a given format

Dependencies:
    - PIL: Image codecs
    - core.formats: normalize_format

Used By:
    - compositing.backends.pillow_backend
    - compositing.backends.numpy_backend
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional, Tuple

from PIL import Image

from thumb_toolkit.core.formats import normalize_format

# Formats encoded without an alpha channel
_OPAQUE_FORMATS = frozenset({"JPEG", "BMP"})

# Formats that take a quality argument
_LOSSY_FORMATS = frozenset({"JPEG", "WEBP"})

DEFAULT_QUALITY = 100


def decode_image(data: bytes) -> Tuple[Image.Image, Optional[str]]:
    """
    Decode image bytes to a fully loaded RGBA image.
    
    Args:
        data: Encoded image bytes
        
    Returns:
        Tuple of (rgba_image, source_format)
        
    Raises:
        OSError: If the data cannot be identified as an image or exceeds
            PIL's decompression bomb limit
    """
    try:
        with Image.open(BytesIO(data)) as opened:
            source_format = opened.format
            image = opened.convert("RGBA")
    except Image.DecompressionBombError as exc:
        raise OSError(f"Image too large to decode: {exc}") from exc
    image.load()
    return image, source_format


def encode_image(
    image: Image.Image,
    format: str,
    quality: Optional[int] = None,
) -> bytes:
    """
    Encode an image to bytes.
    
    Args:
        image: Image to encode (RGBA)
        format: PIL format name or alias
        quality: Quality for JPEG/WEBP, defaults to DEFAULT_QUALITY
        
    Returns:
        Encoded bytes
        
    Raises:
        ValueError: If PIL has no encoder for the format
    """
    fmt = normalize_format(format)
    Image.init()
    if fmt not in Image.SAVE:
        raise ValueError(f"No encoder for image format: {format}")
    
    if fmt in _OPAQUE_FORMATS and image.mode != "RGB":
        image = image.convert("RGB")
    
    options = {}
    if fmt in _LOSSY_FORMATS:
        options["quality"] = quality if quality is not None else DEFAULT_QUALITY
    
    output = BytesIO()
    image.save(output, format=fmt, **options)
    return output.getvalue()
