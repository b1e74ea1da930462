"""
Module: compositing.backends.numpy_backend

Purpose:
    Raster backend on raw RGBA pixel buffers (the raw-pixel family).
    Rasters are ``(height, width, 4)`` uint8 numpy arrays; Pillow is only
    used at the codec boundary.

Key Classes:
    - NumpyBackend: RasterBackend over numpy arrays

Dependencies:
    - numpy: Pixel arithmetic
    - PIL: Codec boundary (via compositing.backends.codec)

Used By:
    - compositing.backends.get_backend("numpy")

Design Notes:
    Resampling is separable. An axis that shrinks is area-averaged (each
    output pixel is the mean of the source pixels it covers); an axis that
    grows is linearly interpolated between pixel centers. Color channels
    are resampled premultiplied by alpha.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PIL import Image

from thumb_toolkit.core.models import Color, Dimensions

from .base import CopyRect, DecodedImage, RasterBackend, clip_overlay
from .codec import decode_image, encode_image

logger = logging.getLogger(__name__)


class NumpyBackend(RasterBackend):
    """
    Backend operating on ``(height, width, 4)`` uint8 RGBA arrays.
    
    Example:
        >>> backend = NumpyBackend()
        >>> source = backend.decode(png_bytes)
        >>> source.raster.shape
        (100, 200, 4)
    """
    
    name = "numpy"
    
    def decode(self, data: bytes) -> DecodedImage:
        image, source_format = decode_image(data)
        pixels = np.array(image, dtype=np.uint8)
        pixels.setflags(write=False)
        logger.debug(f"Decoded {source_format} image into {pixels.shape} buffer")
        return DecodedImage(pixels, image.width, image.height, source_format)
    
    def size(self, raster: np.ndarray) -> Dimensions:
        return Dimensions(raster.shape[1], raster.shape[0])
    
    def resample(self, raster: np.ndarray, width: int, height: int) -> np.ndarray:
        pixels = raster.astype(np.float64)
        # Color is resampled premultiplied by alpha
        pixels[..., :3] *= pixels[..., 3:4] / 255.0
        pixels = _resize_axis(pixels, height, axis=0)
        pixels = _resize_axis(pixels, width, axis=1)
        return _to_uint8(_unpremultiply(pixels))
    
    def new_canvas(self, width: int, height: int) -> np.ndarray:
        return np.zeros((height, width, 4), dtype=np.uint8)
    
    def fill(self, canvas: np.ndarray, color: Color) -> np.ndarray:
        filled = np.empty_like(canvas)
        filled[...] = color.as_tuple()
        return filled
    
    def copy_rect(self, canvas: np.ndarray, source: np.ndarray, rect: CopyRect) -> np.ndarray:
        result = canvas.copy()
        src = source[rect.src_y:rect.src_y + rect.height, rect.src_x:rect.src_x + rect.width]
        dst = result[rect.dest_y:rect.dest_y + rect.height, rect.dest_x:rect.dest_x + rect.width]
        dst[...] = _alpha_over(src, dst)
        return result
    
    def composite_overlay(
        self,
        canvas: np.ndarray,
        overlay: np.ndarray,
        x: int,
        y: int,
    ) -> np.ndarray:
        rect = clip_overlay(self.size(canvas), self.size(overlay), x, y)
        if rect is None:
            logger.debug(f"Overlay at ({x}, {y}) lies outside {canvas.shape[1]}x{canvas.shape[0]} canvas")
            return canvas.copy()
        return self.copy_rect(canvas, overlay, rect)
    
    def encode(self, raster: np.ndarray, format: str, quality: Optional[int] = None) -> bytes:
        image = Image.fromarray(np.ascontiguousarray(raster))
        return encode_image(image, format, quality)


def _resize_axis(pixels: np.ndarray, size: int, axis: int) -> np.ndarray:
    """Resize one axis of a float pixel buffer to ``size``."""
    current = pixels.shape[axis]
    if size == current:
        return pixels
    
    shape = [1] * pixels.ndim
    shape[axis] = size
    
    if size < current:
        # Area average: output pixel i covers source [edges[i], edges[i+1])
        edges = (np.arange(size) * current) // size
        counts = np.diff(np.append(edges, current))
        sums = np.add.reduceat(pixels, edges, axis=axis)
        return sums / counts.reshape(shape)
    
    # Linear interpolation between source pixel centers
    centers = (np.arange(size) + 0.5) * current / size - 0.5
    centers = np.clip(centers, 0, current - 1)
    lower = np.floor(centers).astype(np.intp)
    upper = np.minimum(lower + 1, current - 1)
    weight = (centers - lower).reshape(shape)
    return (
        np.take(pixels, lower, axis=axis) * (1 - weight)
        + np.take(pixels, upper, axis=axis) * weight
    )


def _unpremultiply(pixels: np.ndarray) -> np.ndarray:
    """Divide premultiplied float RGB by alpha; fully transparent pixels become 0."""
    alpha = pixels[..., 3:4]
    rgb = np.divide(
        pixels[..., :3] * 255.0,
        alpha,
        out=np.zeros_like(pixels[..., :3]),
        where=alpha > 0,
    )
    return np.concatenate([rgb, alpha], axis=-1)


def _alpha_over(src: np.ndarray, dst: np.ndarray) -> np.ndarray:
    """Porter-Duff "over" of uint8 RGBA src onto dst."""
    src_f = src.astype(np.float64) / 255.0
    dst_f = dst.astype(np.float64) / 255.0
    src_a = src_f[..., 3:4]
    dst_a = dst_f[..., 3:4]
    
    out_a = src_a + dst_a * (1.0 - src_a)
    premultiplied = src_f[..., :3] * src_a + dst_f[..., :3] * dst_a * (1.0 - src_a)
    out_rgb = np.divide(
        premultiplied,
        out_a,
        out=np.zeros_like(premultiplied),
        where=out_a > 0,
    )
    return _to_uint8(np.concatenate([out_rgb, out_a], axis=-1) * 255.0)


def _to_uint8(pixels: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(pixels), 0, 255).astype(np.uint8)
