from typing import Optional

import numpy as np
from rasterio.transform import from_bounds

from ...models import PixelBuffer

# Pixel centres sit on integer coordinates starting at 1.
PIXEL_ORIGIN = 0.5

# Full intensity for integer RGB, as matplotlib reads it
INTEGER_FULL_SCALE = 255.0


def default_scale(dtype: np.dtype) -> float:
    """Full-intensity value for ``dtype``: 255 for integer data, 1 otherwise."""
    return INTEGER_FULL_SCALE if np.dtype(dtype).kind in "ui" else 1.0


def create_pixel_buffer(rgb: np.ndarray, scale: Optional[float] = None) -> PixelBuffer:
    """
    Build a ``PixelBuffer`` from a north_up (rows, cols, 3) array.

    The buffer spans [0.5, cols + 0.5] x [0.5, rows + 0.5] with one unit per
    pixel. Values are divided by ``scale`` and clipped to [0, 1]. Without a
    ``scale`` integer data is read as 0-255 and anything else as 0-1.
    """
    if scale is None:
        scale = default_scale(rgb.dtype)
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    rows, cols = rgb.shape[:2]
    transform = from_bounds(
        PIXEL_ORIGIN, PIXEL_ORIGIN, cols + PIXEL_ORIGIN, rows + PIXEL_ORIGIN, cols, rows
    )
    data = np.clip(np.asarray(rgb, dtype=float) / float(scale), 0.0, 1.0)
    return PixelBuffer(data=data, transform=transform)


def sample_regular(buffer: PixelBuffer, max_pixels: Optional[int]) -> PixelBuffer:
    """
    Thin a buffer to at most ``max_pixels`` by taking every n-th row and column.

    The sampled buffer keeps the original bounds, so the image still covers
    the same extent with coarser pixels. ``None`` keeps every pixel.
    """
    total = buffer.height * buffer.width
    if max_pixels is None or total <= max_pixels:
        return buffer
    if max_pixels < 1:
        raise ValueError(f"max_pixels must be at least 1, got {max_pixels}")

    step = int(np.ceil(np.sqrt(total / float(max_pixels))))
    while int(np.ceil(buffer.height / step)) * int(np.ceil(buffer.width / step)) > max_pixels:
        step += 1
    data = buffer.data[::step, ::step]
    west, south, east, north = buffer.bounds
    transform = from_bounds(west, south, east, north, data.shape[1], data.shape[0])
    return PixelBuffer(data=data, transform=transform)
