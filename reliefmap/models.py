from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple, Optional, Dict, Any

import numpy as np
from affine import Affine
from rasterio.transform import array_bounds


@dataclass
class GridMetadata:
    crs: str
    bounds: Tuple[float, float, float, float]  # (min_lon, min_lat, max_lon, max_lat)
    meshsize: float


@dataclass
class DisplayOptions:
    """Settings forwarded to the image renderer.

    ``scale`` is the value that maps to full intensity: pixel values are
    divided by it and clipped to [0, 1]. ``None`` reads integer data as
    0-255 and floating data as 0-1. ``max_pixels`` caps the number of drawn
    pixels; ``None`` means every pixel is drawn. Anything in ``extra`` is
    passed verbatim to ``Axes.imshow``.
    """
    scale: Optional[float] = None
    max_pixels: Optional[int] = None
    interpolation: str = "nearest"
    axes_visible: bool = False
    show: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_extra(self, **kwargs: Any) -> "DisplayOptions":
        """Return a copy with ``kwargs`` merged over the current ``extra``."""
        return replace(self, extra={**self.extra, **kwargs})


@dataclass
class PixelBuffer:
    data: np.ndarray  # (rows, cols, 3) float in [0, 1], north_up
    transform: Affine

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(west, south, east, north) of the buffer in pixel coordinates."""
        west, south, east, north = array_bounds(self.height, self.width, self.transform)
        return float(west), float(south), float(east), float(north)

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """Bounds in matplotlib ``imshow`` order: (left, right, bottom, top)."""
        west, south, east, north = self.bounds
        return west, east, south, north
