"""Grid orientation helpers.

Contract:
- Canonical display orientation is "north_up": row 0 is the top row of the
  drawn image and increasing row index moves down the screen.
- "south_up" grids store the bottom row first (row 0 = bottom). Single-channel
  relief grids arrive in this convention and are flipped once, right before
  they are turned into a pixel buffer.
- Columns increase left to right in both conventions.
"""

from __future__ import annotations

from typing import Literal

import numpy as np

ORIENTATION_NORTH_UP: Literal["north_up"] = "north_up"
ORIENTATION_SOUTH_UP: Literal["south_up"] = "south_up"

_ORIENTATIONS = (ORIENTATION_NORTH_UP, ORIENTATION_SOUTH_UP)


def ensure_orientation(
    grid: np.ndarray,
    orientation_in: Literal["north_up", "south_up"],
    orientation_out: Literal["north_up", "south_up"] = ORIENTATION_NORTH_UP,
) -> np.ndarray:
    """Return ``grid`` converted from ``orientation_in`` to ``orientation_out``.

    If orientations match, the input array is returned unchanged (no copy).
    Converting between north_up and south_up is a vertical flip along the
    first axis via ``np.flipud``; trailing axes (channels) are untouched.
    """
    for value in (orientation_in, orientation_out):
        if value not in _ORIENTATIONS:
            raise ValueError(f"Unknown orientation '{value}'; expected one of {_ORIENTATIONS}")
    if orientation_in == orientation_out:
        return grid
    return np.flipud(grid)
