"""
Raster preparation for relief display.

Orientation contract:
- Arrays returned from this package are north_up (row 0 = top of the image).
- Single-channel grids are taken as south_up and converted once, in
  ``matrix_to_rgb``; three-channel grids are already north_up.
"""

from .core import (
    VALID_ROTATIONS,
    RGB_CHANNELS,
    number_of_quarter_turns,
    rotate_quarter_turns,
    as_pixel_array,
    matrix_to_rgb,
    prepare_hillshade,
)

from .buffer import (
    default_scale,
    create_pixel_buffer,
    sample_regular,
)

__all__ = [
    # core
    "VALID_ROTATIONS",
    "RGB_CHANNELS",
    "number_of_quarter_turns",
    "rotate_quarter_turns",
    "as_pixel_array",
    "matrix_to_rgb",
    "prepare_hillshade",
    # buffer
    "default_scale",
    "create_pixel_buffer",
    "sample_regular",
]
