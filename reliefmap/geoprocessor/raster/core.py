import numbers
import warnings
from typing import Any, Tuple

import numpy as np

from ...exceptions import InvalidShapeError, InvalidRotationWarning
from ...utils.logging import get_logger
from ...utils.orientation import ensure_orientation, ORIENTATION_NORTH_UP, ORIENTATION_SOUTH_UP


_logger = get_logger(__name__)

VALID_ROTATIONS: Tuple[int, ...] = (0, 90, 180, 270)
RGB_CHANNELS = 3

_SHAPE_MESSAGE = "`hillshade` is neither array nor matrix--convert to either to plot."


def _is_valid_rotation(rotate: Any) -> bool:
    if isinstance(rotate, bool) or not isinstance(rotate, numbers.Real):
        return False
    return rotate in VALID_ROTATIONS


def number_of_quarter_turns(rotate: Any, stacklevel: int = 2) -> int:
    """
    Convert a rotation in degrees to a count of 90 degree turns.

    Values outside (0, 90, 180, 270), including sequences, strings and None,
    issue an ``InvalidRotationWarning`` and count as no rotation. The warning
    is attributed ``stacklevel`` frames up, 2 being the direct caller.
    """
    if _is_valid_rotation(rotate):
        return int(rotate) // 90

    if isinstance(rotate, (numbers.Number, str)) or rotate is None:
        message = f"Rotation value {rotate} not in {VALID_ROTATIONS}. Ignoring"
    else:
        message = f"Rotation argument `rotate` not in {VALID_ROTATIONS}. Ignoring"
    _logger.warning(message)
    warnings.warn(message, InvalidRotationWarning, stacklevel=stacklevel)
    return 0


def rotate_quarter_turns(grid: np.ndarray, turns: int) -> np.ndarray:
    """
    Rotate ``grid`` counter-clockwise by ``turns`` quarter turns.

    Each turn is a transpose of the first two axes followed by reversing the
    row order, so trailing axes (channels) turn together and always share
    the same orientation. Four turns return the input orientation.
    """
    turns = int(turns) % 4
    if turns == 0:
        return grid
    return np.rot90(grid, k=turns, axes=(0, 1))


def as_pixel_array(hillshade: Any) -> np.ndarray:
    """
    Coerce input to a numeric array of shape (rows, cols) or (rows, cols, 3).

    Raises ``InvalidShapeError`` for any other rank, a channel count other
    than three, zero-size grids and ragged or non-numeric input.
    """
    try:
        arr = np.asarray(hillshade)
    except ValueError as e:
        raise InvalidShapeError(f"{_SHAPE_MESSAGE} ({e})") from e

    if arr.dtype.kind not in "biuf":
        raise InvalidShapeError(f"{_SHAPE_MESSAGE} (non-numeric dtype {arr.dtype})", arr.shape)
    if arr.ndim not in (2, 3):
        raise InvalidShapeError(_SHAPE_MESSAGE, arr.shape)
    if arr.ndim == 3 and arr.shape[2] != RGB_CHANNELS:
        raise InvalidShapeError(
            f"3D `hillshade` must have {RGB_CHANNELS} channels, got {arr.shape[2]}", arr.shape
        )
    if arr.size == 0:
        raise InvalidShapeError(f"`hillshade` has zero-size shape {arr.shape}", arr.shape)
    return arr


def matrix_to_rgb(grid: np.ndarray) -> np.ndarray:
    """
    Turn a single-channel south_up grid into a north_up (rows, cols, 3) array.

    The orientation change is applied before replication so all three
    channels are identical copies of the flipped grid. The grid is indexed
    [row, col] and only its rows are reversed; it is not transposed, so a
    (rows, cols) matrix is drawn rows high and cols wide. Grids indexed
    [x, y] must be transposed by the caller first.
    """
    north_up = ensure_orientation(grid, ORIENTATION_SOUTH_UP, ORIENTATION_NORTH_UP)
    return np.repeat(north_up[:, :, np.newaxis], RGB_CHANNELS, axis=2)


def prepare_hillshade(hillshade: Any, rotate: Any = 0, stacklevel: int = 2) -> np.ndarray:
    """
    Normalize and rotate a hillshade into a north_up RGB array.

    Rank-3 input rotates its channels together; rank-2 input is rotated,
    flipped from south_up and replicated into three channels. ``stacklevel``
    places an invalid-rotation warning, 2 being the direct caller.
    """
    arr = as_pixel_array(hillshade)
    turns = number_of_quarter_turns(rotate, stacklevel=stacklevel + 1)

    if arr.ndim == 3:
        rotated = rotate_quarter_turns(arr, turns)
        _logger.debug("Prepared RGB hillshade %s -> %s (%d turns)", arr.shape, rotated.shape, turns)
        return rotated

    rotated = rotate_quarter_turns(arr, turns)
    rgb = matrix_to_rgb(rotated)
    _logger.debug("Prepared matrix hillshade %s -> %s (%d turns)", arr.shape, rgb.shape, turns)
    return rgb
