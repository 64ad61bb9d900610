from .logging import get_logger
from .orientation import (
    ORIENTATION_NORTH_UP,
    ORIENTATION_SOUTH_UP,
    ensure_orientation,
)

__all__ = [
    "get_logger",
    "ORIENTATION_NORTH_UP",
    "ORIENTATION_SOUTH_UP",
    "ensure_orientation",
]
