from __future__ import annotations

from typing import Optional, Tuple


class InvalidShapeError(ValueError):
    """Raised when an array cannot be drawn as a relief image."""

    def __init__(self, message: str, shape: Optional[Tuple[int, ...]] = None):
        self.message = message
        self.shape = shape
        super().__init__(message)


class InvalidRotationWarning(UserWarning):
    """Issued when a rotation is not a multiple of 90 in [0, 270]; drawing continues unrotated."""
