"""Display shaded-relief arrays with matplotlib."""

from .exceptions import InvalidShapeError, InvalidRotationWarning
from .models import DisplayOptions, GridMetadata, PixelBuffer
from .visualizer import plot_map, aspect_for_latitude, aspect_for_metadata, DisplayState

__version__ = "0.1.0"

__all__ = [
    "plot_map",
    "aspect_for_latitude",
    "aspect_for_metadata",
    "DisplayState",
    "DisplayOptions",
    "GridMetadata",
    "PixelBuffer",
    "InvalidShapeError",
    "InvalidRotationWarning",
]
