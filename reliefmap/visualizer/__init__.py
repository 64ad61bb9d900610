from .maps import plot_map, aspect_for_latitude, aspect_for_metadata
from .state import DisplayState

__all__ = [
    "plot_map",
    "aspect_for_latitude",
    "aspect_for_metadata",
    "DisplayState",
]
