from .raster import *  # noqa: F401,F403
