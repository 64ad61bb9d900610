from __future__ import annotations

import contextlib
import math
import warnings
from typing import Any, Optional

import matplotlib.pyplot as plt

from ..geoprocessor.raster import prepare_hillshade, create_pixel_buffer, sample_regular
from ..models import DisplayOptions, GridMetadata
from ..utils.logging import get_logger
from .state import DisplayState


_logger = get_logger(__name__)

# Raised by pyplot.show() on non-interactive backends such as Agg
_BENIGN_RENDERER_WARNINGS = (
    ".*non-interactive.*",
    ".*cannot be shown.*",
)


def aspect_for_latitude(mean_latitude: float) -> float:
    """
    Aspect ratio that rescales lon/lat grids at ``mean_latitude`` degrees.

    Equivalent to ``1 / cos(mean_latitude * pi / 180)``; pass the result as
    ``asp`` to ``plot_map`` for unprojected geographic grids.
    """
    if not -90.0 < mean_latitude < 90.0:
        raise ValueError(f"mean_latitude must be within (-90, 90), got {mean_latitude}")
    return 1.0 / math.cos(math.radians(mean_latitude))


def aspect_for_metadata(meta: GridMetadata) -> float:
    _, min_lat, _, max_lat = meta.bounds
    return aspect_for_latitude((min_lat + max_lat) / 2.0)


def plot_map(hillshade, rotate=0, asp=1, keep_user_par=False, options: Optional[DisplayOptions] = None, ax=None, **kwargs: Any):
    """
    Display a hillshade on the current matplotlib axes.

    Parameters
    ----------
    hillshade : array-like
        A (rows, cols) intensity matrix or a (rows, cols, 3) RGB array.
    rotate : int, default 0
        Counter-clockwise rotation, one of 0, 90, 180, 270. Anything else
        issues ``InvalidRotationWarning`` and draws the map unrotated.
    asp : float, default 1
        Aspect ratio of the plot. Use ``aspect_for_latitude(mean_latitude)``
        to correct lon/lat grids at higher latitudes.
    keep_user_par : bool, default False
        Restore ``matplotlib.rcParams`` after drawing, even if drawing fails.
        Leave False when setting up multi-panel figures.
    options : DisplayOptions, optional
        Renderer settings; defaults draw every pixel, reading integer data
        as 0-255 and floating data as 0-1.
    ax : matplotlib.axes.Axes, optional
        Target axes; the current axes when omitted.
    **kwargs
        Extra keyword arguments forwarded to ``Axes.imshow``.

    Returns
    -------
    matplotlib.image.AxesImage
    """
    options = (options or DisplayOptions()).with_extra(**kwargs)
    scope = DisplayState() if keep_user_par else contextlib.nullcontext()

    with scope:
        rgb = prepare_hillshade(hillshade, rotate, stacklevel=3)
        buffer = create_pixel_buffer(rgb, scale=options.scale)
        max_pixels = options.max_pixels if options.max_pixels is not None else buffer.height * buffer.width
        drawn = sample_regular(buffer, max_pixels)
        if drawn is not buffer:
            _logger.info("Sampled %dx%d pixels down to %dx%d", buffer.height, buffer.width, drawn.height, drawn.width)

        with warnings.catch_warnings():
            for pattern in _BENIGN_RENDERER_WARNINGS:
                warnings.filterwarnings("ignore", message=pattern, category=UserWarning)

            target = ax if ax is not None else plt.gca()
            image = target.imshow(
                drawn.data,
                extent=drawn.extent,
                origin="upper",
                aspect=asp,
                interpolation=options.interpolation,
                **options.extra,
            )
            if not options.axes_visible:
                target.set_axis_off()
            if options.show:
                plt.show()

    return image
