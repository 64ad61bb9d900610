# tests/test_maps.py

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
import pytest

from reliefmap import (
    DisplayOptions,
    GridMetadata,
    InvalidRotationWarning,
    InvalidShapeError,
    aspect_for_latitude,
    aspect_for_metadata,
    plot_map,
)


class RecordingAxes:
    """Axes stand-in that changes rcParams while drawing."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []

    def imshow(self, data, **kwargs):
        mpl.rcParams["lines.linewidth"] = 42.0
        self.calls.append((data, kwargs))
        if self.fail:
            raise RuntimeError("renderer failed")
        return "image"

    def set_axis_off(self):
        pass


NO_SHOW = DisplayOptions(show=False)


def test_plot_rgb_sets_extent_and_data(rgb) -> None:
    fig, ax = plt.subplots()
    image = plot_map(rgb, ax=ax, options=NO_SHOW)
    assert tuple(image.get_extent()) == (0.5, 4.5, 0.5, 3.5)
    np.testing.assert_allclose(np.asarray(image.get_array()), rgb)
    assert list(ax.images) == [image]
    assert not ax.axison


def test_plot_matrix_flips_and_replicates(matrix) -> None:
    fig, ax = plt.subplots()
    image = plot_map(matrix, ax=ax, options=NO_SHOW)
    data = np.asarray(image.get_array())
    assert data.shape == (3, 4, 3)
    for channel in range(3):
        np.testing.assert_allclose(data[:, :, channel], np.flipud(matrix))


def test_rotation_swaps_extent(rgb) -> None:
    fig, ax = plt.subplots()
    image = plot_map(rgb, rotate=90, ax=ax, options=NO_SHOW)
    assert tuple(image.get_extent()) == (0.5, 3.5, 0.5, 4.5)
    np.testing.assert_allclose(np.asarray(image.get_array()), np.rot90(rgb))


def test_invalid_rotation_warns_and_draws_unrotated(rgb) -> None:
    fig, ax = plt.subplots()
    with pytest.warns(InvalidRotationWarning, match="Rotation value 45"):
        image = plot_map(rgb, rotate=45, ax=ax, options=NO_SHOW)
    np.testing.assert_allclose(np.asarray(image.get_array()), rgb)


def test_invalid_rotation_on_matrix_draws_unrotated(matrix) -> None:
    fig, ax = plt.subplots()
    with pytest.warns(InvalidRotationWarning):
        image = plot_map(matrix, rotate=45, ax=ax, options=NO_SHOW)
    expected = np.repeat(np.flipud(matrix)[:, :, np.newaxis], 3, axis=2)
    np.testing.assert_allclose(np.asarray(image.get_array()), expected)
    assert tuple(image.get_extent()) == (0.5, 4.5, 0.5, 3.5)


def test_invalid_rotation_warning_points_at_caller(rgb) -> None:
    fig, ax = plt.subplots()
    with pytest.warns(InvalidRotationWarning) as record:
        plot_map(rgb, rotate=[90, 180], ax=ax, options=NO_SHOW)
    assert record[0].filename == __file__


def test_keep_user_par_restores_after_shape_error() -> None:
    fig, ax = plt.subplots()
    with mpl.rc_context():
        before = dict(mpl.rcParams.copy())
        with pytest.raises(InvalidShapeError):
            plot_map(np.arange(5), keep_user_par=True, ax=ax, options=NO_SHOW)
        assert dict(mpl.rcParams.copy()) == before
    assert len(ax.images) == 0


def test_byte_data_read_as_0_255_by_default() -> None:
    data = np.zeros((2, 2, 3), dtype=np.uint8)
    data[0, 0] = 128
    data[1, 1] = 40
    fig, ax = plt.subplots()
    image = plot_map(data, ax=ax, options=NO_SHOW)
    drawn = np.asarray(image.get_array())
    assert drawn[0, 0, 0] == pytest.approx(128 / 255)
    assert drawn[1, 1, 2] == pytest.approx(40 / 255)
    assert drawn[0, 1, 0] == 0.0


def test_byte_matrix_read_as_0_255_by_default() -> None:
    data = np.array([[0, 255], [51, 102]], dtype=np.uint8)
    fig, ax = plt.subplots()
    image = plot_map(data, ax=ax, options=NO_SHOW)
    drawn = np.asarray(image.get_array())
    np.testing.assert_allclose(drawn[:, :, 0], np.flipud(data) / 255.0)


@pytest.mark.parametrize("bad", [np.arange(6), np.zeros((2, 2, 3, 2))])
def test_bad_shape_draws_nothing(bad) -> None:
    fig, ax = plt.subplots()
    with pytest.raises(InvalidShapeError):
        plot_map(bad, ax=ax, options=NO_SHOW)
    assert len(ax.images) == 0


def test_current_axes_used_by_default(rgb) -> None:
    image = plot_map(rgb, options=NO_SHOW)
    assert image in plt.gca().images


def test_show_on_non_interactive_backend(rgb) -> None:
    image = plot_map(rgb)
    assert image is not None


def test_aspect_and_kwargs_forwarded(rgb) -> None:
    axes = RecordingAxes()
    with mpl.rc_context():
        plot_map(rgb, asp=2.5, ax=axes, options=NO_SHOW, alpha=0.4)
    _, kwargs = axes.calls[0]
    assert kwargs["aspect"] == 2.5
    assert kwargs["alpha"] == 0.4
    assert kwargs["interpolation"] == "nearest"
    assert kwargs["extent"] == (0.5, 4.5, 0.5, 3.5)


def test_options_extra_merged_with_kwargs(rgb) -> None:
    axes = RecordingAxes()
    options = DisplayOptions(show=False, extra={"alpha": 0.1, "zorder": 3})
    with mpl.rc_context():
        plot_map(rgb, ax=axes, options=options, alpha=0.9)
    _, kwargs = axes.calls[0]
    assert kwargs["alpha"] == 0.9
    assert kwargs["zorder"] == 3
    assert options.extra == {"alpha": 0.1, "zorder": 3}


def test_renderer_errors_propagate(rgb) -> None:
    fig, ax = plt.subplots()
    with pytest.raises(ValueError):
        plot_map(rgb, asp=-1, ax=ax, options=NO_SHOW)
    with pytest.raises((AttributeError, TypeError)):
        plot_map(rgb, ax=ax, options=NO_SHOW, not_an_imshow_option=1)


def test_keep_user_par_restores_after_success(rgb) -> None:
    with mpl.rc_context():
        before = mpl.rcParams["lines.linewidth"]
        assert plot_map(rgb, keep_user_par=True, ax=RecordingAxes(), options=NO_SHOW) == "image"
        assert mpl.rcParams["lines.linewidth"] == before


def test_keep_user_par_restores_after_renderer_failure(rgb) -> None:
    with mpl.rc_context():
        before = dict(mpl.rcParams.copy())
        with pytest.raises(RuntimeError, match="renderer failed"):
            plot_map(rgb, keep_user_par=True, ax=RecordingAxes(fail=True), options=NO_SHOW)
        assert dict(mpl.rcParams.copy()) == before


def test_user_par_left_alone_by_default(rgb) -> None:
    with mpl.rc_context():
        plot_map(rgb, ax=RecordingAxes(), options=NO_SHOW)
        assert mpl.rcParams["lines.linewidth"] == 42.0


def test_max_pixels_samples_buffer(rgb) -> None:
    fig, ax = plt.subplots()
    image = plot_map(rgb, ax=ax, options=DisplayOptions(show=False, max_pixels=4))
    assert np.asarray(image.get_array()).shape == (2, 2, 3)
    assert tuple(image.get_extent()) == (0.5, 4.5, 0.5, 3.5)


def test_scale_normalizes_byte_data() -> None:
    data = np.full((2, 3, 3), 255, dtype=np.uint8)
    fig, ax = plt.subplots()
    image = plot_map(data, ax=ax, options=DisplayOptions(show=False, scale=255, axes_visible=True))
    np.testing.assert_allclose(np.asarray(image.get_array()), 1.0)
    assert ax.axison


def test_aspect_for_latitude() -> None:
    assert aspect_for_latitude(0) == pytest.approx(1.0)
    assert aspect_for_latitude(60) == pytest.approx(2.0)
    assert aspect_for_latitude(-60) == pytest.approx(2.0)
    with pytest.raises(ValueError):
        aspect_for_latitude(90)


def test_aspect_for_metadata() -> None:
    meta = GridMetadata(crs="EPSG:4326", bounds=(-122.5, 50.0, -121.5, 70.0), meshsize=30.0)
    assert aspect_for_metadata(meta) == pytest.approx(2.0)
