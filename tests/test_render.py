"""Tests for gradient rasterization."""

import numpy as np
import pytest
from PIL import Image

from scales import Scale
from warmth import gradient_for, gradient_image, render_gradient, save_gradient
from warmth.gradient import GradientSpec


@pytest.fixture
def cold_spec() -> GradientSpec:
    return gradient_for(-40.0, Scale.CELSIUS)


@pytest.fixture
def hot_spec() -> GradientSpec:
    return gradient_for(120.0, Scale.FAHRENHEIT)


def test_render_shape(cold_spec):
    image = render_gradient(cold_spec, (32, 101))

    assert image.shape == (101, 32, 3)
    assert image.dtype == np.uint8


def test_render_stops_at_top_middle_bottom(hot_spec):
    image = render_gradient(hot_spec, (8, 101))

    assert tuple(image[0, 0]) == hot_spec.start.to_rgb255()
    assert tuple(image[50, 0]) == hot_spec.mid.to_rgb255()
    assert tuple(image[-1, 0]) == hot_spec.end.to_rgb255()


def test_render_rows_are_uniform(cold_spec):
    image = render_gradient(cold_spec, (40, 60))

    assert np.array_equal(image, np.repeat(image[:, :1], 40, axis=1))


def test_render_blends_monotonically(cold_spec):
    # blue -> white -> yellow: red channel only rises toward the bottom
    image = render_gradient(cold_spec, (1, 200))
    red = image[:, 0, 0].astype(int)

    assert red[0] == 0
    assert red[-1] == 255
    assert np.all(np.diff(red) >= 0)


def test_render_single_row_uses_mid(cold_spec):
    image = render_gradient(cold_spec, (5, 1))

    assert tuple(image[0, 0]) == cold_spec.mid.to_rgb255()


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-1, 5)])
def test_render_rejects_bad_size(cold_spec, size):
    with pytest.raises(ValueError):
        render_gradient(cold_spec, size)


def test_render_rejects_other_direction(cold_spec):
    spec = GradientSpec(cold_spec.start, cold_spec.mid, cold_spec.end, direction="left_to_right")

    with pytest.raises(ValueError):
        render_gradient(spec, (4, 4))


def test_gradient_image_and_save(tmp_path, hot_spec):
    image = gradient_image(hot_spec, (12, 30))
    assert image.size == (12, 30)
    assert image.mode == "RGB"

    out = save_gradient(hot_spec, tmp_path / "gradient.png", (12, 30))
    with Image.open(out) as saved:
        assert saved.size == (12, 30)
        assert saved.getpixel((0, 29)) == hot_spec.end.to_rgb255()
