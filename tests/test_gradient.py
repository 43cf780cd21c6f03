"""Tests for the warmth gradient."""

import math

import numpy as np
import pytest

from scales import InvalidInput, Scale
from warmth import (
    BLUE,
    RED,
    WHITE,
    YELLOW,
    ColorRGB,
    GradientSpec,
    gradient_colors,
    gradient_for,
    lerp_color,
    warmth_ratio,
)


def _channels(spec: GradientSpec) -> np.ndarray:
    return np.array([c.as_tuple() for c in spec.colors])


def test_warmth_ratio_window():
    assert warmth_ratio(-30.0) == 0.0
    assert warmth_ratio(50.0) == 1.0
    assert warmth_ratio(10.0) == 0.5
    assert warmth_ratio(-1000.0) == 0.0
    assert warmth_ratio(1000.0) == 1.0


def test_lerp_color():
    assert lerp_color(BLUE, WHITE, 0.0) == BLUE
    assert lerp_color(BLUE, WHITE, 1.0) == WHITE
    assert lerp_color(YELLOW, RED, 0.25) == ColorRGB(1.0, 0.75, 0.0)


def test_gradient_at_cold_end():
    spec = gradient_for(-30.0, Scale.CELSIUS)

    assert spec.ratio == 0.0
    assert spec.colors == (BLUE, WHITE, YELLOW)
    assert spec.direction == "top_to_bottom"


def test_gradient_at_hot_end():
    spec = gradient_for(50.0, Scale.CELSIUS)

    assert spec.ratio == 1.0
    assert spec.colors == (WHITE, YELLOW, RED)


def test_gradient_midpoint_uses_one_ratio_for_all_pairs():
    spec = gradient_for(10.0, Scale.CELSIUS)

    assert spec.start == ColorRGB(0.5, 0.5, 1.0)
    assert spec.mid == ColorRGB(1.0, 1.0, 0.5)
    assert spec.end == ColorRGB(1.0, 0.5, 0.0)


def test_gradient_clamps_extremes():
    assert gradient_for(-1000.0, Scale.CELSIUS) == gradient_for(-30.0, Scale.CELSIUS)
    assert gradient_for(1000.0, Scale.CELSIUS) == gradient_for(50.0, Scale.CELSIUS)


def test_gradient_accepts_any_scale():
    assert gradient_for(212.0, Scale.FAHRENHEIT).ratio == 1.0
    assert gradient_for(283.15, Scale.KELVIN).ratio == pytest.approx(0.5)
    assert gradient_for(0.0, Scale.RANKINE).ratio == 0.0


def test_gradient_monotonic_inside_window():
    temps = np.linspace(-30.0, 50.0, 81)
    specs = [gradient_for(float(t), Scale.CELSIUS) for t in temps]
    ratios = np.array([s.ratio for s in specs])
    assert np.all(np.diff(ratios) > 0)

    stacked = np.stack([_channels(s) for s in specs])  # (n, stop, channel)
    diffs = np.diff(stacked, axis=0)
    for stop in range(3):
        for channel in range(3):
            column = diffs[:, stop, channel]
            assert np.all(column >= 0) or np.all(column <= 0)


def test_gradient_rejects_nan():
    with pytest.raises(InvalidInput):
        gradient_for(math.nan, Scale.CELSIUS)


def test_gradient_colors_shape():
    colors = gradient_colors(50.0, Scale.CELSIUS)

    assert colors == [[1.0, 1.0, 1.0], [1.0, 1.0, 0.0], [1.0, 0.0, 0.0]]


def test_color_helpers():
    assert RED.to_rgb255() == (255, 0, 0)
    assert RED.to_hex() == "#ff0000"
    assert ColorRGB(0.5, 0.5, 1.0).to_hex() == "#8080ff"
