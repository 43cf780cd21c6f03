"""Warmth gradient: temperature -> 3-stop background gradient."""

from __future__ import annotations

from .gradient import (
    BLUE,
    RED,
    WHITE,
    YELLOW,
    WARMTH_MAX_CELSIUS,
    WARMTH_MIN_CELSIUS,
    ColorRGB,
    GradientSpec,
    gradient_colors,
    gradient_for,
    lerp_color,
    warmth_ratio,
)
from .render import gradient_image, render_gradient, save_gradient

__all__ = [
    "BLUE",
    "RED",
    "WHITE",
    "YELLOW",
    "WARMTH_MAX_CELSIUS",
    "WARMTH_MIN_CELSIUS",
    "ColorRGB",
    "GradientSpec",
    "gradient_colors",
    "gradient_for",
    "lerp_color",
    "warmth_ratio",
    "gradient_image",
    "render_gradient",
    "save_gradient",
]
