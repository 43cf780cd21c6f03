"""温度から背景グラデーション（3色）を求める。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from scales import Scale, to_celsius

# この範囲外は端の色で飽和させる
WARMTH_MIN_CELSIUS = -30.0
WARMTH_MAX_CELSIUS = 50.0

TOP_TO_BOTTOM = "top_to_bottom"


@dataclass(frozen=True)
class ColorRGB:
    """RGB color with channels in 0-1 (opacity is always 1.0)."""

    red: float
    green: float
    blue: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_rgb255(self) -> Tuple[int, int, int]:
        return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in self.as_tuple())  # type: ignore[return-value]

    def to_hex(self) -> str:
        r, g, b = self.to_rgb255()
        return f"#{r:02x}{g:02x}{b:02x}"


BLUE = ColorRGB(0.0, 0.0, 1.0)
WHITE = ColorRGB(1.0, 1.0, 1.0)
YELLOW = ColorRGB(1.0, 1.0, 0.0)
RED = ColorRGB(1.0, 0.0, 0.0)


@dataclass(frozen=True)
class GradientSpec:
    """Three stops ordered top to bottom, as handed to the renderer."""

    start: ColorRGB
    mid: ColorRGB
    end: ColorRGB
    ratio: float = 0.0
    direction: str = TOP_TO_BOTTOM

    @property
    def colors(self) -> Tuple[ColorRGB, ColorRGB, ColorRGB]:
        return (self.start, self.mid, self.end)


def warmth_ratio(celsius: float) -> float:
    """Position of ``celsius`` inside the warmth window, clamped to 0-1."""
    ratio = (celsius - WARMTH_MIN_CELSIUS) / (WARMTH_MAX_CELSIUS - WARMTH_MIN_CELSIUS)
    return max(0.0, min(1.0, ratio))


def lerp_color(start: ColorRGB, end: ColorRGB, ratio: float) -> ColorRGB:
    """チャンネルごとの線形補間 ``c0 + (c1 - c0) * ratio``。"""
    return ColorRGB(
        start.red + (end.red - start.red) * ratio,
        start.green + (end.green - start.green) * ratio,
        start.blue + (end.blue - start.blue) * ratio,
    )


def gradient_for(value: float, scale: Scale) -> GradientSpec:
    """Map a temperature in any scale to its background gradient.

    All three pairs are blended with the same ratio, so the lower stops reach
    yellow/red well before the top stop leaves white.
    """
    ratio = warmth_ratio(to_celsius(value, scale))
    start = lerp_color(BLUE, WHITE, ratio)
    mid = lerp_color(WHITE, YELLOW, ratio)
    end = lerp_color(YELLOW, RED, ratio)
    return GradientSpec(start=start, mid=mid, end=end, ratio=ratio)


def gradient_colors(value: float, scale: Scale) -> List[List[float]]:
    """``[[r, g, b], ...]`` for start, mid and end."""
    return [list(color.as_tuple()) for color in gradient_for(value, scale).colors]
