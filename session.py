"""入力値と選択スケールを保持するセッション。"""

from __future__ import annotations

import logging
from typing import Dict

from scales import (
    Domain,
    Scale,
    require_finite,
    all_conversions,
    clamp_to_domain,
    input_domain,
)
from warmth import GradientSpec, gradient_for

_logger = logging.getLogger(__name__)

SLIDER_STEP = 0.1


def snap_to_step(value: float, step: float = SLIDER_STEP, origin: float = 0.0) -> float:
    """Round ``value`` to the nearest multiple of ``step`` counted from ``origin``."""
    if step <= 0:
        return value
    steps = round((value - origin) / step)
    # 0.1刻みの誤差 (0.30000000000000004 など) を表示前に丸める
    return round(origin + steps * step, 10)


class ConversionSession:
    """Current (value, scale) pair of one UI session.

    Switching the scale keeps the raw number: 25 typed as Celsius becomes
    25 °F after selecting Fahrenheit. Every scale tab shares one numeric
    binding, and the screen relies on that.
    """

    def __init__(self, value: float = 0.0, scale: Scale = Scale.CELSIUS) -> None:
        self._value = require_finite(value)
        self._scale = self._check_scale(scale)

    @staticmethod
    def _check_scale(scale: Scale) -> Scale:
        if not isinstance(scale, Scale):
            raise TypeError(f"scale must be a Scale, got {type(scale).__name__}")
        return scale

    @property
    def value(self) -> float:
        return self._value

    @property
    def scale(self) -> Scale:
        return self._scale

    def set_value(self, value: float) -> None:
        self._value = require_finite(value)
        _logger.debug("value set to %s %s", self._value, self._scale.unit)

    def set_scale(self, scale: Scale) -> None:
        """数値はそのまま、解釈するスケールだけを切り替える。"""
        self._scale = self._check_scale(scale)
        _logger.debug("scale set to %s (value kept at %s)", self._scale.label, self._value)

    def set_value_from_slider(self, value: float) -> float:
        """Slider path: clamp to the scale's domain and snap to the slider step."""
        low, high = input_domain(self._scale)
        snapped = snap_to_step(clamp_to_domain(value, self._scale), SLIDER_STEP, origin=low)
        self.set_value(max(low, min(high, snapped)))
        return self._value

    def domain(self) -> Domain:
        return input_domain(self._scale)

    def display_values(self) -> Dict[Scale, float]:
        return all_conversions(self._value, self._scale)

    def other_display_values(self) -> Dict[Scale, float]:
        """Readings for the three scales other than the selected one."""
        return {s: v for s, v in self.display_values().items() if s is not self._scale}

    def gradient(self) -> GradientSpec:
        return gradient_for(self._value, self._scale)

    def __repr__(self) -> str:
        return f"ConversionSession(value={self._value!r}, scale={self._scale})"
