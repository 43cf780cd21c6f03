"""Temperature scale conversion routed through Celsius."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple

_logger = logging.getLogger(__name__)

Domain = Tuple[float, float]
DISPLAY_DECIMALS = 2


class InvalidInput(ValueError):
    """数値入力が NaN / ±Inf のときに送出する例外。"""

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"temperature must be a finite number, got {value!r}")


class Scale(Enum):
    """Supported temperature scales. The value is the display label."""

    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"
    RANKINE = "Rankine"

    @property
    def label(self) -> str:
        return self.value

    @property
    def unit(self) -> str:
        return _SCALES[self].unit

    @property
    def domain(self) -> Domain:
        return _SCALES[self].domain


@dataclass(frozen=True)
class _ScaleSpec:
    to_celsius: Callable[[float], float]
    from_celsius: Callable[[float], float]
    domain: Domain
    unit: str


# スケールごとの振る舞いはここに集約する（追加時はこの表だけ触る）
_SCALES: Dict[Scale, _ScaleSpec] = {
    Scale.CELSIUS: _ScaleSpec(
        to_celsius=lambda v: v,
        from_celsius=lambda c: c,
        domain=(-100.0, 100.0),
        unit="°C",
    ),
    Scale.FAHRENHEIT: _ScaleSpec(
        to_celsius=lambda v: (v - 32) * 5 / 9,
        from_celsius=lambda c: c * 9 / 5 + 32,
        domain=(-148.0, 212.0),
        unit="°F",
    ),
    Scale.KELVIN: _ScaleSpec(
        to_celsius=lambda v: v - 273.15,
        from_celsius=lambda c: c + 273.15,
        domain=(173.15, 373.15),
        unit="K",
    ),
    Scale.RANKINE: _ScaleSpec(
        to_celsius=lambda v: (v - 491.67) * 5 / 9,
        from_celsius=lambda c: (c + 273.15) * 9 / 5,
        domain=(0.0, 671.67),
        unit="°R",
    ),
}


def require_finite(value: float) -> float:
    """Return ``value`` as float or raise :class:`InvalidInput` for NaN/Inf."""
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(value) from exc
    if not math.isfinite(number):
        _logger.debug("rejected non-finite temperature %r", value)
        raise InvalidInput(value)
    return number


def to_celsius(value: float, scale: Scale) -> float:
    """Convert ``value`` expressed in ``scale`` to Celsius."""
    return _SCALES[scale].to_celsius(require_finite(value))


def from_celsius(celsius: float, scale: Scale) -> float:
    """Convert a Celsius value into ``scale``."""
    return _SCALES[scale].from_celsius(require_finite(celsius))


def all_conversions(value: float, scale: Scale) -> Dict[Scale, float]:
    """Express ``value`` in every scale.

    Celsius is computed once and every target, the input scale included, is
    derived from it so that all four readings share one source.

    Results are not range-checked: a finite input near the float limit (for
    example 1e308 °F) overflows to ``inf`` in every reading.
    """
    celsius = to_celsius(value, scale)
    return {target: _SCALES[target].from_celsius(celsius) for target in Scale}


def input_domain(scale: Scale) -> Domain:
    """Slider bounds for ``scale`` (roughly -100 °C to 100 °C)."""
    return _SCALES[scale].domain


def clamp_to_domain(value: float, scale: Scale) -> float:
    """Clamp for the slider control; typed values are never clamped."""
    low, high = input_domain(scale)
    return max(low, min(high, require_finite(value)))


def convert(value: float, from_scale: Scale) -> Dict[str, float]:
    """Plain-dict view of :func:`all_conversions` keyed by lowercase scale name."""
    return {target.name.lower(): converted for target, converted in all_conversions(value, from_scale).items()}


def domain_for(scale: Scale) -> Domain:
    return input_domain(scale)


def label_for(scale: Scale) -> str:
    return scale.label


def unit_for(scale: Scale) -> str:
    return scale.unit


def format_value(value: float, scale: Scale) -> str:
    """Two-decimal reading with unit, e.g. ``"100.00 °C"``."""
    return f"{value:.{DISPLAY_DECIMALS}f} {scale.unit}"


def parse_value(text: str) -> float:
    """Parse text typed into the value field."""
    stripped = str(text).strip()
    if not stripped:
        raise InvalidInput(text, "temperature is empty")
    try:
        number = float(stripped)
    except ValueError as exc:
        raise InvalidInput(text, f"not a number: {text!r}") from exc
    return require_finite(number)
