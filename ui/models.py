"""画面表示用のデータモデル定義。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from scales import Domain, Scale, format_value
from session import ConversionSession
from warmth import GradientSpec

APP_TITLE = "Temperature Converter"


@dataclass(frozen=True)
class ReadingRow:
    """変換結果1行分（例: Kelvin: 373.15 K）。"""

    scale: Scale
    value: float
    text: str

    @property
    def label(self) -> str:
        return self.scale.label

    @property
    def unit(self) -> str:
        return self.scale.unit


@dataclass(frozen=True)
class TemperatureView:
    """セッションから組み立てた描画用スナップショット。"""

    title: str
    scale: Scale
    value: float
    rows: Tuple[ReadingRow, ...]
    gradient: GradientSpec
    domain: Domain

    @property
    def prompt(self) -> str:
        return f"{self.scale.label}:"


def build_view(session: ConversionSession) -> TemperatureView:
    """Snapshot of everything the screen draws for the current session."""
    rows = tuple(
        ReadingRow(scale=scale, value=value, text=f"{scale.label}: {format_value(value, scale)}")
        for scale, value in session.other_display_values().items()
    )
    return TemperatureView(
        title=APP_TITLE,
        scale=session.scale,
        value=session.value,
        rows=rows,
        gradient=session.gradient(),
        domain=session.domain(),
    )
