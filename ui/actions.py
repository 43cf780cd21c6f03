"""ユーザー操作を司るアクション層のMixin。"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import tkinter as tk

from scales import InvalidInput, Scale, clamp_to_domain, parse_value
from session import SLIDER_STEP
from .models import build_view

if TYPE_CHECKING:
    from .app import TemperatureApp

_logger = logging.getLogger(__name__)


class ActionsMixin:
    """スケール切替・数値入力・スライダー操作のハンドラ。"""

    def _on_scale_selected(self: "TemperatureApp") -> None:
        scale = Scale[self.scale_var.get()]
        if scale is self.session.scale:
            return
        # 数値は換算せずに新しいスケールの値として読み替える
        self.session.set_scale(scale)
        low, high = self.session.domain()
        self._syncing_controls = True
        try:
            self.slider.configure(from_=low, to=high)
        finally:
            self._syncing_controls = False
        self._refresh_view()

    def _on_entry_commit(self: "TemperatureApp", _event: Optional[tk.Event] = None) -> None:
        if self._syncing_controls:
            return
        text = self.entry_var.get()
        try:
            value = parse_value(text)
        except InvalidInput as exc:
            # 不正な入力は取り消して直前の値に戻す
            _logger.info("rejected temperature input %r: %s", text, exc)
            self.status_var.set(f"数値を入力してください: {text!r}")
            self._refresh_view()
            return
        self.status_var.set("")
        if value != self.session.value:
            self.session.set_value(value)
        self._refresh_view()

    def _on_slider_moved(self: "TemperatureApp", raw_value: str) -> None:
        if self._syncing_controls:
            return
        try:
            value = float(raw_value)
        except ValueError:
            return
        if self._is_slider_echo(value):
            return
        self.session.set_value_from_slider(value)
        self.status_var.set("")
        self._refresh_view()

    def _is_slider_echo(self: "TemperatureApp", value: float) -> bool:
        """画面側が書き戻したスライダー位置からのコールバックか判定する。

        from_/to の変更で Tk が値を範囲内に寄せると、-command はアイドル時に
        遅れて呼ばれるので _syncing_controls では止められない。tk.Scale は
        端点も 0.1 刻みに丸めるため (173.15 -> 173.1 など)、半ステップ以内を
        同じ位置とみなす。
        """
        shown = clamp_to_domain(self.session.value, self.session.scale)
        return abs(value - shown) <= SLIDER_STEP / 2 + 1e-9

    def _dismiss_keyboard(self: "TemperatureApp", _event: Optional[tk.Event] = None) -> None:
        """背景クリックで入力欄からフォーカスを外す。"""
        self.canvas.focus_set()

    def _refresh_view(self: "TemperatureApp") -> None:
        """セッションから表示を組み立て直し、各ウィジェットへ反映する。"""
        self.view = build_view(self.session)
        self._syncing_controls = True
        try:
            self.prompt_var.set(self.view.prompt)
            self.entry_var.set(self.format_entry(self.view.value))
            # スライダーは範囲外の値を端に寄せて表示するだけで、セッションは変えない
            self.slider_var.set(clamp_to_domain(self.view.value, self.view.scale))
        finally:
            self._syncing_controls = False
        for item, row in zip(self._reading_items, self.view.rows):
            self.canvas.itemconfigure(item, text=row.text)
        self._refresh_background()

    @staticmethod
    def format_entry(value: float) -> str:
        """入力欄の表示。整数なら小数点以下を省く。"""
        if float(value).is_integer():
            return str(int(value))
        return str(float(value))
