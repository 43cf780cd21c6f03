"""Shared helpers for slider pointer interactions."""

from __future__ import annotations

import logging

import tkinter as tk

_logger = logging.getLogger(__name__)


def _pointer_fraction(widget: tk.Widget, x: int, y: int) -> float:
    """ポインタ位置をスライダー上の割合 (0-1, 始点側が 0) にする。"""
    if str(widget.cget("orient") or "horizontal").lower() == "vertical":
        # 縦向きは下端が from 側
        return 1.0 - y / max(1, widget.winfo_height())
    return x / max(1, widget.winfo_width())


def calc_scale_value_from_pointer(event: tk.Event) -> float:
    """Slider value under the pointer, limited to the widget's from/to range."""
    widget = event.widget
    fraction = max(0.0, min(1.0, _pointer_fraction(widget, event.x, event.y)))
    low = float(widget.cget("from"))
    high = float(widget.cget("to"))
    return low + (high - low) * fraction


def bind_scale_click_jump(root: tk.Misc) -> None:
    """Bind click-to-jump behavior to all scales."""

    def _is_disabled(widget: tk.Widget) -> bool:
        # ttk.Scale と tk.Scale の両方に対応する
        if hasattr(widget, "instate"):
            try:
                return bool(widget.instate(["disabled"]))
            except tk.TclError:
                return False
        try:
            return str(widget.cget("state")) == "disabled"
        except tk.TclError:
            return False

    def _on_pointer(event: tk.Event) -> str:
        if _is_disabled(event.widget):
            return "break"
        try:
            new_val = calc_scale_value_from_pointer(event)
            event.widget.set(new_val)
        except (tk.TclError, ValueError):
            _logger.debug("click-to-jump ignored on %s", event.widget)
            return "break"
        # ttk.Scale は set() で command を呼ばないので明示的に通知する
        cmd = event.widget.cget("command")
        if cmd and hasattr(event.widget, "instate"):
            event.widget.tk.call(cmd, new_val)
        return "break"

    for class_name in ("TScale", "Scale"):
        root.bind_class(class_name, "<Button-1>", _on_pointer, add="+")
        root.bind_class(class_name, "<B1-Motion>", _on_pointer, add="+")
