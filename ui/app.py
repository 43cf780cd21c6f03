"""Tkinter UI for the temperature converter."""

from __future__ import annotations

from typing import Optional

import tkinter as tk
from PIL import ImageTk

from session import SLIDER_STEP, ConversionSession
from .actions import ActionsMixin
from .layout import LayoutMixin
from .models import build_view
from .preview import PreviewMixin
from .scale_utils import bind_scale_click_jump


class TemperatureApp(LayoutMixin, ActionsMixin, PreviewMixin):
    """Main application window."""

    WINDOW_SIZE = (440, 680)
    PADDING = 10
    SLIDER_RESOLUTION = SLIDER_STEP

    def __init__(self, root: tk.Tk, session: Optional[ConversionSession] = None) -> None:
        self.root = root
        self.session = session or ConversionSession()
        self.view = build_view(self.session)
        self.scale_var = tk.StringVar(value=self.session.scale.name)
        self.entry_var = tk.StringVar(value="")
        self.slider_var = tk.DoubleVar(value=0.0)
        self.prompt_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="")
        self._background_photo: Optional[ImageTk.PhotoImage] = None
        self._syncing_controls = False  # プログラム側から値を書き戻している間は True

        self._build_layout()
        bind_scale_click_jump(self.root)
        self.root.bind("<Escape>", self._dismiss_keyboard)
        self._refresh_view()
