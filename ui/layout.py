"""レイアウト組み立て専用のMixin。"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import TYPE_CHECKING

from scales import Scale

if TYPE_CHECKING:
    from .app import TemperatureApp


class LayoutMixin:
    """ウィジェット生成と配置だけを担うメソッド群。"""

    def _build_layout(self: "TemperatureApp") -> None:
        self._create_background()
        self._build_header()
        self._build_scale_picker()
        self._build_input_panel()
        self._build_reading_items()
        self._finalize_window_layout()

    def _create_background(self: "TemperatureApp") -> None:
        # 背景グラデーションはキャンバス全面に描き、その上にウィジェットを載せる
        canvas = tk.Canvas(self.root, highlightthickness=0, borderwidth=0)
        canvas.grid(row=0, column=0, sticky="nsew")
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self._background_item = canvas.create_image(0, 0, anchor="nw")
        canvas.bind("<Configure>", self._on_canvas_resize)
        canvas.bind("<Button-1>", self._dismiss_keyboard)
        self.canvas = canvas

    def _build_header(self: "TemperatureApp") -> None:
        self._title_item = self.canvas.create_text(
            0, self.PADDING * 2, text=self.view.title, anchor="n", font=("Helvetica", 22, "bold"), fill="black"
        )

    def _build_scale_picker(self: "TemperatureApp") -> None:
        picker = ttk.Frame(self.canvas, padding=2)
        for column, scale in enumerate(Scale):
            ttk.Radiobutton(
                picker,
                text=scale.label,
                value=scale.name,
                variable=self.scale_var,
                style="Toolbutton",
                command=self._on_scale_selected,
            ).grid(row=0, column=column, padx=1, sticky="we")
            picker.columnconfigure(column, weight=1)
        self._picker_item = self.canvas.create_window(0, 0, window=picker, anchor="n")

    def _build_input_panel(self: "TemperatureApp") -> None:
        panel = ttk.Frame(self.canvas, padding=8)
        panel.columnconfigure(1, weight=1)
        ttk.Label(panel, textvariable=self.prompt_var, font=("Helvetica", 16)).grid(
            row=0, column=0, padx=(0, 8), sticky="w"
        )
        entry = ttk.Entry(panel, textvariable=self.entry_var, width=10, font=("Helvetica", 16))
        entry.grid(row=0, column=1, sticky="we")
        entry.bind("<Return>", self._on_entry_commit)
        entry.bind("<KP_Enter>", self._on_entry_commit)
        entry.bind("<FocusOut>", self._on_entry_commit)
        self.entry = entry

        # tk.Scale は from_/to も resolution に丸める。Kelvin/Rankine の端点は
        # 0.05 ずれるが、セッション側は domain の下端から 0.1 刻みで吸着させる
        low, high = self.view.domain
        slider = tk.Scale(
            panel,
            from_=low,
            to=high,
            resolution=self.SLIDER_RESOLUTION,
            orient="horizontal",
            showvalue=False,
            variable=self.slider_var,
            command=self._on_slider_moved,
        )
        slider.grid(row=1, column=0, columnspan=2, pady=(8, 0), sticky="we")
        self.slider = slider

        ttk.Label(panel, textvariable=self.status_var, foreground="#a00000").grid(
            row=2, column=0, columnspan=2, sticky="w"
        )
        self._panel_item = self.canvas.create_window(0, 0, window=panel, anchor="n")

    def _build_reading_items(self: "TemperatureApp") -> None:
        self._reading_items = [
            self.canvas.create_text(0, 0, anchor="w", font=("Helvetica", 15), fill="black")
            for _ in range(len(Scale) - 1)
        ]

    def _finalize_window_layout(self: "TemperatureApp") -> None:
        width, height = self.WINDOW_SIZE
        self.root.geometry(f"{width}x{height}")
        self.root.minsize(width // 2, height // 2)
        self._place_items(width, height)

    def _place_items(self: "TemperatureApp", width: int, height: int) -> None:
        """キャンバスサイズに合わせて各アイテムを縦に並べ直す。"""
        center = width // 2
        pad = self.PADDING
        content_w = max(1, width - pad * 2)
        self.canvas.coords(self._title_item, center, pad * 2)
        self.canvas.coords(self._picker_item, center, pad * 6)
        self.canvas.itemconfigure(self._picker_item, width=content_w)
        self.canvas.coords(self._panel_item, center, pad * 10)
        self.canvas.itemconfigure(self._panel_item, width=content_w)
        top = max(pad * 22, height // 2)
        for index, item in enumerate(self._reading_items):
            self.canvas.coords(item, pad * 2, top + index * pad * 4)
