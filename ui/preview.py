"""背景グラデーション描画まわりのシンプルなMixin。"""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

from PIL import ImageTk

from warmth import gradient_image

if TYPE_CHECKING:
    from .app import TemperatureApp


class PreviewMixin:
    """キャンバス背景の更新だけを扱う。"""

    def _on_canvas_resize(self: "TemperatureApp", event: tk.Event) -> None:
        self._place_items(event.width, event.height)
        self._refresh_background()

    def _canvas_size(self: "TemperatureApp") -> tuple[int, int]:
        width = self.canvas.winfo_width() or self.canvas.winfo_reqwidth() or self.WINDOW_SIZE[0]
        height = self.canvas.winfo_height() or self.canvas.winfo_reqheight() or self.WINDOW_SIZE[1]
        return max(1, width), max(1, height)

    def _refresh_background(self: "TemperatureApp") -> None:
        size = self._canvas_size()
        image = gradient_image(self.view.gradient, size)
        # PhotoImage は参照を保持しないと GC で消える
        self._background_photo = ImageTk.PhotoImage(image)
        self.canvas.itemconfigure(self._background_item, image=self._background_photo)
        self.canvas.tag_lower(self._background_item)
