"""グラデーション描画: GradientSpec を RGB 画像へラスタライズする。"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from .gradient import GradientSpec, TOP_TO_BOTTOM

Size = Tuple[int, int]


def _validate_size(size: Size) -> Size:
    width, height = size
    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        raise ValueError("幅・高さは1以上にしてください。")
    return width, height


def _stops_array(spec: GradientSpec) -> np.ndarray:
    """3色を (3, 1, 3) の float32 配列にする（上→下の順）。"""
    stops = np.array([c.as_tuple() for c in spec.colors], dtype=np.float32)
    return np.clip(stops, 0.0, 1.0).reshape(3, 1, 3)


def render_gradient(spec: GradientSpec, size: Size) -> np.ndarray:
    """Rasterize ``spec`` into a uint8 RGB array of shape ``(height, width, 3)``.

    Stops sit at the top, middle and bottom rows; rows in between are blended
    linearly and every row is constant across the width.
    """
    if spec.direction != TOP_TO_BOTTOM:
        raise ValueError(f"unsupported gradient direction: {spec.direction!r}")
    width, height = _validate_size(size)
    stops = _stops_array(spec)
    if height == 1:
        column = stops[1:2]
    else:
        # 中心合わせの resize だと端が伸びるので、端点を揃えた座標で remap する
        ys = np.linspace(0.0, 2.0, height, dtype=np.float32).reshape(height, 1)
        map_y = np.ascontiguousarray(ys)
        map_x = np.zeros_like(map_y)
        column = cv2.remap(stops, map_x, map_y, interpolation=cv2.INTER_LINEAR, borderMode=cv2.BORDER_REPLICATE)
        column = column.reshape(height, 1, 3)
    image = np.repeat(column, width, axis=1)
    return np.clip(np.rint(image * 255.0), 0, 255).astype(np.uint8)


def gradient_image(spec: GradientSpec, size: Size) -> Image.Image:
    """Pillow image of the rendered gradient."""
    return Image.fromarray(render_gradient(spec, size))


def save_gradient(spec: GradientSpec, path: str | Path, size: Size) -> Path:
    """Write the gradient as PNG and return the resolved path."""
    out = Path(path)
    gradient_image(spec, size).save(out, format="PNG")
    return out
