"""Наложение вертикального градиента на нижнюю часть изображения.

Градиент идёт от цвета с нулевой непрозрачностью (верхняя точка) до того же
цвета с его собственной альфой (нижний край). Исходное изображение не меняется.
"""
from __future__ import annotations

import numpy as np
from PIL import Image

from average_color.models.color_model import Color


class GradientService:
    def gradient_strip(self, width: int, height: int, color: Color) -> Image.Image:
        """Полоса RGBA `width` x `height` с линейным ростом альфы сверху вниз."""
        r, g, b = color.to_rgb8()
        strip = np.empty((height, width, 4), dtype=np.uint8)
        strip[..., 0] = r
        strip[..., 1] = g
        strip[..., 2] = b
        if height == 1:
            ramp = np.array([1.0], dtype=np.float32)
        else:
            ramp = np.linspace(0.0, 1.0, num=height, dtype=np.float32)
        alpha = np.rint(ramp * (color.alpha * 255.0)).astype(np.uint8)
        strip[..., 3] = alpha[:, None]
        return Image.fromarray(strip)

    def apply_gradient(self, image: Image.Image, color: Color, height: int) -> Image.Image:
        """
        Возвращает новое RGBA-изображение с градиентом высотой `height` px у нижнего края.
        Высота ограничивается высотой изображения; при `height <= 0` — просто копия.
        """
        base = image.convert("RGBA") if image.mode != "RGBA" else image.copy()
        w, h = base.size
        band = min(int(height), h)
        if band <= 0 or w == 0 or color.alpha <= 0.0:
            return base

        overlay = Image.new("RGBA", (w, h), (0, 0, 0, 0))
        overlay.paste(self.gradient_strip(w, band, color), (0, h - band))
        return Image.alpha_composite(base, overlay)
