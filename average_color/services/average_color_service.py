"""Вычисление среднего цвета выбранной стороны изображения.

Алгоритм:
1. Обрезка по стороне (`Side.crop_box`).
2. Приведение к премультиплицированному RGBA и ресемплинг в маленький холст
   `resample_dimension` x `resample_dimension` — стоимость вызова не зависит
   от размера исходника, а разные форматы пикселей сводятся к одному.
3. Упаковка холста в 32-битные слова по раскладке `ARGB32_LITTLE` и
   извлечение каналов сдвигами и масками.
4. Простое среднее по каждому каналу (не квадратичное): оно лучше передаёт
   общий тон изображения.

Любая ошибка на любом шаге даёт `None`; частичных результатов нет.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PIL import Image

from average_color.models.color_model import ARGB32_LITTLE, Color, PixelLayout, Side

logger = logging.getLogger(__name__)

RESAMPLE_DIMENSION = 40


class AverageColorService:
    def __init__(self, resample_dimension: int = RESAMPLE_DIMENSION, layout: PixelLayout = ARGB32_LITTLE) -> None:
        if resample_dimension < 1:
            raise ValueError(f"resample_dimension должен быть >= 1, получено {resample_dimension}")
        self.resample_dimension = int(resample_dimension)
        self.layout = layout

    def compute_average_color(self, image: Optional[Image.Image], side: Side) -> Optional[Color]:
        """Средний цвет области `side` изображения.

        Args:
            image: Декодированное изображение PIL любого режима.
            side: Сторона, по которой считается цвет.

        Returns:
            `Color` с альфой 1.0 или `None`, если цвет получить нельзя
            (нет изображения, пустая обрезка, ошибка ресемплинга).
        """
        if image is None:
            return None

        box = side.crop_box(*image.size)
        left, top, right, bottom = box
        if right <= left or bottom <= top:
            logger.debug("Пустая область обрезки %s для %s (%s)", box, image.size, side.value)
            return None

        canvas = self._resample(image, box)
        if canvas is None:
            return None
        return self.average_of_canvas(canvas)

    def average_of_canvas(self, canvas: Image.Image) -> Color:
        """Простое среднее R, G, B по всем пикселям уже подготовленного холста.

        Холст читается как RGBA; альфа игнорируется, результат всегда непрозрачный.
        """
        words = self._pack(canvas)
        total_pixels = words.size
        mask = PixelLayout.MASK
        layout = self.layout

        # int64 accumulators: 40*40*255 per channel fits with a wide margin
        total_red = int(((words >> layout.red_shift) & mask).sum(dtype=np.int64))
        total_green = int(((words >> layout.green_shift) & mask).sum(dtype=np.int64))
        total_blue = int(((words >> layout.blue_shift) & mask).sum(dtype=np.int64))

        average_red = total_red / total_pixels
        average_green = total_green / total_pixels
        average_blue = total_blue / total_pixels

        return Color.from_rgb8(average_red, average_green, average_blue)

    # ---- Helpers ----
    def _resample(self, image: Image.Image, box) -> Optional[Image.Image]:
        size = (self.resample_dimension, self.resample_dimension)
        try:
            cropped = image.crop(box)
            # premultiplied alpha: transparent pixels count as black
            rgba = cropped if cropped.mode == "RGBA" else cropped.convert("RGBA")
            premultiplied = rgba.convert("RGBa")
            return premultiplied.resize(size, Image.Resampling.BOX)
        except (OSError, ValueError, MemoryError) as exc:
            logger.debug("Не удалось подготовить холст %s: %s", size, exc)
            return None

    def _pack(self, canvas: Image.Image) -> np.ndarray:
        """Упаковывает холст в плоский массив 32-битных слов по `self.layout`."""
        if canvas.mode not in ("RGBA", "RGBa"):
            canvas = canvas.convert("RGBA")
        rgba = np.asarray(canvas, dtype=np.uint8).reshape(-1, 4)
        in_memory = np.ascontiguousarray(rgba[:, list(self.layout.memory_order())])
        return in_memory.view(np.dtype(self.layout.dtype)).reshape(-1)
