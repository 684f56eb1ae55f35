"""Модели данных для изображений галереи.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from average_color.models.color_model import Color, Side


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель загруженного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGBA".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]


@dataclass(frozen=True)
class GalleryItem:
    """Строка галереи, готовая к отображению.

    Fields:
        path: Путь к исходному файлу.
        caption: Подпись (имя файла).
        side: Сторона, по которой считался цвет.
        average_color: Средний цвет стороны или None, если его не удалось получить.
        overlay_color: Итоговый цвет градиента (`Color.CLEAR`, если среднего нет).
        rendered: Изображение, вписанное по ширине, с наложенным градиентом.
    """
    path: Path
    caption: str
    side: Side
    average_color: Optional[Color]
    overlay_color: Color
    rendered: Image.Image
