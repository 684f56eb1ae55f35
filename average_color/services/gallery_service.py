"""Сборка строк галереи: средний цвет -> затемнение -> градиент.

Принципы:
- SRP: только конвейер подготовки строки, без UI.
- DIP: сервисы передаются в конструктор, по умолчанию создаются свои.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from average_color.models.color_model import Color, Side
from average_color.models.image_model import GalleryItem, ImageData
from average_color.services.average_color_service import AverageColorService
from average_color.services.color_service import ColorService
from average_color.services.gradient_service import GradientService
from average_color.services.image_service import ImageService

logger = logging.getLogger(__name__)


class GalleryService:
    def __init__(
        self,
        image_service: Optional[ImageService] = None,
        average_service: Optional[AverageColorService] = None,
        color_service: Optional[ColorService] = None,
        gradient_service: Optional[GradientService] = None,
    ) -> None:
        self.image_service = image_service or ImageService()
        self.average_service = average_service or AverageColorService()
        self.color_service = color_service or ColorService()
        self.gradient_service = gradient_service or GradientService()

    def overlay_color(self, image_data: ImageData, side: Side, percentage: float) -> tuple[Optional[Color], Color]:
        """Средний цвет стороны и цвет градиента; без среднего — прозрачный `Color.CLEAR`."""
        average = self.average_service.compute_average_color(image_data.pil_image, side)
        if average is None:
            return None, Color.CLEAR
        return average, self.color_service.darken(average, percentage)

    def build_item(
        self,
        image_data: ImageData,
        *,
        side: Side,
        percentage: float,
        width: int,
        gradient_height: int,
    ) -> GalleryItem:
        average, overlay = self.overlay_color(image_data, side, percentage)
        logger.debug(
            "%s: средний цвет %s -> %s",
            image_data.path.name,
            average.to_hex() if average else None,
            overlay.to_hex(),
        )
        fitted = self.image_service.fit_to_width(image_data.pil_image, width)
        rendered = self.gradient_service.apply_gradient(fitted, overlay, gradient_height)
        return GalleryItem(
            path=image_data.path,
            caption=image_data.path.name,
            side=side,
            average_color=average,
            overlay_color=overlay,
            rendered=rendered,
        )

    def load_all(self, paths: Iterable[Path]) -> List[ImageData]:
        """Загружает файлы по очереди; нечитаемые пропускаются с предупреждением."""
        loaded: List[ImageData] = []
        for path in paths:
            try:
                loaded.append(self.image_service.load_image(path))
            except (FileNotFoundError, ValueError) as exc:
                logger.warning("Пропущен файл %s: %s", path, exc)
        return loaded

    def build_items(
        self,
        images: Iterable[ImageData],
        *,
        side: Side,
        percentage: float,
        width: int,
        gradient_height: int,
    ) -> List[GalleryItem]:
        return [
            self.build_item(data, side=side, percentage=percentage, width=width, gradient_height=gradient_height)
            for data in images
        ]
