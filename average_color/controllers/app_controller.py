"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без расчёта цвета).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; вся логика строки галереи вынесена в `GalleryService`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, TclError
from typing import List, Optional

import customtkinter as ctk

from average_color.config import AppConfig, merge_app_config
from average_color.models.color_model import Side
from average_color.models.image_model import ImageData
from average_color.services.average_color_service import AverageColorService
from average_color.services.gallery_service import GalleryService
from average_color.ui.bottom_bar import BottomBar
from average_color.ui.gallery_view import GalleryView

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий нижней панели (UI -> контроллер).
    - Загрузка папки с изображениями через `GalleryService`.
    - Пересборка строк при смене стороны или процента затемнения.
    """
    gallery: GalleryView
    bottom: BottomBar
    window: ctk.CTk
    config: AppConfig = field(default_factory=AppConfig)

    _gallery_service: Optional[GalleryService] = None
    _images: List[ImageData] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self._gallery_service is None:
            self._gallery_service = GalleryService(
                average_service=AverageColorService(resample_dimension=self.config.resample_dimension)
            )

    def bind_events(self) -> None:
        """Регистрирует обработчики и синхронизирует панель с конфигурацией."""
        self.bottom.on_open_folder = self._handle_open_folder
        self.bottom.on_side_change = self._handle_side_change
        self.bottom.on_percentage_change = self._handle_percentage_change

        self.bottom.set_side(self.config.side)
        self.bottom.set_percentage(int(round(self.config.darken_percentage)))

        if self.config.images_dir:
            self.open_folder(self.config.images_dir)

    def open_folder(self, folder: str | Path) -> None:
        try:
            paths = self._gallery_service.image_service.list_images(folder)
        except FileNotFoundError as exc:
            logger.warning("%s", exc)
            self.bottom.set_status("Папка не найдена")
            return

        logger.info("Открыта папка %s: %d файлов", folder, len(paths))
        self._images = self._gallery_service.load_all(paths)
        self._refresh()

    # ---- Handlers ----
    def _handle_open_folder(self) -> None:
        try:
            folder = filedialog.askdirectory(title="Выберите папку с изображениями")
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not folder:
            return
        self.open_folder(folder)

    def _handle_side_change(self, side: Side) -> None:
        self.config = merge_app_config(self.config, {"side": side})
        self._refresh()

    def _handle_percentage_change(self, percent: int) -> None:
        if int(round(self.config.darken_percentage)) == percent:
            return
        self.config = merge_app_config(self.config, {"darken_percentage": percent})
        self._refresh()

    # ---- Helpers ----
    def _refresh(self) -> None:
        """Пересобирает строки галереи из уже загруженных изображений."""
        items = self._gallery_service.build_items(
            self._images,
            side=self.config.side,
            percentage=self.config.darken_percentage,
            width=self.config.row_width,
            gradient_height=self.config.gradient_height,
        )
        self.gallery.set_items(items)
        self.bottom.set_status(f"Изображений: {len(items)}")
