"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за загрузку, поиск файлов и масштабирование для показа.
- OCP: новые источники можно добавить отдельными методами.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from average_color.models.image_model import ImageData

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp")


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами, режимом и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as src:
                pil_image = src.convert("RGBA")
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
        )

    def list_images(self, folder: str | Path) -> List[Path]:
        """Файлы изображений в папке (без рекурсии), отсортированные по имени.

        Raises:
            FileNotFoundError: если папка не существует.
        """
        root = Path(folder)
        if not root.is_dir():
            raise FileNotFoundError(f"Папка не найдена: {root}")
        return sorted(
            p for p in root.iterdir()
            if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
        )

    def fit_to_width(self, image: Image.Image, width: int) -> Image.Image:
        """Масштабирует изображение под ширину `width` с сохранением пропорций."""
        if width <= 0:
            raise ValueError(f"Ширина должна быть положительной: {width}")
        img_w, img_h = image.size
        if img_w == 0 or img_h == 0:
            return image.copy()
        scaled_h = max(1, int(round(img_h * width / img_w)))
        return image.resize((width, scaled_h), Image.Resampling.LANCZOS)
