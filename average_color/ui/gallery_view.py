from __future__ import annotations

from typing import List, Sequence

import customtkinter as ctk

from average_color.models.image_model import GalleryItem
from average_color.ui.image_row import ImageRow


class GalleryView(ctk.CTkScrollableFrame):
    """Вертикальный список строк `ImageRow` с прокруткой."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self._rows: List[ImageRow] = []
        self._placeholder = ctk.CTkLabel(self, text="Откройте папку с изображениями")
        self._placeholder.grid(row=0, column=0, padx=12, pady=24)

    def set_items(self, items: Sequence[GalleryItem]) -> None:
        """Заменяет список целиком; если путь тот же — строка переиспользуется."""
        if len(items) == len(self._rows) and all(
            row.item.path == item.path for row, item in zip(self._rows, items)
        ):
            for row, item in zip(self._rows, items):
                row.set_item(item)
            return

        for row in self._rows:
            row.destroy()
        self._rows = []

        if not items:
            self._placeholder.grid(row=0, column=0, padx=12, pady=24)
            return
        self._placeholder.grid_remove()

        for index, item in enumerate(items):
            row = ImageRow(self, item, fg_color="transparent")
            row.grid(row=index, column=0, padx=8, pady=(0, 8), sticky="n")
            self._rows.append(row)
