"""Строка галереи: изображение с градиентом и подписью в левом нижнем углу.

Принципы:
- SRP: только отрисовка готового `GalleryItem`, без вычислений цвета.
"""
from __future__ import annotations

import tkinter as tk
import tkinter.font as tkfont

import customtkinter as ctk
from PIL import ImageTk

from average_color.models.image_model import GalleryItem

CAPTION_PADDING = 16


def _elide(text: str, font: tkfont.Font, max_width: int) -> str:
    """Обрезает подпись до одной строки с многоточием."""
    if font.measure(text) <= max_width:
        return text
    ellipsis = "…"
    while text and font.measure(text + ellipsis) > max_width:
        text = text[:-1]
    return text + ellipsis


class ImageRow(ctk.CTkFrame):
    def __init__(self, master: tk.Misc, item: GalleryItem, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        width, height = item.rendered.size
        self._canvas = tk.Canvas(self, width=width, height=height, highlightthickness=0, bd=0)
        self._canvas.grid(row=0, column=0, sticky="nsew")
        self._font = tkfont.nametofont("TkDefaultFont")
        self._tk_image: ImageTk.PhotoImage | None = None
        self.set_item(item)

    def set_item(self, item: GalleryItem) -> None:
        """Перерисовывает строку для нового состояния (другая сторона / процент)."""
        self._item = item
        width, height = item.rendered.size
        self._canvas.configure(width=width, height=height)
        self._canvas.delete("all")

        # PhotoImage must outlive the canvas item
        self._tk_image = ImageTk.PhotoImage(item.rendered)
        self._canvas.create_image(0, 0, image=self._tk_image, anchor="nw")

        caption = _elide(item.caption, self._font, max(1, width - 2 * CAPTION_PADDING))
        self._canvas.create_text(
            CAPTION_PADDING,
            height - CAPTION_PADDING,
            text=caption,
            fill="white",
            font=self._font,
            anchor="sw",
        )

    @property
    def item(self) -> GalleryItem:
        return self._item
