import customtkinter as ctk

from average_color.config import AppConfig
from average_color.controllers.app_controller import AppController
from average_color.ui.bottom_bar import BottomBar
from average_color.ui.gallery_view import GalleryView


class GalleryApp(ctk.CTk):
    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        config = config or AppConfig()

        self.title("Average Color Gallery")
        self.minsize(config.row_width + 80, 600)

        # root layout: scrollable list on top, controls at the bottom
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._gallery = GalleryView(self)
        self._gallery.grid(row=0, column=0, sticky="nsew", padx=12, pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(gallery=self._gallery, bottom=self._bottom, window=self, config=config)
        self._controller.bind_events()
