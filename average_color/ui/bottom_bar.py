from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from average_color.models.color_model import Side

SIDE_LABELS = {
    "Снизу": Side.BOTTOM,
    "Сверху": Side.TOP,
    "Слева": Side.LEFT,
    "Справа": Side.RIGHT,
}


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=64, **kwargs)

        # callbacks
        self.on_open_folder: Optional[Callable[[], None]] = None
        self.on_side_change: Optional[Callable[[Side], None]] = None
        self.on_percentage_change: Optional[Callable[[int], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(3, weight=1)  # slider stretches

        self._open_btn = ctk.CTkButton(self, text="Открыть папку…", command=self._emit_open_folder)
        self._open_btn.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        # Side selector
        self._side_menu = ctk.CTkSegmentedButton(
            self,
            values=list(SIDE_LABELS),
            command=self._on_side_click,
        )
        self._side_menu.set("Снизу")
        self._side_menu.grid(row=0, column=1, padx=6, pady=8, sticky="w")

        # Darken percentage
        self._pct_label = ctk.CTkLabel(self, text="Затемнение")
        self._pct_label.grid(row=0, column=2, padx=(12, 6), pady=8, sticky="w")

        self._pct_value = ctk.StringVar(value="40%")
        self._pct_slider = ctk.CTkSlider(self, from_=0, to=100, number_of_steps=100, command=self._on_slider_change)
        self._pct_slider.set(40)
        self._pct_slider.grid(row=0, column=3, padx=6, pady=8, sticky="ew")
        self._pct_value_label = ctk.CTkLabel(self, textvariable=self._pct_value, width=48, anchor="w")
        self._pct_value_label.grid(row=0, column=4, padx=(6, 12), pady=8, sticky="w")

        self._status = ctk.StringVar(value="—")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status, anchor="e")
        self._status_label.grid(row=0, column=5, padx=(6, 10), pady=8, sticky="e")

    # public API (sync from controller)
    def set_side(self, side: Side) -> None:
        for label, value in SIDE_LABELS.items():
            if value is side:
                self._side_menu.set(label)
                return

    def set_percentage(self, percent: int) -> None:
        self._pct_slider.set(percent)
        self._pct_value.set(f"{percent}%")

    def set_status(self, text: str) -> None:
        self._status.set(text)

    # events
    def _emit_open_folder(self) -> None:
        if self.on_open_folder:
            self.on_open_folder()

    def _on_side_click(self, value: str) -> None:
        side = SIDE_LABELS.get(value)
        if side is not None and self.on_side_change:
            self.on_side_change(side)

    def _on_slider_change(self, value: float) -> None:
        percent = int(round(value))
        self._pct_value.set(f"{percent}%")
        if self.on_percentage_change:
            self.on_percentage_change(percent)
