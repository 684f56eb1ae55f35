"""Модели цвета, стороны изображения и раскладки пикселей.

Принципы:
- SRP: только структуры данных и их простые преобразования.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

CropRect = Tuple[float, float, float, float]
CropBox = Tuple[int, int, int, int]


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True)
class Color:
    """Цвет RGBA, все каналы — float в диапазоне [0.0, 1.0].

    Fields:
        red: Красный канал.
        green: Зелёный канал.
        blue: Синий канал.
        alpha: Непрозрачность; у вычисленных средних всегда 1.0.
    """
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    CLEAR: ClassVar["Color"]

    def __post_init__(self) -> None:
        # normalize out-of-range input instead of failing
        object.__setattr__(self, "red", _clamp01(self.red))
        object.__setattr__(self, "green", _clamp01(self.green))
        object.__setattr__(self, "blue", _clamp01(self.blue))
        object.__setattr__(self, "alpha", _clamp01(self.alpha))

    @classmethod
    def from_rgb8(cls, red: float, green: float, blue: float, alpha: float = 255) -> "Color":
        """Создаёт цвет из каналов в диапазоне [0, 255] (допускаются дробные значения)."""
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)

    def to_rgb8(self) -> Tuple[int, int, int]:
        """Каналы R, G, B, округлённые до [0, 255]."""
        return (
            int(round(self.red * 255)),
            int(round(self.green * 255)),
            int(round(self.blue * 255)),
        )

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        r, g, b = self.to_rgb8()
        return r, g, b, int(round(self.alpha * 255))

    def to_hex(self) -> str:
        """HEX без альфа-канала, например `#1A2B3C`."""
        r, g, b = self.to_rgb8()
        return f"#{r:02X}{g:02X}{b:02X}"

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.red, self.green, self.blue, alpha)


Color.CLEAR = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class HSBColor:
    """Промежуточное представление: тон, насыщенность, яркость, альфа (все в [0, 1])."""
    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0


class Side(str, Enum):
    """Сторона изображения, по которой считается средний цвет.

    `top`/`bottom` — вся ширина и верхняя/нижняя четверть высоты,
    `left`/`right` — вся высота и левая/правая четверть ширины.
    """
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    def crop_rect(self, width: float, height: float) -> CropRect:
        """Дробный прямоугольник обрезки (x0, y0, x1, y1) в координатах изображения."""
        if self is Side.TOP:
            return 0.0, 0.0, float(width), height * 0.25
        if self is Side.BOTTOM:
            return 0.0, height * 0.75, float(width), float(height)
        if self is Side.LEFT:
            return 0.0, 0.0, width * 0.25, float(height)
        return width * 0.75, 0.0, float(width), float(height)

    def crop_box(self, width: int, height: int) -> CropBox:
        """Целочисленная область обрезки для `Image.crop`.

        Прямоугольник расширяется наружу до целых пикселей и ограничивается
        размерами изображения, поэтому никогда не выходит за его границы.
        Для изображения нулевой ширины или высоты область получается пустой.
        """
        x0, y0, x1, y1 = self.crop_rect(width, height)
        left = max(0, min(width, math.floor(x0)))
        top = max(0, min(height, math.floor(y0)))
        right = max(left, min(width, math.ceil(x1)))
        bottom = max(top, min(height, math.ceil(y1)))
        return left, top, right, bottom


@dataclass(frozen=True)
class PixelLayout:
    """Раскладка 32-битного пикселя в буфере холста.

    `byte_order` — порядок байтов слова ("<" little-endian, ">" big-endian),
    `*_shift` — сдвиг канала внутри слова. Маска канала всегда 0xFF.
    """
    byte_order: str
    red_shift: int
    green_shift: int
    blue_shift: int
    alpha_shift: int

    MASK: ClassVar[int] = 0xFF

    @property
    def dtype(self) -> str:
        return f"{self.byte_order}u4"

    def memory_order(self) -> Tuple[int, int, int, int]:
        """Индексы каналов RGBA (0..3) в порядке следования байтов в памяти."""
        shifts = {
            0: self.red_shift,
            1: self.green_shift,
            2: self.blue_shift,
            3: self.alpha_shift,
        }
        by_shift = sorted(shifts, key=shifts.__getitem__)
        if self.byte_order == ">":
            by_shift.reverse()
        return tuple(by_shift)  # type: ignore[return-value]


# Байт 0 = blue, байт 1 = green, байт 2 = red, байт 3 = alpha:
# 32-битное little-endian слово читается как 0xAARRGGBB.
ARGB32_LITTLE = PixelLayout(byte_order="<", red_shift=16, green_shift=8, blue_shift=0, alpha_shift=24)
