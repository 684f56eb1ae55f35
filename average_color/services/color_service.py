from __future__ import annotations

import colorsys
from typing import Optional

from average_color.models.color_model import Color, HSBColor


class ColorService:
    def to_hsb(self, color: Color) -> Optional[HSBColor]:
        """
        RGB -> HSB. Для ахроматических цветов (R == G == B) тон не определён,
        возвращается None.
        """
        if max(color.red, color.green, color.blue) == min(color.red, color.green, color.blue):
            return None
        hue, saturation, brightness = colorsys.rgb_to_hsv(color.red, color.green, color.blue)
        return HSBColor(hue=hue, saturation=saturation, brightness=brightness, alpha=color.alpha)

    def from_hsb(self, hsb: HSBColor) -> Color:
        red, green, blue = colorsys.hsv_to_rgb(hsb.hue, hsb.saturation, hsb.brightness)
        return Color(red, green, blue, hsb.alpha)

    def darken(self, color: Color, percentage: float = 40) -> Color:
        """
        «Затемнение» цвета на `percentage` процентов от собственного значения:
        - если яркость ниже максимума — уменьшаем яркость;
        - если яркость уже 1.0 — уменьшаем насыщенность (яркость упёрлась в потолок).
        Тон сохраняется. Отрицательный процент осветляет.
        Ахроматический цвет возвращается без изменений.
        """
        hsb = self.to_hsb(color)
        if hsb is None:
            return color

        factor = percentage / 100.0
        if hsb.brightness < 1.0:
            brightness = max(0.0, min(1.0, hsb.brightness - factor * hsb.brightness))
            return self.from_hsb(HSBColor(hsb.hue, hsb.saturation, brightness, hsb.alpha))

        saturation = max(0.0, min(1.0, hsb.saturation - factor * hsb.saturation))
        return self.from_hsb(HSBColor(hsb.hue, saturation, hsb.brightness, hsb.alpha))
