"""Сводные цветовые статистики изображения."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorStatistics:
    """Неизменяемый снимок статистик, полностью определяемый буфером пикселей.

    Fields:
        avg_red, avg_green, avg_blue: Средние значения каналов, [0, 255].
        brightness: Средняя яркость пикселя (R+G+B)/3, [0, 255].
        saturation: Разброс средних каналов относительно максимального, %.
        uniformity: 100 минус масштабированное СКО яркости, не меньше 0, %.
        dark_spot_ratio: Доля тёмных пикселей (яркость < 60), %.
    """
    avg_red: float
    avg_green: float
    avg_blue: float
    brightness: float
    saturation: float
    uniformity: float
    dark_spot_ratio: float

    @property
    def channel_total(self) -> float:
        return self.avg_red + self.avg_green + self.avg_blue
