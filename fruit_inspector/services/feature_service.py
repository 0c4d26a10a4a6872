"""Извлечение цветовых и текстурных статистик из буфера пикселей.

Принципы:
- SRP: только вычисление `ColorStatistics`, без правил классификации.
- Чистая функция: буфер не изменяется, состояние между вызовами не хранится.
"""
from __future__ import annotations

import logging

import numpy as np

from fruit_inspector.config import DARK_PIXEL_THRESHOLD, UNIFORMITY_STD_SCALE
from fruit_inspector.errors import InvalidInputError
from fruit_inspector.models.color_statistics import ColorStatistics
from fruit_inspector.models.pixel_buffer import PixelBuffer

LOGGER = logging.getLogger(__name__)


class FeatureService:
    # ---------- Вспомогательные функции ----------
    def _rgb_matrix(self, buffer: PixelBuffer) -> np.ndarray:
        """
        Возвращает float64-матрицу (N, 3) каналов R, G, B; альфа отбрасывается.
        """
        arr = buffer.as_array()
        return arr[..., :3].reshape(-1, 3).astype(np.float64)

    def _saturation(self, avg_red: float, avg_green: float, avg_blue: float) -> float:
        """
        (max - min) / max * 100 по средним каналов; для чёрного изображения 0.
        """
        hi = max(avg_red, avg_green, avg_blue)
        lo = min(avg_red, avg_green, avg_blue)
        if hi == 0:
            return 0.0
        return (hi - lo) / hi * 100.0

    # ---------- Основной расчёт ----------
    def extract(self, buffer: PixelBuffer) -> ColorStatistics:
        """
        Два прохода по пикселям:
        1) суммы каналов и яркости, подсчёт тёмных пикселей (яркость < 60)
        2) дисперсия яркости относительно общего среднего

        Raises:
            InvalidInputError: если в буфере нет ни одного пикселя.
        """
        n = buffer.pixel_count
        if n == 0:
            raise InvalidInputError("Пустой буфер пикселей: невозможно извлечь признаки")

        rgb = self._rgb_matrix(buffer)
        pixel_brightness = rgb.sum(axis=1) / 3.0

        sums = rgb.sum(axis=0)
        avg_red = float(sums[0]) / n
        avg_green = float(sums[1]) / n
        avg_blue = float(sums[2]) / n
        brightness = float(pixel_brightness.sum()) / n
        dark_pixels = int(np.count_nonzero(pixel_brightness < DARK_PIXEL_THRESHOLD))

        saturation = self._saturation(avg_red, avg_green, avg_blue)

        variance = float(np.square(pixel_brightness - brightness).sum()) / n
        std_dev = variance ** 0.5
        uniformity = max(0.0, 100.0 - std_dev / UNIFORMITY_STD_SCALE)

        dark_spot_ratio = dark_pixels / n * 100.0

        stats = ColorStatistics(
            avg_red=avg_red,
            avg_green=avg_green,
            avg_blue=avg_blue,
            brightness=brightness,
            saturation=saturation,
            uniformity=uniformity,
            dark_spot_ratio=dark_spot_ratio,
        )
        LOGGER.debug("features over %d px: %s", n, stats)
        return stats
