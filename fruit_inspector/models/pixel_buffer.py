"""Модель входного буфера пикселей.

Принципы:
- SRP: только структура данных и проверка её целостности, без обработки.
- Неизменяемость (`frozen=True`, `bytes`): ядро только читает буфер вызывающего.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fruit_inspector.errors import InvalidInputError

CHANNELS = 4  # R, G, B, A


@dataclass(frozen=True)
class PixelBuffer:
    """Декодированное изображение RGBA, построчно, альфа игнорируется.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        pixels: Плоская последовательность байтов длиной width * height * 4.
    """
    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidInputError(f"Отрицательный размер изображения: {self.width}x{self.height}")
        if not isinstance(self.pixels, bytes):
            # bytearray / memoryview копируем, чтобы буфер остался неизменяемым
            object.__setattr__(self, "pixels", bytes(self.pixels))
        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise InvalidInputError(
                f"Длина буфера {len(self.pixels)} не соответствует размеру {self.width}x{self.height}"
            )

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.pixel_count == 0

    def as_array(self) -> np.ndarray:
        """Возвращает представление (height, width, 4) uint8 только для чтения."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(self.height, self.width, CHANNELS)

    @classmethod
    def filled(cls, width: int, height: int, rgba: tuple[int, int, int, int]) -> "PixelBuffer":
        """Буфер, в котором все пиксели одного цвета."""
        return cls(width=width, height=height, pixels=bytes(rgba) * (width * height))
