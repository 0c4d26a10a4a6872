"""Приведение изображения к рабочему разрешению для предсказуемой стоимости анализа."""
from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

from fruit_inspector.config import MAX_SAMPLE_SIZE
from fruit_inspector.errors import InvalidInputError
from fruit_inspector.models.pixel_buffer import PixelBuffer
from fruit_inspector.utils import round_half_up

LOGGER = logging.getLogger(__name__)


class SamplingService:
    def target_size(self, width: int, height: int, max_size: int = MAX_SAMPLE_SIZE) -> Tuple[int, int]:
        """Размер после масштабирования с коэффициентом min(max/W, max/H).

        Коэффициент не ограничен сверху: маленькие изображения увеличиваются.
        """
        if width <= 0 or height <= 0:
            raise InvalidInputError(f"Пустое изображение {width}x{height}: невозможно извлечь признаки")
        scale = min(max_size / width, max_size / height)
        return round_half_up(width * scale), round_half_up(height * scale)

    def downscale(self, buffer: PixelBuffer, max_size: int = MAX_SAMPLE_SIZE) -> PixelBuffer:
        """Ресэмплинг box-фильтром Pillow до рабочего разрешения.

        Исходный буфер не изменяется; возвращается новый `PixelBuffer`.
        """
        new_w, new_h = self.target_size(buffer.width, buffer.height, max_size)
        if new_w == 0 or new_h == 0:
            raise InvalidInputError(
                f"Вырожденное изображение {buffer.width}x{buffer.height}: невозможно извлечь признаки"
            )
        if (new_w, new_h) == (buffer.width, buffer.height):
            return buffer

        # альфа игнорируется: ресэмплинг в RGB, чтобы Pillow не домножал каналы на альфу
        src = Image.frombuffer("RGBA", (buffer.width, buffer.height), buffer.pixels, "raw", "RGBA", 0, 1)
        resized = src.convert("RGB").resize((new_w, new_h), resample=Image.Resampling.BOX).convert("RGBA")
        LOGGER.debug("resampled %dx%d -> %dx%d", buffer.width, buffer.height, new_w, new_h)
        return PixelBuffer(width=new_w, height=new_h, pixels=resized.tobytes())
