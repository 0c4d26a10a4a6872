"""Загрузка изображений с диска или из памяти и упаковка в `PixelBuffer`.

Принципы:
- SRP: класс отвечает только за декодирование и проверку допустимости файла.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- ISP: наружу отдаётся только `PixelBuffer`; ядро анализа о Pillow не знает.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from fruit_inspector.config import ALLOWED_FORMATS, MAX_FILE_SIZE
from fruit_inspector.errors import InvalidInputError
from fruit_inspector.models.pixel_buffer import PixelBuffer

LOGGER = logging.getLogger(__name__)


class ImageService:
    def load_pixels(self, file_path: str | Path) -> PixelBuffer:
        """Загружает изображение с диска и возвращает его пиксели RGBA.

        Args:
            file_path: Путь до файла изображения (JPEG, PNG или WebP).

        Returns:
            `PixelBuffer` с исходными размерами изображения.

        Raises:
            InvalidInputError: если файла нет, он не читается, больше 10MB,
                повреждён, не распознан как изображение или формат не поддерживается.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise InvalidInputError(f"Файл не найден: {path}")

        try:
            size_bytes = path.stat().st_size
            if size_bytes > MAX_FILE_SIZE:
                raise InvalidInputError(f"Файл больше 10MB: {path} ({size_bytes} байт)")
            data = path.read_bytes()
        except OSError as exc:
            raise InvalidInputError(f"Не удалось прочитать файл: {path}") from exc

        return self.decode_bytes(data, source=str(path))

    def decode_bytes(self, data: bytes, source: str = "<memory>") -> PixelBuffer:
        """Декодирует закодированное изображение из памяти в `PixelBuffer`."""
        if len(data) > MAX_FILE_SIZE:
            raise InvalidInputError(f"Изображение больше 10MB: {source}")

        try:
            with Image.open(io.BytesIO(data)) as pil_image:
                fmt = pil_image.format
                if fmt not in ALLOWED_FORMATS:
                    raise InvalidInputError(f"Неподдерживаемый формат {fmt}: {source}")
                rgba = pil_image.convert("RGBA")
        except InvalidInputError:
            raise
        except UnidentifiedImageError as exc:
            raise InvalidInputError(f"Файл не является изображением: {source}") from exc
        # повреждённые чанки PNG дают SyntaxError, обрезанный IHDR даёт ValueError
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise InvalidInputError(f"Не удалось декодировать изображение: {source}") from exc

        width, height = rgba.size
        LOGGER.debug("decoded %s: format=%s size=%dx%d", source, fmt, width, height)
        return PixelBuffer(width=width, height=height, pixels=rgba.tobytes())
