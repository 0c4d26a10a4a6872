"""Контроллер анализа: оркестрация конвейера буфер -> статистики -> вердикт.

SOLID:
- SRP: класс связывает сервисы между собой, сам ничего не вычисляет.
- DIP: сервисы передаются как поля dataclass; их можно подменить в тестах.
Clean Code:
- Любая ошибка входных данных наружу выходит одним сообщением, без частичного результата.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from fruit_inspector.config import ANALYSIS_FAILED_MESSAGE
from fruit_inspector.errors import InvalidInputError
from fruit_inspector.models.color_statistics import ColorStatistics
from fruit_inspector.models.pixel_buffer import PixelBuffer
from fruit_inspector.models.verdicts import AnalysisResult
from fruit_inspector.services.classification_service import ClassificationService
from fruit_inspector.services.feature_service import FeatureService
from fruit_inspector.services.freshness_service import FreshnessService
from fruit_inspector.services.image_service import ImageService
from fruit_inspector.services.sampling_service import SamplingService

LOGGER = logging.getLogger(__name__)


@dataclass
class AnalysisController:
    """Связывает загрузку, сэмплирование, признаки и вердикты.

    Ответственности:
    - Загрузка файла через `ImageService` (внешняя граница).
    - Приведение к рабочему разрешению через `SamplingService`.
    - Расчёт статистик и вердиктов через соответствующие сервисы.
    """
    image_service: ImageService = field(default_factory=ImageService)
    sampling_service: SamplingService = field(default_factory=SamplingService)
    feature_service: FeatureService = field(default_factory=FeatureService)
    classification_service: ClassificationService = field(default_factory=ClassificationService)
    freshness_service: FreshnessService = field(default_factory=FreshnessService)

    def extract_statistics(self, buffer: PixelBuffer) -> ColorStatistics:
        sampled = self.sampling_service.downscale(buffer)
        return self.feature_service.extract(sampled)

    def analyze_pixels(self, buffer: PixelBuffer) -> AnalysisResult:
        """Полный анализ декодированного буфера.

        Raises:
            InvalidInputError: с единым сообщением для пользователя;
                исходная причина доступна через `__cause__`.
        """
        try:
            stats = self.extract_statistics(buffer)
        except InvalidInputError as exc:
            LOGGER.warning("analysis rejected: %s", exc)
            raise InvalidInputError(ANALYSIS_FAILED_MESSAGE) from exc

        fruit = self.classification_service.classify(stats)
        freshness = self.freshness_service.assess(stats, fruit.fruit)
        result = AnalysisResult(fruit=fruit, freshness=freshness)
        LOGGER.info(
            "analyzed %dx%d: %s (%d%%), %s score=%d",
            buffer.width, buffer.height, fruit.fruit.value, fruit.confidence,
            freshness.category.value, freshness.score,
        )
        return result

    def analyze_file(self, file_path: str | Path) -> AnalysisResult:
        try:
            buffer = self.image_service.load_pixels(file_path)
        except InvalidInputError as exc:
            LOGGER.warning("image rejected: %s", exc)
            raise InvalidInputError(ANALYSIS_FAILED_MESSAGE) from exc
        return self.analyze_pixels(buffer)

    def analyze_bytes(self, data: bytes) -> AnalysisResult:
        try:
            buffer = self.image_service.decode_bytes(data)
        except InvalidInputError as exc:
            LOGGER.warning("image rejected: %s", exc)
            raise InvalidInputError(ANALYSIS_FAILED_MESSAGE) from exc
        return self.analyze_pixels(buffer)
