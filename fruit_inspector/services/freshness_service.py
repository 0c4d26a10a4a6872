"""Оценка свежести по яркости, однородности, тёмным пятнам и насыщенности."""
from __future__ import annotations

import logging
from typing import List, Optional

from fruit_inspector.config import (
    FRESHNESS_BASE_SCORE,
    FRESHNESS_CONFIDENCE_BASE,
    FRESHNESS_CONFIDENCE_MAX,
    FRESHNESS_CONFIDENCE_MIN,
)
from fruit_inspector.models.color_statistics import ColorStatistics
from fruit_inspector.models.verdicts import FreshnessCategory, FreshnessVerdict, FruitType
from fruit_inspector.utils import clamp, round_half_up

LOGGER = logging.getLogger(__name__)

FALLBACK_EXPLANATION = "Analysis based on overall visual characteristics."


class FreshnessService:
    def score(self, stats: ColorStatistics) -> int:
        """
        Балл свежести: база 50 плюс независимые поправки, обрезка в [0, 100].
        """
        total = FRESHNESS_BASE_SCORE

        if stats.brightness > 120:
            total += 20
        elif stats.brightness < 80:
            total -= 20

        if stats.uniformity > 70:
            total += 15
        elif stats.uniformity < 50:
            total -= 15

        # тёмные пятна штрафуются сильнее, чем поощряется их отсутствие
        if stats.dark_spot_ratio < 5:
            total += 15
        elif stats.dark_spot_ratio > 15:
            total -= 25

        if stats.saturation > 40:
            total += 10
        elif stats.saturation < 20:
            total -= 10

        return int(clamp(total, 0, 100))

    def explain(self, stats: ColorStatistics) -> str:
        indicators: List[str] = []

        if stats.uniformity > 70:
            indicators.append("uniform color distribution")
        elif stats.uniformity < 50:
            indicators.append("uneven coloring")

        if stats.dark_spot_ratio < 5:
            indicators.append("minimal dark spots")
        elif stats.dark_spot_ratio > 15:
            indicators.append("significant browning or dark spots")

        if stats.brightness > 120:
            indicators.append("bright appearance")
        elif stats.brightness < 80:
            indicators.append("dull appearance")

        if stats.saturation > 40:
            indicators.append("vibrant color")
        elif stats.saturation < 20:
            indicators.append("faded color")

        if not indicators:
            return FALLBACK_EXPLANATION
        return f"Based on {', '.join(indicators)}."

    def assess(self, stats: ColorStatistics, fruit: Optional[FruitType] = None) -> FreshnessVerdict:
        """Категория, балл, уверенность и текстовое пояснение.

        Args:
            stats: Цветовые статистики изображения.
            fruit: Вид фрукта. Пока не влияет на балл; оставлен под
                калибровку порогов по видам.
        """
        score = self.score(stats)
        category = FreshnessCategory.from_score(score)
        confidence = round_half_up(
            clamp(
                FRESHNESS_CONFIDENCE_BASE + abs(score - FRESHNESS_BASE_SCORE) / 2,
                FRESHNESS_CONFIDENCE_MIN,
                FRESHNESS_CONFIDENCE_MAX,
            )
        )
        verdict = FreshnessVerdict(
            category=category,
            score=score,
            confidence=confidence,
            explanation=self.explain(stats),
        )
        LOGGER.debug("freshness for %s: %s", fruit.value if fruit else "-", verdict)
        return verdict
