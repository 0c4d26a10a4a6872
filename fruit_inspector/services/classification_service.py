"""Определение вида фрукта по цветовым статистикам.

Фиксированная эвристика, не обученная модель: доли каналов R/G/B
сравниваются с порогами, каждое сработавшее правило выставляет баллы
своим категориям, побеждает категория с наибольшим баллом.
"""
from __future__ import annotations

import logging
from typing import Dict

from fruit_inspector.config import FRUIT_CONFIDENCE_MAX, FRUIT_CONFIDENCE_MIN
from fruit_inspector.models.color_statistics import ColorStatistics
from fruit_inspector.models.verdicts import FruitType, FruitVerdict
from fruit_inspector.utils import clamp, round_half_up

LOGGER = logging.getLogger(__name__)

DEFAULT_FRUIT = FruitType.APPLE


class ClassificationService:
    def score_fruits(self, stats: ColorStatistics) -> Dict[FruitType, float]:
        """
        Баллы по всем восьми категориям в порядке apple..plum.

        Правила независимы и могут срабатывать одновременно; правило
        зелёных фруктов только повышает уже выставленные баллы.
        """
        scores: Dict[FruitType, float] = {fruit: 0.0 for fruit in FruitType}

        total = stats.channel_total
        if total == 0:
            return scores

        red = stats.avg_red / total
        green = stats.avg_green / total
        blue = stats.avg_blue / total
        sat = stats.saturation

        # Red fruits
        if red > 0.38 and sat > 30:
            scores[FruitType.APPLE] = 70 + (red - 0.38) * 100
            scores[FruitType.STRAWBERRY] = 65 + (red - 0.38) * 80

        # Yellow fruits
        if red > 0.36 and green > 0.36 and blue < 0.30 and sat > 25:
            scores[FruitType.BANANA] = 75 + (green - 0.36) * 100
            scores[FruitType.PEAR] = 60 + (green - 0.36) * 80

        # Orange fruits
        if red > 0.37 and green > 0.34 and sat > 35:
            scores[FruitType.ORANGE] = 80 + (red - 0.37) * 120
            scores[FruitType.PEACH] = 65 + (red - 0.37) * 90

        # Purple/blue fruits
        if blue > 0.32 or (red > 0.35 and blue > 0.30):
            scores[FruitType.GRAPES] = 70 + (blue - 0.30) * 100
            scores[FruitType.PLUM] = 65 + (blue - 0.30) * 90

        # Green fruits
        if green > 0.37 and sat > 20:
            scores[FruitType.PEAR] = max(scores[FruitType.PEAR], 70 + (green - 0.37) * 100)
            scores[FruitType.GRAPES] = max(scores[FruitType.GRAPES], 60 + (green - 0.37) * 80)

        return scores

    def classify(self, stats: ColorStatistics) -> FruitVerdict:
        """Вид фрукта и уверенность в диапазоне [60, 95].

        При равенстве баллов побеждает категория, встреченная раньше
        (сравнение строгое). Если ни одно правило не сработало, результат
        apple с минимальной уверенностью.
        """
        scores = self.score_fruits(stats)

        best_fruit = DEFAULT_FRUIT
        best_score = 0.0
        for fruit, score in scores.items():
            if score > best_score:
                best_score = score
                best_fruit = fruit

        confidence = round_half_up(clamp(best_score, FRUIT_CONFIDENCE_MIN, FRUIT_CONFIDENCE_MAX))
        LOGGER.debug("fruit scores=%s -> %s (%d)", {f.value: s for f, s in scores.items()}, best_fruit.value, confidence)
        return FruitVerdict(fruit=best_fruit, confidence=confidence)
