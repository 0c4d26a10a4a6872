"""Модели результатов анализа: вердикты по виду фрукта и свежести.

Принципы:
- SRP: только структуры данных; логика вычисления живёт в сервисах.
- Неизменяемость: результат создаётся один раз за вызов и больше не меняется.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from fruit_inspector.config import FRESHNESS_FALLBACK, FRESHNESS_THRESHOLDS


class FruitType(str, Enum):
    """Закрытый набор меток. Порядок объявления задаёт порядок разрешения ничьих."""
    APPLE = "apple"
    BANANA = "banana"
    ORANGE = "orange"
    STRAWBERRY = "strawberry"
    GRAPES = "grapes"
    PEACH = "peach"
    PEAR = "pear"
    PLUM = "plum"


class FreshnessCategory(str, Enum):
    FRESH = "Fresh"
    RIPE = "Ripe"
    OVERRIPE = "Overripe"
    SPOILED = "Spoiled"
    UNKNOWN = "Unknown"

    @classmethod
    def from_score(cls, score: float) -> "FreshnessCategory":
        """Категория по итоговому баллу свежести.

        Используется и при оценке, и при восстановлении категории
        из сохранённой записи, поэтому пороги здесь единственные.
        """
        for lower_bound, label in FRESHNESS_THRESHOLDS:
            if score >= lower_bound:
                return cls(label)
        return cls(FRESHNESS_FALLBACK)


@dataclass(frozen=True)
class FruitVerdict:
    fruit: FruitType
    confidence: int  # [60, 95]


@dataclass(frozen=True)
class FreshnessVerdict:
    category: FreshnessCategory
    score: int  # [0, 100]
    confidence: int  # [65, 90]
    explanation: str


@dataclass(frozen=True)
class AnalysisRecord:
    """Плоская запись для внешнего хранилища истории.

    Категория и пояснение не хранятся: категория восстанавливается по баллу.
    """
    fruit: FruitType
    confidence: int
    freshness_score: int
    freshness_confidence: int

    @property
    def freshness_category(self) -> FreshnessCategory:
        return FreshnessCategory.from_score(self.freshness_score)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "fruit": self.fruit.value,
            "confidence": self.confidence,
            "freshnessScore": self.freshness_score,
            "freshnessConfidence": self.freshness_confidence,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Пара (вид фрукта, свежесть) для отображения во внешнем UI."""
    fruit: FruitVerdict
    freshness: FreshnessVerdict

    def to_record(self) -> AnalysisRecord:
        return AnalysisRecord(
            fruit=self.fruit.fruit,
            confidence=self.fruit.confidence,
            freshness_score=self.freshness.score,
            freshness_confidence=self.freshness.confidence,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            "fruitType": self.fruit.fruit.value,
            "confidence": self.fruit.confidence,
            "freshnessCategory": self.freshness.category.value,
            "freshnessScore": self.freshness.score,
            "freshnessConfidence": self.freshness.confidence,
            "freshnessExplanation": self.freshness.explanation,
        }
