"""Константы эвристики и настройки логирования.

Все пороги эвристики зафиксированы здесь, чтобы сервисы и тесты
ссылались на один источник. Во время вызова ядро конфигурацию не принимает.
"""
from __future__ import annotations

import os

# ---- Downscaler ----
MAX_SAMPLE_SIZE = 200

# ---- Feature extractor ----
DARK_PIXEL_THRESHOLD = 60
UNIFORMITY_STD_SCALE = 2.55

# ---- Fruit classification ----
FRUIT_CONFIDENCE_MIN = 60
FRUIT_CONFIDENCE_MAX = 95

# ---- Freshness assessment ----
FRESHNESS_BASE_SCORE = 50
FRESHNESS_CONFIDENCE_BASE = 70
FRESHNESS_CONFIDENCE_MIN = 65
FRESHNESS_CONFIDENCE_MAX = 90

# (нижняя граница, категория) по убыванию
FRESHNESS_THRESHOLDS = (
    (80, "Fresh"),
    (60, "Ripe"),
    (40, "Overripe"),
    (20, "Spoiled"),
)
FRESHNESS_FALLBACK = "Unknown"

# ---- Image loading ----
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
ALLOWED_FORMATS = frozenset({"JPEG", "PNG", "WEBP"})

ANALYSIS_FAILED_MESSAGE = "Failed to analyze image. Please ensure the image is valid and try again."

# ---- Logging ----
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def env_bool(name: str, default: bool = False) -> bool:
    """Читает булев флаг из окружения (1/true/yes/on, без учёта регистра)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def log_level_from_env() -> str:
    return os.getenv("FRUIT_INSPECTOR_LOG_LEVEL", "INFO")


def debug_from_env() -> bool:
    return env_bool("FRUIT_INSPECTOR_DEBUG", default=False)
