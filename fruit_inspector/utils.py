"""Общие числовые помощники для стадии вердиктов и сэмплирования."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Округление половины вверх: 72.5 -> 73 (встроенный round даёт 72)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))
