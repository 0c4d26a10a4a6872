import numpy as np
import pytest
from PIL import Image

from fruit_inspector.models.color_statistics import ColorStatistics
from fruit_inspector.models.pixel_buffer import PixelBuffer


@pytest.fixture
def solid_buffer():
    """Фабрика однотонных буферов."""
    def _make(rgba, width=400, height=200):
        return PixelBuffer.filled(width, height, rgba)
    return _make


@pytest.fixture
def random_buffer():
    """Фабрика случайных буферов с фиксированным seed."""
    def _make(width, height, seed=0):
        rng = np.random.default_rng(seed)
        arr = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
        return PixelBuffer(width=width, height=height, pixels=arr.tobytes())
    return _make


@pytest.fixture
def make_stats():
    """ColorStatistics с нейтральными значениями по умолчанию (ни один индикатор свежести не срабатывает)."""
    def _make(**overrides):
        values = dict(
            avg_red=100.0,
            avg_green=100.0,
            avg_blue=100.0,
            brightness=100.0,
            saturation=30.0,
            uniformity=60.0,
            dark_spot_ratio=10.0,
        )
        values.update(overrides)
        return ColorStatistics(**values)
    return _make


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGB", (400, 400), (255, 0, 0)).save(path)
    return path
