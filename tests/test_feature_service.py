import pytest

from fruit_inspector.errors import InvalidInputError
from fruit_inspector.models.pixel_buffer import PixelBuffer
from fruit_inspector.services.feature_service import FeatureService


def _buffer(*pixels):
    return PixelBuffer(width=len(pixels), height=1, pixels=b"".join(bytes(p) for p in pixels))


@pytest.mark.parametrize("x", [0, 30, 59, 60, 100, 255])
def test_uniform_gray_boundaries(solid_buffer, x):
    stats = FeatureService().extract(solid_buffer((x, x, x, 255), width=20, height=10))
    assert stats.brightness == x
    assert stats.uniformity == 100
    assert stats.saturation == 0
    assert stats.dark_spot_ratio == (100 if x < 60 else 0)


def test_black_has_zero_saturation_without_division_error(solid_buffer):
    stats = FeatureService().extract(solid_buffer((0, 0, 0, 255)))
    assert stats.saturation == 0
    assert stats.avg_red == stats.avg_green == stats.avg_blue == 0


def test_pure_red(solid_buffer):
    stats = FeatureService().extract(solid_buffer((255, 0, 0, 255)))
    assert stats.avg_red == 255
    assert stats.avg_green == 0
    assert stats.saturation == 100
    assert stats.brightness == pytest.approx(85)
    assert stats.dark_spot_ratio == 0


def test_empty_buffer_fails_fast():
    with pytest.raises(InvalidInputError):
        FeatureService().extract(PixelBuffer(width=0, height=0, pixels=b""))


def test_black_and_white_halves():
    stats = FeatureService().extract(_buffer((0, 0, 0, 255), (255, 255, 255, 255)))
    assert stats.brightness == pytest.approx(127.5)
    # std = 127.5 -> 127.5 / 2.55 = 50
    assert stats.uniformity == pytest.approx(50)
    assert stats.dark_spot_ratio == pytest.approx(50)


def test_uniformity_floors_at_zero(monkeypatch):
    from fruit_inspector.services import feature_service

    monkeypatch.setattr(feature_service, "UNIFORMITY_STD_SCALE", 0.5)
    stats = FeatureService().extract(_buffer((0, 0, 0, 255), (255, 255, 255, 255)))
    assert stats.uniformity == 0


def test_saturation_uses_channel_averages():
    stats = FeatureService().extract(_buffer((200, 100, 50, 255), (100, 100, 50, 255)))
    assert stats.avg_red == 150
    assert stats.avg_blue == 50
    assert stats.saturation == pytest.approx((150 - 50) / 150 * 100)


def test_alpha_is_ignored():
    a = FeatureService().extract(_buffer((10, 200, 30, 255), (40, 50, 60, 255)))
    b = FeatureService().extract(_buffer((10, 200, 30, 0), (40, 50, 60, 17)))
    assert a == b


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_ranges_hold_for_random_buffers(random_buffer, seed):
    stats = FeatureService().extract(random_buffer(37, 23, seed=seed))
    for value in (stats.saturation, stats.uniformity, stats.dark_spot_ratio):
        assert 0 <= value <= 100
    for value in (stats.avg_red, stats.avg_green, stats.avg_blue, stats.brightness):
        assert 0 <= value <= 255
