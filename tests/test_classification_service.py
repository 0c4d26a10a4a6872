import pytest

from fruit_inspector.models.verdicts import FruitType
from fruit_inspector.services.classification_service import ClassificationService


def _channels(make_stats, r, g, b):
    hi, lo = max(r, g, b), min(r, g, b)
    sat = 0.0 if hi == 0 else (hi - lo) / hi * 100
    return make_stats(avg_red=r, avg_green=g, avg_blue=b, saturation=sat)


def test_pure_red_is_apple_with_capped_confidence(make_stats):
    stats = _channels(make_stats, 255, 0, 0)
    scores = ClassificationService().score_fruits(stats)
    assert scores[FruitType.APPLE] == pytest.approx(132)
    assert scores[FruitType.STRAWBERRY] == pytest.approx(114.6)
    verdict = ClassificationService().classify(stats)
    assert verdict.fruit is FruitType.APPLE
    assert verdict.confidence == 95


def test_black_falls_back_to_apple_with_floor_confidence(make_stats):
    verdict = ClassificationService().classify(_channels(make_stats, 0, 0, 0))
    assert verdict.fruit is FruitType.APPLE
    assert verdict.confidence == 60


def test_neutral_gray_reads_as_grapes(make_stats):
    # blueRatio = 1/3 > 0.32
    verdict = ClassificationService().classify(_channels(make_stats, 100, 100, 100))
    assert verdict.fruit is FruitType.GRAPES
    assert verdict.confidence == 73


def test_yellow_is_banana_and_green_rule_raises_pear(make_stats):
    stats = _channels(make_stats, 73, 80, 47)
    scores = ClassificationService().score_fruits(stats)
    assert scores[FruitType.BANANA] == pytest.approx(79)
    assert scores[FruitType.PEAR] == pytest.approx(73)
    assert scores[FruitType.GRAPES] == pytest.approx(62.4)
    assert scores[FruitType.ORANGE] == 0
    verdict = ClassificationService().classify(stats)
    assert (verdict.fruit, verdict.confidence) == (FruitType.BANANA, 79)


def test_green_is_pear(make_stats):
    verdict = ClassificationService().classify(_channels(make_stats, 60, 90, 50))
    assert (verdict.fruit, verdict.confidence) == (FruitType.PEAR, 78)


def test_purple_is_grapes(make_stats):
    verdict = ClassificationService().classify(_channels(make_stats, 100, 60, 120))
    assert (verdict.fruit, verdict.confidence) == (FruitType.GRAPES, 83)


def test_deep_orange_is_orange(make_stats):
    stats = _channels(make_stats, 240, 140, 20)
    scores = ClassificationService().score_fruits(stats)
    assert scores[FruitType.ORANGE] == pytest.approx(107.6)
    assert scores[FruitType.PEACH] == pytest.approx(85.7)
    verdict = ClassificationService().classify(stats)
    assert (verdict.fruit, verdict.confidence) == (FruitType.ORANGE, 95)


def test_low_saturation_disables_color_rules(make_stats):
    stats = make_stats(avg_red=150, avg_green=60, avg_blue=40, saturation=10)
    scores = ClassificationService().score_fruits(stats)
    assert scores[FruitType.APPLE] == 0
    assert scores[FruitType.STRAWBERRY] == 0


def test_scores_follow_declared_order(make_stats):
    scores = ClassificationService().score_fruits(_channels(make_stats, 1, 2, 3))
    assert list(scores) == [
        FruitType.APPLE,
        FruitType.BANANA,
        FruitType.ORANGE,
        FruitType.STRAWBERRY,
        FruitType.GRAPES,
        FruitType.PEACH,
        FruitType.PEAR,
        FruitType.PLUM,
    ]


def test_exact_tie_goes_to_first_in_order(make_stats, monkeypatch):
    service = ClassificationService()
    tied = {fruit: 0.0 for fruit in FruitType}
    tied[FruitType.PLUM] = 81.0
    tied[FruitType.PEACH] = 81.0
    tied[FruitType.BANANA] = 81.0
    monkeypatch.setattr(service, "score_fruits", lambda stats: tied)
    verdict = service.classify(make_stats())
    assert (verdict.fruit, verdict.confidence) == (FruitType.BANANA, 81)
