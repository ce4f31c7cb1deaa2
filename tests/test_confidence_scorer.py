import random

import pytest

from trendcast.confidence import Grade, calculate_confidence, grade_for, sentiment_alignment
from trendcast.trend import Direction

FALLING = [100.0, 90.0, 80.0, 70.0, 60.0]


def test_two_points_return_fixed_default():
    result = calculate_confidence([50.0, 55.0], 0.4, Direction.BULLISH, 20)

    assert result.score == 30
    assert result.grade == Grade.D
    assert result.explanation == "Insufficient data for confidence analysis."


def test_bearish_call_backed_by_bearish_sentiment():
    assert sentiment_alignment(Direction.BEARISH, -0.8) == pytest.approx(84.0)

    result = calculate_confidence(FALLING, -0.8, Direction.BEARISH, 62)
    assert result.score == 82
    assert result.grade == Grade.A


def test_upper_clamp():
    prices = [100.0 + i for i in range(14)]
    result = calculate_confidence(prices, 1.0, Direction.BULLISH, 0)

    assert result.score == 95
    assert result.grade == Grade.A


def test_unsupported_call_is_penalised():
    prices = [100.0 + i for i in range(14)]
    backed = calculate_confidence(prices, 0.5, Direction.BULLISH, 30)
    contradicted = calculate_confidence(prices, -0.5, Direction.BULLISH, 30)

    assert backed.score > contradicted.score


@pytest.mark.parametrize(
    "direction, sentiment, expected",
    [
        (Direction.BULLISH, 0.5, 60.0),
        (Direction.BULLISH, 1.0, 100.0),
        (Direction.BULLISH, 0.05, 20.0),
        (Direction.BULLISH, -0.5, 20.0),
        (Direction.BEARISH, -0.05, 20.0),
        (Direction.BEARISH, 0.3, 20.0),
        (Direction.NEUTRAL, 0.9, 50.0),
        (Direction.NEUTRAL, -0.9, 50.0),
        ("BULLISH", 0.5, 60.0),
    ],
)
def test_sentiment_alignment(direction, sentiment, expected):
    assert sentiment_alignment(direction, sentiment) == pytest.approx(expected)


@pytest.mark.parametrize(
    "score, grade",
    [
        (95, Grade.A),
        (80, Grade.A),
        (79, Grade.B),
        (65, Grade.B),
        (64, Grade.C),
        (50, Grade.C),
        (49, Grade.D),
        (35, Grade.D),
        (34, Grade.F),
        (5, Grade.F),
    ],
)
def test_grade_bands(score, grade):
    assert grade_for(score)[0] == grade


def test_each_grade_has_its_own_explanation():
    explanations = {grade_for(s)[1] for s in (90, 70, 55, 40, 10)}
    assert len(explanations) == 5


def test_score_is_bounded_integer_and_repeatable():
    rng = random.Random(7)
    for _ in range(200):
        n = rng.randint(2, 14)
        prices = [round(rng.uniform(10.0, 300.0), 2) for _ in range(n)]
        sentiment = rng.uniform(-1.0, 1.0)
        direction = rng.choice(list(Direction))
        risk = rng.randint(0, 100)

        result = calculate_confidence(prices, sentiment, direction, risk)
        assert isinstance(result.score, int)
        assert 5 <= result.score <= 95
        assert result == calculate_confidence(prices, sentiment, direction, risk)
