import random

import pytest

from trendcast.trend import Direction, analyze_trend, classify, tally_votes

RISING = [100.0, 101.0, 102.0, 103.0, 104.0, 105.0, 106.0]
FLAT = [100.0, 100.0, 100.0, 100.0, 100.0]
FALLING = [100.0, 90.0, 80.0, 70.0, 60.0]


def test_rising_series_is_bullish_with_higher_target():
    result = analyze_trend(RISING)

    assert result.indicators.rsi == 100
    assert result.bullish_votes == 5
    assert result.bearish_votes == 1  # overbought RSI
    assert result.direction == Direction.BULLISH
    assert result.bullish_pct == 83
    assert result.bearish_pct == 17

    pr = result.price_range
    assert pr.current == 106.0
    assert pr.target_7d == pytest.approx(113.0)
    assert pr.target_7d > 106
    assert pr.target_high == pytest.approx(113.0 * 1.025, abs=0.01)
    assert pr.target_low == pytest.approx(113.0 * 0.975, abs=0.01)
    assert pr.change_percent == pytest.approx(6.6)

    assert result.indicators.sma5 == 104.0
    assert result.indicators.sma10 == 103.0
    assert result.support == 100.0
    assert result.resistance == 106.0


def test_flat_series_casts_no_votes():
    result = analyze_trend(FLAT)

    assert result.indicators.linear_slope == 0.0
    assert result.indicators.rsi == 50
    assert result.indicators.macd == 0.0
    assert result.bullish_votes == 0
    assert result.bearish_votes == 0
    assert result.bullish_pct == 50
    assert result.bearish_pct == 50
    assert result.direction == Direction.NEUTRAL
    assert result.price_range.target_7d == 100.0


def test_falling_series_is_bearish():
    result = analyze_trend(FALLING)

    assert result.direction == Direction.BEARISH
    assert result.indicators.rsi == 0
    # oversold RSI still votes bullish
    assert result.bullish_votes == 1
    assert result.bearish_votes == 2
    assert result.price_range.target_7d == pytest.approx(-10.0)


@pytest.mark.parametrize("factor", [1e-11, 1e-6, 1e6])
def test_votes_do_not_depend_on_price_scale(factor):
    base = analyze_trend(RISING)
    scaled = analyze_trend([p * factor for p in RISING])

    assert scaled.direction == base.direction == Direction.BULLISH
    assert scaled.bullish_votes == base.bullish_votes == 5
    assert scaled.bearish_votes == base.bearish_votes == 1
    assert scaled.bullish_pct == base.bullish_pct


def test_flat_series_at_tiny_prices_casts_no_votes():
    result = analyze_trend([p * 1e-11 for p in FLAT])

    assert result.bullish_votes == 0
    assert result.bearish_votes == 0
    assert result.direction == Direction.NEUTRAL


def test_macd_sign_is_judged_against_last_price():
    # a 1e-12 MACD is a real move on a 1e-9 asset and noise on a 100 asset
    assert tally_votes(1e-9, 1e-9, 1e-9, 1e-9, 50.0, 1e-12, 0.0) == (1, 0)
    assert tally_votes(1e-9, 1e-9, 1e-9, 1e-9, 50.0, -1e-12, 0.0) == (0, 1)
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 50.0, 1e-12, 0.0) == (0, 0)


def test_two_point_series():
    result = analyze_trend([50.0, 55.0])

    assert result.indicators.sma5 == 55.0
    assert result.indicators.sma10 == 52.5
    assert result.indicators.ema7 == pytest.approx(53.33)
    assert result.direction == Direction.BULLISH
    assert result.price_range.target_7d == pytest.approx(90.0)


def test_single_point_does_not_raise():
    result = analyze_trend([42.0])
    assert result.price_range.target_7d == 42.0
    assert result.bullish_pct + result.bearish_pct == 100


def test_empty_series_raises():
    with pytest.raises(ValueError):
        analyze_trend([])


def test_slope_dead_zone():
    # tiny drift: slope stays inside +/-0.0005 and casts no vote
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 50.0, 0.0, 0.0004) == (0, 0)
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 50.0, 0.0, 0.0006) == (1, 0)
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 50.0, 0.0, -0.0006) == (0, 1)


def test_rsi_votes_are_one_sided():
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 34.9, 0.0, 0.0) == (1, 0)
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 65.1, 0.0, 0.0) == (0, 1)
    assert tally_votes(100.0, 100.0, 100.0, 100.0, 50.0, 0.0, 0.0) == (0, 0)


def test_sma_cross_counts_twice():
    assert tally_votes(100.0, 101.0, 100.0, 100.0, 50.0, 0.0, 0.0) == (2, 0)
    assert tally_votes(100.0, 99.0, 100.0, 100.0, 50.0, 0.0, 0.0) == (0, 2)


@pytest.mark.parametrize(
    "pct, expected",
    [
        (60.0, Direction.BULLISH),
        (59.9, Direction.NEUTRAL),
        (50.0, Direction.NEUTRAL),
        (40.1, Direction.NEUTRAL),
        (40.0, Direction.BEARISH),
    ],
)
def test_classify_bands(pct, expected):
    assert classify(pct) == expected


def test_percentages_sum_to_100_and_match_direction():
    rng = random.Random(1234)
    for _ in range(200):
        n = rng.randint(2, 14)
        prices = [round(rng.uniform(50, 150), 2) for _ in range(n)]
        result = analyze_trend(prices)

        assert result.bullish_pct + result.bearish_pct == 100
        assert 0 <= result.bullish_pct <= 100
        total = result.bullish_votes + result.bearish_votes
        pct = (result.bullish_votes / total) * 100.0 if total else 50.0
        assert result.direction == classify(pct)


def test_repeated_calls_are_identical():
    prices = [182.5, 184.1, 181.9, 185.0, 186.2, 184.7, 187.3, 188.0]
    assert analyze_trend(prices) == analyze_trend(prices)


def test_to_json_field_names():
    payload = analyze_trend(RISING).to_json()

    assert payload["direction"] == "BULLISH"
    assert set(payload["indicators"]) == {"sma5", "sma10", "ema7", "rsi", "macd", "linearSlope"}
    assert set(payload["priceRange"]) == {"current", "target7d", "targetHigh", "targetLow", "changePercent"}
    assert {"bullishPct", "bearishPct", "support", "resistance"} <= set(payload)
    assert "bullish_votes" not in payload
