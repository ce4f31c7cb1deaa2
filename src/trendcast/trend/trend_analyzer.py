from __future__ import annotations

import math
from typing import Sequence, Tuple

from ..indicators.technical import (
    ema,
    linear_slope,
    macd_lite,
    round_half_up,
    rsi,
    sma,
    support_resistance,
)
from .types import Direction, PriceRange, TrendIndicators, TrendResult

SMA_CROSS_WEIGHT = 2
RSI_OVERSOLD = 35.0
RSI_OVERBOUGHT = 65.0
SLOPE_DEAD_ZONE = 0.0005

BULLISH_MIN_PCT = 60.0
BEARISH_MAX_PCT = 40.0

TARGET_HORIZON_DAYS = 7
TARGET_BAND = 0.025


TIE_REL_TOL = 1e-9


def _vote(a: float, b: float, scale: float = 0.0) -> int:
    """+1 if a > b, -1 if a < b, 0 when equal within float noise.

    The tolerance is relative to the operands; `scale` sets the reference
    magnitude when one side is 0 (the MACD sign check).
    """
    if math.isclose(a, b, rel_tol=TIE_REL_TOL, abs_tol=TIE_REL_TOL * abs(scale)):
        return 0
    return 1 if a > b else -1


def tally_votes(
    last: float,
    sma5: float,
    sma10: float,
    ema7: float,
    rsi_value: float,
    macd: float,
    slope: float,
) -> Tuple[int, int]:
    """Weighted bullish/bearish vote counts for one indicator snapshot."""

    bullish = 0
    bearish = 0

    cross = _vote(sma5, sma10)
    if cross > 0:
        bullish += SMA_CROSS_WEIGHT
    elif cross < 0:
        bearish += SMA_CROSS_WEIGHT

    vs_ema = _vote(last, ema7)
    if vs_ema > 0:
        bullish += 1
    elif vs_ema < 0:
        bearish += 1

    # Oversold reads as a bounce, overbought as a pullback.
    if rsi_value < RSI_OVERSOLD:
        bullish += 1
    if rsi_value > RSI_OVERBOUGHT:
        bearish += 1

    # MACD is in price units; judge it against the last price
    macd_sign = _vote(macd, 0.0, scale=last)
    if macd_sign > 0:
        bullish += 1
    elif macd_sign < 0:
        bearish += 1

    if slope > SLOPE_DEAD_ZONE:
        bullish += 1
    elif slope < -SLOPE_DEAD_ZONE:
        bearish += 1

    return bullish, bearish


def classify(bullish_pct: float) -> Direction:
    if bullish_pct >= BULLISH_MIN_PCT:
        return Direction.BULLISH
    if bullish_pct <= BEARISH_MAX_PCT:
        return Direction.BEARISH
    return Direction.NEUTRAL


def analyze_trend(prices: Sequence[float]) -> TrendResult:
    """Classify the short-term direction of `prices` and project a 7-day target.

    Raises ValueError on an empty series; every other input degrades to
    neutral indicator values.
    """

    if not prices:
        raise ValueError("analyze_trend() needs at least one price")

    prices = [float(p) for p in prices]
    n = len(prices)
    last = prices[-1]
    first = prices[0]

    sma5 = sma(prices, 5) if n >= 5 else last
    sma10 = sma(prices, 10)
    ema7 = ema(prices, min(7, n))
    rsi_value = rsi(prices, min(7, n - 1))
    macd = macd_lite(prices)
    slope = linear_slope(prices)
    support, resistance = support_resistance(prices)

    bullish, bearish = tally_votes(last, sma5, sma10, ema7, rsi_value, macd, slope)
    total = bullish + bearish
    bullish_pct = (bullish / total) * 100.0 if total else 50.0
    direction = classify(bullish_pct)

    # Straight-line extrapolation of the window's average daily change.
    daily_change = (last - first) / ((n - 1) or 1)
    target_7d = last + daily_change * TARGET_HORIZON_DAYS
    target_high = target_7d * (1.0 + TARGET_BAND)
    target_low = target_7d * (1.0 - TARGET_BAND)
    change_pct = ((target_7d - last) / last) * 100.0 if last else 0.0

    bullish_rounded = int(round_half_up(bullish_pct))

    return TrendResult(
        direction=direction,
        bullish_pct=bullish_rounded,
        bearish_pct=100 - bullish_rounded,
        indicators=TrendIndicators(
            sma5=round_half_up(sma5, 2),
            sma10=round_half_up(sma10, 2),
            ema7=round_half_up(ema7, 2),
            rsi=int(round_half_up(rsi_value)),
            macd=round_half_up(macd, 3),
            linear_slope=round_half_up(slope, 4),
        ),
        price_range=PriceRange(
            current=round_half_up(last, 2),
            target_7d=round_half_up(target_7d, 2),
            target_high=round_half_up(target_high, 2),
            target_low=round_half_up(target_low, 2),
            change_percent=round_half_up(change_pct, 2),
        ),
        support=round_half_up(support, 2),
        resistance=round_half_up(resistance, 2),
        bullish_votes=bullish,
        bearish_votes=bearish,
    )
