"""Indicator library for short price windows (7-14 closes).

Every function here is pure and degrades to a documented neutral value
instead of raising when the window is too short or the series is flat.
Prices are ordered oldest first.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going towards +infinity (2.5 -> 3, -2.5 -> -2)."""
    factor = 10.0 ** int(ndigits)
    return math.floor(float(value) * factor + 0.5) / factor


def sma(prices: Sequence[float], n: int) -> float:
    """Mean of the last min(n, len(prices)) prices."""
    window = list(prices)[-max(int(n), 1):]
    if not window:
        return 0.0
    return float(sum(window)) / len(window)


def ema(prices: Sequence[float], period: int) -> float:
    """Exponential moving average seeded with the first price.

    The recurrence runs over the whole series; `period` only sets the
    smoothing factor k = 2 / (period + 1).
    """
    if not prices:
        return 0.0
    k = 2.0 / (float(period) + 1.0)
    value = float(prices[0])
    for p in prices[1:]:
        value = float(p) * k + value * (1.0 - k)
    return value


def rsi(prices: Sequence[float], period: int = 7) -> float:
    period = int(period)
    if period < 1 or len(prices) < period + 1:
        return 50.0

    window = [float(p) for p in prices[-(period + 1):]]
    deltas = [b - a for a, b in zip(window, window[1:])]
    avg_gain = sum(d for d in deltas if d > 0) / period
    avg_loss = sum(-d for d in deltas if d < 0) / period

    if avg_loss == 0:
        # flat window: nothing to measure
        return 100.0 if avg_gain > 0 else 50.0
    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def macd_lite(prices: Sequence[float]) -> float:
    """EMA(3) - EMA(6); a short-window stand-in for MACD."""
    if len(prices) < 6:
        return 0.0
    return ema(prices, 3) - ema(prices, 6)


def _ols_slope(prices: Sequence[float]) -> float:
    n = len(prices)
    if n < 2:
        return 0.0
    x_mean = (n - 1) / 2.0
    y_mean = sum(prices) / n
    ss_xy = 0.0
    ss_xx = 0.0
    for i, p in enumerate(prices):
        ss_xy += (i - x_mean) * (float(p) - y_mean)
        ss_xx += (i - x_mean) ** 2
    return ss_xy / ss_xx if ss_xx else 0.0


def linear_slope(prices: Sequence[float]) -> float:
    """OLS slope per step, normalised by the last price."""
    if not prices:
        return 0.0
    last = float(prices[-1])
    return _ols_slope(prices) / (last or 1.0)


def mean_normalised_slope(prices: Sequence[float]) -> float:
    """OLS slope per step, normalised by the mean price."""
    if not prices:
        return 0.0
    mean = sum(prices) / len(prices)
    return _ols_slope(prices) / (mean or 1.0)


def support_resistance(prices: Sequence[float]) -> Tuple[float, float]:
    return float(min(prices)), float(max(prices))


def linear_r2(prices: Sequence[float]) -> float:
    """Squared Pearson correlation between index and price (0..1)."""
    n = len(prices)
    if n < 3:
        return 0.0
    x_mean = (n - 1) / 2.0
    y_mean = sum(prices) / n
    ss_xy = ss_xx = ss_yy = 0.0
    for i, p in enumerate(prices):
        dy = float(p) - y_mean
        ss_xy += (i - x_mean) * dy
        ss_xx += (i - x_mean) ** 2
        ss_yy += dy * dy

    # Float noise on a constant series must not read as variance.
    if not ss_xx or ss_yy <= n * (1e-12 * abs(y_mean)) ** 2:
        return 0.0
    r = ss_xy / math.sqrt(ss_xx * ss_yy)
    return min(r * r, 1.0)


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def trend_consistency(prices: Sequence[float]) -> float:
    """Share of consecutive price changes that keep the same sign."""
    changes = [float(b) - float(a) for a, b in zip(prices, prices[1:])]
    if len(changes) < 2:
        return 0.0
    consistent = sum(1 for a, b in zip(changes, changes[1:]) if _sign(a) == _sign(b))
    return consistent / (len(changes) - 1)


def daily_returns(prices: Sequence[float]) -> List[float]:
    return [(float(p) - float(prev)) / (float(prev) or 1.0) for prev, p in zip(prices, prices[1:])]


def stddev(values: Sequence[float]) -> float:
    """Population standard deviation."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def max_drawdown(prices: Sequence[float]) -> float:
    """Largest peak-to-trough decline as a fraction of the running peak."""
    if not prices:
        return 0.0
    peak = float(prices[0])
    worst = 0.0
    for p in prices:
        p = float(p)
        if p > peak:
            peak = p
        if peak <= 0:
            continue
        dd = (peak - p) / peak
        if dd > worst:
            worst = dd
    return worst
