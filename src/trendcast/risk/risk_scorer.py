from __future__ import annotations

from typing import Sequence

from ..indicators.technical import (
    daily_returns,
    max_drawdown,
    mean_normalised_slope,
    round_half_up,
    stddev,
)
from ..sentiment.types import SentimentInput, sentiment_score
from .types import RiskFactors, RiskLevel, RiskResult

VOLATILITY_SCALE = 15.0
DRAWDOWN_SCALE = 3.0
MOMENTUM_SCALE = 20.0

VOLATILITY_WEIGHT = 0.35
DRAWDOWN_WEIGHT = 0.30
MOMENTUM_WEIGHT = 0.15
SENTIMENT_WEIGHT = 0.20

INSUFFICIENT_DATA = RiskResult(score=50, level=RiskLevel.MEDIUM, factors=None)


def risk_level(score: float) -> RiskLevel:
    if score >= 75:
        return RiskLevel.VERY_HIGH
    if score >= 55:
        return RiskLevel.HIGH
    if score >= 35:
        return RiskLevel.MEDIUM
    if score >= 15:
        return RiskLevel.LOW
    return RiskLevel.VERY_LOW


def calculate_risk(prices: Sequence[float], sentiment: SentimentInput = 0.0) -> RiskResult:
    """Score 0..100 from volatility, drawdown, trend steepness and sentiment.

    Series shorter than two points get a neutral Medium(50) result.
    """

    if not prices or len(prices) < 2:
        return INSUFFICIENT_DATA

    s = sentiment_score(sentiment)

    volatility_pct = stddev(daily_returns(prices)) * 100.0
    drawdown_pct = max_drawdown(prices) * 100.0
    slope_pct = abs(mean_normalised_slope(prices)) * 100.0

    vol_score = min(100.0, volatility_pct * VOLATILITY_SCALE)
    dd_score = min(100.0, drawdown_pct * DRAWDOWN_SCALE)
    momentum = min(100.0, slope_pct * MOMENTUM_SCALE)
    # Tops out at 50 so sentiment alone cannot push risk into Very High.
    sentiment_risk = (-s + 1.0) * 25.0

    raw = (
        vol_score * VOLATILITY_WEIGHT
        + dd_score * DRAWDOWN_WEIGHT
        + momentum * MOMENTUM_WEIGHT
        + sentiment_risk * SENTIMENT_WEIGHT
    )
    score = int(round_half_up(max(0.0, min(100.0, raw))))

    return RiskResult(
        score=score,
        level=risk_level(score),
        factors=RiskFactors(
            volatility_score=int(round_half_up(vol_score)),
            drawdown_score=int(round_half_up(dd_score)),
            momentum_risk=int(round_half_up(momentum)),
            sentiment_risk=int(round_half_up(sentiment_risk)),
        ),
    )
