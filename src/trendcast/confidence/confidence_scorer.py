"""Prediction confidence from data depth, fit quality, consistency,
sentiment agreement and risk.

The composite is clamped to 5..95: the scorer never claims certainty in
either direction.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from ..indicators.technical import linear_r2, round_half_up, trend_consistency
from ..sentiment.types import SentimentInput, sentiment_score
from ..trend.types import Direction
from .types import ConfidenceResult, Grade

FULL_WINDOW_DAYS = 14
SENTIMENT_DEAD_ZONE = 0.05
RISK_PENALTY_FACTOR = 0.35

MIN_SCORE = 5
MAX_SCORE = 95

INSUFFICIENT_DATA = ConfidenceResult(
    score=30,
    grade=Grade.D,
    explanation="Insufficient data for confidence analysis.",
)

# (lower bound, grade, explanation), highest band first
GRADE_BANDS: Tuple[Tuple[int, Grade, str], ...] = (
    (80, Grade.A, "Strong signal: high data quality, consistent trend, aligned sentiment."),
    (65, Grade.B, "Good signal: most indicators align but some noise present."),
    (50, Grade.C, "Moderate signal: mixed indicators, use with additional analysis."),
    (35, Grade.D, "Weak signal: low consistency or data quality."),
    (0, Grade.F, "Very weak signal: insufficient or contradictory data."),
)


def grade_for(score: float) -> Tuple[Grade, str]:
    for lower, grade, explanation in GRADE_BANDS:
        if score >= lower:
            return grade, explanation
    return GRADE_BANDS[-1][1], GRADE_BANDS[-1][2]


def sentiment_alignment(direction: Union[Direction, str], sentiment: float) -> float:
    """How well sentiment backs the call; unsupported calls get a flat 20."""
    direction = Direction(direction)
    if direction == Direction.BULLISH and sentiment > SENTIMENT_DEAD_ZONE:
        return min(100.0, sentiment * 80.0 + 20.0)
    if direction == Direction.BEARISH and sentiment < -SENTIMENT_DEAD_ZONE:
        return min(100.0, -sentiment * 80.0 + 20.0)
    if direction == Direction.NEUTRAL:
        return 50.0
    return 20.0


def calculate_confidence(
    prices: Sequence[float],
    sentiment: SentimentInput,
    direction: Union[Direction, str],
    risk_score: float,
) -> ConfidenceResult:
    if not prices or len(prices) < 2:
        return INSUFFICIENT_DATA

    s = sentiment_score(sentiment)

    data_quality = min(100.0, len(prices) / FULL_WINDOW_DAYS * 100.0)
    trend_r2 = linear_r2(prices) * 100.0
    consistency = trend_consistency(prices) * 100.0
    aligned = sentiment_alignment(direction, s)
    risk_penalty = float(risk_score) * RISK_PENALTY_FACTOR

    raw = (
        data_quality * 0.20
        + trend_r2 * 0.30
        + consistency * 0.20
        + aligned * 0.25
        + (100.0 - risk_penalty) * 0.05
    )
    score = int(round_half_up(max(float(MIN_SCORE), min(float(MAX_SCORE), raw))))
    grade, explanation = grade_for(score)

    return ConfidenceResult(score=score, grade=grade, explanation=explanation)
