from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union


class SentimentLabel(str, Enum):
    VERY_BEARISH = "Very Bearish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"
    BULLISH = "Bullish"
    VERY_BULLISH = "Very Bullish"

    @classmethod
    def from_score(cls, score: float) -> "SentimentLabel":
        if score >= 0.6:
            return cls.VERY_BULLISH
        if score > 0.3:
            return cls.BULLISH
        if score <= -0.6:
            return cls.VERY_BEARISH
        if score < -0.3:
            return cls.BEARISH
        return cls.NEUTRAL

    @classmethod
    def from_keyword_score(cls, score: float) -> "SentimentLabel":
        """Keyword counts are too coarse for the "Very" labels."""
        if score > 0.3:
            return cls.BULLISH
        if score < -0.3:
            return cls.BEARISH
        return cls.NEUTRAL

    @classmethod
    def parse(cls, raw: Any, score: float) -> "SentimentLabel":
        """Accept 'Very Bullish', 'VeryBullish', 'very_bullish'; else derive from score."""
        key = "".join(ch for ch in str(raw or "").lower() if ch.isalpha())
        for label in cls:
            if label.value.replace(" ", "").lower() == key:
                return label
        return cls.from_score(score)


@dataclass(frozen=True)
class SentimentSignal:
    score: float  # -1.0 (very bearish) to 1.0 (very bullish)
    label: SentimentLabel = SentimentLabel.NEUTRAL
    breakdown: str = ""

    @classmethod
    def neutral(cls, breakdown: str = "") -> "SentimentSignal":
        return cls(score=0.0, label=SentimentLabel.NEUTRAL, breakdown=breakdown)

    def to_json(self) -> Dict[str, Any]:
        return {
            "score": float(self.score),
            "label": self.label.value,
            "breakdown": self.breakdown,
        }


SentimentInput = Union[float, int, SentimentSignal, None]


def sentiment_score(value: SentimentInput) -> float:
    """Scalar score from either a bare number or a SentimentSignal."""
    if value is None:
        return 0.0
    if isinstance(value, SentimentSignal):
        return float(value.score)
    return float(value)
