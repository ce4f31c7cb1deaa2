from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Direction(str, Enum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


@dataclass(frozen=True)
class TrendIndicators:
    """Indicator values as displayed (rounded)."""

    sma5: float
    sma10: float
    ema7: float
    rsi: int
    macd: float
    linear_slope: float

    def to_json(self) -> Dict[str, Any]:
        return {
            "sma5": self.sma5,
            "sma10": self.sma10,
            "ema7": self.ema7,
            "rsi": self.rsi,
            "macd": self.macd,
            "linearSlope": self.linear_slope,
        }


@dataclass(frozen=True)
class PriceRange:
    current: float
    target_7d: float
    target_high: float
    target_low: float
    change_percent: float

    def to_json(self) -> Dict[str, Any]:
        return {
            "current": self.current,
            "target7d": self.target_7d,
            "targetHigh": self.target_high,
            "targetLow": self.target_low,
            "changePercent": self.change_percent,
        }


@dataclass(frozen=True)
class TrendResult:
    """Result from analyze_trend()."""

    direction: Direction
    bullish_pct: int
    bearish_pct: int
    indicators: TrendIndicators
    price_range: PriceRange
    support: float
    resistance: float

    # raw tally behind bullish_pct; not part of the outbound payload
    bullish_votes: int = 0
    bearish_votes: int = 0

    def to_json(self) -> Dict[str, Any]:
        return {
            "direction": self.direction.value,
            "bullishPct": self.bullish_pct,
            "bearishPct": self.bearish_pct,
            "indicators": self.indicators.to_json(),
            "priceRange": self.price_range.to_json(),
            "support": self.support,
            "resistance": self.resistance,
        }
