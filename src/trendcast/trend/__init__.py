"""Trend analyzer: weighted indicator vote plus a 7-day price target."""

from .trend_analyzer import analyze_trend, classify, tally_votes
from .types import Direction, PriceRange, TrendIndicators, TrendResult

__all__ = [
    "analyze_trend",
    "classify",
    "tally_votes",
    "Direction",
    "PriceRange",
    "TrendIndicators",
    "TrendResult",
]
