"""trendcast: short-window trend, risk and confidence scoring."""

from .confidence import ConfidenceResult, Grade, calculate_confidence
from .risk import RiskFactors, RiskLevel, RiskResult, calculate_risk
from .trend import Direction, PriceRange, TrendIndicators, TrendResult, analyze_trend

__all__ = [
    "analyze_trend",
    "calculate_risk",
    "calculate_confidence",
    "Direction",
    "TrendResult",
    "TrendIndicators",
    "PriceRange",
    "RiskLevel",
    "RiskFactors",
    "RiskResult",
    "Grade",
    "ConfidenceResult",
]
