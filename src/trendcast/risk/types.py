from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class RiskLevel(str, Enum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


@dataclass(frozen=True)
class RiskFactors:
    """Per-factor scores, each rounded to an int in 0..100."""

    volatility_score: int
    drawdown_score: int
    momentum_risk: int
    sentiment_risk: int

    def to_json(self) -> Dict[str, int]:
        return {
            "volatilityScore": int(self.volatility_score),
            "drawdownScore": int(self.drawdown_score),
            "momentumRisk": int(self.momentum_risk),
            "sentimentRisk": int(self.sentiment_risk),
        }


@dataclass(frozen=True)
class RiskResult:
    """Result from calculate_risk()."""

    score: int
    level: RiskLevel

    # None when the series was too short to score
    factors: Optional[RiskFactors] = None

    def to_json(self) -> Dict[str, Any]:
        return {
            "score": int(self.score),
            "level": self.level.value,
            "factors": self.factors.to_json() if self.factors else {},
        }
