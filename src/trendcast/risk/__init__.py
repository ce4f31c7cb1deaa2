
from .risk_scorer import calculate_risk, risk_level
from .types import RiskFactors, RiskLevel, RiskResult

__all__ = [
    "calculate_risk",
    "risk_level",
    "RiskFactors",
    "RiskLevel",
    "RiskResult",
]
