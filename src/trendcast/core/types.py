from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..confidence.types import ConfidenceResult
from ..risk.types import RiskResult
from ..sentiment.types import SentimentSignal
from ..trend.types import TrendResult
from ..util.jsonlog import utc_iso


def _env_int(key: str) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass
class PredictionConfig:
    default_days: int = field(default_factory=lambda: _env_int("TRENDCAST_DEFAULT_DAYS") or 10)

    # "synthetic" or "coingecko"
    price_source: str = field(default_factory=lambda: os.getenv("TRENDCAST_PRICE_SOURCE", "synthetic"))
    seed: Optional[int] = field(default_factory=lambda: _env_int("TRENDCAST_SEED"))

    use_gemini: bool = field(default_factory=lambda: os.getenv("USE_GEMINI", "1") == "1")
    gemini_model: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"))

    http_timeout_seconds: float = 15.0


@dataclass(frozen=True)
class PredictionReport:
    """Everything one analysis request produced. Built fresh per request."""

    symbol: str
    prices: Tuple[float, ...]
    sentiment: SentimentSignal
    trend: TrendResult
    risk: RiskResult
    confidence: ConfidenceResult
    narrative: str
    generated_at: datetime

    def to_json(self) -> Dict[str, Any]:
        return {
            "symbol": self.symbol,
            "prices": [float(p) for p in self.prices],
            "sentiment": self.sentiment.to_json(),
            "trend": self.trend.to_json(),
            "risk": self.risk.to_json(),
            "confidence": self.confidence.to_json(),
            "narrative": self.narrative,
            "generatedAt": utc_iso(self.generated_at),
        }
