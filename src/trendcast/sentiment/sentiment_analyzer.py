from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..util.jsonlog import log_json, utc_iso
from .gemini_scorer import KEYWORD_BREAKDOWN, GeminiScorer, get_gemini_scorer
from .types import SentimentSignal


@dataclass
class SentimentAnalyzer:
    """Turns recent headlines into a SentimentSignal.

    - No headlines: neutral signal (score 0)
    - Gemini when configured, keyword scoring otherwise
    - Never raises; an unreachable model only changes the scoring path
    """

    logger: logging.Logger
    scorer: GeminiScorer = field(default_factory=get_gemini_scorer)

    def analyze(
        self,
        symbol: str,
        headlines: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None,
    ) -> SentimentSignal:
        now = now or datetime.now(timezone.utc)
        cleaned = [str(h).strip() for h in (headlines or []) if str(h).strip()]

        if not cleaned:
            signal = SentimentSignal.neutral("No headlines provided.")
            scorer_name = "none"
        else:
            try:
                signal = self.scorer.analyze_headlines(cleaned, symbol)
            except Exception as e:
                self.logger.warning(f"[SentimentAnalyzer] scorer failed: {e}")
                signal = self.scorer.fallback_score(cleaned)
            # Gemini failures fall back inside the scorer; the breakdown tells which path ran
            scorer_name = "keywords" if signal.breakdown == KEYWORD_BREAKDOWN else "gemini"

        payload = {
            "module": "SentimentAnalyzer",
            "timestamp": utc_iso(now),
            "symbol": symbol,
            "score": round(float(signal.score), 4),
            "label": signal.label.value,
            "evidence": {
                "headline_count": len(cleaned),
                "scorer": scorer_name,
            },
        }
        log_json(self.logger, payload, level=logging.INFO)
        return signal
