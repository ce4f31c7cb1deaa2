from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..confidence import calculate_confidence
from ..data.coingecko_client import CoinGeckoPriceProvider
from ..data.price_provider import PriceProvider, SyntheticPriceProvider, clamp_days
from ..risk import calculate_risk
from ..sentiment import GeminiScorer, SentimentAnalyzer, SentimentSignal, templated_summary
from ..trend import analyze_trend
from ..util.jsonlog import log_json, utc_iso
from .types import PredictionConfig, PredictionReport


@dataclass
class PredictionEngine:
    """Runs one full analysis: prices -> sentiment -> trend/risk/confidence -> narrative.

    Key principle:
    - The numeric scorers are pure and never depend on a collaborator
    - Sentiment and narrative degrade locally when Gemini is unreachable
    - Price fetch errors belong to the caller and are not retried here
    """

    logger: logging.Logger
    prices: PriceProvider
    config: PredictionConfig = field(default_factory=PredictionConfig)

    sentiment: Optional[SentimentAnalyzer] = None
    narrator: Optional[GeminiScorer] = None

    def __post_init__(self) -> None:
        if self.narrator is None:
            self.narrator = GeminiScorer(model_name=self.config.gemini_model, enabled=self.config.use_gemini)
        if self.sentiment is None:
            self.sentiment = SentimentAnalyzer(logger=self.logger, scorer=self.narrator)

    @classmethod
    def from_config(cls, config: PredictionConfig, logger: logging.Logger) -> "PredictionEngine":
        source = config.price_source.strip().lower()
        if source == "coingecko":
            prices: PriceProvider = CoinGeckoPriceProvider(timeout_seconds=config.http_timeout_seconds)
        elif source == "synthetic":
            prices = SyntheticPriceProvider(seed=config.seed)
        else:
            raise ValueError(f"Unknown price source: {config.price_source!r}")
        return cls(logger=logger, prices=prices, config=config)

    def analyze(
        self,
        symbol: str,
        days: Optional[int] = None,
        headlines: Optional[Iterable[str]] = None,
        sentiment: Optional[SentimentSignal] = None,
        now: Optional[datetime] = None,
    ) -> PredictionReport:
        now = now or datetime.now(timezone.utc)
        symbol = symbol.strip().upper()
        days = clamp_days(days if days is not None else self.config.default_days)

        prices = [float(p) for p in self.prices.fetch_prices(symbol, days)]
        if not prices:
            raise ValueError(f"No price history available for {symbol}")

        if sentiment is None:
            assert self.sentiment is not None
            sentiment = self.sentiment.analyze(symbol, headlines, now=now)

        trend = analyze_trend(prices)
        risk = calculate_risk(prices, sentiment.score)
        confidence = calculate_confidence(prices, sentiment.score, trend.direction, risk.score)

        try:
            assert self.narrator is not None
            narrative = self.narrator.generate_summary(symbol, trend, sentiment, risk, confidence)
        except Exception as e:
            self.logger.warning(f"[PredictionEngine] narrative failed: {e}")
            narrative = templated_summary(symbol, trend, sentiment, confidence)

        payload = {
            "module": "PredictionEngine",
            "timestamp": utc_iso(now),
            "symbol": symbol,
            "direction": trend.direction.value,
            "metrics": {
                "days": len(prices),
                "last_price": prices[-1],
                "bullish_votes": trend.bullish_votes,
                "bearish_votes": trend.bearish_votes,
                "bullish_pct": trend.bullish_pct,
                "rsi": trend.indicators.rsi,
                "target_7d": trend.price_range.target_7d,
                "sentiment_score": round(float(sentiment.score), 4),
                "risk_score": risk.score,
                "risk_level": risk.level.value,
                "confidence_score": confidence.score,
                "confidence_grade": confidence.grade.value,
            },
        }
        log_json(self.logger, payload, level=logging.INFO)

        return PredictionReport(
            symbol=symbol,
            prices=tuple(prices),
            sentiment=sentiment,
            trend=trend,
            risk=risk,
            confidence=confidence,
            narrative=narrative,
            generated_at=now,
        )
