"""Gemini-backed headline sentiment and analyst summary for trendcast.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

import google.generativeai as genai

from .types import SentimentLabel, SentimentSignal

if TYPE_CHECKING:
    from ..confidence.types import ConfidenceResult
    from ..risk.types import RiskResult
    from ..trend.types import TrendResult

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

POSITIVE_KEYWORDS = [
    "surge", "rally", "profit", "growth", "beat", "acquisition",
    "all-time high", "record", "upgrade", "bullish", "expansion", "recovery",
]
NEGATIVE_KEYWORDS = [
    "crash", "decline", "loss", "bearish", "downgrade", "recession",
    "sell-off", "default", "crisis", "miss", "correction", "layoff", "sanctions",
]
KEYWORD_STEP = 0.12
KEYWORD_BREAKDOWN = "Keyword-based analysis (Gemini unavailable)."

DISCLAIMER = "This is AI-generated probabilistic guidance, not financial advice."


def keyword_score(headlines: List[str]) -> float:
    """Count each keyword at most once across all headlines."""
    text = " ".join(headlines).lower()
    score = 0.0
    for kw in POSITIVE_KEYWORDS:
        if kw in text:
            score += KEYWORD_STEP
    for kw in NEGATIVE_KEYWORDS:
        if kw in text:
            score -= KEYWORD_STEP
    return max(-1.0, min(1.0, score))


def templated_summary(
    symbol: str,
    trend: "TrendResult",
    sentiment: SentimentSignal,
    confidence: "ConfidenceResult",
) -> str:
    return (
        f"{trend.direction.value} signal detected for {symbol} with {confidence.score}% confidence. "
        f"RSI at {trend.indicators.rsi} and {sentiment.label.value.lower()} sentiment suggest "
        f"a 7-day target of ${trend.price_range.target_7d}. {DISCLAIMER}"
    )


def _strip_fences(raw_text: str) -> str:
    raw_text = raw_text.strip()
    if raw_text.startswith("```"):
        raw_text = raw_text.split("```")[1]
        if raw_text.startswith("json"):
            raw_text = raw_text[4:]
    return raw_text.strip()


@dataclass
class GeminiScorer:
    """Gemini-powered sentiment scorer and summary writer.

    Without an API key (or with `enabled=False`) every call takes the local
    fallback: keyword scoring for sentiment, a fixed template for summaries.
    """

    api_key: Optional[str] = None
    model_name: str = field(default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL))
    enabled: bool = True
    _client: Optional[Any] = field(default=None, init=False, repr=False)
    _initialized: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.enabled:
            return
        if self.api_key is None:
            self.api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")

        if self.api_key:
            try:
                genai.configure(api_key=self.api_key)
                self._client = genai.GenerativeModel(self.model_name)
                self._initialized = True
                logger.info(f"[GeminiScorer] Initialized with model: {self.model_name}")
            except Exception as e:
                logger.warning(f"[GeminiScorer] Failed to initialize: {e}. Using local fallback.")

    def is_available(self) -> bool:
        return self._initialized and self._client is not None

    def analyze_headlines(self, headlines: List[str], symbol: str) -> SentimentSignal:
        """Score headlines in [-1, 1] with a label and a one-line breakdown."""
        if not headlines:
            return SentimentSignal.neutral("No headlines provided.")
        if not self.is_available():
            return self.fallback_score(headlines)

        numbered = "\n".join(f"{i + 1}. {h}" for i, h in enumerate(headlines))
        prompt = f"""You are a financial sentiment analyst. Analyse the following recent news headlines for {symbol}.

Headlines:
{numbered}

Respond in strict JSON with:
{{
  "score": <number between -1.0 (very bearish) and 1.0 (very bullish)>,
  "label": "<Very Bearish | Bearish | Neutral | Bullish | Very Bullish>",
  "breakdown": "<1-2 sentence summary of the dominant sentiment trend>"
}}
Return ONLY the JSON. No extra text."""

        try:
            response = self._client.generate_content(
                prompt,
                generation_config={
                    "temperature": 0.1,
                    "max_output_tokens": 300,
                },
            )
            result = json.loads(_strip_fences(response.text))
            if not isinstance(result, dict):
                raise ValueError("Gemini sentiment response is not a JSON object")

            try:
                score = float(result.get("score", 0.0))
            except (TypeError, ValueError):
                score = 0.0
            score = max(-1.0, min(1.0, score))

            return SentimentSignal(
                score=score,
                label=SentimentLabel.parse(result.get("label"), score),
                breakdown=str(result.get("breakdown") or ""),
            )
        except json.JSONDecodeError as e:
            logger.warning(f"[GeminiScorer] JSON parse error: {e}")
            return self.fallback_score(headlines)
        except Exception as e:
            logger.warning(f"[GeminiScorer] API error: {e}")
            return self.fallback_score(headlines)

    def generate_summary(
        self,
        symbol: str,
        trend: "TrendResult",
        sentiment: SentimentSignal,
        risk: "RiskResult",
        confidence: "ConfidenceResult",
    ) -> str:
        """Two or three sentence analyst outlook built from the numeric report."""
        if not self.is_available():
            return templated_summary(symbol, trend, sentiment, confidence)

        pr = trend.price_range
        prompt = f"""You are a professional quant analyst generating a short-term stock outlook. Be concise and probabilistic (not financial advice).

Symbol: {symbol}
Direction Signal: {trend.direction.value} ({trend.bullish_pct}% bullish indicators)
RSI: {trend.indicators.rsi} | MACD: {"Positive" if trend.indicators.macd > 0 else "Negative"}
Sentiment: {sentiment.label.value} ({sentiment.score:.2f})
7-Day Price Target: ${pr.target_7d} ({"+" if pr.change_percent > 0 else ""}{pr.change_percent}%)
Risk Level: {risk.level.value} ({risk.score}/100)
Confidence: {confidence.score}% (Grade {confidence.grade.value})

Write a 2-3 sentence probabilistic analyst summary. Reference specific indicators. End with a disclaimer that this is AI-generated probabilistic guidance, not financial advice. Keep it under 80 words."""

        try:
            response = self._client.generate_content(
                prompt,
                generation_config={
                    "temperature": 0.3,
                    "max_output_tokens": 200,
                },
            )
            text = response.text.strip()
            if not text:
                raise ValueError("empty summary")
            return text
        except Exception as e:
            logger.warning(f"[GeminiScorer] Summary generation failed: {e}")
            return templated_summary(symbol, trend, sentiment, confidence)

    def fallback_score(self, headlines: List[str]) -> SentimentSignal:
        score = keyword_score(headlines)
        return SentimentSignal(
            score=score,
            label=SentimentLabel.from_keyword_score(score),
            breakdown=KEYWORD_BREAKDOWN,
        )


_gemini_scorer: Optional[GeminiScorer] = None


def get_gemini_scorer() -> GeminiScorer:
    """Get or create the process-wide Gemini scorer."""
    global _gemini_scorer
    if _gemini_scorer is None:
        _gemini_scorer = GeminiScorer(enabled=os.getenv("USE_GEMINI", "1") == "1")
    return _gemini_scorer
