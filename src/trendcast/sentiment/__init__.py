"""Headline sentiment for trendcast."""

from .gemini_scorer import GeminiScorer, get_gemini_scorer, keyword_score, templated_summary
from .sentiment_analyzer import SentimentAnalyzer
from .types import SentimentLabel, SentimentSignal, sentiment_score

__all__ = [
    "SentimentAnalyzer",
    "SentimentLabel",
    "SentimentSignal",
    "sentiment_score",
    "GeminiScorer",
    "get_gemini_scorer",
    "keyword_score",
    "templated_summary",
]
