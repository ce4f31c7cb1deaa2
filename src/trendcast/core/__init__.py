"""Prediction pipeline wiring for trendcast."""

from .engine import PredictionEngine
from .types import PredictionConfig, PredictionReport

__all__ = ["PredictionEngine", "PredictionConfig", "PredictionReport"]
