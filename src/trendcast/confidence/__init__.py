
from .confidence_scorer import calculate_confidence, grade_for, sentiment_alignment
from .types import ConfidenceResult, Grade

__all__ = [
    "calculate_confidence",
    "grade_for",
    "sentiment_alignment",
    "ConfidenceResult",
    "Grade",
]
