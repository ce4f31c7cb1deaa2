from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


@dataclass(frozen=True)
class ConfidenceResult:
    """Result from calculate_confidence()."""

    score: int
    grade: Grade
    explanation: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "score": int(self.score),
            "grade": self.grade.value,
            "explanation": self.explanation,
        }
