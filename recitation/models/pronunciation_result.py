"""Data model for a scored recitation attempt."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class PronunciationResult:
    """Outcome of comparing a transcript against the expected transliteration.

    Attributes:
        score: Similarity percentage, 0-100
        expected: Normalized reference text
        actual: Normalized transcript
        mismatches: Expected words that differ from the word at the same position in ``actual``
    """
    score: int
    expected: str
    actual: str
    mismatches: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "expected": self.expected,
            "actual": self.actual,
            "mismatches": list(self.mismatches),
        }
