"""Practice feedback built from a pronunciation result."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from jiwer import wer

from ..config import BAND_EXCELLENT, BAND_GOOD, BAND_KEEP_PRACTICING, TIER_HIGH, TIER_MEDIUM
from ..models.pronunciation_result import PronunciationResult

FEEDBACK_MESSAGES = {
    "excellent": "Excellent!",
    "good": "Good effort!",
    "keep_practicing": "Keep practicing!",
    "try_again": "Try again - listen first, then repeat.",
}


@dataclass(frozen=True)
class PracticeReport:
    result: PronunciationResult
    band: str
    message: str
    tier: str
    word_error_rate: float

    def to_dict(self) -> Dict[str, Any]:
        out = self.result.to_dict()
        out.update(
            {
                "band": self.band,
                "message": self.message,
                "tier": self.tier,
                "word_error_rate": self.word_error_rate,
            }
        )
        return out


def band_from_score(score: int) -> str:
    if score >= BAND_EXCELLENT:
        return "excellent"
    if score >= BAND_GOOD:
        return "good"
    if score >= BAND_KEEP_PRACTICING:
        return "keep_practicing"
    return "try_again"


def tier_from_score(score: int) -> str:
    if score >= TIER_HIGH:
        return "high"
    if score >= TIER_MEDIUM:
        return "medium"
    return "low"


def word_error_rate(expected: str, actual: str) -> float:
    """Word error rate of ``actual`` against ``expected``, clamped to [0, 1]."""
    if not expected:
        return 1.0 if actual else 0.0
    if not actual:
        return 1.0
    v = wer(expected, actual)
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return float(v)


def build_practice_report(result: PronunciationResult) -> PracticeReport:
    """Attach feedback band, colour tier and word error rate to a result."""
    band = band_from_score(result.score)
    return PracticeReport(
        result=result,
        band=band,
        message=FEEDBACK_MESSAGES[band],
        tier=tier_from_score(result.score),
        word_error_rate=word_error_rate(result.expected, result.actual),
    )
