"""Pronunciation scoring and feedback for recitation practice."""
from .feedback import PracticeReport, build_practice_report
from .pronunciation_scorer import score_pronunciation

__all__ = ["score_pronunciation", "build_practice_report", "PracticeReport"]
