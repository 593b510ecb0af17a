"""Pronunciation scoring for shloka recitation practice."""
from .models import PronunciationResult
from .scorer import score_pronunciation

__version__ = "0.1.0"

__all__ = ["PronunciationResult", "score_pronunciation"]
