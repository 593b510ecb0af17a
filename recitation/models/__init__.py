"""Value types shared across the recitation package."""
from .pronunciation_result import PronunciationResult

__all__ = ["PronunciationResult"]
