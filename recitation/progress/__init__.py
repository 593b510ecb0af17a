"""Practice progress tracking."""
from .score_book import ScoreBook

__all__ = ["ScoreBook"]
