"""Word splitting for normalized text."""
from __future__ import annotations

from typing import List


def split_words(normalized: str) -> List[str]:
    """Split normalized text on single spaces.

    Normalized text never holds consecutive spaces, so this is a plain split.
    An empty string yields ``[""]``, which callers treat as "no word here".

    Example: "dharma kshetra" -> ["dharma", "kshetra"]
    """
    return normalized.split(" ")


def word_at(words: List[str], index: int) -> str:
    """Word at ``index`` or an empty string past the end."""
    return words[index] if index < len(words) else ""
