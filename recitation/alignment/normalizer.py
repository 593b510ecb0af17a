"""Text normalization for comparing transliterations with transcripts."""
from __future__ import annotations

import re
import unicodedata

_NON_WORD_RE = re.compile(r"[^\w\s]+")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """Decompose text and drop every combining mark.

    Example: "Kṛṣṇa" -> "Krsna"
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


def normalize_for_comparison(text: str) -> str:
    """Normalize text before scoring.

    Lowercases, strips diacritics, removes punctuation (anything that is not a
    word character or whitespace) and collapses whitespace to single spaces.
    Applying it twice gives the same result as applying it once.

    Word characters are Unicode ``\\w``, not ASCII only as in the mobile app,
    so letters without a decomposition survive ("łódź" -> "łodz" where the app
    gives "odz") and Devanagari keeps its consonants while its vowel signs and
    virama, being combining marks, are dropped ("धर्म" -> "धरम" where the app
    gives "").

    Args:
        text: Transliteration or transcript, any Unicode string

    Returns:
        Normalized string, empty when the input holds no word characters
    """
    text = strip_diacritics(text.lower())
    text = _NON_WORD_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
