"""Pronunciation scoring for shloka recitation practice."""
from __future__ import annotations

import math
from typing import List

from ..alignment.edit_distance import levenshtein_distance
from ..alignment.normalizer import normalize_for_comparison
from ..alignment.tokenizer import split_words, word_at
from ..config import EMPTY_MATCH_SCORE
from ..models.pronunciation_result import PronunciationResult


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def similarity_score(expected: str, actual: str) -> int:
    """Percentage similarity of two normalized strings.

    Two empty strings count as a perfect match.
    """
    max_len = max(len(expected), len(actual))
    if max_len == 0:
        return EMPTY_MATCH_SCORE

    distance = levenshtein_distance(expected, actual)
    score = _round_half_up(((max_len - distance) / max_len) * 100)
    return max(0, min(100, score))


def positional_mismatches(expected: str, actual: str) -> List[str]:
    """Expected words that differ from the actual word at the same position.

    Words are compared index by index without realignment, so a dropped or
    extra word shifts every later position.
    """
    expected_words = split_words(expected)
    actual_words = split_words(actual)

    mismatches: List[str] = []
    for i in range(max(len(expected_words), len(actual_words))):
        exp = word_at(expected_words, i)
        act = word_at(actual_words, i)
        if exp != act and exp != "":
            mismatches.append(exp)
    return mismatches


def score_pronunciation(expected_transliteration: str, actual_transcription: str) -> PronunciationResult:
    """Score a transcript against the expected transliteration.

    Example:
        >>> score_pronunciation("dharma kshetra", "karma kshetra").mismatches
        ('dharma',)

    Args:
        expected_transliteration: Reference Roman-script rendering of the shloka
        actual_transcription: Text returned by speech-to-text for the attempt

    Returns:
        PronunciationResult with score, normalized texts and word mismatches
    """
    expected = normalize_for_comparison(expected_transliteration)
    actual = normalize_for_comparison(actual_transcription)

    return PronunciationResult(
        score=similarity_score(expected, actual),
        expected=expected,
        actual=actual,
        mismatches=tuple(positional_mismatches(expected, actual)),
    )
