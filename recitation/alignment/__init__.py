"""Normalization and distance utilities for comparing recitations to reference text."""
from .edit_distance import levenshtein_distance
from .normalizer import normalize_for_comparison, strip_diacritics
from .tokenizer import split_words

__all__ = ["levenshtein_distance", "normalize_for_comparison", "strip_diacritics", "split_words"]
