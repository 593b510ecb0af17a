"""Tests for normalization, edit distance and pronunciation scoring."""
import pytest

from recitation.alignment import levenshtein_distance, normalize_for_comparison, split_words, strip_diacritics
from recitation.models import PronunciationResult
from recitation.scorer import score_pronunciation
from recitation.scorer.pronunciation_scorer import positional_mismatches, similarity_score

SAMPLES = [
    "",
    "   ",
    "dharma kshetra",
    "Śrī Kṛṣṇa uvāca",
    "dharma-kṣetre kuru-kṣetre samavetā yuyutsavaḥ |",
    "  Mixed\tCASE \n text!!  ",
    "İstanbul",
    "Å ǅ Ω",
    "धर्मक्षेत्रे कुरुक्षेत्रे",
    "under_score and 123 numbers",
]


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------
def test_normalize_strips_diacritics_case_and_punctuation():
    assert normalize_for_comparison("Śrī Kṛṣṇa uvāca") == "sri krsna uvaca"
    assert normalize_for_comparison("  Dharma-Kṣetre,   Kuru  ") == "dharmaksetre kuru"
    assert normalize_for_comparison("Hello,\n\tWORLD!") == "hello world"


def test_normalize_empty_and_blank():
    assert normalize_for_comparison("") == ""
    assert normalize_for_comparison(" \t\n ") == ""
    assert normalize_for_comparison("|| ,. !") == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text):
    once = normalize_for_comparison(text)
    assert normalize_for_comparison(once) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_output_has_single_spaces_and_no_edges(text):
    out = normalize_for_comparison(text)
    assert "  " not in out
    assert out == out.strip()


def test_normalize_keeps_non_ascii_letters():
    assert normalize_for_comparison("Łódź") == "łodz"
    # vowel signs and virama are combining marks, consonants stay
    assert normalize_for_comparison("धर्म") == "धरम"


def test_strip_diacritics_keeps_base_letters():
    assert strip_diacritics("āīūṛṝḷṅñṭḍṇśṣḥṃ") == "aiurrlnntdnsshm"


def test_split_words():
    assert split_words("dharma kshetra") == ["dharma", "kshetra"]
    assert split_words("") == [""]


# ---------------------------------------------------------------------------
# Edit distance
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("a,b,expected", [
    ("", "", 0),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("dharma kshetra", "karma kshetra", 2),
    ("sri krsna uvaca", "sri krishna uvacha", 3),
    ("abc", "", 3),
])
def test_levenshtein_known_values(a, b, expected):
    assert levenshtein_distance(a, b) == expected


@pytest.mark.parametrize("a", SAMPLES)
def test_levenshtein_identity_and_empty(a):
    assert levenshtein_distance(a, a) == 0
    assert levenshtein_distance("", a) == len(a)
    assert levenshtein_distance(a, "") == len(a)


@pytest.mark.parametrize("a,b", [
    ("dharma", "karma"),
    ("yoga", "yogah"),
    ("", "xyz"),
    ("Kṛṣṇa", "krishna"),
])
def test_levenshtein_is_symmetric(a, b):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)


# ---------------------------------------------------------------------------
# Scorer
# ---------------------------------------------------------------------------
def test_exact_match_scores_100():
    result = score_pronunciation("dharma kshetra", "dharma kshetra")
    assert result.score == 100
    assert result.mismatches == ()


def test_single_word_substitution():
    result = score_pronunciation("dharma kshetra", "karma kshetra")
    assert result.expected == "dharma kshetra"
    assert result.actual == "karma kshetra"
    assert result.mismatches == ("dharma",)
    assert 0 < result.score < 100
    assert result.score == 86


def test_diacritics_do_not_count_against_the_speaker():
    result = score_pronunciation("Śrī Kṛṣṇa uvāca", "sri krishna uvacha")
    assert result.expected == "sri krsna uvaca"
    assert result.actual == "sri krishna uvacha"
    assert result.score == 83
    assert result.mismatches == ("krsna", "uvaca")


def test_empty_expected_against_speech_scores_zero():
    result = score_pronunciation("", "dharma")
    assert result.score == 0
    assert result.mismatches == ()


def test_both_empty_is_a_perfect_match():
    result = score_pronunciation("", "")
    assert result.score == 100
    assert result.expected == ""
    assert result.actual == ""
    assert result.mismatches == ()


def test_missing_trailing_word_is_reported():
    result = score_pronunciation("a b c", "a b")
    assert result.mismatches == ("c",)
    assert result.score == 60


def test_dropped_word_cascades_positionally():
    result = score_pronunciation("one two three four", "one three four")
    assert result.mismatches == ("two", "three", "four")


def test_extra_spoken_words_are_not_mismatches():
    result = score_pronunciation("a b", "a b c d")
    assert result.mismatches == ()


def test_silence_flags_every_expected_word():
    result = score_pronunciation("yoga karmasu kausalam", "")
    assert result.score == 0
    assert result.mismatches == ("yoga", "karmasu", "kausalam")


def test_score_rounds_half_up():
    # distance 3 over length 8 -> 62.5
    assert similarity_score("abcdefgh", "abcdexyz") == 63


@pytest.mark.parametrize("expected", SAMPLES)
@pytest.mark.parametrize("actual", ["", "dharma", "completely different words here", "Śrī"])
def test_score_is_bounded_and_mismatches_come_from_expected(expected, actual):
    result = score_pronunciation(expected, actual)
    assert 0 <= result.score <= 100
    expected_words = result.expected.split(" ")
    assert all(word in expected_words for word in result.mismatches)


def test_positional_mismatches_ignores_empty_expected_words():
    assert positional_mismatches("", "anything at all") == []


def test_result_is_immutable_and_serializable():
    result = score_pronunciation("dharma kshetra", "karma kshetra")
    assert isinstance(result, PronunciationResult)
    with pytest.raises(AttributeError):
        result.score = 0  # type: ignore[misc]
    assert result.to_dict() == {
        "score": 86,
        "expected": "dharma kshetra",
        "actual": "karma kshetra",
        "mismatches": ["dharma"],
    }
