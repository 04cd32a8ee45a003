"""
Tests for the category scorers.
"""

import pytest

from cryptanalysis.errors import UnsupportedLanguageError
from cryptanalysis.frequency import (
    CATEGORY_SCORERS,
    ShiftScore,
    analyze_all_languages,
    analyze_digrams,
    analyze_first_letters,
    analyze_language,
    analyze_monograms,
    analyze_single_letters,
    analyze_trigrams,
    rank_scores,
)
from cryptanalysis.languages import ENGLISH, GERMAN
from cryptanalysis.monograms import ALL_SHIFTS
from cryptanalysis.transforms import encode


def test_rank_scores_descending_lower_shift_wins_ties():
    assert rank_scores({3: 5.0, 1: 5.0, 7: 9.0}) == [(7, 9.0), (1, 5.0), (3, 5.0)]
    assert rank_scores({}) == []


def test_single_letters_rank_weighting():
    result = analyze_single_letters("eee ttt", ENGLISH, ALL_SHIFTS)
    # e->e and t->t both at shift 0: 3*5 + 3*4
    assert result[0] == ShiftScore(0, 27)
    # shifts 11 and 15 tie at 15, lower shift first
    assert result[1:3] == [ShiftScore(11, 15), ShiftScore(15, 15)]


def test_scorers_respect_possible_shifts():
    result = analyze_single_letters("eee ttt", ENGLISH, {15, 4})
    assert [s.shift for s in result] == [15, 4]
    for scorer in CATEGORY_SCORERS.values():
        assert scorer("the quick brown fox jumps", ENGLISH, frozenset()) == []


def test_scorers_empty_text():
    for scorer in CATEGORY_SCORERS.values():
        assert scorer("", ENGLISH, ALL_SHIFTS) == []


def test_first_letters():
    result = analyze_first_letters("tea tan top", ENGLISH, ALL_SHIFTS)
    # three words starting with t, English's most frequent first letter
    assert result[0] == ShiftScore(0, 15)


def test_monograms_full_cross_product():
    result = analyze_monograms("i a", ENGLISH, ALL_SHIFTS)
    assert result == [ShiftScore(0, 100.0), ShiftScore(18, 55.0), ShiftScore(8, 45.0)]
    assert analyze_monograms("i a", ENGLISH, {8}) == [ShiftScore(8, 45.0)]


def test_monograms_language_without_vocabulary():
    assert analyze_monograms("i a", GERMAN, ALL_SHIFTS) == []


def test_digrams_match_by_gap():
    result = analyze_digrams("th", ENGLISH, ALL_SHIFTS)
    # gap 14 in the English table: th, es, ma
    assert [s.shift for s in result] == [0, 15, 7]
    assert [s.score for s in result] == pytest.approx([3.56, 1.34, 0.57])


def test_digrams_follow_shift():
    result = analyze_digrams(encode("th", 3), ENGLISH, ALL_SHIFTS)
    assert result[0].shift == 3
    assert result[0].score == pytest.approx(3.56)


def test_trigrams_match_by_gap_pair():
    result = analyze_trigrams("the", ENGLISH, ALL_SHIFTS)
    assert result[0].shift == 0
    assert result[0].score == pytest.approx(1.81)
    shifted = analyze_trigrams(encode("the", 20), ENGLISH, ALL_SHIFTS)
    assert shifted[0].shift == 20


def test_analyze_language_shape(english_sample):
    analysis = analyze_language(encode(english_sample, 5), "english")
    assert analysis["language"] == "English"
    assert analysis["method"] == "intersection"
    assert analysis["possibleShifts"] == [5]
    assert analysis["possibleShiftsCount"] == 1
    assert list(analysis["categories"]) == list(CATEGORY_SCORERS)
    for results in analysis["categories"].values():
        assert all(s.shift == 5 for s in results)


def test_analyze_language_unsupported():
    with pytest.raises(UnsupportedLanguageError):
        analyze_language("abc", "klingon")


def test_analyze_all_languages(pangram):
    results = analyze_all_languages(pangram)
    assert set(results) == {"english", "french", "spanish", "german"}
    assert results["german"]["method"] == "no_monograms_in_language"
    assert results["english"]["possibleShiftsCount"] == 26
