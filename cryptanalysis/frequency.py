"""
CAESAR TOOLKIT - Frequency analysis for Caesar shift detection.

Six independent category scorers (single letters, first letters, last letters,
monograms, digrams, trigrams). Each maps observed text features onto a
language profile and returns (shift, score) pairs for shifts allowed by the
monogram narrowing, highest score first.
"""

from collections import Counter, defaultdict
from typing import AbstractSet, Any, Callable, Dict, List, Mapping, NamedTuple, Tuple

from loguru import logger

from cryptanalysis import features
from cryptanalysis.languages import LANGUAGES, LanguageProfile, get_profile, top_symbols
from cryptanalysis.monograms import find_possible_shifts
from cryptanalysis.shift import calculate_shift

TOP_N = 5


class ShiftScore(NamedTuple):
    shift: int
    score: float


CategoryResult = List[ShiftScore]
Scorer = Callable[[str, LanguageProfile, AbstractSet[int]], CategoryResult]


def rank_scores(scores: Mapping[int, float]) -> CategoryResult:
    """Sparse shift->score map to a descending list; lower shift wins ties."""
    return [ShiftScore(s, v) for s, v in sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))]


def _score_letters(
    letters: List[str],
    language_table: Mapping[str, float],
    possible_shifts: AbstractSet[int],
) -> CategoryResult:
    """Top observed letters x top language letters, weighted by language rank."""
    if not letters:
        return []
    top_text = Counter(letters).most_common(TOP_N)
    top_language = top_symbols(language_table, TOP_N)
    scores: Dict[int, float] = defaultdict(float)
    for text_letter, count in top_text:
        for rank, language_letter in enumerate(top_language):
            shift = calculate_shift(text_letter, language_letter)
            if shift is None or shift not in possible_shifts:
                continue
            scores[shift] += count * (TOP_N - rank)
    return rank_scores(scores)


def analyze_single_letters(text: str, profile: LanguageProfile, possible_shifts: AbstractSet[int]) -> CategoryResult:
    return _score_letters(features.extract_letters_excluding_monograms(text), profile.letter_frequency, possible_shifts)


def analyze_first_letters(text: str, profile: LanguageProfile, possible_shifts: AbstractSet[int]) -> CategoryResult:
    return _score_letters(features.extract_first_letters(text), profile.first_letters, possible_shifts)


def analyze_last_letters(text: str, profile: LanguageProfile, possible_shifts: AbstractSet[int]) -> CategoryResult:
    return _score_letters(features.extract_last_letters(text), profile.last_letters, possible_shifts)


def analyze_monograms(text: str, profile: LanguageProfile, possible_shifts: AbstractSet[int]) -> CategoryResult:
    """Every observed one-letter word against every language monogram."""
    monograms = features.extract_monograms(text)
    if not monograms:
        return []
    scores: Dict[int, float] = defaultdict(float)
    for text_monogram, count in Counter(monograms).items():
        for language_monogram, weight in profile.monograms.items():
            shift = calculate_shift(text_monogram, language_monogram)
            if shift is None or shift not in possible_shifts:
                continue
            scores[shift] += count * weight
    return rank_scores(scores)


def _group_language_ngrams(table: Mapping[str, float]) -> Dict[Tuple[int, ...], List[Tuple[str, float]]]:
    grouped: Dict[Tuple[int, ...], List[Tuple[str, float]]] = defaultdict(list)
    for ngram, frequency in table.items():
        key = tuple(features.gap(a, b) for a, b in zip(ngram, ngram[1:]))
        grouped[key].append((ngram, frequency))
    return grouped


def _score_ngrams(
    observed: Mapping[Tuple[int, ...], List[str]],
    language_table: Mapping[str, float],
    possible_shifts: AbstractSet[int],
) -> CategoryResult:
    """Match observed n-grams to language n-grams with the same gap pattern."""
    language_groups = _group_language_ngrams(language_table)
    scores: Dict[int, float] = defaultdict(float)
    for gap_key, text_ngrams in observed.items():
        language_ngrams = language_groups.get(gap_key)
        if not language_ngrams:
            continue
        for text_ngram, count in Counter(text_ngrams).items():
            for language_ngram, frequency in language_ngrams:
                shift = calculate_shift(text_ngram[0], language_ngram[0])
                if shift is None or shift not in possible_shifts:
                    continue
                scores[shift] += count * frequency
    return rank_scores(scores)


def analyze_digrams(text: str, profile: LanguageProfile, possible_shifts: AbstractSet[int]) -> CategoryResult:
    digrams = features.extract_digrams(text)
    if not digrams:
        return []
    by_gap: Dict[Tuple[int, ...], List[str]] = defaultdict(list)
    for d in digrams:
        by_gap[(d.gap,)].append(d.digram)
    return _score_ngrams(by_gap, profile.digrams, possible_shifts)


def analyze_trigrams(text: str, profile: LanguageProfile, possible_shifts: AbstractSet[int]) -> CategoryResult:
    trigrams = features.extract_trigrams(text)
    if not trigrams:
        return []
    by_gaps: Dict[Tuple[int, ...], List[str]] = defaultdict(list)
    for t in trigrams:
        by_gaps[(t.gap1, t.gap2)].append(t.trigram)
    return _score_ngrams(by_gaps, profile.trigrams, possible_shifts)


CATEGORY_SCORERS: Dict[str, Scorer] = {
    "singleLetters": analyze_single_letters,
    "firstLetters": analyze_first_letters,
    "lastLetters": analyze_last_letters,
    "monograms": analyze_monograms,
    "digrams": analyze_digrams,
    "trigrams": analyze_trigrams,
}


def analyze_language(text: str, language_id: str) -> Dict[str, Any]:
    """Narrow the shift space for one language and run every category scorer."""
    profile = get_profile(language_id)
    narrowed = find_possible_shifts(text, profile)
    logger.debug(
        f"[{profile.name}] narrowing={narrowed.method} possible_shifts={len(narrowed.possible_shifts)}"
    )
    return {
        "language": profile.name,
        "possibleShiftsCount": len(narrowed.possible_shifts),
        "possibleShifts": narrowed.as_list(),
        "method": narrowed.method,
        "details": narrowed.details,
        "categories": {
            name: scorer(text, profile, narrowed.possible_shifts)
            for name, scorer in CATEGORY_SCORERS.items()
        },
    }


def analyze_all_languages(text: str) -> Dict[str, Dict[str, Any]]:
    return {language_id: analyze_language(text, language_id) for language_id in LANGUAGES}
