"""
CAESAR TOOLKIT - Monogram analyzer.
Narrows the 26 candidate shifts using one-letter words before scoring.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List

from cryptanalysis.features import extract_monograms
from cryptanalysis.languages import LanguageProfile
from cryptanalysis.shift import ALPHABET_SIZE, calculate_shift

ALL_SHIFTS: FrozenSet[int] = frozenset(range(ALPHABET_SIZE))


@dataclass(frozen=True)
class PossibleShifts:
    possible_shifts: FrozenSet[int]
    method: str
    details: Dict[str, Any] = field(default_factory=dict)

    def as_list(self) -> List[int]:
        return sorted(self.possible_shifts)


def _shifts_for(text_monogram: str, valid_monograms: Iterable[str]) -> FrozenSet[int]:
    shifts = (calculate_shift(text_monogram, v) for v in valid_monograms)
    return frozenset(s for s in shifts if s is not None)


def find_possible_shifts(text: str, profile: LanguageProfile) -> PossibleShifts:
    """Shifts consistent with the one-letter words of text under this language.

    Falls back to all 26 shifts when the language has no monograms, the text
    has none, or the text has more distinct monograms than the language.
    """
    text_monograms = extract_monograms(text)
    valid_monograms = list(profile.monograms)

    if not valid_monograms:
        return PossibleShifts(ALL_SHIFTS, "no_monograms_in_language", {
            "textMonogramsFound": len(text_monograms),
            "languageMonograms": 0,
        })

    if not text_monograms:
        return PossibleShifts(ALL_SHIFTS, "no_monograms_in_text", {
            "textMonogramsFound": 0,
            "languageMonograms": len(valid_monograms),
        })

    if len(text_monograms) == 1:
        text_monogram = text_monograms[0]
        return PossibleShifts(_shifts_for(text_monogram, valid_monograms), "single_monogram", {
            "textMonogramsFound": 1,
            "textMonogram": text_monogram,
            "possibleMappings": len(valid_monograms),
        })

    unique_monograms = list(dict.fromkeys(text_monograms))

    if len(unique_monograms) == 1:
        text_monogram = unique_monograms[0]
        return PossibleShifts(_shifts_for(text_monogram, valid_monograms), "single_unique_monogram", {
            "textMonogramsFound": len(text_monograms),
            "uniqueMonogram": text_monogram,
            "possibleMappings": len(valid_monograms),
        })

    if len(unique_monograms) > len(valid_monograms):
        return PossibleShifts(ALL_SHIFTS, "too_many_monograms", {
            "textMonogramsFound": len(text_monograms),
            "uniqueMonograms": len(unique_monograms),
            "languageMonograms": len(valid_monograms),
            "note": "More unique monograms in text than in language reference - cannot determine shift",
        })

    possible = _shifts_for(unique_monograms[0], valid_monograms)
    for text_monogram in unique_monograms[1:]:
        possible &= _shifts_for(text_monogram, valid_monograms)

    return PossibleShifts(possible, "intersection", {
        "textMonogramsFound": len(text_monograms),
        "uniqueMonograms": len(unique_monograms),
        "languageMonograms": len(valid_monograms),
        "shiftsFound": len(possible),
    })
