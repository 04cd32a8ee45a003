"""
CAESAR TOOLKIT - Text feature extraction for frequency analysis.
Monograms (one-letter words), words, first/last letters, digrams and trigrams.
Digram and trigram gaps are invariant under any Caesar shift.
"""

import re
import unicodedata
from typing import List, NamedTuple

from cryptanalysis.shift import ALPHABET_SIZE

# Apostrophe or hyphen between two letters joins them: l'ecole -> lecole
_JOINER_RE = re.compile(r"([a-z])['\-]([a-z])")
_TOKEN_SPLIT_RE = re.compile(r"[\s.,;!?¿¡\"()\[\]{}]+")
_WORD_RE = re.compile(r"[a-z]+")
_LETTER_RE = re.compile(r"[a-z]")
_COMBINING_RE = re.compile(r"[\u0300-\u036f]")

MIN_WORD_LENGTH = 3


class Digram(NamedTuple):
    digram: str
    gap: int


class Trigram(NamedTuple):
    trigram: str
    gap1: int
    gap2: int


def gap(a: str, b: str) -> int:
    """Alphabetic distance from a to b, mod 26."""
    return (ord(b) - ord(a) + ALPHABET_SIZE) % ALPHABET_SIZE


def strip_accents(text: str) -> str:
    """Decompose (NFD) and drop combining diacritical marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return _COMBINING_RE.sub("", decomposed)


def extract_monograms(text: str) -> List[str]:
    """One-letter words, in order of appearance."""
    cleaned = _JOINER_RE.sub(r"\1\2", text.lower())
    return [t for t in _TOKEN_SPLIT_RE.split(cleaned) if _LETTER_RE.fullmatch(t)]


def extract_words(text: str) -> List[str]:
    """Runs of a-z letters of length >= 3, accents removed."""
    normalized = strip_accents(text.lower())
    return [w for w in _WORD_RE.findall(normalized) if len(w) >= MIN_WORD_LENGTH]


def extract_letters_excluding_monograms(text: str) -> List[str]:
    letters: List[str] = []
    for word in extract_words(text):
        if len(word) > 1:
            letters.extend(word)
    return letters


def extract_first_letters(text: str) -> List[str]:
    return [w[0] for w in extract_words(text)]


def extract_last_letters(text: str) -> List[str]:
    return [w[-1] for w in extract_words(text)]


def _letter_stream(text: str) -> List[str]:
    return _LETTER_RE.findall(text.lower())


def extract_digrams(text: str) -> List[Digram]:
    """Adjacent letter pairs across word boundaries, tagged with their gap."""
    letters = _letter_stream(text)
    return [
        Digram(a + b, gap(a, b))
        for a, b in zip(letters, letters[1:])
    ]


def extract_trigrams(text: str) -> List[Trigram]:
    """Consecutive letter triples, tagged with both gaps."""
    letters = _letter_stream(text)
    return [
        Trigram(a + b + c, gap(a, b), gap(b, c))
        for a, b, c in zip(letters, letters[1:], letters[2:])
    ]
