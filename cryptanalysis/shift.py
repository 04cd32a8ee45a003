"""
CAESAR TOOLKIT - Alphabet shift primitive.
Shifts single letters modulo 26, folding accented Latin letters first.
"""

from typing import Optional

ALPHABET_SIZE = 26

ACCENT_MAP = {
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a",
    "è": "e", "é": "e", "ê": "e", "ë": "e",
    "ì": "i", "í": "i", "î": "i", "ï": "i",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "o",
    "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "ý": "y", "ÿ": "y",
    "ñ": "n", "ç": "c",
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A",
    "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I",
    "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O", "Ö": "O",
    "Ù": "U", "Ú": "U", "Û": "U", "Ü": "U",
    "Ý": "Y", "Ÿ": "Y",
    "Ñ": "N", "Ç": "C",
}


def is_ascii_letter(c: str) -> bool:
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def normalize_shift(shift: int) -> int:
    """Bring any integer shift into [0, 25]."""
    return ((shift % ALPHABET_SIZE) + ALPHABET_SIZE) % ALPHABET_SIZE


def letter_index(c: str) -> int:
    return ord(c.lower()) - ord("a")


def calculate_shift(source: str, target: str) -> Optional[int]:
    """Shift that turns plaintext letter target into ciphertext letter source.

    Returns None when either symbol is not a plain a-z letter (e.g. the
    accented keys of some language tables), so such pairings give no evidence.
    """
    if not (is_ascii_letter(source) and is_ascii_letter(target)):
        return None
    return (letter_index(source) - letter_index(target) + ALPHABET_SIZE) % ALPHABET_SIZE


def shift_char(char: str, shift: int) -> str:
    """Shift one character; non-letters are returned unchanged, case is kept."""
    base = ACCENT_MAP.get(char, char)
    if not is_ascii_letter(base):
        return char
    shifted = chr((letter_index(base) + normalize_shift(shift)) % ALPHABET_SIZE + ord("a"))
    return shifted.upper() if base.isupper() else shifted
