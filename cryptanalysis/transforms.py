"""
CAESAR TOOLKIT - Encode, decode, ROT13 and brute force over whole strings.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, List

from cryptanalysis.errors import InvalidArgumentError
from cryptanalysis.shift import ALPHABET_SIZE, normalize_shift, shift_char

ROT13_SHIFT = 13

_LETTER_RE = re.compile(r"[a-zA-Z]")
_WORD_RE = re.compile(r"[a-zA-Z]+")


def _check_args(text: Any, shift: Any) -> None:
    if not isinstance(text, str):
        raise InvalidArgumentError("Text must be a string")
    if isinstance(shift, bool) or not isinstance(shift, int):
        raise InvalidArgumentError("Shift must be a number")


def encode(text: str, shift: int) -> str:
    """Apply a Caesar shift to every letter; everything else is kept in place."""
    _check_args(text, shift)
    normalized = normalize_shift(shift)
    return "".join(shift_char(c, normalized) for c in text)


def decode(text: str, shift: int) -> str:
    _check_args(text, shift)
    return encode(text, -shift)


def rot13(text: str) -> Dict[str, str]:
    return {"original": text, "encoded": encode(text, ROT13_SHIFT)}


def brute_force(text: str) -> List[Dict[str, Any]]:
    """Decode with every shift 0..25, in ascending order."""
    return [{"shift": s, "text": decode(text, s)} for s in range(ALPHABET_SIZE)]


def encode_text(text: str, shift: int) -> Dict[str, Any]:
    """Strict encoder: non-empty text, shift in [1, 25]; returns text statistics too."""
    if not text or not isinstance(text, str):
        raise InvalidArgumentError("Text must be a non-empty string")
    if isinstance(shift, bool) or not isinstance(shift, int) or not 1 <= shift <= 25:
        raise InvalidArgumentError("Shift must be a number between 1 and 25")
    letter_count = len(_LETTER_RE.findall(text))
    return {
        "original": text,
        "encoded": encode(text, shift),
        "shift": shift,
        "stats": {
            "letterCount": letter_count,
            "wordCount": len(_WORD_RE.findall(text)),
            "preservedChars": len(text) - letter_count,
        },
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
