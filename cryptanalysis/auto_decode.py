"""
CAESAR TOOLKIT - Automatic Caesar decoding.
Weighted combination of the six category rankings into one shift ranking.
"""

from collections import defaultdict
from typing import Any, Dict, List, Mapping

from loguru import logger

from cryptanalysis.frequency import CategoryResult, ShiftScore, analyze_language, rank_scores
from cryptanalysis.transforms import decode

CATEGORY_WEIGHTS: Mapping[str, float] = {
    "singleLetters": 0.25,
    "firstLetters": 0.15,
    "lastLetters": 0.15,
    "monograms": 0.20,
    "digrams": 0.15,
    "trigrams": 0.10,
}

NO_SOLUTION_MESSAGE = "No valid shifts found"


def combine_scores(categories: Mapping[str, CategoryResult]) -> List[ShiftScore]:
    """Weighted sum per shift. Shifts never scored by any category are left out."""
    totals: Dict[int, float] = defaultdict(float)
    for category, results in categories.items():
        weight = CATEGORY_WEIGHTS.get(category, 0.0)
        for shift, score in results:
            totals[shift] += score * weight
    return [ShiftScore(s, round(v, 4)) for s, v in rank_scores(totals)]


def auto_decode(text: str, language_id: str = "english") -> Dict[str, Any]:
    """Guess the shift of a Caesar ciphertext for one language and decode it.

    Raises UnsupportedLanguageError for an unknown language id. Returns
    success=False (not an exception) when no shift received any evidence.
    """
    analysis = analyze_language(text, language_id)
    ranked = combine_scores(analysis["categories"])

    if not ranked:
        logger.debug(f"[{analysis['language']}] no ranked shifts")
        return {
            "language": analysis["language"],
            "success": False,
            "message": NO_SOLUTION_MESSAGE,
            "original": text,
        }

    best = ranked[0]
    return {
        "language": analysis["language"],
        "success": True,
        "original": text,
        "decoded": decode(text, best.shift),
        "shift": best.shift,
        "confidence": best.score,
        "allShifts": [{"shift": s.shift, "score": s.score} for s in ranked],
        "possibleShiftsCount": analysis["possibleShiftsCount"],
    }
