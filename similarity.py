from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from arabic_words import get_all_valid_forms, normalize_arabic
from game_config import get_config


class BestMatch(NamedTuple):
    match: Optional[str]
    score: float


# Hint bands for near misses, highest first
_HINTS = (
    (0.9, "قريب جداً! تحقق من الإملاء"),
    (0.7, "قريب! راجع الكتابة"),
    (0.5, "حاول مرة أخرى"),
)


def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def similarity_ratio(a: str, b: str) -> float:
    """1 - edit distance / longer length; two empty strings are identical."""
    return Levenshtein.normalized_similarity(a, b)


def _threshold(threshold: Optional[float]) -> float:
    return get_config().reading_match_threshold if threshold is None else threshold


def is_answer_correct(
    text: str, candidates: Sequence[str], threshold: Optional[float] = None
) -> bool:
    limit = _threshold(threshold)
    norm = normalize_arabic(text)
    for cand in candidates:
        norm_cand = normalize_arabic(cand)
        if norm == norm_cand or similarity_ratio(norm, norm_cand) >= limit:
            return True
    return False


def is_number_written_correctly(text: str, num: int, threshold: Optional[float] = None) -> bool:
    return is_answer_correct(text, get_all_valid_forms(num), threshold)


def find_best_match(text: str, candidates: Sequence[str]) -> BestMatch:
    norm = normalize_arabic(text)
    best: Optional[str] = None
    best_score = 0.0
    for cand in candidates:
        score = similarity_ratio(norm, normalize_arabic(cand))
        if score > best_score:
            best, best_score = cand, score
    return BestMatch(best, best_score)


def get_answer_hint(text: str, candidates: Sequence[str]) -> Optional[str]:
    match, score = find_best_match(text, candidates)
    if match is None:
        return None
    for floor, hint in _HINTS:
        if score >= floor:
            return hint
    return None
