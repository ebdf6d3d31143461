from __future__ import annotations

from fastapi import APIRouter

from marking import mark_answer
from schemas.marking import (
    CheckRequest,
    CheckResponse,
    MatchRequest,
    MatchResponse,
    SimilarityRequest,
    SimilarityResponse,
)
from similarity import (
    find_best_match,
    get_answer_hint,
    is_answer_correct,
    levenshtein_distance,
    similarity_ratio,
)

router = APIRouter(tags=["marking"])


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest):
    return mark_answer(req.question, req.answer)


@router.post("/similarity", response_model=SimilarityResponse)
def similarity(req: SimilarityRequest):
    return {"ratio": similarity_ratio(req.a, req.b), "distance": levenshtein_distance(req.a, req.b)}


@router.post("/match", response_model=MatchResponse)
def match(req: MatchRequest):
    best, score = find_best_match(req.text, req.candidates)
    correct = is_answer_correct(req.text, req.candidates, req.threshold)
    return {
        "correct": correct,
        "best_match": best,
        "score": score,
        "hint": None if correct else get_answer_hint(req.text, req.candidates),
    }
