# services/quiz/schemas/marking.py
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from schemas.questions import Question

UserAnswer = Union[int, float, str, None]

# ---------- Check single ----------


class CheckRequest(BaseModel):
    question: Question
    answer: UserAnswer = None


class CheckResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str = ""
    # display form of the right answer, e.g. "12", ">" or "3/5"
    expected: Optional[str] = None
    hint: Optional[str] = None


# ---------- Similarity ----------


class SimilarityRequest(BaseModel):
    a: str
    b: str


class SimilarityResponse(BaseModel):
    ratio: float
    distance: int


class MatchRequest(BaseModel):
    text: str
    candidates: List[str] = Field(min_length=1)
    threshold: Optional[float] = Field(default=None, ge=0, le=1)


class MatchResponse(BaseModel):
    correct: bool
    best_match: Optional[str] = None
    score: float
    hint: Optional[str] = None
