from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from errors import InvalidRange
from game_config import get_config
from generators import make_rng
from questions import GAME_NAMES, generate_questions
from schemas.questions import GameInfo, GameType, GenerateRequest, GenerateResponse

router = APIRouter(tags=["questions"])


@router.get("/games", response_model=List[GameInfo])
def list_games():
    config = get_config()
    return [
        {
            "type": g,
            "name": GAME_NAMES[g],
            "timers": config.timers[g.value].model_dump() if g.value in config.timers else {},
        }
        for g in GameType
    ]


@router.post("/questions/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest):
    s = req.settings
    try:
        qs = generate_questions(
            req.game_type,
            s.questions_count,
            s.difficulty,
            s.question_mode,
            s.custom_ranges,
            rng=make_rng(req.seed),
        )
    except InvalidRange as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"ok": True, "questions": qs}
