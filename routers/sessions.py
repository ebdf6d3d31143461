# quiz/routers/sessions.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from db import SessionLocal
from deps.auth import require_client
from models import GameSession
from schemas.sessions import SessionOut, SessionStats, SessionSubmitRequest
from sessions import (
    build_summary,
    grade_answers,
    overall_statistics,
    recent_sessions,
    save_session,
)

logger = logging.getLogger("arabic-quiz.sessions")

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("")
def submit_session(req: SessionSubmitRequest):
    records, score = grade_answers(req.game_type, req.settings, req.questions, req.answers)
    summary = build_summary(req.game_type, req.settings, len(req.questions), records, score)

    session_id: Optional[int] = None
    try:
        with SessionLocal() as db:
            session_id = save_session(db, summary).id
    except Exception:
        # history is best effort; the graded summary still goes back to the player
        logger.exception("could not store game session")
        session_id = None

    return {"ok": True, "session_id": session_id, "summary": summary.model_dump(mode="json")}


@router.get("/recent-list", dependencies=[Depends(require_client)])
def sessions_recent(limit: int = 20, game_type: Optional[str] = None):
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        items = recent_sessions(db, limit, game_type)

    # Reuse schema; exclude the potentially large answer log
    rows = [SessionOut.model_validate(s).model_dump(exclude={"answers"}) for s in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/stats", response_model=SessionStats)
def sessions_stats():
    with SessionLocal() as db:
        return overall_statistics(db)


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: int):
    # Public endpoint: no client key required
    with SessionLocal() as db:
        s = db.get(GameSession, session_id)
        if not s:
            raise HTTPException(status_code=404, detail="Session not found")
        return SessionOut.model_validate(s)
