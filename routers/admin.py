from __future__ import annotations

from fastapi import APIRouter, Depends

from db import SessionLocal
from deps.auth import require_admin
from game_config import reload_config
from sessions import clear_sessions

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.post("/reload")
def reload_game_config():
    config = reload_config()
    return {"ok": True, "games": len(config.ranges), "threshold": config.reading_match_threshold}


@router.post("/sessions/clear")
def clear_history():
    with SessionLocal() as db:
        n = clear_sessions(db)
    return {"ok": True, "deleted": n}
