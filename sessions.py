# Session scoring and history.
# A finished (or abandoned) game is graded once into an immutable SessionSummary,
# then appended to the history table, which is trimmed to the most recent games.

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from db import HISTORY_LIMIT
from game_config import GameConfig, ResultThresholds, get_config
from marking import check_answer
from models import GameSession
from schemas.questions import GameSettings, GameType, Question
from schemas.sessions import AnswerRecord, Rating, SessionStats, SessionSummary, SubmittedAnswer

logger = logging.getLogger("arabic-quiz.sessions")


def score_answer(
    is_correct: bool,
    is_skipped: bool,
    time_spent: float,
    timer_enabled: bool,
    time_limit: float,
    config: Optional[GameConfig] = None,
) -> int:
    scoring = (config or get_config()).scoring
    if is_skipped:
        return scoring.skip_question
    if not is_correct:
        return scoring.wrong_answer

    points = scoring.correct_answer
    # fast answers earn a bonus only while the timer is running
    if timer_enabled and time_spent < time_limit * scoring.bonus_time_threshold:
        # halves round up
        points = math.floor(points * scoring.bonus_time_multiplier + 0.5)
    return points


def rate(accuracy: float, thresholds: ResultThresholds) -> Rating:
    if accuracy >= thresholds.excellent:
        return "excellent"
    if accuracy >= thresholds.good:
        return "good"
    if accuracy >= thresholds.average:
        return "average"
    return "needs_practice"


def grade_answers(
    game_type: GameType,
    settings: GameSettings,
    questions: Sequence[Question],
    answers: Sequence[SubmittedAnswer],
) -> Tuple[List[AnswerRecord], int]:
    config = get_config()
    time_limit = config.time_limit(GameType(game_type).value, settings.difficulty)
    by_id: Dict[int, Question] = {q.id: q for q in questions}

    records: List[AnswerRecord] = []
    score = 0
    for it in answers:
        q = by_id.get(it.question_id)
        if it.skipped:
            is_correct = False
        elif q is None:
            logger.warning("answer for unknown question id %s marked wrong", it.question_id)
            is_correct = False
        else:
            is_correct = check_answer(q, it.answer)

        records.append(
            AnswerRecord(
                question_id=it.question_id,
                user_answer=None if it.skipped else it.answer,
                is_correct=is_correct,
                is_skipped=it.skipped,
                time_spent=it.time_spent,
            )
        )
        score += score_answer(
            is_correct, it.skipped, it.time_spent, settings.timer_enabled, time_limit, config
        )
    return records, score


def build_summary(
    game_type: GameType,
    settings: GameSettings,
    questions_count: int,
    records: Sequence[AnswerRecord],
    total_score: int,
) -> SessionSummary:
    correct = sum(1 for a in records if a.is_correct)
    skipped = sum(1 for a in records if a.is_skipped)
    wrong = sum(1 for a in records if not a.is_correct and not a.is_skipped)
    accuracy = (correct / questions_count) * 100 if questions_count else 0.0

    return SessionSummary(
        game_type=game_type,
        difficulty=settings.difficulty,
        question_mode=settings.question_mode,
        number_format=settings.number_format,
        timer_enabled=settings.timer_enabled,
        questions_count=questions_count,
        correct_answers=correct,
        wrong_answers=wrong,
        skipped_questions=skipped,
        total_score=total_score,
        total_time=sum(a.time_spent for a in records),
        accuracy=accuracy,
        rating=rate(accuracy, get_config().result_thresholds),
        answers=list(records),
    )


# --- History ----------------------------------------------------------------------


def save_session(db: Session, summary: SessionSummary) -> GameSession:
    row = GameSession(**summary.model_dump(mode="json", exclude={"accuracy", "rating"}))
    db.add(row)
    db.flush()
    trim_history(db)
    db.commit()
    db.refresh(row)
    return row


def trim_history(db: Session, keep: int = HISTORY_LIMIT) -> int:
    stale = [
        sid
        for (sid,) in db.query(GameSession.id).order_by(GameSession.id.desc()).offset(keep).all()
    ]
    if stale:
        db.query(GameSession).filter(GameSession.id.in_(stale)).delete(synchronize_session=False)
    return len(stale)


def recent_sessions(
    db: Session, limit: int = 20, game_type: Optional[str] = None
) -> List[GameSession]:
    q = db.query(GameSession)
    if game_type:
        q = q.filter(GameSession.game_type == game_type)
    return q.order_by(GameSession.id.desc()).limit(limit).all()


def overall_statistics(db: Session) -> SessionStats:
    games, questions, correct, score = db.query(
        func.count(GameSession.id),
        func.coalesce(func.sum(GameSession.questions_count), 0),
        func.coalesce(func.sum(GameSession.correct_answers), 0),
        func.coalesce(func.sum(GameSession.total_score), 0),
    ).one()

    return SessionStats(
        total_games=games,
        total_questions=questions,
        correct_answers=correct,
        accuracy=(correct / questions) * 100 if questions else 0.0,
        average_score=score / games if games else 0.0,
    )


def clear_sessions(db: Session) -> int:
    n = db.query(GameSession).delete(synchronize_session=False)
    db.commit()
    return n
