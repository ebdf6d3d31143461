from fastapi.testclient import TestClient
from pydantic import TypeAdapter

from db import HISTORY_LIMIT, SessionLocal
from game_config import GameConfig, ResultThresholds, ScoringConfig
from main import app
from models import GameSession
from schemas.questions import GameSettings, GameType, Question
from schemas.sessions import SubmittedAnswer
from sessions import build_summary, grade_answers, rate, save_session, score_answer, trim_history

client = TestClient(app)

QUESTIONS = [
    {"id": 0, "type": "addition", "num1": 2, "num2": 3, "operator": "+", "correct_answer": 5},
    {"id": 1, "type": "comparing_numbers", "num1": 5, "num2": 3, "correct_answer": ">"},
    {"id": 2, "type": "fractions", "numerator": 3, "denominator": 5},
    {"id": 3, "type": "reading_numbers", "number": 21, "correct_answers": ["واحد وعشرون"]},
]


def _payload(**settings):
    return {
        "game_type": "arithmetic",
        "settings": {"questions_count": 4, **settings},
        "questions": QUESTIONS,
        "answers": [
            {"question_id": 0, "answer": "5", "time_spent": 3},
            {"question_id": 1, "answer": "<", "time_spent": 4},
            {"question_id": 2, "skipped": True, "time_spent": 10},
            {"question_id": 3, "answer": "واحد وعشرون", "time_spent": 20},
        ],
    }


def test_score_answer_bonus():
    assert score_answer(True, False, 5, False, 30) == 10
    assert score_answer(True, False, 5, True, 30) == 15
    # bonus needs an answer inside half the time limit
    assert score_answer(True, False, 15, True, 30) == 10
    assert score_answer(False, False, 1, True, 30) == 0
    assert score_answer(False, True, 1, True, 30) == 0


def test_score_bonus_rounds_halves_up():
    config = GameConfig(scoring=ScoringConfig(correct_answer=3))
    # 3 * 1.5 = 4.5
    assert score_answer(True, False, 1, True, 30, config) == 5
    config = GameConfig(scoring=ScoringConfig(correct_answer=7))
    assert score_answer(True, False, 1, True, 30, config) == 11


def test_rate():
    t = ResultThresholds()
    assert rate(95, t) == "excellent"
    assert rate(70, t) == "good"
    assert rate(50, t) == "average"
    assert rate(10, t) == "needs_practice"


def test_build_summary_counts():
    questions = [TypeAdapter(Question).validate_python(q) for q in QUESTIONS]
    answers = [SubmittedAnswer(**a) for a in _payload()["answers"]]
    settings = GameSettings(questions_count=4)

    records, score = grade_answers(GameType.ARITHMETIC, settings, questions, answers)
    assert [r.is_correct for r in records] == [True, False, False, True]
    assert records[2].is_skipped and records[2].user_answer is None
    assert score == 20

    summary = build_summary(GameType.ARITHMETIC, settings, len(questions), records, score)
    assert summary.correct_answers == 2
    assert summary.wrong_answers == 1
    assert summary.skipped_questions == 1
    assert summary.total_time == 37
    assert summary.accuracy == 50
    assert summary.rating == "average"


def test_submit_session_roundtrip():
    r = client.post("/sessions", json=_payload())
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    session_id = body["session_id"]
    assert isinstance(session_id, int)
    assert body["summary"]["total_score"] == 20

    r2 = client.get(f"/sessions/{session_id}")
    assert r2.status_code == 200
    stored = r2.json()
    assert stored["id"] == session_id
    assert stored["correct_answers"] == 2
    assert len(stored["answers"]) == 4
    assert "created_at" in stored


def test_submit_session_with_timer_bonus():
    r = client.post("/sessions", json=_payload(timer_enabled=True))
    # arithmetic low limit is 45s: the 3s and 20s answers both earn the bonus
    assert r.json()["summary"]["total_score"] == 30


def test_submit_session_requires_answers():
    payload = _payload()
    payload["answers"] = []
    assert client.post("/sessions", json=payload).status_code == 422


def test_get_session_404():
    assert client.get("/sessions/999999").status_code == 404


def test_recent_list_requires_client_key(monkeypatch):
    monkeypatch.setenv("QUIZ_API_KEY", "k")
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    assert client.get("/sessions/recent-list").status_code == 401

    client.post("/sessions", json=_payload())
    r = client.get("/sessions/recent-list", headers={"x-api-key": "k"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["count"] >= 1
    assert "answers" not in body["items"][0]

    r = client.get(
        "/sessions/recent-list", params={"game_type": "fractions"}, headers={"x-api-key": "k"}
    )
    assert r.json()["count"] == 0


def test_stats():
    client.post("/sessions", json=_payload())
    b = client.get("/sessions/stats").json()
    assert b["total_games"] >= 1
    assert b["total_questions"] >= 4
    assert 0 <= b["accuracy"] <= 100


def test_history_is_trimmed():
    for _ in range(5):
        client.post("/sessions", json=_payload())

    with SessionLocal() as db:
        newest = db.query(GameSession.id).order_by(GameSession.id.desc()).first()[0]
        removed = trim_history(db, keep=2)
        db.commit()
        ids = [sid for (sid,) in db.query(GameSession.id).order_by(GameSession.id.desc()).all()]

    assert removed >= 3
    assert ids == [newest, newest - 1]
    assert HISTORY_LIMIT == 100


def test_save_session_keeps_history_limit():
    questions = [TypeAdapter(Question).validate_python(q) for q in QUESTIONS]
    answers = [SubmittedAnswer(**a) for a in _payload()["answers"]]
    settings = GameSettings(questions_count=4)
    records, score = grade_answers(GameType.ARITHMETIC, settings, questions, answers)
    summary = build_summary(GameType.ARITHMETIC, settings, len(questions), records, score)

    with SessionLocal() as db:
        ids = [save_session(db, summary).id for _ in range(HISTORY_LIMIT + 1)]
        count = db.query(GameSession).count()
        oldest = db.query(GameSession.id).order_by(GameSession.id.asc()).first()[0]

    assert count == HISTORY_LIMIT
    assert oldest == ids[1]
