from fastapi.testclient import TestClient

from marking import check_answer, mark_answer
from main import app
from schemas.questions import (
    ArithmeticQuestion,
    ComparisonQuestion,
    FractionQuestion,
    ReadingNumberQuestion,
)

client = TestClient(app)

DIVISION_Q = ArithmeticQuestion(
    id=0, type="division", num1=84, num2=7, operator="÷", correct_answer=12, options=[12, 10, 14, 9]
)
COMPARE_Q = ComparisonQuestion(id=1, num1=5, num2=3, correct_answer=">")
FRACTION_Q = FractionQuestion(id=2, numerator=3, denominator=5)
READING_Q = ReadingNumberQuestion(id=3, number=21, correct_answers=["واحد وعشرون"])


def test_arithmetic_answers():
    assert check_answer(DIVISION_Q, 12)
    assert check_answer(DIVISION_Q, "12")
    assert check_answer(DIVISION_Q, "١٢")
    assert check_answer(DIVISION_Q, "12.0")
    assert not check_answer(DIVISION_Q, "13")
    assert not check_answer(DIVISION_Q, "12.5")


def test_unparsable_numeric_answer_is_wrong_not_an_error():
    assert check_answer(DIVISION_Q, "twelve") is False
    assert check_answer(DIVISION_Q, None) is False
    assert check_answer(DIVISION_Q, "") is False


def test_comparison_answers():
    assert check_answer(COMPARE_Q, ">") is True
    assert check_answer(COMPARE_Q, "<") is False
    assert check_answer(COMPARE_Q, "=") is False


def test_fraction_answers():
    assert check_answer(FRACTION_Q, 3) is True
    assert check_answer(FRACTION_Q, "3") is True
    assert check_answer(FRACTION_Q, 4) is False
    assert check_answer(FRACTION_Q, "3/1") is True
    assert check_answer(FRACTION_Q, "3/5") is False


def test_reading_answers():
    assert check_answer(READING_Q, "واحد وعشرون")
    assert check_answer(READING_Q, "واحدة و عشرون")
    assert check_answer(READING_Q, "واحد عشرين")
    assert not check_answer(READING_Q, "تسعة")


def test_mark_answer_feedback():
    res = mark_answer(DIVISION_Q, "abc")
    assert res.ok is False and res.correct is False
    assert res.expected == "12"
    assert res.feedback

    res = mark_answer(READING_Q, "واحد وعشرو")
    assert res.ok is True and res.correct is True

    res = mark_answer(READING_Q, "تسعة")
    assert res.ok is True and res.correct is False
    assert res.expected == "واحد وعشرون"

    res = mark_answer(FRACTION_Q, None)
    assert res.ok is False and res.expected == "3/5"


def test_check_endpoint_correct():
    r = client.post("/check", json={"question": DIVISION_Q.model_dump(), "answer": "12"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["correct"] is True


def test_check_endpoint_comparison_and_fraction():
    r = client.post("/check", json={"question": COMPARE_Q.model_dump(), "answer": "<"})
    assert r.json()["correct"] is False

    r = client.post("/check", json={"question": FRACTION_Q.model_dump(), "answer": 3})
    assert r.json()["correct"] is True


def test_check_endpoint_invalid_chars():
    r = client.post("/check", json={"question": DIVISION_Q.model_dump(), "answer": "abc"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is False and body["correct"] is False


def test_check_endpoint_rejects_unknown_question_type():
    r = client.post("/check", json={"question": {"id": 0, "type": "geometry"}, "answer": "1"})
    assert r.status_code == 422


def test_check_endpoint_rejects_impossible_fraction():
    q = {"id": 0, "type": "fractions", "numerator": 6, "denominator": 5}
    r = client.post("/check", json={"question": q, "answer": 6})
    assert r.status_code == 422


def test_similarity_and_match_endpoints():
    r = client.post("/similarity", json={"a": "abcd", "b": "abce"})
    assert r.json() == {"ratio": 0.75, "distance": 1}

    r = client.post("/match", json={"text": "ثلاثه", "candidates": ["ثلاثة", "أربعة"]})
    body = r.json()
    assert body["correct"] is True
    assert body["best_match"] == "ثلاثة"
    assert body["hint"] is None

    r = client.post("/match", json={"text": "abcd", "candidates": ["abce"], "threshold": 0.9})
    assert r.json()["correct"] is False
