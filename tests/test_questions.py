import random

import pytest
from fastapi.testclient import TestClient

from errors import InvalidRange
from game_config import NumberRange
from main import app
from questions import generate_questions, resolve_range
from schemas.questions import (
    ArithmeticQuestion,
    ComparisonQuestion,
    CustomRangeSettings,
    FractionQuestion,
    GameType,
    ReadingNumberQuestion,
)

client = TestClient(app)


def test_low_addition_scenario(rng):
    qs = generate_questions(GameType.ADDITION, 1000, "low", "written", rng=rng)
    assert [q.id for q in qs] == list(range(1000))
    for q in qs:
        assert isinstance(q, ArithmeticQuestion)
        assert 0 <= q.num1 <= 9 and 0 <= q.num2 <= 9
        assert q.correct_answer == q.num1 + q.num2
        assert q.operator == "+"
        assert q.options is None


def test_division_scenario(rng):
    custom = CustomRangeSettings(division=NumberRange(min=100, max=10000))
    qs = generate_questions(GameType.DIVISION, 300, "custom", "written", custom, rng)
    for q in qs:
        assert q.num1 % q.num2 == 0
        assert q.correct_answer * q.num2 == q.num1
        assert q.operator == "÷"


def test_multiple_choice_options(rng):
    qs = generate_questions(GameType.ARITHMETIC, 200, "medium", "multipleChoice", rng=rng)
    for q in qs:
        assert len(q.options) == 4
        assert len(set(q.options)) == 4
        assert q.options.count(q.correct_answer) == 1
        assert all(o >= 0 for o in q.options)


def test_mixed_games_use_both_operations(rng):
    qs = generate_questions(GameType.ADDITION_SUBTRACTION, 200, "low", "written", rng=rng)
    assert {q.type for q in qs} == {"addition", "subtraction"}
    for q in qs:
        if q.type == "subtraction":
            assert q.correct_answer == q.num1 - q.num2 >= 0


def test_reading_questions(rng):
    qs = generate_questions(GameType.READING_NUMBERS, 50, "high", "written", rng=rng)
    for q in qs:
        assert isinstance(q, ReadingNumberQuestion)
        assert 1000 <= q.number <= 9999
        assert q.correct_answers
        assert len(q.correct_answers) == len(set(q.correct_answers))


def test_comparison_and_fraction_questions(rng):
    for q in generate_questions(GameType.COMPARING_NUMBERS, 50, "medium", rng=rng):
        assert isinstance(q, ComparisonQuestion)
        assert 10 <= q.num1 <= 99 and 10 <= q.num2 <= 99
        expected = ">" if q.num1 > q.num2 else "<" if q.num1 < q.num2 else "="
        assert q.correct_answer == expected

    for q in generate_questions(GameType.FRACTIONS, 50, "low", rng=rng):
        assert isinstance(q, FractionQuestion)
        assert 2 <= q.denominator <= 9
        assert 0 <= q.numerator <= q.denominator


def test_same_seed_same_questions():
    a = generate_questions(GameType.ARITHMETIC, 20, "high", rng=random.Random(3))
    b = generate_questions(GameType.ARITHMETIC, 20, "high", rng=random.Random(3))
    assert a == b


def test_resolve_range_prefers_custom_only_for_custom_difficulty():
    custom = CustomRangeSettings(addition=NumberRange(min=50, max=60))
    assert resolve_range("addition", "custom", custom) == NumberRange(min=50, max=60)
    assert resolve_range("addition", "low", custom) == NumberRange(min=0, max=9)
    # custom difficulty without a custom range falls back to 0..10
    assert resolve_range("subtraction", "custom", custom) == NumberRange(min=0, max=10)


@pytest.mark.parametrize(
    "game_type,custom",
    [
        (GameType.ADDITION, CustomRangeSettings(addition=NumberRange(min=9, max=1))),
        (GameType.DIVISION, CustomRangeSettings(division=NumberRange(min=0, max=0))),
        (GameType.ARITHMETIC, CustomRangeSettings(multiplication=NumberRange(min=-5, max=5))),
        (GameType.READING_NUMBERS, CustomRangeSettings(reading_numbers=NumberRange(min=0, max=20000))),
    ],
)
def test_invalid_ranges_fail_fast(game_type, custom):
    with pytest.raises(InvalidRange):
        generate_questions(game_type, 5, "custom", "written", custom)


def test_list_games():
    r = client.get("/games")
    assert r.status_code == 200
    data = r.json()
    assert len(data) == len(GameType)
    fractions = next(g for g in data if g["type"] == "fractions")
    assert fractions["name"] == "الكسور"
    assert fractions["timers"]["low"] == 45


def test_generate_endpoint():
    r = client.post(
        "/questions/generate",
        json={"game_type": "comparing_numbers", "settings": {"questions_count": 5}, "seed": 1},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert [q["id"] for q in body["questions"]] == [0, 1, 2, 3, 4]
    assert all(q["type"] == "comparing_numbers" for q in body["questions"])


def test_generate_endpoint_is_seeded():
    payload = {"game_type": "arithmetic", "settings": {"questions_count": 10}, "seed": 42}
    a = client.post("/questions/generate", json=payload).json()
    b = client.post("/questions/generate", json=payload).json()
    assert a == b


def test_generate_endpoint_rejects_bad_range():
    r = client.post(
        "/questions/generate",
        json={
            "game_type": "addition",
            "settings": {"difficulty": "custom", "custom_ranges": {"addition": {"min": 5, "max": 1}}},
        },
    )
    assert r.status_code == 422
