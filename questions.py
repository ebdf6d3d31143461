# Question factory: turns a game type plus settings into an ordered list of questions.
# Ids are dense (0..count-1) within one generated list.

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Tuple

from arabic_words import MAX_WORD_NUMBER, get_all_valid_forms
from errors import InvalidRange
from game_config import FractionRange, NumberRange, get_config
from generators import (
    generate_addition_numbers,
    generate_comparison_numbers,
    generate_division_numbers,
    generate_fraction,
    generate_multiplication_numbers,
    generate_options,
    generate_subtraction_numbers,
    get_comparison_result,
    make_rng,
    random_int,
    validate_fraction_range,
    validate_range,
)
from schemas.questions import (
    ArithmeticKind,
    ArithmeticQuestion,
    ComparisonQuestion,
    CustomRangeSettings,
    Difficulty,
    FractionQuestion,
    GameType,
    Question,
    QuestionMode,
    ReadingNumberQuestion,
)

logger = logging.getLogger("arabic-quiz.questions")

GAME_NAMES: Dict[GameType, str] = {
    GameType.ADDITION: "لعبة الجمع",
    GameType.SUBTRACTION: "لعبة الطرح",
    GameType.ADDITION_SUBTRACTION: "الجمع والطرح",
    GameType.MULTIPLICATION: "لعبة الضرب",
    GameType.DIVISION: "لعبة القسمة",
    GameType.MULTIPLICATION_DIVISION: "الضرب والقسمة",
    GameType.ARITHMETIC: "العمليات الحسابية",
    GameType.READING_NUMBERS: "قراءة الأعداد",
    GameType.COMPARING_NUMBERS: "مقارنة الأعداد",
    GameType.FRACTIONS: "الكسور",
}

# Sub-operations a game draws from; mixed games pick one uniformly per question
ARITHMETIC_KINDS: Dict[GameType, Tuple[ArithmeticKind, ...]] = {
    GameType.ADDITION: ("addition",),
    GameType.SUBTRACTION: ("subtraction",),
    GameType.MULTIPLICATION: ("multiplication",),
    GameType.DIVISION: ("division",),
    GameType.ADDITION_SUBTRACTION: ("addition", "subtraction"),
    GameType.MULTIPLICATION_DIVISION: ("multiplication", "division"),
    GameType.ARITHMETIC: ("addition", "subtraction", "multiplication", "division"),
}

_PAIR_GENERATORS: Dict[ArithmeticKind, Callable[[int, int, random.Random], Tuple[int, int]]] = {
    "addition": generate_addition_numbers,
    "subtraction": generate_subtraction_numbers,
    "multiplication": generate_multiplication_numbers,
    "division": generate_division_numbers,
}

_OPERATORS = {"addition": "+", "subtraction": "-", "multiplication": "×", "division": "÷"}


def _apply(kind: ArithmeticKind, num1: int, num2: int) -> int:
    if kind == "addition":
        return num1 + num2
    if kind == "subtraction":
        return num1 - num2
    if kind == "multiplication":
        return num1 * num2
    # dividends are built as divisor * quotient
    return num1 // num2


# --- Ranges -----------------------------------------------------------------------


def resolve_range(
    key: str, difficulty: Difficulty, custom_ranges: Optional[CustomRangeSettings] = None
) -> NumberRange:
    """Custom range when asked for and supplied, else the difficulty range, else the fallback."""
    config = get_config()
    if difficulty == "custom" and custom_ranges is not None:
        custom = getattr(custom_ranges, key, None)
        if isinstance(custom, NumberRange):
            return custom

    ranges = config.ranges.get(key)
    if ranges is not None and difficulty != "custom":
        return getattr(ranges, difficulty)

    return config.fallback_range


def resolve_fraction_range(
    difficulty: Difficulty, custom_ranges: Optional[CustomRangeSettings] = None
) -> FractionRange:
    if difficulty == "custom" and custom_ranges is not None and custom_ranges.fractions:
        return custom_ranges.fractions
    return get_config().fractions


def validate_settings(
    game_type: GameType, difficulty: Difficulty, custom_ranges: Optional[CustomRangeSettings]
) -> None:
    """Reject ranges that cannot yield valid questions before anything is generated."""
    if game_type in ARITHMETIC_KINDS:
        for kind in ARITHMETIC_KINDS[game_type]:
            r = resolve_range(kind, difficulty, custom_ranges)
            validate_range(r.min, r.max, kind)
    elif game_type == GameType.READING_NUMBERS:
        r = resolve_range("reading_numbers", difficulty, custom_ranges)
        validate_range(r.min, r.max)
        if r.max > MAX_WORD_NUMBER:
            raise InvalidRange(f"Reading numbers only go up to {MAX_WORD_NUMBER}, got {r.max}.")
    elif game_type == GameType.COMPARING_NUMBERS:
        r = resolve_range("comparing_numbers", difficulty, custom_ranges)
        validate_range(r.min, r.max, "comparison")
    elif game_type == GameType.FRACTIONS:
        f = resolve_fraction_range(difficulty, custom_ranges)
        validate_fraction_range(
            f.denominator_min, f.denominator_max, f.numerator_min, f.numerator_max
        )
    else:
        raise InvalidRange(f"Unknown game type: {game_type!r}")


# --- Builders ---------------------------------------------------------------------


def generate_arithmetic_question(
    qid: int,
    kind: ArithmeticKind,
    difficulty: Difficulty,
    include_options: bool,
    custom_ranges: Optional[CustomRangeSettings],
    rng: random.Random,
) -> ArithmeticQuestion:
    r = resolve_range(kind, difficulty, custom_ranges)
    num1, num2 = _PAIR_GENERATORS[kind](r.min, r.max, rng)
    correct = _apply(kind, num1, num2)
    options = generate_options(correct, rng, get_config().options_count) if include_options else None
    return ArithmeticQuestion(
        id=qid,
        type=kind,
        num1=num1,
        num2=num2,
        operator=_OPERATORS[kind],
        correct_answer=correct,
        options=options,
    )


def generate_reading_question(
    qid: int,
    difficulty: Difficulty,
    custom_ranges: Optional[CustomRangeSettings],
    rng: random.Random,
) -> ReadingNumberQuestion:
    r = resolve_range("reading_numbers", difficulty, custom_ranges)
    number = random_int(r.min, r.max, rng)
    return ReadingNumberQuestion(id=qid, number=number, correct_answers=get_all_valid_forms(number))


def generate_comparison_question(
    qid: int,
    difficulty: Difficulty,
    custom_ranges: Optional[CustomRangeSettings],
    rng: random.Random,
) -> ComparisonQuestion:
    r = resolve_range("comparing_numbers", difficulty, custom_ranges)
    num1, num2 = generate_comparison_numbers(r.min, r.max, rng)
    return ComparisonQuestion(
        id=qid, num1=num1, num2=num2, correct_answer=get_comparison_result(num1, num2)
    )


def generate_fraction_question(
    qid: int,
    difficulty: Difficulty,
    custom_ranges: Optional[CustomRangeSettings],
    rng: random.Random,
) -> FractionQuestion:
    f = resolve_fraction_range(difficulty, custom_ranges)
    numerator, denominator = generate_fraction(
        f.denominator_min, f.denominator_max, f.numerator_min, f.numerator_max, rng
    )
    return FractionQuestion(id=qid, numerator=numerator, denominator=denominator)


def generate_questions(
    game_type: GameType,
    count: int,
    difficulty: Difficulty = "low",
    mode: QuestionMode = "multipleChoice",
    custom_ranges: Optional[CustomRangeSettings] = None,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Build `count` questions for `game_type`.

    Raises InvalidRange before generating anything if the resolved ranges are unusable.
    """
    game_type = GameType(game_type)
    if count < 0:
        raise InvalidRange(f"Question count must not be negative, got {count}.")
    validate_settings(game_type, difficulty, custom_ranges)

    rng = rng or make_rng()
    include_options = mode == "multipleChoice"
    questions: List[Question] = []

    for i in range(count):
        if game_type in ARITHMETIC_KINDS:
            kinds = ARITHMETIC_KINDS[game_type]
            kind = kinds[0] if len(kinds) == 1 else rng.choice(kinds)
            q = generate_arithmetic_question(
                i, kind, difficulty, include_options, custom_ranges, rng
            )
        elif game_type == GameType.READING_NUMBERS:
            q = generate_reading_question(i, difficulty, custom_ranges, rng)
        elif game_type == GameType.COMPARING_NUMBERS:
            q = generate_comparison_question(i, difficulty, custom_ranges, rng)
        elif game_type == GameType.FRACTIONS:
            q = generate_fraction_question(i, difficulty, custom_ranges, rng)
        else:
            raise InvalidRange(f"Unknown game type: {game_type!r}")
        questions.append(q)

    logger.debug("generated %d %s questions (%s)", len(questions), game_type.value, difficulty)
    return questions


def _ensure_every_game_is_named() -> None:
    missing = [g.value for g in GameType if g not in GAME_NAMES]
    if missing:
        raise RuntimeError(f"Game types missing a display name: {missing}")


_ensure_every_game_is_named()
