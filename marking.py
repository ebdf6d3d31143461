from __future__ import annotations

import logging

from errors import ParseFailure
from numerals import parse_user_input
from schemas.marking import CheckResponse, UserAnswer
from schemas.questions import (
    ArithmeticQuestion,
    ComparisonQuestion,
    FractionQuestion,
    Question,
    ReadingNumberQuestion,
)
from similarity import get_answer_hint, is_number_written_correctly

logger = logging.getLogger("arabic-quiz.marking")

_ANSWER_REQUIRED_MSG = "Answer required."


def _expected_str(q: Question) -> str:
    if isinstance(q, ArithmeticQuestion):
        return str(q.correct_answer)
    if isinstance(q, ReadingNumberQuestion):
        return q.correct_answers[0] if q.correct_answers else str(q.number)
    if isinstance(q, ComparisonQuestion):
        return q.correct_answer
    if isinstance(q, FractionQuestion):
        return f"{q.numerator}/{q.denominator}"
    raise TypeError(f"Unsupported question variant: {type(q).__name__}")


def _is_blank(answer: UserAnswer) -> bool:
    return answer is None or (isinstance(answer, str) and not answer.strip())


def check_answer(question: Question, answer: UserAnswer) -> bool:
    """Stateless correctness check for one (question, answer) pair."""
    if _is_blank(answer):
        return False

    if isinstance(question, ArithmeticQuestion):
        try:
            return parse_user_input(answer) == question.correct_answer
        except ParseFailure:
            return False

    if isinstance(question, ComparisonQuestion):
        return str(answer).strip() == question.correct_answer

    if isinstance(question, FractionQuestion):
        try:
            filled = parse_user_input(answer)
        except ParseFailure:
            return False
        return isinstance(filled, int) and filled == question.numerator

    if isinstance(question, ReadingNumberQuestion):
        return is_number_written_correctly(str(answer), question.number)

    raise TypeError(f"Unsupported question variant: {type(question).__name__}")


def mark_answer(question: Question, answer: UserAnswer) -> CheckResponse:
    """Like check_answer, with the expected answer, feedback and a spelling hint attached."""
    expected = _expected_str(question)

    if _is_blank(answer):
        return CheckResponse(ok=False, correct=False, feedback=_ANSWER_REQUIRED_MSG, expected=expected)

    # numeric families report unparsable input instead of just marking it wrong
    if isinstance(question, (ArithmeticQuestion, FractionQuestion)):
        try:
            parse_user_input(answer)
        except ParseFailure as e:
            logger.debug("unparsable answer %r for question %s: %s", answer, question.id, e)
            return CheckResponse(ok=False, correct=False, feedback=str(e), expected=expected)

    correct = check_answer(question, answer)

    hint = None
    if isinstance(question, ReadingNumberQuestion) and not correct:
        hint = get_answer_hint(str(answer), question.correct_answers)

    return CheckResponse(ok=True, correct=correct, expected=expected, hint=hint)
