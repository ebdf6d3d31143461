from __future__ import annotations


class QuizError(ValueError):
    """Base class for errors raised by the question engine."""


class InvalidRange(QuizError):
    """A numeric range that cannot produce valid questions (min > max, max < 1 for division...)."""


class UnsupportedMagnitude(QuizError):
    """Word conversion was requested for a number outside 0..9999."""


class ParseFailure(QuizError):
    """A written numeric answer could not be parsed."""
