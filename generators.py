"""Operand, fraction and multiple-choice option generation.

Every function takes an explicit `rng` so callers (and tests) control the
random source; `make_rng` builds one, honouring QUIZ_SEED when set.
"""

from __future__ import annotations

import math
import os
import random
from typing import List, Literal, Optional, Sequence, Set, Tuple, TypeVar

from errors import InvalidRange

T = TypeVar("T")

Operation = Literal["addition", "subtraction", "multiplication", "division", "comparison"]
Relation = Literal[">", "<", "="]

# Share of equal comparison pairs that get nudged apart
_COMPARISON_NUDGE_PROBABILITY = 0.9


def make_rng(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        env = os.environ.get("QUIZ_SEED")
        if env is not None:
            try:
                seed = int(env)
            except ValueError:
                seed = None
    return random.Random(seed)


def random_int(lo: int, hi: int, rng: random.Random) -> int:
    return rng.randint(lo, hi)


# --- Validation -------------------------------------------------------------------


def validate_range(lo: int, hi: int, op: Operation = "addition") -> None:
    if lo > hi:
        raise InvalidRange(f"Range minimum {lo} is greater than maximum {hi}.")
    if lo < 0:
        raise InvalidRange(f"Range minimum {lo} must not be negative.")
    if op == "division" and hi < 1:
        raise InvalidRange(f"Division needs a range maximum of at least 1, got {hi}.")


def validate_fraction_range(den_min: int, den_max: int, num_min: int, num_max: int) -> None:
    if den_min < 2:
        raise InvalidRange(f"Denominator minimum must be at least 2, got {den_min}.")
    if den_min > den_max:
        raise InvalidRange(f"Denominator range {den_min}..{den_max} is empty.")
    if num_min < 0:
        raise InvalidRange(f"Numerator minimum {num_min} must not be negative.")
    if num_min > num_max:
        raise InvalidRange(f"Numerator range {num_min}..{num_max} is empty.")


# --- Operand pairs ----------------------------------------------------------------


def generate_addition_numbers(lo: int, hi: int, rng: random.Random) -> Tuple[int, int]:
    return random_int(lo, hi, rng), random_int(lo, hi, rng)


def generate_subtraction_numbers(lo: int, hi: int, rng: random.Random) -> Tuple[int, int]:
    num1 = random_int(lo, hi, rng)
    num2 = random_int(lo, hi, rng)
    # keep the difference non-negative
    if num1 < num2:
        num1, num2 = num2, num1
    return num1, num2


def generate_multiplication_numbers(lo: int, hi: int, rng: random.Random) -> Tuple[int, int]:
    return random_int(lo, hi, rng), random_int(lo, hi, rng)


def generate_division_numbers(lo: int, hi: int, rng: random.Random) -> Tuple[int, int]:
    """Return (dividend, divisor) with an exact integer quotient."""
    validate_range(lo, hi, "division")

    divisor = random_int(max(1, math.isqrt(lo)), math.isqrt(hi), rng)

    quotient_min = max(1, lo // divisor)
    quotient_max = hi // divisor
    quotient = random_int(quotient_min, max(quotient_min, quotient_max), rng)

    return divisor * quotient, divisor


def generate_comparison_numbers(lo: int, hi: int, rng: random.Random) -> Tuple[int, int]:
    num1 = random_int(lo, hi, rng)
    num2 = random_int(lo, hi, rng)

    # leave roughly one equal pair in ten so "=" still shows up
    if num1 == num2 and rng.random() < _COMPARISON_NUDGE_PROBABILITY:
        step = 1 if rng.random() < 0.5 else -1
        for cand in (num1 + step, num1 - step):
            if lo <= cand <= hi:
                num2 = cand
                break

    return num1, num2


def get_comparison_result(num1: int, num2: int) -> Relation:
    if num1 > num2:
        return ">"
    if num1 < num2:
        return "<"
    return "="


def generate_fraction(
    den_min: int, den_max: int, num_min: int, num_max: int, rng: random.Random
) -> Tuple[int, int]:
    """Return (numerator, denominator) with numerator <= denominator."""
    validate_fraction_range(den_min, den_max, num_min, num_max)

    denominator = random_int(den_min, den_max, rng)
    cap = min(num_max, denominator)
    numerator = random_int(min(num_min, cap), cap, rng)
    return numerator, denominator


# --- Multiple-choice options ------------------------------------------------------


def shuffle_list(items: Sequence[T], rng: random.Random) -> List[T]:
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled


def generate_wrong_options(
    correct: int,
    count: int,
    rng: random.Random,
    min_diff: int = 1,
    max_diff: int = 10,
) -> List[int]:
    options: List[int] = []
    seen: Set[int] = {correct}

    attempts = 0
    max_attempts = count * 10
    while len(options) < count and attempts < max_attempts:
        attempts += 1
        diff = random_int(min_diff, max_diff, rng)
        sign = 1 if rng.random() > 0.5 else -1
        cand = correct + diff * sign
        if cand >= 0 and cand not in seen:
            seen.add(cand)
            options.append(cand)

    # fill up with +1, -1, +2, -2, ...
    offset = 1
    while len(options) < count:
        cand = correct + offset
        if cand >= 0 and cand not in seen:
            seen.add(cand)
            options.append(cand)
        offset = -offset if offset > 0 else -offset + 1

    return options


def _magnitude(value: int) -> int:
    # floor(log10(|value| + 1)) computed on the digits to stay exact
    return max(1, len(str(abs(value) + 1)) - 1)


def generate_options(correct: int, rng: random.Random, total: int = 4) -> List[int]:
    magnitude = _magnitude(correct)
    min_diff = max(1, 10 ** (magnitude - 1))
    max_diff = max(5, 10**magnitude)

    wrong = generate_wrong_options(correct, total - 1, rng, min_diff, max_diff)
    return shuffle_list([correct, *wrong], rng)
