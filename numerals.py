from __future__ import annotations

import math
import re
from typing import Literal, Union

from sympy import Rational

from errors import ParseFailure

NumberFormat = Literal["arabic", "english"]

_LATIN_DIGITS = "0123456789"
_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_ARABIC = str.maketrans(_LATIN_DIGITS, _ARABIC_DIGITS)
# Arabic decimal separator is folded into "." as well
_TO_LATIN = str.maketrans(_ARABIC_DIGITS + "٫", _LATIN_DIGITS + ".")

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d+)?|\d+\s*/\s*\d+)$")
LEN_LIMIT = 32


def to_arabic_numerals(num: Union[int, str]) -> str:
    return str(num).translate(_TO_ARABIC)


def from_arabic_numerals(text: str) -> str:
    return text.translate(_TO_LATIN)


def format_number(num: Union[int, str], fmt: NumberFormat = "arabic") -> str:
    return to_arabic_numerals(num) if fmt == "arabic" else str(num)


def parse_user_input(text: Union[str, int, float]) -> Union[int, Rational]:
    """
    Parse a typed answer into an exact number.

    Accepts Latin or Arabic-Indic digits, an optional sign, a decimal part or a
    simple a/b fraction. Integral values are returned as int, everything else as
    a sympy Rational so comparisons stay exact.
    """
    if isinstance(text, bool):
        raise ParseFailure("Answer must be a number.")
    if isinstance(text, int):
        return text
    if isinstance(text, float):
        if not math.isfinite(text):
            raise ParseFailure("Answer is not a finite number.")
        text = repr(text)
    if not isinstance(text, str) or not text.strip():
        raise ParseFailure("Answer required.")
    if len(text) > LEN_LIMIT:
        raise ParseFailure("Answer too long.")

    s = from_arabic_numerals(text.strip())
    if _NUMBER_RE.fullmatch(s) is None:
        raise ParseFailure("Only digits, an optional sign, a decimal point or a/b are allowed.")

    if "/" in s:
        num_str, den_str = s.split("/", 1)
        den = int(den_str.strip())
        if den == 0:
            raise ParseFailure("Division by zero.")
        val = Rational(int(num_str.strip()), den)
    else:
        val = Rational(s)

    if val.q == 1:
        return int(val.p)
    return val
