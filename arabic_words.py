from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from errors import UnsupportedMagnitude

MIN_WORD_NUMBER = 0
MAX_WORD_NUMBER = 9999

CONNECTOR = "و"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"


class ThousandForm(str, Enum):
    ONE = "one"  # 1000
    TWO = "two"  # 2000
    PLURAL = "plural"  # 3000-9000


# --- Lexical tables ---------------------------------------------------------------

UNITS: Mapping[Gender, Tuple[str, ...]] = MappingProxyType(
    {
        Gender.MASCULINE: (
            "صفر", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة",
        ),
        Gender.FEMININE: (
            "صفر", "واحدة", "اثنتان", "ثلاث", "أربع", "خمس", "ست", "سبع", "ثمان", "تسع",
        ),
    }
)

TEENS: Mapping[Gender, Tuple[str, ...]] = MappingProxyType(
    {
        Gender.MASCULINE: (
            "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
            "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
        ),
        Gender.FEMININE: (
            "عشر", "إحدى عشرة", "اثنتا عشرة", "ثلاث عشرة", "أربع عشرة",
            "خمس عشرة", "ست عشرة", "سبع عشرة", "ثماني عشرة", "تسع عشرة",
        ),
    }
)

TENS: Tuple[str, ...] = (
    "", "عشر", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون",
)

HUNDREDS: Tuple[str, ...] = (
    "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة", "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
)

THOUSANDS: Mapping[ThousandForm, str] = MappingProxyType(
    {
        ThousandForm.ONE: "ألف",
        ThousandForm.TWO: "ألفان",
        ThousandForm.PLURAL: "آلاف",
    }
)

# Common alternate and informal spellings accepted alongside the grammatical forms
VARIANTS: Mapping[int, Tuple[str, ...]] = MappingProxyType(
    {
        0: ("صفر",),
        1: ("واحد", "واحدة", "احد", "احدى"),
        2: ("اثنان", "اثنين", "اثنتان", "اثنتين"),
        3: ("ثلاثة", "ثلاث", "تلاتة", "تلاث"),
        4: ("أربعة", "اربعة", "أربع", "اربع"),
        5: ("خمسة", "خمس"),
        6: ("ستة", "ست"),
        7: ("سبعة", "سبع"),
        8: ("ثمانية", "ثماني", "ثمان", "تمانية", "تماني"),
        9: ("تسعة", "تسع"),
        10: ("عشرة", "عشر"),
        11: ("أحد عشر", "احد عشر", "إحدى عشرة", "احدى عشرة"),
        12: ("اثنا عشر", "اثني عشر", "اثنتا عشرة", "اثنتي عشرة"),
        20: ("عشرون", "عشرين"),
        30: ("ثلاثون", "ثلاثين", "تلاتون", "تلاتين"),
        40: ("أربعون", "اربعون", "أربعين", "اربعين"),
        50: ("خمسون", "خمسين"),
        60: ("ستون", "ستين"),
        70: ("سبعون", "سبعين"),
        80: ("ثمانون", "ثمانين", "تمانون", "تمانين"),
        90: ("تسعون", "تسعين"),
        100: ("مائة", "مئة", "ميه", "ميا"),
        200: ("مائتان", "مئتان", "مائتين", "مئتين", "ميتين"),
        1000: ("ألف", "الف"),
        2000: ("ألفان", "الفان", "ألفين", "الفين"),
    }
)

_DIACRITICS_RE = re.compile(r"[\u064B-\u065F]")
_ALEF_RE = re.compile(r"[أإآا]")
_SPACES_RE = re.compile(r"\s+")


# --- Conversion -------------------------------------------------------------------


def _thousand_form(digit: int) -> ThousandForm:
    if digit == 1:
        return ThousandForm.ONE
    if digit == 2:
        return ThousandForm.TWO
    return ThousandForm.PLURAL


def _thousands_phrase(digit: int) -> str:
    form = _thousand_form(digit)
    if form in (ThousandForm.ONE, ThousandForm.TWO):
        return THOUSANDS[form]
    # counted thousands always take the masculine unit ("ثلاثة آلاف")
    return f"{UNITS[Gender.MASCULINE][digit]} {THOUSANDS[form]}"


def _below_hundred(rem: int, gender: Gender) -> str:
    if rem < 10:
        return UNITS[gender][rem]
    if rem < 20:
        return TEENS[gender][rem - 10]
    tens_digit, units_digit = divmod(rem, 10)
    if units_digit == 0:
        return TENS[tens_digit]
    # units before tens: "واحد وعشرون"
    return f"{UNITS[gender][units_digit]} {CONNECTOR}{TENS[tens_digit]}"


def convert_to_arabic(num: int, gender: Gender) -> str:
    """Render one grammatical form of `num` (0..9999) in the given gender."""
    if num == 0:
        return UNITS[gender][0]

    parts: List[str] = []

    thousands_digit = num // 1000
    if thousands_digit > 0:
        parts.append(_thousands_phrase(thousands_digit))

    hundreds_digit = (num % 1000) // 100
    if hundreds_digit > 0:
        parts.append(HUNDREDS[hundreds_digit])

    rem = num % 100
    if rem > 0:
        parts.append(_below_hundred(rem, gender))

    return f" {CONNECTOR}".join(parts)


def _dedupe(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


def number_to_arabic_words(num: int) -> List[str]:
    """
    Return every accepted Arabic spelling of `num`.

    Masculine and feminine forms come first, then the informal variants, then a
    copy of each connector-bearing phrase with the connector dropped. Raises
    UnsupportedMagnitude outside 0..9999.
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise UnsupportedMagnitude(f"Expected an integer, got {num!r}.")
    if num < MIN_WORD_NUMBER or num > MAX_WORD_NUMBER:
        raise UnsupportedMagnitude(
            f"{num} is outside {MIN_WORD_NUMBER}..{MAX_WORD_NUMBER} for word conversion."
        )

    results = [convert_to_arabic(num, Gender.MASCULINE), convert_to_arabic(num, Gender.FEMININE)]
    results.extend(VARIANTS.get(num, ()))

    stripped = [r.replace(f" {CONNECTOR}", " ") for r in results if f" {CONNECTOR}" in r]
    return _dedupe(results + stripped)


def normalize_arabic(text: str) -> str:
    """Fold diacritics and letter variants so spellings compare equal."""
    s = _DIACRITICS_RE.sub("", text)
    s = _ALEF_RE.sub("ا", s)
    s = s.replace("ة", "ه").replace("ى", "ي")
    s = _SPACES_RE.sub(" ", s).strip()
    return s.lower()


def get_all_valid_forms(num: int) -> List[str]:
    forms = number_to_arabic_words(num)
    return _dedupe(forms + [normalize_arabic(f) for f in forms])
