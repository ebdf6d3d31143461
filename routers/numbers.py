from __future__ import annotations

from fastapi import APIRouter, HTTPException

from arabic_words import get_all_valid_forms, normalize_arabic, number_to_arabic_words
from errors import ParseFailure, UnsupportedMagnitude
from numerals import NumberFormat, format_number, parse_user_input
from schemas.numbers import TextRequest

router = APIRouter(prefix="/numbers", tags=["numbers"])


@router.get("/{n}/words")
def words(n: int, all_forms: bool = False):
    try:
        forms = get_all_valid_forms(n) if all_forms else number_to_arabic_words(n)
    except UnsupportedMagnitude as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"ok": True, "number": n, "words": forms}


@router.get("/{n}/format")
def format_text(n: int, fmt: NumberFormat = "arabic"):
    return {"ok": True, "number": n, "text": format_number(n, fmt)}


@router.post("/parse")
def parse(req: TextRequest):
    try:
        val = parse_user_input(req.text)
    except ParseFailure as e:
        return {"ok": False, "value": None, "feedback": str(e)}
    # exact value as text ("7" or "5/2")
    return {"ok": True, "value": str(val)}


@router.post("/normalize")
def normalize(req: TextRequest):
    return {"ok": True, "text": normalize_arabic(req.text)}
