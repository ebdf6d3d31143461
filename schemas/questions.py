# services/quiz/schemas/questions.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from game_config import FractionRange, NumberRange
from numerals import NumberFormat

Difficulty = Literal["low", "medium", "high", "custom"]
QuestionMode = Literal["multipleChoice", "written"]
Operator = Literal["+", "-", "×", "÷"]
Relation = Literal[">", "<", "="]
ArithmeticKind = Literal["addition", "subtraction", "multiplication", "division"]


class GameType(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    ADDITION_SUBTRACTION = "addition_subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    MULTIPLICATION_DIVISION = "multiplication_division"
    ARITHMETIC = "arithmetic"
    READING_NUMBERS = "reading_numbers"
    COMPARING_NUMBERS = "comparing_numbers"
    FRACTIONS = "fractions"


# ---------- Settings ----------


class CustomRangeSettings(BaseModel):
    addition: Optional[NumberRange] = None
    subtraction: Optional[NumberRange] = None
    multiplication: Optional[NumberRange] = None
    division: Optional[NumberRange] = None
    reading_numbers: Optional[NumberRange] = None
    comparing_numbers: Optional[NumberRange] = None
    fractions: Optional[FractionRange] = None


class GameSettings(BaseModel):
    difficulty: Difficulty = "low"
    question_mode: QuestionMode = "multipleChoice"
    number_format: NumberFormat = "arabic"
    timer_enabled: bool = False
    questions_count: int = Field(default=10, ge=1, le=100)
    custom_ranges: Optional[CustomRangeSettings] = None


# ---------- Questions ----------


class ArithmeticQuestion(BaseModel):
    id: int
    type: ArithmeticKind
    num1: int
    num2: int
    operator: Operator
    correct_answer: int
    # present only in multiple-choice mode
    options: Optional[List[int]] = None


class ReadingNumberQuestion(BaseModel):
    id: int
    type: Literal["reading_numbers"] = "reading_numbers"
    number: int = Field(ge=0, le=9999)
    correct_answers: List[str]


class ComparisonQuestion(BaseModel):
    id: int
    type: Literal["comparing_numbers"] = "comparing_numbers"
    num1: int
    num2: int
    correct_answer: Relation


class FractionQuestion(BaseModel):
    id: int
    type: Literal["fractions"] = "fractions"
    numerator: int = Field(ge=0)
    denominator: int = Field(ge=2)

    @model_validator(mode="after")
    def _numerator_fits(self) -> "FractionQuestion":
        if self.numerator > self.denominator:
            raise ValueError("numerator must not exceed denominator")
        return self


Question = Annotated[
    Union[ArithmeticQuestion, ReadingNumberQuestion, ComparisonQuestion, FractionQuestion],
    Field(discriminator="type"),
]


# ---------- Generate ----------


class GenerateRequest(BaseModel):
    game_type: GameType
    settings: GameSettings = Field(default_factory=GameSettings)
    seed: Optional[int] = None


class GenerateResponse(BaseModel):
    ok: bool
    questions: List[Question]


class GameInfo(BaseModel):
    type: GameType
    name: str
    timers: Dict[str, int]
