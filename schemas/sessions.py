from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.marking import UserAnswer
from schemas.questions import GameSettings, GameType, Question

Rating = Literal["excellent", "good", "average", "needs_practice"]


class SubmittedAnswer(BaseModel):
    question_id: int
    answer: UserAnswer = None
    skipped: bool = False
    time_spent: float = Field(default=0, ge=0)  # seconds


class AnswerRecord(BaseModel):
    model_config = ConfigDict(frozen=True)
    question_id: int
    user_answer: UserAnswer = None
    is_correct: bool
    is_skipped: bool
    time_spent: float


class SessionSubmitRequest(BaseModel):
    game_type: GameType
    settings: GameSettings = Field(default_factory=GameSettings)
    questions: List[Question] = Field(min_length=1)
    answers: List[SubmittedAnswer] = Field(min_length=1)


class SessionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)
    game_type: GameType
    difficulty: str
    question_mode: str
    number_format: str
    timer_enabled: bool
    questions_count: int
    correct_answers: int
    wrong_answers: int
    skipped_questions: int
    total_score: int
    total_time: float
    accuracy: float
    rating: Rating
    answers: List[AnswerRecord]


class SessionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None
    game_type: str
    difficulty: str
    question_mode: str
    number_format: str
    timer_enabled: bool
    questions_count: int
    correct_answers: int
    wrong_answers: int
    skipped_questions: int
    total_score: int
    total_time: float
    # keep answers optional; usually excluded in list views
    answers: list | None = None


class SessionStats(BaseModel):
    total_games: int
    total_questions: int
    correct_answers: int
    accuracy: float
    average_score: float
