# services/quiz/game_config.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("arabic-quiz.config")

_BASE = Path(__file__).resolve().parent
_DEFAULT_PATH = _BASE / "data" / "game_config.json"


class NumberRange(BaseModel):
    min: int
    max: int


class FractionRange(BaseModel):
    denominator_min: int = 2
    denominator_max: int = 9
    numerator_min: int = 1
    numerator_max: int = 8


class DifficultyRanges(BaseModel):
    low: NumberRange
    medium: NumberRange
    high: NumberRange


class DifficultyTimers(BaseModel):
    low: int = 30
    medium: int = 45
    high: int = 60
    custom: int = 45


class ScoringConfig(BaseModel):
    correct_answer: int = 10
    wrong_answer: int = 0  # can be negative for a penalty
    skip_question: int = 0
    bonus_time_multiplier: float = 1.5
    bonus_time_threshold: float = 0.5  # fraction of the time limit


class ResultThresholds(BaseModel):
    excellent: float = 90
    good: float = 70
    average: float = 50


def _r(lo: int, hi: int) -> NumberRange:
    return NumberRange(min=lo, max=hi)


def _ranges(low, medium, high) -> DifficultyRanges:
    return DifficultyRanges(low=_r(*low), medium=_r(*medium), high=_r(*high))


def _default_ranges() -> Dict[str, DifficultyRanges]:
    return {
        "addition": _ranges((0, 9), (10, 99), (100, 999)),
        "subtraction": _ranges((0, 9), (10, 99), (100, 999)),
        "multiplication": _ranges((0, 10), (10, 99), (100, 999)),
        "division": _ranges((0, 100), (100, 10000), (10000, 1000000)),
        "reading_numbers": _ranges((0, 99), (100, 999), (1000, 9999)),
        "comparing_numbers": _ranges((0, 9), (10, 99), (100, 999)),
    }


def _default_timers() -> Dict[str, DifficultyTimers]:
    return {
        "addition": DifficultyTimers(low=30, medium=45, high=60, custom=45),
        "subtraction": DifficultyTimers(low=30, medium=45, high=60, custom=45),
        "addition_subtraction": DifficultyTimers(low=30, medium=45, high=60, custom=45),
        "multiplication": DifficultyTimers(low=30, medium=60, high=90, custom=60),
        "division": DifficultyTimers(low=45, medium=75, high=120, custom=75),
        "multiplication_division": DifficultyTimers(low=45, medium=75, high=120, custom=75),
        "arithmetic": DifficultyTimers(low=45, medium=60, high=90, custom=60),
        "reading_numbers": DifficultyTimers(low=45, medium=60, high=90, custom=60),
        "comparing_numbers": DifficultyTimers(low=20, medium=30, high=45, custom=30),
        "fractions": DifficultyTimers(low=45, medium=60, high=90, custom=60),
    }


class GameConfig(BaseModel):
    default_questions_count: int = Field(default=10, ge=1)
    options_count: int = Field(default=4, ge=2)
    reading_match_threshold: float = Field(default=0.7, ge=0, le=1)
    fallback_range: NumberRange = Field(default_factory=lambda: _r(0, 10))
    ranges: Dict[str, DifficultyRanges] = Field(default_factory=_default_ranges)
    fractions: FractionRange = Field(default_factory=FractionRange)
    timers: Dict[str, DifficultyTimers] = Field(default_factory=_default_timers)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    result_thresholds: ResultThresholds = Field(default_factory=ResultThresholds)

    def time_limit(self, game_type: str, difficulty: str) -> int:
        timers = self.timers.get(game_type)
        if timers is None:
            return 30
        return getattr(timers, difficulty, timers.custom)


def _config_path() -> Path:
    env = os.getenv("GAME_CONFIG_PATH")
    return Path(env) if env else _DEFAULT_PATH


def _read_overrides(p: Path) -> Optional[Dict]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed game config at %s", p)
            return None
    if not isinstance(data, dict):
        logger.warning("Ignoring game config at %s: root must be an object", p)
        return None
    return data


class GameConfigStore:
    _config: Optional[GameConfig] = None

    @classmethod
    def load(cls) -> GameConfig:
        if cls._config is None:
            cls.reload()
        return cls._config

    @classmethod
    def reload(cls) -> GameConfig:
        config = GameConfig()
        p = _config_path()
        if p.exists():
            raw = _read_overrides(p)
            if raw is not None:
                merged = config.model_dump()
                for key, val in raw.items():
                    # per-game tables merge one level deep, everything else replaces
                    if key in ("ranges", "timers") and isinstance(val, dict):
                        merged[key] = {**merged[key], **val}
                    else:
                        merged[key] = val
                try:
                    config = GameConfig(**merged)
                except ValidationError as e:
                    logger.warning("Invalid game config at %s, using defaults: %s", p, e)
        cls._config = config
        return cls._config


# Public API
def get_config() -> GameConfig:
    return GameConfigStore.load()


def reload_config() -> GameConfig:
    return GameConfigStore.reload()
