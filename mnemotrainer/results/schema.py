from __future__ import annotations

"""Pydantic models for persisted practice results."""

from typing import List
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

from ..engine.models import Difficulty


def new_record_id(timestamp_ms: int) -> str:
    """Time-derived id with a random suffix so same-millisecond saves differ."""
    return f"{timestamp_ms}-{uuid4().hex[:8]}"


class HighScoreRecord(BaseModel):
    id: str
    tactic_id: str
    score: int = Field(ge=0)
    accuracy: int = Field(ge=0, le=100)
    difficulty: Difficulty
    timestamp: int = Field(ge=0)


class GameSessionRecord(BaseModel):
    tactic_id: str
    difficulty: Difficulty
    items_to_memorize: List[str]
    user_answers: List[str]
    start_time: int = Field(ge=0)
    end_time: int = Field(ge=0)
    score: int = Field(ge=0)
    accuracy: int = Field(ge=0, le=100)

    @field_validator("items_to_memorize")
    @classmethod
    def _non_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("items_to_memorize must not be empty")
        return v

    @model_validator(mode="after")
    def _end_after_start(self) -> "GameSessionRecord":
        if self.end_time < self.start_time:
            raise ValueError("end_time must be >= start_time")
        return self
