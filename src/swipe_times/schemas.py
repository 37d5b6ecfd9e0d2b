# src/swipe_times/schemas.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Fact(BaseModel):
    """
    One multiplication question with its answer, e.g. "3 x 4" -> 12.
    Immutable: the same instance travels between the pool and the current card.
    """
    model_config = ConfigDict(frozen=True)

    multiplicand: int = Field(ge=1)
    multiplier: int = Field(ge=1)

    @property
    def question(self) -> str:
        return f"{self.multiplicand} x {self.multiplier}"

    @property
    def answer(self) -> int:
        return self.multiplicand * self.multiplier


class SessionReport(BaseModel):
    """
    Summary metrics produced when the pool runs dry.
    accuracy_percent is NaN when nothing was graded.
    """
    total_graded: int = 0
    correct_graded: int = 0
    time_taken_seconds: float = 0.0
    accuracy_percent: float = float("nan")
    seconds_per_card: float = 0.0
    cards_per_second: float = 0.0

    # Wall-clock timestamps (UTC), informational only
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
