from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .utils.optional import reduce_optional


class Color(str, Enum):
    """Cube colours a game line may mention."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class CubeDraw(BaseModel):
    """One (count, colour) observation within a game record."""

    count: int = Field(ge=0)
    color: Color


class GameRecord(BaseModel):
    """A parsed game line: its id and every draw, rounds flattened."""

    id: int = Field(ge=0)
    draws: List[CubeDraw] = Field(default_factory=list)


class Limits(BaseModel):
    red: int = Field(default=12, ge=0)
    green: int = Field(default=13, ge=0)
    blue: int = Field(default=14, ge=0)

    def for_color(self, color: Color) -> int:
        return getattr(self, color.value)

    def allows(self, draw: CubeDraw) -> bool:
        return draw.count <= self.for_color(draw.color)


class MinCounts(BaseModel):
    """Running per-colour maximum across one record.

    A colour that never appears stays ``None`` and counts as 0 in the power,
    so a record missing any colour has power 0.
    """

    red: Optional[int] = None
    green: Optional[int] = None
    blue: Optional[int] = None

    def observe(self, draw: CubeDraw) -> MinCounts:
        field = draw.color.value
        merged = reduce_optional(getattr(self, field), draw.count, max)
        return self.model_copy(update={field: merged})

    def power(self) -> int:
        return (self.red or 0) * (self.green or 0) * (self.blue or 0)


class RecordOutcome(BaseModel):
    """What one evaluator made of one input line."""

    page: int
    line: int
    game_id: int
    valid: bool | None = None
    violation: CubeDraw | None = None
    min_counts: MinCounts | None = None
    power: int | None = None
    contribution: int = 0


class EvaluationResult(BaseModel):
    mode: str
    source: str
    total: int = 0
    records: List[RecordOutcome] = Field(default_factory=list)
