from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .scoring.frame import FrameStatus


class RollEventIn(BaseModel):
    type: Literal["ROLL", "MISS", "SPARE", "STRIKE"]
    pins: Optional[int] = Field(default=None, ge=0, le=10)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _pins_only_for_rolls(self) -> "RollEventIn":
        if self.type == "ROLL" and self.pins is None:
            raise ValueError("pins is required for ROLL events")
        if self.type != "ROLL" and self.pins is not None:
            raise ValueError(f"pins is not allowed for {self.type} events")
        return self


class ScoreRequest(BaseModel):
    rolls: Optional[str] = Field(default=None, max_length=64)
    events: Optional[List[RollEventIn]] = Field(default=None, max_length=64)

    model_config = ConfigDict(extra="forbid")

    @field_validator("rolls", mode="before")
    @classmethod
    def _strip_rolls(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class FrameOut(BaseModel):
    number: int
    rolls: List[int]
    status: FrameStatus
    score: int
    runningTotal: int


class ScoreOut(BaseModel):
    frames: List[FrameOut]
    total: int
    frameCount: int
    complete: bool
