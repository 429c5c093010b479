# rota_core/models.py
from __future__ import annotations
import re
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, validator

MAX_GROUPS = 10

TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class Group(BaseModel):
    id: int
    employees: List[str] = Field(default_factory=list)

    @validator("employees", pre=True)
    def _never_none(cls, v):
        return [] if v is None else v


class TimeSlot(BaseModel):
    start: str = "00:00"
    end: str = "00:00"

    @validator("start", "end")
    def _hhmm(cls, v):
        if not TIME_RE.match(v):
            raise ValueError("Invalid time format (HH:MM)")
        return v

    def label(self) -> str:
        return f"{self.start} - {self.end}"


class RotaConfig(BaseModel):
    num_groups: int = 3
    policy: Literal["shift", "shuffle"] = "shift"
    time_slots: List[TimeSlot] = Field(default_factory=list)
    export_prefix: str = "Rota_Schedule"
    log_level: str = "INFO"

    @validator("num_groups")
    def _in_range(cls, v):
        if not 1 <= v <= MAX_GROUPS:
            raise ValueError(f"num_groups must be between 1 and {MAX_GROUPS}")
        return v


class ScheduleResult(BaseModel):
    groups: List[Group] = Field(default_factory=list)
    day_index: int = 0
    policy: str = "shift"
    scheduled_count: int = 0
    excluded_count: int = 0
    error: Optional[str] = None
