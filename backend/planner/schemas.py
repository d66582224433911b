"""Planner schemas — tasks in, scheduled entries out."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

Difficulty = Literal["easy", "hard"]
Priority = Literal["high", "medium", "low"]


class TimeWindow(BaseModel):
    start: Optional[str] = None  # e.g. "9:00 AM"
    end: Optional[str] = None


class Task(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    duration: int = Field(gt=0)  # minutes
    difficulty: Difficulty = "easy"
    priority: Priority = "medium"
    preferred_time_window: Optional[TimeWindow] = None


class ScheduledTask(Task):
    start_time: datetime
    end_time: datetime
    is_break: bool = False
    break_duration: Optional[int] = None


class AdjustResult(BaseModel):
    new_schedule: List[ScheduledTask]
    adjustments: List[str]


# ─── Requests / responses ────────────────────────────────────

class ScheduleRequest(BaseModel):
    tasks: List[Task]
    start_time: Optional[datetime] = None


class ScheduleResponse(BaseModel):
    schedule: List[ScheduledTask]
    summary: str


class AdjustRequest(BaseModel):
    schedule: List[ScheduledTask]
    task_id: str
    actual_duration: int = Field(ge=0)  # minutes


class AdjustResponse(AdjustResult):
    pass


class FormatRequest(BaseModel):
    schedule: List[ScheduledTask]


class FormatResponse(BaseModel):
    text: str
