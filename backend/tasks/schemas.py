"""Task schemas — stored task rows as the data layer hands them over."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from planner.schemas import Priority


class TaskRecord(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[str] = None
    due_time: Optional[str] = None  # 24-hour HH:mm
    difficulty: Literal["easy", "medium", "hard"] = "easy"
    duration: int = Field(gt=0)  # minutes
    task_type: Literal["one-time", "multi-day"] = "one-time"
    status: Literal["pending", "completed"] = "pending"


class RecordScheduleRequest(BaseModel):
    records: List[TaskRecord]
    start_time: Optional[datetime] = None
    priority: Priority = "medium"
