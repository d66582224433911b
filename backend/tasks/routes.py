"""Task routes."""

import logging
from fastapi import APIRouter
from planner.routes import scheduler
from planner.scheduler import format_schedule
from planner.schemas import ScheduleResponse
from tasks.schemas import RecordScheduleRequest
from tasks.utils import records_to_tasks

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/tasks/schedule", response_model=ScheduleResponse)
def schedule_records(body: RecordScheduleRequest):
    """Schedule stored task rows; completed rows are left out."""
    tasks = records_to_tasks(body.records, body.priority)
    logger.info(f"Scheduling {len(tasks)} of {len(body.records)} stored tasks")
    schedule = scheduler.create_schedule(tasks, body.start_time)
    return ScheduleResponse(schedule=schedule, summary=format_schedule(schedule))
