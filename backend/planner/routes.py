"""Schedule routes: build, adjust and render study agendas."""

from fastapi import APIRouter, HTTPException
from planner.scheduler import Scheduler, format_schedule
from planner.schemas import (
    AdjustRequest,
    AdjustResponse,
    FormatRequest,
    FormatResponse,
    ScheduleRequest,
    ScheduleResponse,
)

router = APIRouter()

scheduler = Scheduler()


@router.post("/schedule", response_model=ScheduleResponse)
def build_schedule(body: ScheduleRequest):
    schedule = scheduler.create_schedule(body.tasks, body.start_time)
    return ScheduleResponse(schedule=schedule, summary=format_schedule(schedule))


@router.post("/schedule/adjust", response_model=AdjustResponse)
def adjust_schedule(body: AdjustRequest):
    """Re-flow the agenda after a task ran shorter or longer than planned."""
    try:
        result = scheduler.adjust_schedule(body.schedule, body.task_id, body.actual_duration)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AdjustResponse(**result.model_dump())


@router.post("/schedule/format", response_model=FormatResponse)
def render_schedule(body: FormatRequest):
    return FormatResponse(text=format_schedule(body.schedule))
