"""
Study-session scheduler.

Greedy single pass: tasks go in priority order, long tasks are cut into
focus segments, and short/long breaks are woven in between them.
adjust_schedule() repairs an existing agenda locally when one task runs
shorter or longer than planned.
"""

import itertools
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from planner.clock import add_minutes, format_time, minutes_between, on_same_day, parse_time_of_day
from planner.schemas import AdjustResult, ScheduledTask, Task

logger = logging.getLogger(__name__)

SHORT_BREAK_DURATION = 10     # minutes
LONG_BREAK_DURATION = 45      # minutes
MAX_SEGMENT_DURATION = 45     # minutes
WORK_BEFORE_LONG_BREAK = 180  # minutes (3 hours)

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def _segment_lengths(duration: int) -> List[int]:
    """45-minute chunks, remainder last."""
    lengths = []
    remaining = duration
    while remaining > 0:
        take = min(remaining, MAX_SEGMENT_DURATION)
        lengths.append(take)
        remaining -= take
    return lengths


class Scheduler:
    """Builds and repairs study agendas.

    Each instance hands out its own break ids (break-1, break-2, ...), so two
    schedules built in quick succession never share an id.
    """

    def __init__(self):
        self._break_ids = itertools.count(1)

    def _make_break(self, name: str, minutes: int, start: datetime) -> ScheduledTask:
        return ScheduledTask(
            id=f"break-{next(self._break_ids)}",
            name=name,
            duration=minutes,
            difficulty="easy",
            priority="low",
            start_time=start,
            end_time=add_minutes(start, minutes),
            is_break=True,
            break_duration=minutes,
        )

    def create_schedule(
        self,
        tasks: Iterable[Task],
        start_time: Optional[datetime] = None,
    ) -> List[ScheduledTask]:
        if start_time is None:
            start_time = datetime.now()

        # sorted() is stable: equal priorities keep their input order
        ordered = sorted(tasks, key=lambda t: PRIORITY_ORDER[t.priority])

        schedule: List[ScheduledTask] = []
        current_time = start_time
        total_work_time = 0

        for task in ordered:
            preferred_start = None
            if task.preferred_time_window and task.preferred_time_window.start:
                preferred_start = parse_time_of_day(task.preferred_time_window.start)

            for length in _segment_lengths(task.duration):
                if total_work_time >= WORK_BEFORE_LONG_BREAK:
                    long_break = self._make_break("Long Break", LONG_BREAK_DURATION, current_time)
                    schedule.append(long_break)
                    current_time = long_break.end_time
                    total_work_time = 0

                # Soft hint: only ever pulls the clock forward
                if preferred_start is not None:
                    wanted = on_same_day(current_time, preferred_start)
                    if wanted > current_time:
                        current_time = wanted

                if schedule and not schedule[-1].is_break:
                    short_break = self._make_break("Short Break", SHORT_BREAK_DURATION, current_time)
                    schedule.append(short_break)
                    current_time = short_break.end_time

                end_time = add_minutes(current_time, length)
                schedule.append(ScheduledTask(
                    **task.model_dump(include=set(Task.model_fields)),
                    start_time=current_time,
                    end_time=end_time,
                    is_break=False,
                ))
                current_time = end_time
                total_work_time += length

        if schedule:
            logger.debug(
                f"Built schedule: {len(schedule)} entries, "
                f"{format_time(schedule[0].start_time)} - {format_time(schedule[-1].end_time)}"
            )
        return schedule

    def adjust_schedule(
        self,
        schedule: List[ScheduledTask],
        task_id: str,
        actual_duration: int,
    ) -> AdjustResult:
        if actual_duration < 0:
            raise ValueError(f"actual_duration must be >= 0, got {actual_duration}")

        index = next(
            (i for i, entry in enumerate(schedule) if entry.id == task_id and not entry.is_break),
            None,
        )
        if index is None:
            return AdjustResult(new_schedule=[e.model_copy(deep=True) for e in schedule], adjustments=[])

        target = schedule[index]
        planned = minutes_between(target.start_time, target.end_time)
        if actual_duration - planned == 0:
            return AdjustResult(new_schedule=[e.model_copy(deep=True) for e in schedule], adjustments=[])

        new_schedule = [e.model_copy(deep=True) for e in schedule[:index]]
        new_schedule.append(target.model_copy(deep=True, update={
            "end_time": add_minutes(target.start_time, actual_duration),
        }))

        # Cascade: each later entry keeps its length and follows the previous one.
        # Break placement is not re-derived here.
        adjustments = []
        current_time = new_schedule[-1].end_time
        for entry in schedule[index + 1:]:
            length = minutes_between(entry.start_time, entry.end_time)
            moved = entry.model_copy(deep=True, update={
                "start_time": current_time,
                "end_time": add_minutes(current_time, length),
            })
            new_schedule.append(moved)
            current_time = moved.end_time
            if not moved.is_break:
                adjustments.append(f'Task "{moved.name}" moved to {format_time(moved.start_time)}')

        logger.info(
            f"Adjusted task {task_id}: {planned}m -> {actual_duration}m, "
            f"{len(adjustments)} later task(s) moved"
        )
        return AdjustResult(new_schedule=new_schedule, adjustments=adjustments)


def format_schedule(schedule: Iterable[ScheduledTask]) -> str:
    lines = []
    for entry in schedule:
        time_range = f"{format_time(entry.start_time)} - {format_time(entry.end_time)}"
        if entry.is_break:
            lines.append(f"{time_range}: {entry.name} ({entry.break_duration} minutes)")
        else:
            lines.append(f"{time_range}: {entry.name} ({entry.difficulty}, {entry.priority} priority)")
    return "\n".join(lines)


_default_scheduler = Scheduler()


def create_schedule(tasks: Iterable[Task], start_time: Optional[datetime] = None) -> List[ScheduledTask]:
    return _default_scheduler.create_schedule(tasks, start_time)


def adjust_schedule(schedule: List[ScheduledTask], task_id: str, actual_duration: int) -> AdjustResult:
    return _default_scheduler.adjust_schedule(schedule, task_id, actual_duration)
