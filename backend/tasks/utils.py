"""Translate stored task rows into planner tasks."""

from typing import Iterable, List

from planner.schemas import Priority, Task
from tasks.schemas import TaskRecord


def record_to_task(record: TaskRecord, priority: Priority = "medium") -> Task:
    # The planner only knows easy/hard; anything above easy counts as hard
    difficulty = "easy" if record.difficulty == "easy" else "hard"
    return Task(
        id=record.id,
        name=record.title,
        description=record.description,
        duration=record.duration,
        difficulty=difficulty,
        priority=priority,
    )


def records_to_tasks(records: Iterable[TaskRecord], priority: Priority = "medium") -> List[Task]:
    """Skip completed rows, keep the rest in their stored order."""
    return [record_to_task(r, priority) for r in records if r.status != "completed"]
