"""
Test configuration — puts backend/ on sys.path and pins the clock.

This allows tests to import the top-level packages (server, planner, tasks)
the same way the running app does.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

BACKEND_DIR = Path(__file__).parent.parent / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


@pytest.fixture
def nine_am():
    """Monday 9:00 AM — every schedule in the suite starts from a fixed point."""
    return datetime(2026, 1, 5, 9, 0)


@pytest.fixture
def make_task():
    from planner.schemas import Task

    def _make(id, duration, priority="high", **kwargs):
        return Task(id=id, name=kwargs.pop("name", id), duration=duration, priority=priority, **kwargs)

    return _make
