"""
Tests for the HTTP API.

Exercises /schedule, /schedule/adjust, /schedule/format, /tasks/schedule
and /health through FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from server import app

START = "2026-01-05T09:00:00"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def build(client, tasks):
    resp = client.post("/schedule", json={"tasks": tasks, "start_time": START})
    assert resp.status_code == 200
    return resp.json()


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestScheduleEndpoint:
    def test_builds_schedule_and_summary(self, client):
        data = build(client, [
            {"id": "t1", "name": "Essay", "duration": 90, "priority": "medium"},
        ])

        assert [e["is_break"] for e in data["schedule"]] == [False, True, False]
        assert data["schedule"][0]["start_time"] == START
        assert data["schedule"][2]["end_time"] == "2026-01-05T10:40:00"
        assert data["summary"].splitlines()[1] == "9:45 AM - 9:55 AM: Short Break (10 minutes)"

    def test_empty_task_list(self, client):
        assert build(client, []) == {"schedule": [], "summary": ""}

    def test_preferred_window_round_trips(self, client):
        data = build(client, [
            {"id": "t1", "name": "Lab", "duration": 30,
             "preferred_time_window": {"start": "10:00 AM", "end": "11:00 AM"}},
        ])

        entry = data["schedule"][0]
        assert entry["start_time"] == "2026-01-05T10:00:00"
        assert entry["preferred_time_window"] == {"start": "10:00 AM", "end": "11:00 AM"}

    @pytest.mark.parametrize("task", [
        {"id": "t1", "name": "x", "duration": 0},
        {"id": "t1", "name": "x", "duration": -10},
        {"id": "t1", "name": "x", "duration": 10, "priority": "urgent"},
        {"id": "t1", "name": "x", "duration": 10, "difficulty": "medium"},
    ])
    def test_invalid_task_is_rejected(self, client, task):
        resp = client.post("/schedule", json={"tasks": [task], "start_time": START})

        assert resp.status_code == 422


class TestAdjustEndpoint:
    def test_shifts_later_tasks(self, client):
        schedule = build(client, [
            {"id": "t1", "name": "t1", "duration": 30, "priority": "high"},
            {"id": "t2", "name": "t2", "duration": 30, "priority": "high"},
        ])["schedule"]

        resp = client.post("/schedule/adjust", json={
            "schedule": schedule, "task_id": "t1", "actual_duration": 45,
        })

        assert resp.status_code == 200
        data = resp.json()
        assert data["adjustments"] == ['Task "t2" moved to 9:55 AM']
        assert data["new_schedule"][2]["start_time"] == "2026-01-05T09:55:00"
        assert data["new_schedule"][2]["end_time"] == "2026-01-05T10:25:00"

    def test_unknown_task_is_a_no_op(self, client):
        schedule = build(client, [{"id": "t1", "name": "t1", "duration": 30}])["schedule"]

        resp = client.post("/schedule/adjust", json={
            "schedule": schedule, "task_id": "nope", "actual_duration": 45,
        })

        assert resp.status_code == 200
        assert resp.json() == {"new_schedule": schedule, "adjustments": []}

    def test_negative_duration_is_rejected(self, client):
        schedule = build(client, [{"id": "t1", "name": "t1", "duration": 30}])["schedule"]

        resp = client.post("/schedule/adjust", json={
            "schedule": schedule, "task_id": "t1", "actual_duration": -1,
        })

        assert resp.status_code == 422


class TestFormatEndpoint:
    def test_renders_lines(self, client):
        schedule = build(client, [
            {"id": "t1", "name": "Flashcards", "duration": 20, "difficulty": "hard", "priority": "low"},
        ])["schedule"]

        resp = client.post("/schedule/format", json={"schedule": schedule})

        assert resp.status_code == 200
        assert resp.json()["text"] == "9:00 AM - 9:20 AM: Flashcards (hard, low priority)"


class TestTaskRecordsEndpoint:
    def test_schedules_pending_records(self, client):
        resp = client.post("/tasks/schedule", json={
            "start_time": START,
            "priority": "high",
            "records": [
                {"id": "r1", "title": "Stats homework", "duration": 30, "difficulty": "medium"},
                {"id": "r2", "title": "Old quiz", "duration": 30, "status": "completed"},
                {"id": "r3", "title": "Read paper", "duration": 20},
            ],
        })

        assert resp.status_code == 200
        data = resp.json()
        assert [e["id"] for e in data["schedule"] if not e["is_break"]] == ["r1", "r3"]
        assert data["summary"].splitlines() == [
            "9:00 AM - 9:30 AM: Stats homework (hard, high priority)",
            "9:30 AM - 9:40 AM: Short Break (10 minutes)",
            "9:40 AM - 10:00 AM: Read paper (easy, high priority)",
        ]
