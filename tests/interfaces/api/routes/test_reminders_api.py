"""Integration tests for the reminder endpoints."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

NOW = "2025-01-10T12:00:00+00:00"


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    from lms_notifications.config import reset_settings_cache
    from lms_notifications.main import create_app

    reset_settings_cache()
    with TestClient(create_app()) as test_client:
        yield test_client


def _schedule_payload(**overrides):
    payload = {
        "deadline_id": "dl-1",
        "user_id": "student-1",
        "title": "Research paper",
        "due_date": "2025-01-12T12:00:00+00:00",
        "course_name": "Sociology",
        "now": NOW,
    }
    payload.update(overrides)
    return payload


def test_schedule_uses_recommended_offsets_by_default(client: TestClient) -> None:
    response = client.post("/reminders/schedule", json=_schedule_payload())

    assert response.status_code == 200
    body = response.json()
    assert [item["offset"] for item in body["reminders"]] == ["1_DAY", "6_HOURS"]
    assert body["reminders"][0]["reminder_key"] == "dl-1:1_DAY"
    assert body["reminders"][0]["offset_ms"] == 86_400_000
    assert body["notification"]["urgency"] == "high"
    assert body["notification"]["message"] == (
        'Reminder: "Research paper" is due in 2 days. (Sociology)'
    )


def test_schedule_sorts_requested_offsets(client: TestClient) -> None:
    response = client.post(
        "/reminders/schedule",
        json=_schedule_payload(offsets=["1_HOUR", "1_WEEK", "12_HOURS"]),
    )

    assert response.status_code == 200
    assert [item["offset"] for item in response.json()["reminders"]] == ["12_HOURS", "1_HOUR"]


@pytest.mark.parametrize(
    ("overrides", "detail"),
    [
        ({"title": "  "}, "Title is required"),
        ({"user_id": ""}, "User ID is required"),
        ({"offsets": ["1_DAY", "5_MINUTES"]}, "Invalid reminder offset"),
    ],
)
def test_schedule_rejects_invalid_input(client: TestClient, overrides, detail) -> None:
    response = client.post("/reminders/schedule", json=_schedule_payload(**overrides))

    assert response.status_code == 400
    assert response.json()["detail"] == detail


def test_due_returns_reminders_once(client: TestClient) -> None:
    candidate = {
        "deadline_id": "dl-1",
        "due_date": "2025-01-11T12:00:00+00:00",
        "offset": "1_DAY",
    }
    late = {
        "deadline_id": "dl-2",
        "due_date": "2025-01-10T13:00:00+00:00",
        "offset": "1_HOUR",
    }

    first = client.post(
        "/reminders/due",
        json={"reminders": [candidate, late], "fired": [], "now": "2025-01-10T12:03:00+00:00"},
    )

    assert first.status_code == 200
    body = first.json()
    assert [item["reminder_key"] for item in body["due"]] == ["dl-1:1_DAY", "dl-2:1_HOUR"]
    assert body["fired"] == ["dl-1:1_DAY", "dl-2:1_HOUR"]

    second = client.post(
        "/reminders/due",
        json={"reminders": [candidate], "fired": body["fired"], "now": "2025-01-10T12:04:00+00:00"},
    )

    assert second.json()["due"] == []


def test_due_respects_tolerance(client: TestClient) -> None:
    candidate = {
        "deadline_id": "dl-1",
        "due_date": "2025-01-11T12:00:00+00:00",
        "offset": "1_DAY",
    }

    default = client.post(
        "/reminders/due", json={"reminders": [candidate], "now": "2025-01-10T12:06:00+00:00"}
    )
    widened = client.post(
        "/reminders/due",
        json={
            "reminders": [candidate],
            "now": "2025-01-10T12:06:00+00:00",
            "tolerance_minutes": 10,
        },
    )

    assert default.json()["due"] == []
    assert len(widened.json()["due"]) == 1


def test_due_rejects_unknown_offset(client: TestClient) -> None:
    response = client.post(
        "/reminders/due",
        json={
            "reminders": [
                {"deadline_id": "dl-1", "due_date": "2025-01-11T12:00:00+00:00", "offset": "1_MONTH"}
            ],
            "now": NOW,
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid reminder offset: 1_MONTH"
