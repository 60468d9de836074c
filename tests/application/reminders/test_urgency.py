"""Tests for deadline urgency classification and remaining-time wording."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lms_notifications.application.use_cases.reminders import (
    classify_urgency,
    format_time_remaining,
)
from lms_notifications.domain.entities import Urgency

NOW = datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)
MS = timedelta(milliseconds=1)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (-timedelta(hours=3), Urgency.URGENT),
        (timedelta(0), Urgency.URGENT),
        (timedelta(hours=24), Urgency.URGENT),
        (timedelta(hours=24) + MS, Urgency.HIGH),
        (timedelta(hours=48), Urgency.HIGH),
        (timedelta(hours=48) + MS, Urgency.MEDIUM),
        (timedelta(hours=168), Urgency.MEDIUM),
        (timedelta(hours=168) + MS, Urgency.LOW),
        (timedelta(days=30), Urgency.LOW),
    ],
)
def test_classify_urgency_boundaries(delta, expected):
    assert classify_urgency(NOW + delta, NOW) is expected


def test_classify_urgency_rejects_non_datetime():
    with pytest.raises(TypeError):
        classify_urgency("tomorrow", NOW)


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (0, "Overdue"),
        (1, "1 minute"),
        (59, "59 minutes"),
        (60, "1 hour"),
        (61, "1 hour"),
        (119, "1 hour"),
        (120, "2 hours"),
        (23 * 60 + 59, "23 hours"),
        (24 * 60, "1 day"),
        (24 * 60 + 1, "1 day"),
        (48 * 60, "2 days"),
    ],
)
def test_format_time_remaining_uses_largest_whole_unit(minutes, expected):
    assert format_time_remaining(NOW + timedelta(minutes=minutes), NOW) == expected


def test_format_time_remaining_for_sub_minute_and_overdue():
    assert format_time_remaining(NOW + timedelta(seconds=30), NOW) == "0 minutes"
    assert format_time_remaining(NOW - timedelta(days=2), NOW) == "Overdue"
