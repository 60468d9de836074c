"""Classification of deadlines by how much time is left."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Final

from lms_notifications.domain.entities import Urgency

_ZERO: Final[timedelta] = timedelta(0)
_MINUTE: Final[timedelta] = timedelta(minutes=1)
_HOUR: Final[timedelta] = timedelta(hours=1)

URGENT_WINDOW: Final[timedelta] = timedelta(hours=24)
HIGH_WINDOW: Final[timedelta] = timedelta(hours=48)
MEDIUM_WINDOW: Final[timedelta] = timedelta(hours=168)


def _time_until(due_date: datetime, now: datetime) -> timedelta:
    if not isinstance(due_date, datetime) or not isinstance(now, datetime):
        raise TypeError("due_date and now must both be datetime instances")
    return due_date - now


def classify_urgency(due_date: datetime, now: datetime) -> Urgency:
    """Return the urgency of a deadline due at ``due_date`` as seen at ``now``.

    Each window is inclusive of its upper bound: exactly 24 hours left is
    ``URGENT``, exactly 48 hours is ``HIGH`` and exactly 168 hours is
    ``MEDIUM``. Overdue deadlines are ``URGENT``.
    """

    remaining = _time_until(due_date, now)
    if remaining <= URGENT_WINDOW:
        return Urgency.URGENT
    if remaining <= HIGH_WINDOW:
        return Urgency.HIGH
    if remaining <= MEDIUM_WINDOW:
        return Urgency.MEDIUM
    return Urgency.LOW


def is_overdue(due_date: datetime, now: datetime) -> bool:
    return _time_until(due_date, now) <= _ZERO


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_time_remaining(due_date: datetime, now: datetime) -> str:
    """Describe the time left before ``due_date`` using its largest whole unit."""

    remaining = _time_until(due_date, now)
    if remaining <= _ZERO:
        return "Overdue"

    hours = remaining // _HOUR
    days = hours // 24
    if days > 0:
        return _pluralize(days, "day")
    if hours > 0:
        return _pluralize(hours, "hour")
    return _pluralize(remaining // _MINUTE, "minute")


__all__ = [
    "HIGH_WINDOW",
    "MEDIUM_WINDOW",
    "URGENT_WINDOW",
    "classify_urgency",
    "format_time_remaining",
    "is_overdue",
]
