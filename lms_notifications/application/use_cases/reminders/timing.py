"""Conversion of named reminder offsets into durations and trigger times."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Final

from lms_notifications.domain.entities import (
    CalculatedReminder,
    ReminderConfig,
    ReminderOffset,
)

_HOUR: Final[timedelta] = timedelta(hours=1)
_DAY: Final[timedelta] = timedelta(days=1)
_MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)

_OFFSET_DURATIONS: Final[dict[ReminderOffset, timedelta]] = {
    ReminderOffset.ONE_HOUR: _HOUR,
    ReminderOffset.THREE_HOURS: 3 * _HOUR,
    ReminderOffset.SIX_HOURS: 6 * _HOUR,
    ReminderOffset.TWELVE_HOURS: 12 * _HOUR,
    ReminderOffset.ONE_DAY: _DAY,
    ReminderOffset.TWO_DAYS: 2 * _DAY,
    ReminderOffset.THREE_DAYS: 3 * _DAY,
    ReminderOffset.ONE_WEEK: 7 * _DAY,
}


def coerce_offset(offset: ReminderOffset | str) -> ReminderOffset:
    """Return ``offset`` as a :class:`ReminderOffset`.

    Raises ``ValueError`` when the value is not one of the named offsets.
    """

    return ReminderOffset(offset)


def duration_of(offset: ReminderOffset | str) -> timedelta:
    """Return the fixed duration represented by ``offset``."""

    return _OFFSET_DURATIONS[coerce_offset(offset)]


def offset_milliseconds(offset: ReminderOffset | str) -> int:
    """Return the duration of ``offset`` expressed in whole milliseconds."""

    return duration_of(offset) // _MILLISECOND


def trigger_time(due_date: datetime, offset: ReminderOffset | str) -> datetime:
    """Return the instant a reminder with ``offset`` fires before ``due_date``.

    The subtraction is exact and the result keeps the ``tzinfo`` of
    ``due_date``.
    """

    if not isinstance(due_date, datetime):
        raise TypeError(f"due_date must be a datetime, got {type(due_date).__name__}")
    return due_date - duration_of(offset)


def reminder_for(
    deadline_id: str, due_date: datetime, offset: ReminderOffset | str
) -> CalculatedReminder:
    """Return the reminder firing ``offset`` before ``due_date``.

    Raises ``ValueError`` for an unknown offset.
    """

    offset = coerce_offset(offset)
    return CalculatedReminder(
        deadline_id=deadline_id,
        trigger_time=trigger_time(due_date, offset),
        due_date=due_date,
        offset=offset,
        offset_ms=offset_milliseconds(offset),
    )


def calculate_reminder(config: ReminderConfig) -> CalculatedReminder:
    """Resolve ``config`` into a :class:`CalculatedReminder`."""

    if config is None:
        raise TypeError("A reminder configuration is required")

    return reminder_for(config.deadline_id, config.due_date, config.offset)


__all__ = [
    "calculate_reminder",
    "coerce_offset",
    "duration_of",
    "offset_milliseconds",
    "reminder_for",
    "trigger_time",
]
