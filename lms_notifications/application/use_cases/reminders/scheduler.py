"""Scheduling decisions for deadline reminders.

The scheduler owns no clock and no timers. A poller calls :func:`collect_due`
(or :func:`is_due`) on every tick with the current time and the identifiers
of reminders that already fired.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from operator import attrgetter
from typing import Final

from lms_notifications.domain.entities import (
    CalculatedReminder,
    ReminderConfig,
    ReminderOffset,
)

from .timing import calculate_reminder

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE: Final[timedelta] = timedelta(minutes=5)
_ZERO: Final[timedelta] = timedelta(0)

_DEFAULT_OFFSET_TABLE: Final[tuple[tuple[timedelta, tuple[ReminderOffset, ...]], ...]] = (
    (
        timedelta(days=1),
        (ReminderOffset.SIX_HOURS, ReminderOffset.THREE_HOURS, ReminderOffset.ONE_HOUR),
    ),
    (
        timedelta(days=3),
        (ReminderOffset.TWO_DAYS, ReminderOffset.ONE_DAY, ReminderOffset.SIX_HOURS),
    ),
    (
        timedelta(days=7),
        (ReminderOffset.THREE_DAYS, ReminderOffset.TWO_DAYS, ReminderOffset.ONE_DAY),
    ),
)
_FALLBACK_OFFSETS: Final[tuple[ReminderOffset, ...]] = (
    ReminderOffset.ONE_WEEK,
    ReminderOffset.THREE_DAYS,
    ReminderOffset.ONE_DAY,
)


def is_schedulable(trigger_time: datetime, now: datetime) -> bool:
    """Return whether a reminder firing at ``trigger_time`` is still ahead."""

    return trigger_time > now


def schedule_multiple(
    config: ReminderConfig,
    offsets: Iterable[ReminderOffset | str],
    now: datetime,
) -> list[CalculatedReminder]:
    """Return one reminder per offset, dropping those whose time has passed.

    ``config.offset`` is ignored; each entry of ``offsets`` replaces it. The
    result keeps the order of ``offsets``.
    """

    reminders: list[CalculatedReminder] = []
    for offset in offsets:
        reminder = calculate_reminder(replace(config, offset=offset))
        if not is_schedulable(reminder.trigger_time, now):
            logger.debug(
                "Dropping reminder %s for deadline %s: trigger time %s is not after %s",
                reminder.offset.value,
                reminder.deadline_id,
                reminder.trigger_time.isoformat(),
                now.isoformat(),
            )
            continue
        reminders.append(reminder)
    return reminders


def sort_by_time(reminders: Iterable[CalculatedReminder]) -> list[CalculatedReminder]:
    """Return ``reminders`` ordered by trigger time, earliest first.

    The sort is stable so reminders sharing a trigger time keep their
    relative order.
    """

    return sorted(reminders, key=attrgetter("trigger_time"))


def is_due(
    trigger_time: datetime,
    now: datetime,
    tolerance: timedelta = DEFAULT_TOLERANCE,
) -> bool:
    """Return whether ``now`` falls within ``[trigger_time, trigger_time + tolerance]``."""

    elapsed = now - trigger_time
    return _ZERO <= elapsed <= tolerance


def filter_due(
    reminders: Iterable[CalculatedReminder],
    now: datetime,
    tolerance: timedelta = DEFAULT_TOLERANCE,
) -> list[CalculatedReminder]:
    """Return the reminders that should fire at ``now``."""

    return [
        reminder
        for reminder in reminders
        if is_due(reminder.trigger_time, now, tolerance)
    ]


def collect_due(
    reminders: Iterable[CalculatedReminder],
    now: datetime,
    fired: Iterable[str] = (),
    tolerance: timedelta = DEFAULT_TOLERANCE,
) -> tuple[list[CalculatedReminder], frozenset[str]]:
    """Return the reminders to fire now and the updated set of fired keys.

    Reminders whose :attr:`CalculatedReminder.reminder_key` is already in
    ``fired`` are skipped, so repeated polls within the tolerance window fire
    each reminder once. ``fired`` itself is not modified.
    """

    already_fired = frozenset(fired)
    due: list[CalculatedReminder] = []
    newly_fired: set[str] = set()
    for reminder in filter_due(reminders, now, tolerance):
        key = reminder.reminder_key
        if key in already_fired or key in newly_fired:
            continue
        newly_fired.add(key)
        due.append(reminder)
    return due, already_fired | newly_fired


def default_offsets(due_date: datetime, now: datetime) -> list[ReminderOffset]:
    """Return the recommended reminder offsets for a deadline at ``due_date``."""

    remaining = due_date - now
    for limit, offsets in _DEFAULT_OFFSET_TABLE:
        if remaining <= limit:
            return list(offsets)
    return list(_FALLBACK_OFFSETS)


def schedule_default(config: ReminderConfig, now: datetime) -> list[CalculatedReminder]:
    """Schedule the default offsets for ``config`` sorted by trigger time."""

    offsets: Sequence[ReminderOffset] = default_offsets(config.due_date, now)
    return sort_by_time(schedule_multiple(config, offsets, now))


__all__ = [
    "DEFAULT_TOLERANCE",
    "collect_due",
    "default_offsets",
    "filter_due",
    "is_due",
    "is_schedulable",
    "schedule_default",
    "schedule_multiple",
    "sort_by_time",
]
