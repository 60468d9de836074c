"""Domain entities describing pre-deadline reminders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ReminderOffset(str, Enum):
    """Named durations a reminder can fire ahead of its deadline."""

    ONE_HOUR = "1_HOUR"
    THREE_HOURS = "3_HOURS"
    SIX_HOURS = "6_HOURS"
    TWELVE_HOURS = "12_HOURS"
    ONE_DAY = "1_DAY"
    TWO_DAYS = "2_DAYS"
    THREE_DAYS = "3_DAYS"
    ONE_WEEK = "1_WEEK"


class Urgency(str, Enum):
    """How close a deadline is; drives the wording of deadline messages."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


@dataclass
class ReminderConfig:
    """Request to remind ``user_id`` about ``deadline_id`` ahead of ``due_date``."""

    deadline_id: str
    due_date: datetime
    offset: ReminderOffset | str
    user_id: str
    title: str
    course_id: str | None = None
    course_name: str | None = None


@dataclass(frozen=True)
class CalculatedReminder:
    """A reminder with its absolute trigger time resolved."""

    deadline_id: str
    trigger_time: datetime
    due_date: datetime
    offset: ReminderOffset
    offset_ms: int

    @property
    def reminder_key(self) -> str:
        """Identifier used to remember that this reminder already fired."""

        return f"{self.deadline_id}:{self.offset.value}"


@dataclass(frozen=True)
class ReminderNotification:
    """Content generated for a deadline reminder addressed to a user."""

    user_id: str
    title: str
    message: str
    due_date: datetime
    deadline_id: str
    urgency: Urgency
    course_id: str | None = None
    course_name: str | None = None


__all__ = [
    "CalculatedReminder",
    "ReminderConfig",
    "ReminderNotification",
    "ReminderOffset",
    "Urgency",
]
