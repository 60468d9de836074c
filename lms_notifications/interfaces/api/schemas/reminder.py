"""Pydantic models describing reminder scheduling payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lms_notifications.domain.entities import ReminderOffset, Urgency


class ReminderScheduleRequest(BaseModel):
    """Deadline to schedule reminders for."""

    deadline_id: str
    user_id: str
    title: str
    due_date: datetime
    course_id: str | None = None
    course_name: str | None = None
    offsets: list[str] | None = Field(
        default=None,
        description="Offsets to schedule; the recommended ones are used when omitted",
    )
    now: datetime | None = Field(
        default=None, description="Evaluation instant; defaults to the server clock"
    )


class CalculatedReminderRead(BaseModel):
    """Reminder with its resolved trigger time."""

    model_config = ConfigDict(from_attributes=True)

    deadline_id: str
    reminder_key: str
    trigger_time: datetime
    due_date: datetime
    offset: ReminderOffset
    offset_ms: int


class ReminderNotificationRead(BaseModel):
    """Reminder content addressed to the user as of the evaluation instant."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    title: str
    message: str
    due_date: datetime
    deadline_id: str
    urgency: Urgency
    course_id: str | None = None
    course_name: str | None = None


class ReminderScheduleResponse(BaseModel):
    reminders: list[CalculatedReminderRead]
    notification: ReminderNotificationRead


class ReminderCandidate(BaseModel):
    """A previously scheduled reminder to check against the current time."""

    deadline_id: str
    due_date: datetime
    offset: str


class ReminderDueRequest(BaseModel):
    """Candidate reminders fetched by a poller together with its fired set."""

    reminders: list[ReminderCandidate] = Field(default_factory=list)
    fired: list[str] = Field(
        default_factory=list, description="Keys of reminders that already fired"
    )
    tolerance_minutes: int | None = Field(default=None, gt=0)
    now: datetime | None = None


class ReminderDueResponse(BaseModel):
    due: list[CalculatedReminderRead]
    fired: list[str]


__all__ = [
    "CalculatedReminderRead",
    "ReminderCandidate",
    "ReminderDueRequest",
    "ReminderDueResponse",
    "ReminderNotificationRead",
    "ReminderScheduleRequest",
    "ReminderScheduleResponse",
]
