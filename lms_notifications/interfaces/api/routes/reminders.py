"""Endpoints computing reminder schedules and due reminders."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta

from fastapi import APIRouter, HTTPException, status

from lms_notifications.application.use_cases.notifications import (
    generate_reminder_notification,
)
from lms_notifications.application.use_cases.reminders import (
    collect_due,
    default_offsets,
    reminder_for,
    schedule_multiple,
    sort_by_time,
    validate_config,
)
from lms_notifications.config import get_settings
from lms_notifications.domain.entities import CalculatedReminder, ReminderConfig
from lms_notifications.interfaces.api.routes_helpers import raise_for_invalid, resolve_now
from lms_notifications.interfaces.api.schemas import (
    CalculatedReminderRead,
    ReminderCandidate,
    ReminderDueRequest,
    ReminderDueResponse,
    ReminderNotificationRead,
    ReminderScheduleRequest,
    ReminderScheduleResponse,
)
from lms_notifications.utils import ensure_app_timezone

router = APIRouter(prefix="/reminders", tags=["reminders"])


def _candidate_to_reminder(candidate: ReminderCandidate) -> CalculatedReminder:
    due_date: datetime = ensure_app_timezone(candidate.due_date)
    try:
        return reminder_for(candidate.deadline_id, due_date, candidate.offset)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid reminder offset: {candidate.offset}",
        ) from exc


@router.post("/schedule", response_model=ReminderScheduleResponse)
def schedule_reminders(payload: ReminderScheduleRequest) -> ReminderScheduleResponse:
    """Return the future reminders for a deadline, earliest first."""

    now = resolve_now(payload.now)
    due_date = ensure_app_timezone(payload.due_date)
    recommended = default_offsets(due_date, now)

    base = ReminderConfig(
        deadline_id=payload.deadline_id,
        due_date=due_date,
        offset=recommended[0],
        user_id=payload.user_id,
        title=payload.title,
        course_id=payload.course_id,
        course_name=payload.course_name,
    )
    raise_for_invalid(validate_config(base))

    offsets = payload.offsets if payload.offsets is not None else recommended
    for offset in offsets:
        raise_for_invalid(validate_config(replace(base, offset=offset)))

    reminders = sort_by_time(schedule_multiple(base, offsets, now))
    notification = generate_reminder_notification(base, now)
    return ReminderScheduleResponse(
        reminders=[CalculatedReminderRead.model_validate(reminder) for reminder in reminders],
        notification=ReminderNotificationRead.model_validate(notification),
    )


@router.post("/due", response_model=ReminderDueResponse)
def due_reminders(payload: ReminderDueRequest) -> ReminderDueResponse:
    """Return the reminders to fire now along with the updated fired keys."""

    now = resolve_now(payload.now)
    minutes = payload.tolerance_minutes or get_settings().reminder_tolerance_minutes
    reminders = [_candidate_to_reminder(candidate) for candidate in payload.reminders]

    due, fired = collect_due(
        reminders, now, payload.fired, tolerance=timedelta(minutes=minutes)
    )
    return ReminderDueResponse(
        due=[CalculatedReminderRead.model_validate(reminder) for reminder in due],
        fired=sorted(fired),
    )


__all__ = ["router"]
