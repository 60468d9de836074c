"""Compose notification content for upstream learning events.

Every composer is a pure function of its arguments. Composers that depend on
the current time receive ``now`` explicitly.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Final

from lms_notifications.application.use_cases.reminders.timing import (
    calculate_reminder,
)
from lms_notifications.application.use_cases.reminders.urgency import (
    classify_urgency,
    format_time_remaining,
    is_overdue,
)
from lms_notifications.domain.entities import (
    Notification,
    NotificationCategory,
    NotificationContent,
    NotificationPriority,
    ReminderConfig,
    ReminderNotification,
    Urgency,
)
from lms_notifications.utils import format_short_date

DEFAULT_PREVIEW_LENGTH: Final[int] = 100
ELLIPSIS: Final[str] = "..."

URGENT_DEADLINE_TITLE: Final[str] = "⏰ Urgent Deadline"
DEADLINE_REMINDER_TITLE: Final[str] = "📅 Deadline Reminder"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}".rstrip("0").rstrip(".")


def message_preview(message: str, max_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Return ``message`` cut to ``max_length`` characters plus ``"..."``.

    Messages that already fit are returned unchanged. The cut is a hard
    character cut; word boundaries are not considered.
    """

    if max_length < 0:
        raise ValueError("max_length must not be negative")
    if len(message) <= max_length:
        return message
    return message[:max_length] + ELLIPSIS


def truncate_body(
    content: NotificationContent, max_length: int
) -> NotificationContent:
    """Return ``content`` with its body shortened using the preview rule."""

    return NotificationContent(
        title=content.title,
        body=message_preview(content.body, max_length),
        action_url=content.action_url,
        action_text=content.action_text,
    )


def compose_grade_notification(
    assignment_title: str,
    grade: float,
    max_grade: float,
    feedback_url: str,
) -> NotificationContent:
    """Describe a posted grade with the score and rounded percentage."""

    if max_grade <= 0:
        raise ValueError("max_grade must be greater than zero")

    percentage = _round_half_up(grade / max_grade * 100)
    score = f"{_format_number(grade)}/{_format_number(max_grade)}"
    return NotificationContent(
        title=f"Assignment Graded: {assignment_title}",
        body=(
            f'Your assignment "{assignment_title}" has been graded. '
            f"You scored {score} ({percentage}%). Click to view detailed feedback."
        ),
        action_url=feedback_url,
        action_text="View Feedback",
    )


def compose_assignment_notification(
    assignment_title: str,
    course_name: str,
    due_date: datetime,
    assignment_url: str,
) -> NotificationContent:
    """Announce a newly posted assignment and when it is due."""

    return NotificationContent(
        title=f"New Assignment: {assignment_title}",
        body=(
            f'A new assignment "{assignment_title}" has been posted in {course_name}. '
            f"Due date: {format_short_date(due_date)}."
        ),
        action_url=assignment_url,
        action_text="View Assignment",
    )


def deadline_title(urgency: Urgency) -> str:
    return URGENT_DEADLINE_TITLE if urgency is Urgency.URGENT else DEADLINE_REMINDER_TITLE


def deadline_message(
    title: str,
    due_date: datetime,
    now: datetime,
    *,
    course_name: str | None = None,
) -> tuple[str, Urgency]:
    """Return the deadline wording for ``title`` together with its urgency."""

    urgency = classify_urgency(due_date, now)
    remaining = format_time_remaining(due_date, now)

    if urgency is Urgency.URGENT:
        if is_overdue(due_date, now):
            message = f'"{title}" is overdue! Please submit as soon as possible.'
        else:
            message = f'"{title}" is due in {remaining}! Don\'t forget to submit.'
    elif urgency is Urgency.HIGH:
        message = f'Reminder: "{title}" is due in {remaining}.'
    else:
        message = f'Upcoming: "{title}" is due in {remaining}.'

    if course_name:
        message += f" ({course_name})"
    return message, urgency


def compose_deadline_notification(
    assignment_title: str,
    due_date: datetime,
    now: datetime,
    assignment_url: str,
    *,
    course_name: str | None = None,
) -> NotificationContent:
    """Remind about an approaching (or missed) deadline."""

    message, urgency = deadline_message(
        assignment_title, due_date, now, course_name=course_name
    )
    return NotificationContent(
        title=deadline_title(urgency),
        body=message,
        action_url=assignment_url,
        action_text="Submit Now",
    )


def generate_reminder_notification(
    config: ReminderConfig, now: datetime
) -> ReminderNotification:
    """Build the reminder addressed to ``config.user_id`` as seen at ``now``."""

    reminder = calculate_reminder(config)
    message, urgency = deadline_message(
        config.title, reminder.due_date, now, course_name=config.course_name
    )
    return ReminderNotification(
        user_id=config.user_id,
        title=deadline_title(urgency),
        message=message,
        due_date=reminder.due_date,
        deadline_id=reminder.deadline_id,
        urgency=urgency,
        course_id=config.course_id,
        course_name=config.course_name,
    )


def compose_message_notification(
    sender_name: str,
    message_content: str,
    message_url: str,
    preview_length: int = DEFAULT_PREVIEW_LENGTH,
) -> NotificationContent:
    """Announce a received message with a preview of its text."""

    return NotificationContent(
        title=f"New Message from {sender_name}",
        body=message_preview(message_content, preview_length),
        action_url=message_url,
        action_text="Read Message",
    )


def compose_achievement_notification(
    achievement_title: str,
    achievement_description: str,
    points: int,
    achievement_url: str,
) -> NotificationContent:
    """Congratulate the user on an unlocked achievement."""

    return NotificationContent(
        title=f"Achievement Unlocked: {achievement_title}",
        body=(
            f'Congratulations! You\'ve earned the "{achievement_title}" achievement. '
            f"{achievement_description} (+{points} points)"
        ),
        action_url=achievement_url,
        action_text="View Achievement",
    )


def compose_payment_received_notification(
    amount: float, course_name: str
) -> NotificationContent:
    """Confirm that a course payment was received."""

    return NotificationContent(
        title="Payment Received",
        body=(
            f"Your payment of ₵{_format_amount(amount)} for {course_name} "
            "has been received successfully."
        ),
    )


def compose_payment_reminder_notification(
    amount: float,
    course_name: str,
    due_date: datetime,
    payment_url: str | None = None,
) -> NotificationContent:
    """Remind the user about an outstanding course payment."""

    return NotificationContent(
        title=f"Payment Reminder - {course_name}",
        body=(
            f"This is a friendly reminder that your payment of ₵{_format_amount(amount)} "
            f"for {course_name} is due on {format_short_date(due_date)}."
        ),
        action_url=payment_url,
        action_text="Make Payment" if payment_url else None,
    )


def build_notification(
    content: NotificationContent,
    *,
    notification_id: str,
    recipient_id: str,
    category: NotificationCategory,
    priority: NotificationPriority,
    created_at: datetime,
    expires_at: datetime | None = None,
    metadata: dict[str, Any] | None = None,
) -> Notification:
    """Wrap composed ``content`` into an unread :class:`Notification`."""

    return Notification(
        id=notification_id,
        recipient_id=recipient_id,
        category=category,
        priority=priority,
        title=content.title,
        body=content.body,
        action_url=content.action_url,
        action_text=content.action_text,
        read=False,
        created_at=created_at,
        expires_at=expires_at,
        metadata=metadata or {},
    )


__all__ = [
    "DEFAULT_PREVIEW_LENGTH",
    "build_notification",
    "compose_achievement_notification",
    "compose_assignment_notification",
    "compose_deadline_notification",
    "compose_grade_notification",
    "compose_message_notification",
    "compose_payment_received_notification",
    "compose_payment_reminder_notification",
    "deadline_message",
    "deadline_title",
    "generate_reminder_notification",
    "message_preview",
    "truncate_body",
]
