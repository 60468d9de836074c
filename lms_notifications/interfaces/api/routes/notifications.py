"""Endpoints composing notification content and serving dashboard views."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from lms_notifications.application.use_cases.notifications import (
    active,
    compose_achievement_notification,
    compose_assignment_notification,
    compose_deadline_notification,
    compose_grade_notification,
    compose_message_notification,
    filter_by_preferences,
    recent,
    unread_count,
)
from lms_notifications.config import get_settings
from lms_notifications.domain.entities import (
    Notification,
    NotificationContent,
    NotificationSettings,
)
from lms_notifications.interfaces.api.routes_helpers import resolve_now
from lms_notifications.interfaces.api.schemas import (
    AchievementComposeRequest,
    AssignmentComposeRequest,
    DeadlineComposeRequest,
    GradeComposeRequest,
    MessageComposeRequest,
    NotificationContentRead,
    NotificationFilterRequest,
    NotificationFilterResponse,
    NotificationRead,
)
from lms_notifications.utils import ensure_app_timezone

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _schema_to_notification(payload: NotificationRead) -> Notification:
    return Notification(
        id=payload.id,
        recipient_id=payload.recipient_id,
        category=payload.category,
        priority=payload.priority,
        title=payload.title,
        body=payload.body,
        action_url=payload.action_url,
        action_text=payload.action_text,
        read=payload.read,
        created_at=ensure_app_timezone(payload.created_at),
        expires_at=ensure_app_timezone(payload.expires_at),
        metadata=dict(payload.metadata),
    )


def _content_to_schema(content: NotificationContent) -> NotificationContentRead:
    return NotificationContentRead.model_validate(content)


@router.post("/filter", response_model=NotificationFilterResponse)
def filter_notifications(payload: NotificationFilterRequest) -> NotificationFilterResponse:
    """Return the notifications the user should see, newest first."""

    now = resolve_now(payload.now)
    settings = NotificationSettings(**payload.settings.model_dump())
    notifications = [_schema_to_notification(item) for item in payload.notifications]

    visible = active(filter_by_preferences(notifications, settings), now)
    limit = payload.limit
    if limit is None:
        limit = get_settings().recent_notifications_limit

    return NotificationFilterResponse(
        notifications=[
            NotificationRead.model_validate(item) for item in recent(visible, limit)
        ],
        unread_count=unread_count(visible),
    )


@router.post("/compose/grade", response_model=NotificationContentRead)
def compose_grade(payload: GradeComposeRequest) -> NotificationContentRead:
    try:
        content = compose_grade_notification(
            payload.assignment_title,
            payload.grade,
            payload.max_grade,
            payload.feedback_url,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _content_to_schema(content)


@router.post("/compose/assignment", response_model=NotificationContentRead)
def compose_assignment(payload: AssignmentComposeRequest) -> NotificationContentRead:
    content = compose_assignment_notification(
        payload.assignment_title,
        payload.course_name,
        ensure_app_timezone(payload.due_date),
        payload.assignment_url,
    )
    return _content_to_schema(content)


@router.post("/compose/deadline", response_model=NotificationContentRead)
def compose_deadline(payload: DeadlineComposeRequest) -> NotificationContentRead:
    content = compose_deadline_notification(
        payload.assignment_title,
        ensure_app_timezone(payload.due_date),
        resolve_now(payload.now),
        payload.assignment_url,
        course_name=payload.course_name,
    )
    return _content_to_schema(content)


@router.post("/compose/message", response_model=NotificationContentRead)
def compose_message(payload: MessageComposeRequest) -> NotificationContentRead:
    preview_length = payload.preview_length
    if preview_length is None:
        preview_length = get_settings().message_preview_length

    content = compose_message_notification(
        payload.sender_name,
        payload.message_content,
        payload.message_url,
        preview_length,
    )
    return _content_to_schema(content)


@router.post("/compose/achievement", response_model=NotificationContentRead)
def compose_achievement(payload: AchievementComposeRequest) -> NotificationContentRead:
    content = compose_achievement_notification(
        payload.achievement_title,
        payload.achievement_description,
        payload.points,
        payload.achievement_url,
    )
    return _content_to_schema(content)


__all__ = ["router"]
