"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lms_notifications.domain.entities import NotificationCategory, NotificationPriority


class NotificationRead(BaseModel):
    """Representation of a notification exchanged with the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    recipient_id: str
    category: NotificationCategory
    priority: NotificationPriority = NotificationPriority.MEDIUM
    title: str
    body: str
    action_url: str | None = None
    action_text: str | None = None
    read: bool = False
    created_at: datetime
    expires_at: datetime | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class NotificationSettingsPayload(BaseModel):
    """Per-user delivery preferences."""

    assignments: bool = True
    grades: bool = True
    deadlines: bool = True
    messages: bool = True
    achievements: bool = True
    email: bool = True
    push: bool = True
    sms: bool = False


class NotificationFilterRequest(BaseModel):
    """Notification set to reduce to what the user should currently see."""

    notifications: list[NotificationRead] = Field(default_factory=list)
    settings: NotificationSettingsPayload = Field(default_factory=NotificationSettingsPayload)
    limit: int | None = Field(default=None, ge=0)
    now: datetime | None = None


class NotificationFilterResponse(BaseModel):
    notifications: list[NotificationRead]
    unread_count: int


class NotificationContentRead(BaseModel):
    """Composed title, body and call to action."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    body: str
    action_url: str | None = None
    action_text: str | None = None


class GradeComposeRequest(BaseModel):
    assignment_title: str
    grade: float
    max_grade: float = Field(gt=0)
    feedback_url: str


class AssignmentComposeRequest(BaseModel):
    assignment_title: str
    course_name: str
    due_date: datetime
    assignment_url: str


class DeadlineComposeRequest(BaseModel):
    assignment_title: str
    due_date: datetime
    assignment_url: str
    course_name: str | None = None
    now: datetime | None = None


class MessageComposeRequest(BaseModel):
    sender_name: str
    message_content: str
    message_url: str
    preview_length: int | None = Field(default=None, ge=0)


class AchievementComposeRequest(BaseModel):
    achievement_title: str
    achievement_description: str
    points: int
    achievement_url: str


__all__ = [
    "AchievementComposeRequest",
    "AssignmentComposeRequest",
    "DeadlineComposeRequest",
    "GradeComposeRequest",
    "MessageComposeRequest",
    "NotificationContentRead",
    "NotificationFilterRequest",
    "NotificationFilterResponse",
    "NotificationRead",
    "NotificationSettingsPayload",
]
