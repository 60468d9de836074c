"""Domain entities representing user notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationCategory(str, Enum):
    """Closed set of notification categories."""

    ASSIGNMENT = "assignment"
    GRADE = "grade"
    DEADLINE = "deadline"
    MESSAGE = "message"
    ACHIEVEMENT = "achievement"
    SYSTEM = "system"


class NotificationPriority(str, Enum):
    """Delivery priority of a notification, ordered from ``LOW`` to ``URGENT``."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return _PRIORITY_ORDER.index(self)


_PRIORITY_ORDER = (
    NotificationPriority.LOW,
    NotificationPriority.MEDIUM,
    NotificationPriority.HIGH,
    NotificationPriority.URGENT,
)


@dataclass(frozen=True)
class NotificationContent:
    """Title, body and call to action composed for an upstream event."""

    title: str
    body: str
    action_url: str | None = None
    action_text: str | None = None


@dataclass(frozen=True)
class Notification:
    """Information message delivered to a specific user.

    Instances are immutable; state changes such as marking as read produce a
    new instance.
    """

    id: str
    recipient_id: str
    category: NotificationCategory
    priority: NotificationPriority
    title: str
    body: str
    created_at: datetime
    action_url: str | None = None
    action_text: str | None = None
    read: bool = False
    expires_at: datetime | None = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)


__all__ = [
    "Notification",
    "NotificationCategory",
    "NotificationContent",
    "NotificationPriority",
]
