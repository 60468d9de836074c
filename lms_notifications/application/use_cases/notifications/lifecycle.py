"""State transitions and queries over a user's notification collection.

Nothing here mutates its input: transitions return new notifications or new
lists. Dismissing removes entries from the returned working set; expiry is
derived from ``expires_at`` at evaluation time and never stored.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import replace
from datetime import datetime
from operator import attrgetter

from lms_notifications.domain.entities import (
    Notification,
    NotificationCategory,
    NotificationPriority,
)

DEFAULT_RECENT_COUNT = 10


def mark_as_read(notification: Notification) -> Notification:
    """Return ``notification`` flagged as read.

    Already read notifications are returned as they are.
    """

    if notification.read:
        return notification
    return replace(notification, read=True)


def mark_many_as_read(
    notifications: Iterable[Notification],
    notification_ids: Collection[str] | None = None,
) -> list[Notification]:
    """Mark the notifications listed in ``notification_ids`` (or all) as read."""

    if notification_ids is None:
        return [mark_as_read(notification) for notification in notifications]

    targets = set(notification_ids)
    return [
        mark_as_read(notification) if notification.id in targets else notification
        for notification in notifications
    ]


def dismiss(notifications: Iterable[Notification], notification_id: str) -> list[Notification]:
    """Return ``notifications`` without the one identified by ``notification_id``."""

    return [
        notification for notification in notifications if notification.id != notification_id
    ]


def dismiss_many(
    notifications: Iterable[Notification], notification_ids: Iterable[str]
) -> list[Notification]:
    """Return ``notifications`` without any of ``notification_ids``, order preserved."""

    ids_to_remove = set(notification_ids)
    return [
        notification
        for notification in notifications
        if notification.id not in ids_to_remove
    ]


def unread_count(notifications: Iterable[Notification]) -> int:
    return sum(1 for notification in notifications if not notification.read)


def by_category(
    notifications: Iterable[Notification], category: NotificationCategory
) -> list[Notification]:
    return [
        notification for notification in notifications if notification.category == category
    ]


def by_priority(
    notifications: Iterable[Notification], priority: NotificationPriority
) -> list[Notification]:
    return [
        notification for notification in notifications if notification.priority == priority
    ]


def at_least_priority(
    notifications: Iterable[Notification], minimum: NotificationPriority
) -> list[Notification]:
    """Return the notifications whose priority is ``minimum`` or higher."""

    return [
        notification
        for notification in notifications
        if notification.priority.rank >= minimum.rank
    ]


def sort_by_recency(notifications: Iterable[Notification]) -> list[Notification]:
    """Return ``notifications`` newest first; ties keep their original order."""

    return sorted(notifications, key=attrgetter("created_at"), reverse=True)


def recent(
    notifications: Iterable[Notification], count: int = DEFAULT_RECENT_COUNT
) -> list[Notification]:
    """Return the ``count`` most recently created notifications."""

    if count < 0:
        raise ValueError("count must not be negative")
    return sort_by_recency(notifications)[:count]


def is_expired(notification: Notification, now: datetime) -> bool:
    """Return whether ``notification`` expired before ``now``."""

    if notification.expires_at is None:
        return False
    return now > notification.expires_at


def remove_expired(
    notifications: Iterable[Notification], now: datetime
) -> list[Notification]:
    return [
        notification for notification in notifications if not is_expired(notification, now)
    ]


def active(notifications: Sequence[Notification], now: datetime) -> list[Notification]:
    """Return the notifications that belong in active views at ``now``."""

    return remove_expired(notifications, now)


__all__ = [
    "DEFAULT_RECENT_COUNT",
    "active",
    "at_least_priority",
    "by_category",
    "by_priority",
    "dismiss",
    "dismiss_many",
    "is_expired",
    "mark_as_read",
    "mark_many_as_read",
    "recent",
    "remove_expired",
    "sort_by_recency",
    "unread_count",
]
