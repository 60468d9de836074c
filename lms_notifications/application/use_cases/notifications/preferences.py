"""Decide which notifications a user wants to receive."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Final

from lms_notifications.domain.entities import (
    Notification,
    NotificationCategory,
    NotificationSettings,
)

_CATEGORY_FLAGS: Final[dict[NotificationCategory, Callable[[NotificationSettings], bool]]] = {
    NotificationCategory.ASSIGNMENT: lambda settings: settings.assignments,
    NotificationCategory.GRADE: lambda settings: settings.grades,
    NotificationCategory.DEADLINE: lambda settings: settings.deadlines,
    NotificationCategory.MESSAGE: lambda settings: settings.messages,
    NotificationCategory.ACHIEVEMENT: lambda settings: settings.achievements,
    NotificationCategory.SYSTEM: lambda settings: True,
}

_CHANNEL_FLAGS: Final[tuple[str, ...]] = ("email", "push", "sms")


def is_enabled(category: NotificationCategory | str, settings: NotificationSettings) -> bool:
    """Return whether ``settings`` allow notifications of ``category``.

    System notifications are always enabled. Unknown categories are disabled.
    """

    try:
        resolved = NotificationCategory(category)
    except ValueError:
        return False

    flag = _CATEGORY_FLAGS.get(resolved)
    if flag is None:
        return False
    return bool(flag(settings))


def filter_by_preferences(
    notifications: Iterable[Notification], settings: NotificationSettings
) -> list[Notification]:
    """Keep the notifications whose category is enabled, preserving order."""

    # Priority based suppression would plug in here; only categories apply today.
    return [
        notification
        for notification in notifications
        if is_enabled(notification.category, settings)
    ]


def enabled_channels(settings: NotificationSettings) -> list[str]:
    """Return the delivery channels switched on in ``settings``."""

    return [channel for channel in _CHANNEL_FLAGS if getattr(settings, channel)]


__all__ = ["enabled_channels", "filter_by_preferences", "is_enabled"]
