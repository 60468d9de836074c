"""Domain entities exposed by the application."""

from .notification import (
    Notification,
    NotificationCategory,
    NotificationContent,
    NotificationPriority,
)
from .notification_settings import NotificationSettings
from .reminder import (
    CalculatedReminder,
    ReminderConfig,
    ReminderNotification,
    ReminderOffset,
    Urgency,
)
from .validation import ReminderConfigError, ValidationResult

__all__ = [
    "CalculatedReminder",
    "Notification",
    "NotificationCategory",
    "NotificationContent",
    "NotificationPriority",
    "NotificationSettings",
    "ReminderConfig",
    "ReminderConfigError",
    "ReminderNotification",
    "ReminderOffset",
    "Urgency",
    "ValidationResult",
]
