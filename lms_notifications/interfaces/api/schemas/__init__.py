from .notification import (
    AchievementComposeRequest,
    AssignmentComposeRequest,
    DeadlineComposeRequest,
    GradeComposeRequest,
    MessageComposeRequest,
    NotificationContentRead,
    NotificationFilterRequest,
    NotificationFilterResponse,
    NotificationRead,
    NotificationSettingsPayload,
)
from .reminder import (
    CalculatedReminderRead,
    ReminderCandidate,
    ReminderDueRequest,
    ReminderDueResponse,
    ReminderNotificationRead,
    ReminderScheduleRequest,
    ReminderScheduleResponse,
)

__all__ = [
    "AchievementComposeRequest",
    "AssignmentComposeRequest",
    "CalculatedReminderRead",
    "DeadlineComposeRequest",
    "GradeComposeRequest",
    "MessageComposeRequest",
    "NotificationContentRead",
    "NotificationFilterRequest",
    "NotificationFilterResponse",
    "NotificationRead",
    "NotificationSettingsPayload",
    "ReminderCandidate",
    "ReminderDueRequest",
    "ReminderDueResponse",
    "ReminderNotificationRead",
    "ReminderScheduleRequest",
    "ReminderScheduleResponse",
]
