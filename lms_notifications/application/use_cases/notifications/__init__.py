"""Public helpers for composing, filtering and delivering notifications."""

from .composer import (
    build_notification,
    compose_achievement_notification,
    compose_assignment_notification,
    compose_deadline_notification,
    compose_grade_notification,
    compose_message_notification,
    compose_payment_received_notification,
    compose_payment_reminder_notification,
    generate_reminder_notification,
    message_preview,
    truncate_body,
)
from .delivery import (
    DeliveryChannel,
    DeliveryResult,
    DeliverySummary,
    Recipient,
    deliver_bulk,
    deliver_notification,
)
from .lifecycle import (
    active,
    at_least_priority,
    by_category,
    by_priority,
    dismiss,
    dismiss_many,
    is_expired,
    mark_as_read,
    mark_many_as_read,
    recent,
    remove_expired,
    sort_by_recency,
    unread_count,
)
from .preferences import enabled_channels, filter_by_preferences, is_enabled

__all__ = [
    "DeliveryChannel",
    "DeliveryResult",
    "DeliverySummary",
    "Recipient",
    "active",
    "at_least_priority",
    "build_notification",
    "by_category",
    "by_priority",
    "compose_achievement_notification",
    "compose_assignment_notification",
    "compose_deadline_notification",
    "compose_grade_notification",
    "compose_message_notification",
    "compose_payment_received_notification",
    "compose_payment_reminder_notification",
    "deliver_bulk",
    "deliver_notification",
    "dismiss",
    "dismiss_many",
    "enabled_channels",
    "filter_by_preferences",
    "generate_reminder_notification",
    "is_enabled",
    "is_expired",
    "mark_as_read",
    "mark_many_as_read",
    "message_preview",
    "recent",
    "remove_expired",
    "sort_by_recency",
    "truncate_body",
    "unread_count",
]
