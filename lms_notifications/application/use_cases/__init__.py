"""Aggregate application use cases."""

from .notifications import compose_deadline_notification, filter_by_preferences
from .reminders import collect_due, schedule_multiple, validate_config

__all__ = [
    "collect_due",
    "compose_deadline_notification",
    "filter_by_preferences",
    "schedule_multiple",
    "validate_config",
]
