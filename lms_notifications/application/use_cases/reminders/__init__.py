"""Use cases for computing and scheduling deadline reminders."""

from .scheduler import (
    DEFAULT_TOLERANCE,
    collect_due,
    default_offsets,
    filter_due,
    is_due,
    is_schedulable,
    schedule_default,
    schedule_multiple,
    sort_by_time,
)
from .timing import (
    calculate_reminder,
    coerce_offset,
    duration_of,
    offset_milliseconds,
    reminder_for,
    trigger_time,
)
from .urgency import classify_urgency, format_time_remaining, is_overdue
from .validators import validate_config

__all__ = [
    "DEFAULT_TOLERANCE",
    "calculate_reminder",
    "classify_urgency",
    "coerce_offset",
    "collect_due",
    "default_offsets",
    "duration_of",
    "filter_due",
    "format_time_remaining",
    "is_due",
    "is_overdue",
    "is_schedulable",
    "offset_milliseconds",
    "reminder_for",
    "schedule_default",
    "schedule_multiple",
    "sort_by_time",
    "trigger_time",
    "validate_config",
]
