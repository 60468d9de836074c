"""Validation helpers for reminder configurations."""

from datetime import datetime

from lms_notifications.domain.entities import (
    ReminderConfig,
    ReminderConfigError,
    ReminderOffset,
    ValidationResult,
)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_known_offset(value: object) -> bool:
    try:
        ReminderOffset(value)
    except ValueError:
        return False
    return True


def validate_config(config: ReminderConfig) -> ValidationResult:
    """Return the first problem found in ``config`` or a valid result.

    Invalid user input never raises; passing ``None`` is a caller bug and
    raises ``TypeError``.
    """

    if config is None:
        raise TypeError("A reminder configuration is required")

    if not isinstance(config.due_date, datetime):
        return ValidationResult.failed(ReminderConfigError.INVALID_DUE_DATE)
    if _is_blank(config.deadline_id):
        return ValidationResult.failed(ReminderConfigError.MISSING_DEADLINE_ID)
    if _is_blank(config.user_id):
        return ValidationResult.failed(ReminderConfigError.MISSING_USER_ID)
    if _is_blank(config.title):
        return ValidationResult.failed(ReminderConfigError.MISSING_TITLE)
    if not _is_known_offset(config.offset):
        return ValidationResult.failed(ReminderConfigError.INVALID_OFFSET)
    return ValidationResult.ok()


__all__ = ["validate_config"]
