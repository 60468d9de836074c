"""Structured outcome of validating user supplied reminder data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReminderConfigError(Enum):
    """Reasons a reminder configuration can be rejected."""

    INVALID_DUE_DATE = "Invalid due date"
    MISSING_DEADLINE_ID = "Deadline ID is required"
    MISSING_USER_ID = "User ID is required"
    MISSING_TITLE = "Title is required"
    INVALID_OFFSET = "Invalid reminder offset"


@dataclass(frozen=True)
class ValidationResult:
    """Either ``valid`` or carrying the first ``error`` found."""

    valid: bool
    error: ReminderConfigError | None = None

    @property
    def message(self) -> str | None:
        return self.error.value if self.error is not None else None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failed(cls, error: ReminderConfigError) -> "ValidationResult":
        return cls(valid=False, error=error)


__all__ = ["ReminderConfigError", "ValidationResult"]
