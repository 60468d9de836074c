"""Domain entity holding per-user notification preferences."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationSettings:
    """Per-category and per-channel delivery preferences of a user."""

    assignments: bool = True
    grades: bool = True
    deadlines: bool = True
    messages: bool = True
    achievements: bool = True
    email: bool = True
    push: bool = True
    sms: bool = False


__all__ = ["NotificationSettings"]
