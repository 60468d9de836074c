"""Helper utilities shared across API route handlers."""

from datetime import datetime

from fastapi import HTTPException, status

from lms_notifications.domain.entities import ValidationResult
from lms_notifications.utils import ensure_app_timezone, now_in_app_timezone


def resolve_now(value: datetime | None) -> datetime:
    """Return the evaluation instant sent by the client or the server clock."""

    localized = ensure_app_timezone(value)
    return localized if localized is not None else now_in_app_timezone()


def raise_for_invalid(result: ValidationResult) -> None:
    """Turn a failed validation into a ``400`` response."""

    if not result.valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
