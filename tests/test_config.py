"""Tests for settings loading and timezone helpers."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError

from lms_notifications.config import Settings
from lms_notifications.utils import datetime as datetime_utils


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SENDGRID_API_KEY", "SENDGRID_SENDER", "REMINDER_TOLERANCE_MINUTES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.reminder_tolerance_minutes == 5
    assert settings.message_preview_length == 100
    assert settings.recent_notifications_limit == 10


def test_sendgrid_settings_must_come_in_pairs() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, sendgrid_api_key="SG.key", sendgrid_sender=None)

    with pytest.raises(ValidationError):
        Settings(_env_file=None, sendgrid_api_key="SG.key", sendgrid_sender="not-an-email")


def test_tolerance_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, reminder_tolerance_minutes=0)


@pytest.mark.parametrize(
    ("name", "expected_offset"),
    [
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_resolve_timezone(name, expected_offset) -> None:
    tz = datetime_utils._resolve_timezone(name)

    assert datetime(2025, 1, 10, tzinfo=tz).utcoffset() == expected_offset


def test_ensure_app_timezone_keeps_aware_values() -> None:
    aware = datetime(2025, 1, 10, 12, tzinfo=timezone(timedelta(hours=2)))

    assert datetime_utils.ensure_app_timezone(aware) is aware
    assert datetime_utils.ensure_app_timezone(None) is None


def test_reset_settings_cache_reloads_app_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    from lms_notifications.config import reset_settings_cache

    monkeypatch.setenv("APP_TIMEZONE", "UTC+02:00")
    reset_settings_cache()
    assert datetime(2025, 1, 10, tzinfo=datetime_utils.get_app_timezone()).utcoffset() == (
        timedelta(hours=2)
    )

    monkeypatch.setenv("APP_TIMEZONE", "UTC-03:00")
    reset_settings_cache()
    offset = datetime(2025, 1, 10, tzinfo=datetime_utils.get_app_timezone()).utcoffset()

    monkeypatch.delenv("APP_TIMEZONE")
    reset_settings_cache()
    assert offset == timedelta(hours=-3)


def test_format_short_date() -> None:
    assert datetime_utils.format_short_date(datetime(2025, 1, 5)) == "Jan 5, 2025"
    assert datetime_utils.format_short_date(datetime(2024, 12, 31)) == "Dec 31, 2024"
