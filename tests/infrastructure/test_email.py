"""Unit tests for the SendGrid email channel."""

from __future__ import annotations

import json
import types
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

pytest.importorskip("sendgrid")

from lms_notifications.infrastructure import email as email_module


class DummySettings:
    sendgrid_api_key = "SG.fake"
    sendgrid_sender = "sender@example.com"


class MissingSettings:
    sendgrid_api_key = None
    sendgrid_sender = None


class RecordingClient:
    """Stand-in for ``SendGridAPIClient`` capturing sent messages."""

    instances: list["RecordingClient"] = []

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key
        self.messages = []
        RecordingClient.instances.append(self)

    def send(self, message):
        self.messages.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


def test_send_email_without_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    monkeypatch.setattr(email_module, "get_settings", lambda: MissingSettings())

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is False


def test_send_email_success(monkeypatch: pytest.MonkeyPatch) -> None:
    """A successful SendGrid response should return ``True``."""

    RecordingClient.instances.clear()
    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RecordingClient)

    assert email_module.send_email("Subject", "<p>Body</p>", "user@example.com") is True
    assert RecordingClient.instances[0].api_key == "SG.fake"
    assert len(RecordingClient.instances[0].messages) == 1


def test_send_email_logs_unsuccessful_status(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    class RejectingClient(RecordingClient):
        def send(self, message):
            return types.SimpleNamespace(
                status_code=400,
                body=json.dumps({"errors": [{"message": "Invalid recipient"}]}),
            )

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 400" in caplog.text
    assert "Invalid recipient" in caplog.text


def test_send_email_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {"errors": [{"message": "The provided authorization grant is invalid."}]}
        ).encode()

    class FailingClient(RecordingClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email("Subject", "<p>Body</p>", "user@example.com")

    assert result is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_email_channel_delegates_to_send_email(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_send_email(subject, html_content, recipient):
        calls.append((subject, html_content, recipient))
        return True

    monkeypatch.setattr(email_module, "send_email", fake_send_email)

    channel = email_module.EmailChannel(subject="Course update")

    assert channel.deliver("<p>Hello</p>", "student@example.com") is True
    assert calls == [("Course update", "<p>Hello</p>", "student@example.com")]
