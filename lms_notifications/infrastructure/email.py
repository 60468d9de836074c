"""Email delivery channel backed by SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from lms_notifications.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "You have a new notification"


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages = [
                str(item["message"])
                for item in errors
                if isinstance(item, dict) and item.get("message")
            ]
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    return None


def _log_unsuccessful_response(status_code: Any, body: Any) -> None:
    details = _extract_sendgrid_error_details(body)
    if details:
        logger.error("SendGrid API responded with status %s: %s", status_code, details)
    else:
        logger.error("SendGrid API responded with status %s", status_code)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an email using the configured SendGrid credentials."""

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        status_code = getattr(exc, "status_code", None)
        if status_code is not None:
            _log_unsuccessful_response(status_code, getattr(exc, "body", None))
        else:
            logger.exception("Error sending email via SendGrid: %s", exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_unsuccessful_response(status_code, getattr(response, "body", None))
        return False

    return True


class EmailChannel:
    """Delivery channel sending rendered notifications by email."""

    def __init__(self, subject: str = DEFAULT_SUBJECT) -> None:
        self.subject = subject

    def deliver(self, message: str, recipient: str) -> bool:
        return send_email(self.subject, message, recipient)


__all__ = ["DEFAULT_SUBJECT", "EmailChannel", "send_email"]
