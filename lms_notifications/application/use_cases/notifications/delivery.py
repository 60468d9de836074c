"""Hand composed notifications to the delivery channels a user enabled.

Channels are external collaborators exposing ``deliver(message, recipient)``.
Failures are reported back to the caller; nothing is retried here.
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from lms_notifications.domain.entities import Notification, NotificationSettings

from .preferences import enabled_channels, is_enabled

logger = logging.getLogger(__name__)

_HTML_TAG_PATTERN = re.compile(r"<[^>]*>")

SKIPPED_CATEGORY_DISABLED = "category_disabled"
SKIPPED_NO_CHANNELS = "no_channels"


class DeliveryChannel(Protocol):
    """Anything able to send a rendered message to a recipient address."""

    def deliver(self, message: str, recipient: str) -> bool:
        ...


@dataclass(frozen=True)
class Recipient:
    """A user together with their preferences and per-channel addresses."""

    user_id: str
    settings: NotificationSettings
    addresses: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of delivering one notification."""

    notification_id: str
    delivered_channels: tuple[str, ...] = ()
    failed_channels: tuple[str, ...] = ()
    skipped_reason: str | None = None

    @property
    def delivered(self) -> bool:
        return bool(self.delivered_channels)


@dataclass
class DeliverySummary:
    """Counters returned by :func:`deliver_bulk`."""

    success: int = 0
    failed: int = 0
    results: list[DeliveryResult] = field(default_factory=list)


def strip_html(text: str) -> str:
    """Return ``text`` without markup, suitable for SMS bodies."""

    return html.unescape(_HTML_TAG_PATTERN.sub("", text))


def render_for_channel(notification: Notification, channel: str) -> str:
    """Render ``notification`` as the message string sent through ``channel``."""

    if channel == "email":
        parts = [
            f"<h2>{html.escape(notification.title)}</h2>",
            f"<p>{html.escape(strip_html(notification.body))}</p>",
        ]
        if notification.action_url:
            label = notification.action_text or notification.action_url
            parts.append(
                f'<p><a href="{html.escape(notification.action_url)}">'
                f"{html.escape(label)}</a></p>"
            )
        return "".join(parts)

    text = f"{notification.title}: {strip_html(notification.body)}"
    if channel == "sms" and notification.action_url:
        text = f"{text} {notification.action_url}"
    return text


def deliver_notification(
    notification: Notification,
    recipient: Recipient,
    channels: Mapping[str, DeliveryChannel],
) -> DeliveryResult:
    """Send ``notification`` through every channel ``recipient`` enabled.

    A channel is used only when it is enabled in the settings, an
    implementation is available in ``channels`` and the recipient has an
    address for it.
    """

    if not is_enabled(notification.category, recipient.settings):
        logger.info(
            "Skipping notification %s: category %s disabled for user %s",
            notification.id,
            notification.category.value,
            recipient.user_id,
        )
        return DeliveryResult(
            notification_id=notification.id, skipped_reason=SKIPPED_CATEGORY_DISABLED
        )

    delivered: list[str] = []
    failed: list[str] = []
    for channel_name in enabled_channels(recipient.settings):
        channel = channels.get(channel_name)
        address = recipient.addresses.get(channel_name)
        if channel is None or not address:
            continue

        message = render_for_channel(notification, channel_name)
        try:
            ok = channel.deliver(message, address)
        except Exception:
            logger.exception(
                "Channel %s raised while delivering notification %s",
                channel_name,
                notification.id,
            )
            ok = False

        if ok:
            delivered.append(channel_name)
        else:
            failed.append(channel_name)

    if not delivered and not failed:
        logger.info(
            "Skipping notification %s: no usable channel for user %s",
            notification.id,
            recipient.user_id,
        )
        return DeliveryResult(
            notification_id=notification.id, skipped_reason=SKIPPED_NO_CHANNELS
        )

    return DeliveryResult(
        notification_id=notification.id,
        delivered_channels=tuple(delivered),
        failed_channels=tuple(failed),
    )


def deliver_bulk(
    notifications: Iterable[Notification],
    recipients: Mapping[str, Recipient],
    channels: Mapping[str, DeliveryChannel],
) -> DeliverySummary:
    """Deliver each notification to its recipient and count the outcomes."""

    summary = DeliverySummary()
    for notification in notifications:
        recipient = recipients.get(notification.recipient_id)
        if recipient is None:
            logger.warning(
                "Recipient %s not found for notification %s",
                notification.recipient_id,
                notification.id,
            )
            summary.failed += 1
            continue

        result = deliver_notification(notification, recipient, channels)
        summary.results.append(result)
        if result.delivered:
            summary.success += 1
        else:
            summary.failed += 1
    return summary


__all__ = [
    "DeliveryChannel",
    "DeliveryResult",
    "DeliverySummary",
    "Recipient",
    "SKIPPED_CATEGORY_DISABLED",
    "SKIPPED_NO_CHANNELS",
    "deliver_bulk",
    "deliver_notification",
    "render_for_channel",
    "strip_html",
]
