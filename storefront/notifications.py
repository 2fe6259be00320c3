"""
Customer messaging for the storefront.

NotificationService is the Notifier that OrderService talks to. Nothing
leaves the process: every email and SMS is appended to an in-memory
outbox and written to the "notifications" logger, so demos can show what
went out and tests can read it back.

Delivery can be made unreliable per channel with a fail rate. A failed
delivery is still recorded (marked undelivered) and reported to the
caller as False; it never raises.
"""

import logging
import random
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

logger = logging.getLogger("notifications")

# Longer texts are split by carriers
SMS_MAX_LENGTH = 160


class Channel(str, Enum):
    EMAIL = "email"
    SMS = "sms"


class SentMessage(BaseModel):
    """One entry in the outbox."""
    channel: Channel
    recipient: str
    body: str
    subject: Optional[str] = Field(default=None, description="Email only")
    delivered: bool = True
    sent_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(frozen=True)

    def summary(self) -> str:
        """One-line description for console output."""
        text = self.subject if self.channel == Channel.EMAIL else self.body
        outcome = "" if self.delivered else " (undelivered)"
        return f"{self.channel.value.upper()} -> {self.recipient}: {text}{outcome}"


class NotificationService:
    """
    Simulated email and SMS sender.

    Example:
        notifier = NotificationService()
        notifier.send_email("customer@example.com", "Order Confirmation", "...")
        notifier.send_sms("+1234567890", "...")

        notifier.messages(Channel.SMS)   # what was "sent" by SMS
    """

    def __init__(self, email_fail_rate: float = 0.0, sms_fail_rate: float = 0.0):
        """
        Args:
            email_fail_rate: Chance (0.0 to 1.0) that an email is not delivered
            sms_fail_rate: Chance (0.0 to 1.0) that an SMS is not delivered
        """
        self.fail_rates = {Channel.EMAIL: email_fail_rate, Channel.SMS: sms_fail_rate}
        self.outbox: list[SentMessage] = []

    def __len__(self) -> int:
        return len(self.outbox)

    def send_email(self, to: str, subject: str, body: str) -> bool:
        """Deliver an email; True if it went through."""
        return self._deliver(Channel.EMAIL, to, body, subject=subject)

    def send_sms(self, to: str, body: str) -> bool:
        """Deliver a text message; True if it went through."""
        if len(body) > SMS_MAX_LENGTH:
            logger.warning(f"SMS to {to} is {len(body)} chars, over the {SMS_MAX_LENGTH} char limit")
        return self._deliver(Channel.SMS, to, body)

    def messages(self, channel: Optional[Channel] = None) -> list[SentMessage]:
        """Outbox entries in send order, optionally for one channel only."""
        if channel is None:
            return list(self.outbox)
        return [m for m in self.outbox if m.channel == channel]

    def last_message_to(self, recipient: str) -> Optional[SentMessage]:
        """Most recent outbox entry addressed to ``recipient``."""
        for message in reversed(self.outbox):
            if message.recipient == recipient:
                return message
        return None

    def clear(self) -> None:
        self.outbox.clear()

    def _deliver(self, channel: Channel, to: str, body: str, subject: Optional[str] = None) -> bool:
        delivered = random.random() >= self.fail_rates[channel]
        message = SentMessage(channel=channel, recipient=to, body=body, subject=subject, delivered=delivered)
        self.outbox.append(message)

        if delivered:
            logger.info(message.summary())
            logger.debug(f"{channel.value} body: {body}")
        else:
            logger.error(f"Could not deliver {channel.value} to {to}")
        return delivered
