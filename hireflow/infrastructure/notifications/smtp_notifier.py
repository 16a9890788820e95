"""
SMTP Notifier - Sends candidate notifications as plain-text email.

smtplib is blocking, so each message is delivered from a worker thread.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from hireflow.application.interfaces import NotificationPort
from hireflow.config.settings import Settings
from hireflow.domain.value_objects import DeliveryResult, Notification


logger = logging.getLogger(__name__)


class SMTPNotifier(NotificationPort):
    """Delivers notifications through an SMTP relay."""

    def __init__(self, settings: Settings) -> None:
        """
        Initialize the notifier.

        Args:
            settings: Application settings (smtp_* fields).
        """
        self.settings = settings

    async def send(self, notification: Notification) -> DeliveryResult:
        """Send ``notification``; SMTP and socket errors become failures."""
        try:
            await asyncio.to_thread(self._deliver, notification)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Email to {notification.recipient} failed: {e}")
            return DeliveryResult.failure(str(e))

        logger.info(f"Email sent to {notification.recipient}: {notification.subject}")
        return DeliveryResult.success()

    def build_message(self, notification: Notification) -> EmailMessage:
        """Build the MIME message for ``notification``."""
        message = EmailMessage()
        message["From"] = notification.sender
        message["To"] = notification.recipient
        message["Subject"] = notification.subject
        message.set_content(notification.body)
        return message

    def _deliver(self, notification: Notification) -> None:
        s = self.settings
        with smtplib.SMTP(s.smtp_host, s.smtp_port, timeout=s.notification_timeout) as smtp:
            if s.smtp_use_tls:
                smtp.starttls()
            if s.smtp_username:
                smtp.login(s.smtp_username, s.smtp_password)
            smtp.send_message(self.build_message(notification))
