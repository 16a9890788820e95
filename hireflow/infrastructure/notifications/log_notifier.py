"""
Logging Notifier - Development dispatcher that only logs messages.
"""

import logging

from hireflow.application.interfaces import NotificationPort
from hireflow.domain.value_objects import DeliveryResult, Notification


logger = logging.getLogger(__name__)


class LoggingNotifier(NotificationPort):
    """Records notifications in the log and in ``sent``; never fails."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    async def send(self, notification: Notification) -> DeliveryResult:
        self.sent.append(notification)
        logger.info(
            f"[notification] {notification.sender} -> {notification.recipient}: "
            f"{notification.subject}"
        )
        return DeliveryResult.success()
