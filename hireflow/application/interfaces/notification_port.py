"""
Notification Port - Abstract interface for candidate notifications.
"""

from abc import ABC, abstractmethod

from hireflow.domain.value_objects import DeliveryResult, Notification


class NotificationPort(ABC):
    """Best-effort outbound message sink."""

    @abstractmethod
    async def send(self, notification: Notification) -> DeliveryResult:
        """Send a notification. Failures are returned, not raised."""
        pass
