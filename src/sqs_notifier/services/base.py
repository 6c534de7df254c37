"""
Module: base.py
Description: Channel interface implemented by notification services.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sqs_notifier.models.notification import Destination, Notification


class NotificationService(ABC):
    """A pluggable delivery mechanism for rendered notifications."""

    @abstractmethod
    async def send(
        self,
        notification: Notification,
        destination: Destination,
        timeout: Optional[float] = None
    ) -> str:
        """
        Deliver a notification to a destination.

        Args:
            notification: Rendered notification
            destination: Routing target
            timeout: Deadline in seconds for the whole call, None for none

        Returns:
            Channel-specific delivery id
        """
