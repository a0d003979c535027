"""
Notifications Gateway Interface - Domain Layer

This module defines the interface for publishing notifications to the
support-notifications service.
"""

from abc import ABC, abstractmethod

from src.domain.entities.callback import Notification


class INotificationsGateway(ABC):
    """Interface for the notifications gateway."""

    @abstractmethod
    async def post(self, notification: Notification) -> None:
        """
        Publish a notification.

        Raises:
            ServiceError: If the notifications service cannot be reached
        """
        pass
