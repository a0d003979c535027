"""
Device Service Callback Gateway Interface - Domain Layer

This module defines the interface for calling back the device service that
owns a changed catalog entity.
"""

from abc import ABC, abstractmethod

from src.domain.entities.addressable import Addressable
from src.domain.entities.callback import ActionType, ChangeAction


class IDeviceServiceGateway(ABC):
    """Interface for the device service callback gateway."""

    @abstractmethod
    async def send_callback(
        self,
        addressable: Addressable,
        subject_id: str,
        action: ChangeAction,
        subject_type: ActionType,
    ) -> None:
        """
        Tell a device service that one of its entities changed.

        Args:
            addressable: Endpoint of the owning device service
            subject_id: Identifier of the changed entity
            action: Kind of change, also the HTTP method used
            subject_type: Kind of entity that changed

        Raises:
            ServiceError: If the device service cannot be reached or refuses
        """
        pass
