"""Domain port for fire-and-forget change notifications."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from src.domain.entities.addressable import Addressable
from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.device import DeviceService


class IChangeNotifier(Protocol):
    """Hands change notifications off without waiting for their delivery.

    None of these methods raise or block on the outbound call.
    """

    def notify(
        self,
        addressable: Optional[Addressable],
        subject_id: str,
        action: ChangeAction,
        subject_type: ActionType,
    ) -> None:
        """Call back one device service; nothing happens without an addressable."""
        ...

    def notify_services(
        self,
        services: Iterable[Optional[DeviceService]],
        subject_id: str,
        action: ChangeAction,
        subject_type: ActionType,
    ) -> None:
        """Call back each distinct service once."""
        ...

    def notify_device_change(self, device_name: str, action: ChangeAction) -> None:
        """Publish a device change notification when enabled."""
        ...
