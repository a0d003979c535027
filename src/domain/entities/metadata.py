"""
Domain Entities - Metadata base

Common attributes, enumerations and timestamp rules shared by every catalog
entity (addressables, services, profiles, devices and scheduling constructs).
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

# Document stores keep datetimes at millisecond precision.
TIMESTAMP_RESOLUTION = timedelta(milliseconds=1)


class AdminState(str, Enum):
    """Administrative state of a device or service."""

    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


class OperatingState(str, Enum):
    """Operational state of a device or service."""

    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class Protocol(str, Enum):
    """Transport protocol of an addressable."""

    HTTP = "HTTP"
    TCP = "TCP"
    MAC = "MAC"
    ZMQ = "ZMQ"
    OTHER = "OTHER"


class EntityType(str, Enum):
    """Catalog entity families."""

    ADDRESSABLE = "Addressable"
    DEVICE_SERVICE = "DeviceService"
    DEVICE_PROFILE = "DeviceProfile"
    COMMAND = "Command"
    DEVICE = "Device"
    DEVICE_MANAGER = "DeviceManager"
    SCHEDULE = "Schedule"
    SCHEDULE_EVENT = "ScheduleEvent"
    DEVICE_REPORT = "DeviceReport"
    PROVISION_WATCHER = "ProvisionWatcher"


def utc_now() -> datetime:
    """Current UTC time truncated to the store's timestamp resolution."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


@dataclass
class MetadataEntity:
    """Attributes carried by every catalog entity."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    description: Optional[str] = None
    origin: int = 0
    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    def mark_created(self) -> None:
        """Stamp a new entity; the only moment ``created == modified``."""
        now = utc_now()
        self.created = now
        self.modified = now

    def touch(self) -> None:
        """Advance ``modified`` strictly past its previous value."""
        now = utc_now()
        if self.modified is not None and now <= self.modified:
            now = self.modified + TIMESTAMP_RESOLUTION
        self.modified = now
