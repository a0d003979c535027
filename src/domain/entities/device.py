"""
Domain Entities - Devices and Device Services

Devices, the services that own them, aggregating device managers and the
provision watchers used to auto-detect new devices.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .addressable import Addressable
from .device_profile import DeviceProfile
from .metadata import AdminState, MetadataEntity, OperatingState


@dataclass
class DeviceService(MetadataEntity):
    """A service owning devices, reachable through its addressable."""

    admin_state: Optional[AdminState] = None
    operating_state: Optional[OperatingState] = None
    labels: List[str] = field(default_factory=list)
    last_connected: int = 0
    last_reported: int = 0
    addressable: Optional[Addressable] = None


@dataclass
class Device(MetadataEntity):
    """A device attached to an addressable, a service and a profile."""

    admin_state: Optional[AdminState] = None
    operating_state: Optional[OperatingState] = None
    labels: List[str] = field(default_factory=list)
    location: Optional[Any] = None
    last_connected: int = 0
    last_reported: int = 0
    addressable: Optional[Addressable] = None
    service: Optional[DeviceService] = None
    profile: Optional[DeviceProfile] = None


@dataclass
class DeviceManager(Device):
    """An aggregating device (a gateway) owning devices and other managers."""

    devices: List[Device] = field(default_factory=list)
    managers: List["DeviceManager"] = field(default_factory=list)


@dataclass
class ProvisionWatcher(MetadataEntity):
    """Identifier matchers used to provision newly discovered devices."""

    identifiers: Dict[str, str] = field(default_factory=dict)
    profile: Optional[DeviceProfile] = None
    service: Optional[DeviceService] = None
