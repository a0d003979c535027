"""
Device DTOs - Application Layer

Devices and device managers. Admin and operating state are optional at the
DTO level so that an explicit null reaches the use case and is rejected with
a data integrity error rather than a request validation error.
"""

from typing import Any, List, Optional

from pydantic import Field

from src.domain.entities.device import Device, DeviceManager
from src.domain.entities.metadata import AdminState, OperatingState

from .addressable_dto import AddressableResponseDTO
from .common_dto import (
    MetadataCreateDTO,
    MetadataResponseDTO,
    MetadataUpdateDTO,
    ReferenceDTO,
)
from .device_profile_dto import DeviceProfileResponseDTO
from .device_service_dto import DeviceServiceResponseDTO


class DeviceCreateDTO(MetadataCreateDTO):
    """DTO for creating a device."""

    admin_state: Optional[AdminState] = Field(None, description="Admin state")
    operating_state: Optional[OperatingState] = Field(
        None, description="Operating state"
    )
    labels: List[str] = Field(default_factory=list)
    location: Optional[Any] = None
    last_connected: int = Field(0, ge=0)
    last_reported: int = Field(0, ge=0)
    addressable: Optional[ReferenceDTO] = None
    service: Optional[ReferenceDTO] = None
    profile: Optional[ReferenceDTO] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "camera-01",
                "admin_state": "UNLOCKED",
                "operating_state": "ENABLED",
                "labels": ["camera", "lobby"],
                "addressable": {"name": "camera-01-addressable"},
                "service": {"name": "camera-service"},
                "profile": {"name": "camera-profile"},
            }
        }
    }


class DeviceUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a device; only the fields present are applied."""

    admin_state: Optional[AdminState] = None
    operating_state: Optional[OperatingState] = None
    labels: Optional[List[str]] = None
    location: Optional[Any] = None
    last_connected: int = Field(0, ge=0)
    last_reported: int = Field(0, ge=0)
    addressable: Optional[ReferenceDTO] = None
    service: Optional[ReferenceDTO] = None
    profile: Optional[ReferenceDTO] = None


class DeviceResponseDTO(MetadataResponseDTO):
    """DTO for device responses."""

    admin_state: Optional[AdminState] = None
    operating_state: Optional[OperatingState] = None
    labels: List[str] = Field(default_factory=list)
    location: Optional[Any] = None
    last_connected: int = 0
    last_reported: int = 0
    addressable: Optional[AddressableResponseDTO] = None
    service: Optional[DeviceServiceResponseDTO] = None
    profile: Optional[DeviceProfileResponseDTO] = None

    @staticmethod
    def device_fields(device: Device) -> dict:
        return {
            **MetadataResponseDTO.base_fields(device),
            "admin_state": device.admin_state,
            "operating_state": device.operating_state,
            "labels": device.labels,
            "location": device.location,
            "last_connected": device.last_connected,
            "last_reported": device.last_reported,
            "addressable": (
                AddressableResponseDTO.from_domain(device.addressable)
                if device.addressable
                else None
            ),
            "service": (
                DeviceServiceResponseDTO.from_domain(device.service)
                if device.service
                else None
            ),
            "profile": (
                DeviceProfileResponseDTO.from_domain(device.profile)
                if device.profile
                else None
            ),
        }

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponseDTO":
        return cls(**cls.device_fields(device))


class DeviceManagerCreateDTO(DeviceCreateDTO):
    """DTO for creating a device manager."""

    devices: List[ReferenceDTO] = Field(default_factory=list)
    managers: List[ReferenceDTO] = Field(default_factory=list)


class DeviceManagerUpdateDTO(DeviceUpdateDTO):
    """DTO for updating a device manager; a list replaces the stored one."""

    devices: Optional[List[ReferenceDTO]] = None
    managers: Optional[List[ReferenceDTO]] = None


class DeviceManagerResponseDTO(DeviceResponseDTO):
    """DTO for device manager responses."""

    devices: List[DeviceResponseDTO] = Field(default_factory=list)
    managers: List["DeviceManagerResponseDTO"] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, manager: DeviceManager) -> "DeviceManagerResponseDTO":
        return cls(
            **cls.device_fields(manager),
            devices=[DeviceResponseDTO.from_domain(d) for d in manager.devices],
            managers=[cls.from_domain(m) for m in manager.managers],
        )


DeviceManagerResponseDTO.model_rebuild()
