"""Provision Watcher DTOs - Application Layer"""

from typing import Dict, Optional

from pydantic import Field

from src.domain.entities.device import ProvisionWatcher

from .common_dto import (
    MetadataCreateDTO,
    MetadataResponseDTO,
    MetadataUpdateDTO,
    ReferenceDTO,
)
from .device_profile_dto import DeviceProfileResponseDTO
from .device_service_dto import DeviceServiceResponseDTO


class ProvisionWatcherCreateDTO(MetadataCreateDTO):
    """DTO for creating a provision watcher."""

    identifiers: Dict[str, str] = Field(default_factory=dict)
    profile: Optional[ReferenceDTO] = None
    service: Optional[ReferenceDTO] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "camera-watcher",
                "identifiers": {"mac": "00:1A:.*"},
                "profile": {"name": "camera-profile"},
                "service": {"name": "camera-service"},
            }
        }
    }


class ProvisionWatcherUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a provision watcher."""

    identifiers: Optional[Dict[str, str]] = None
    profile: Optional[ReferenceDTO] = None
    service: Optional[ReferenceDTO] = None


class ProvisionWatcherResponseDTO(MetadataResponseDTO):
    """DTO for provision watcher responses."""

    identifiers: Dict[str, str] = Field(default_factory=dict)
    profile: Optional[DeviceProfileResponseDTO] = None
    service: Optional[DeviceServiceResponseDTO] = None

    @classmethod
    def from_domain(cls, watcher: ProvisionWatcher) -> "ProvisionWatcherResponseDTO":
        return cls(
            **cls.base_fields(watcher),
            identifiers=watcher.identifiers,
            profile=(
                DeviceProfileResponseDTO.from_domain(watcher.profile)
                if watcher.profile
                else None
            ),
            service=(
                DeviceServiceResponseDTO.from_domain(watcher.service)
                if watcher.service
                else None
            ),
        )
