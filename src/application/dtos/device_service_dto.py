"""Device Service DTOs - Application Layer"""

from typing import List, Optional

from pydantic import Field

from src.domain.entities.device import DeviceService
from src.domain.entities.metadata import AdminState, OperatingState

from .addressable_dto import AddressableResponseDTO
from .common_dto import (
    MetadataCreateDTO,
    MetadataResponseDTO,
    MetadataUpdateDTO,
    ReferenceDTO,
)


class DeviceServiceCreateDTO(MetadataCreateDTO):
    """DTO for creating a device service."""

    admin_state: Optional[AdminState] = Field(None, description="Admin state")
    operating_state: Optional[OperatingState] = Field(
        None, description="Operating state"
    )
    labels: List[str] = Field(default_factory=list)
    last_connected: int = Field(0, ge=0)
    last_reported: int = Field(0, ge=0)
    addressable: Optional[ReferenceDTO] = Field(
        None, description="Addressable the service is reached at"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "camera-service",
                "admin_state": "UNLOCKED",
                "operating_state": "ENABLED",
                "labels": ["camera"],
                "addressable": {"name": "camera-service-addressable"},
            }
        }
    }


class DeviceServiceUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a device service."""

    admin_state: Optional[AdminState] = None
    operating_state: Optional[OperatingState] = None
    labels: Optional[List[str]] = None
    last_connected: int = Field(0, ge=0)
    last_reported: int = Field(0, ge=0)
    addressable: Optional[ReferenceDTO] = None


class DeviceServiceResponseDTO(MetadataResponseDTO):
    """DTO for device service responses."""

    admin_state: Optional[AdminState] = None
    operating_state: Optional[OperatingState] = None
    labels: List[str] = Field(default_factory=list)
    last_connected: int = 0
    last_reported: int = 0
    addressable: Optional[AddressableResponseDTO] = None

    @classmethod
    def from_domain(cls, service: DeviceService) -> "DeviceServiceResponseDTO":
        return cls(
            **cls.base_fields(service),
            admin_state=service.admin_state,
            operating_state=service.operating_state,
            labels=service.labels,
            last_connected=service.last_connected,
            last_reported=service.last_reported,
            addressable=(
                AddressableResponseDTO.from_domain(service.addressable)
                if service.addressable
                else None
            ),
        )
