"""Addressable DTOs - Application Layer"""

from typing import Optional

from pydantic import Field

from src.domain.entities.addressable import Addressable
from src.domain.entities.metadata import Protocol

from .common_dto import MetadataCreateDTO, MetadataResponseDTO, MetadataUpdateDTO


class AddressableCreateDTO(MetadataCreateDTO):
    """DTO for creating an addressable."""

    protocol: Protocol = Field(Protocol.HTTP, description="Transport protocol")
    method: str = Field("POST", description="HTTP method used on the endpoint")
    address: str = Field("", description="Host name or IP address")
    port: int = Field(0, description="Port", ge=0, le=65535)
    path: str = Field("", description="Path appended to the base URL")
    publisher: Optional[str] = None
    topic: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "camera-service-addressable",
                "protocol": "HTTP",
                "method": "POST",
                "address": "camera-service",
                "port": 49977,
                "path": "/api/v1/callback",
            }
        }
    }


class AddressableUpdateDTO(MetadataUpdateDTO):
    """DTO for updating an addressable."""

    protocol: Optional[Protocol] = None
    method: Optional[str] = None
    address: Optional[str] = None
    port: Optional[int] = Field(None, ge=0, le=65535)
    path: Optional[str] = None
    publisher: Optional[str] = None
    topic: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None


class AddressableResponseDTO(MetadataResponseDTO):
    """DTO for addressable responses."""

    protocol: Protocol
    method: str
    address: str
    port: int
    path: str
    publisher: Optional[str] = None
    topic: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    base_url: str
    url: str

    @classmethod
    def from_domain(cls, addressable: Addressable) -> "AddressableResponseDTO":
        return cls(
            **cls.base_fields(addressable),
            protocol=addressable.protocol,
            method=addressable.method,
            address=addressable.address,
            port=addressable.port,
            path=addressable.path,
            publisher=addressable.publisher,
            topic=addressable.topic,
            user=addressable.user,
            password=addressable.password,
            base_url=addressable.base_url,
            url=addressable.url,
        )
