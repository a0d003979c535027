"""
Device Profile DTOs - Application Layer

Profiles and the commands they own. The same create DTO validates a profile
posted as JSON and a profile imported from a YAML document.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.device_profile import (
    Command,
    CommandOperation,
    CommandResponse,
    DeviceProfile,
)

from .common_dto import MetadataCreateDTO, MetadataResponseDTO, MetadataUpdateDTO


class ExpectedResponseDTO(BaseModel):
    """A response a command operation may produce."""

    code: Optional[str] = None
    description: Optional[str] = None
    expected_values: List[str] = Field(default_factory=list)

    def to_domain(self) -> CommandResponse:
        return CommandResponse(
            code=self.code,
            description=self.description,
            expected_values=list(self.expected_values),
        )

    @classmethod
    def from_domain(cls, response: CommandResponse) -> "ExpectedResponseDTO":
        return cls(
            code=response.code,
            description=response.description,
            expected_values=response.expected_values,
        )


class OperationDTO(BaseModel):
    """Request shape of a command's get or put operation."""

    path: Optional[str] = None
    parameter_names: List[str] = Field(default_factory=list)
    responses: List[ExpectedResponseDTO] = Field(default_factory=list)

    def to_domain(self) -> CommandOperation:
        return CommandOperation(
            path=self.path,
            parameter_names=list(self.parameter_names),
            responses=[response.to_domain() for response in self.responses],
        )

    @classmethod
    def from_domain(
        cls, operation: Optional[CommandOperation]
    ) -> Optional["OperationDTO"]:
        if operation is None:
            return None
        return cls(
            path=operation.path,
            parameter_names=operation.parameter_names,
            responses=[ExpectedResponseDTO.from_domain(r) for r in operation.responses],
        )


class CommandCreateDTO(MetadataCreateDTO):
    """DTO for a command submitted on its own or inside a profile."""

    get: Optional[OperationDTO] = None
    put: Optional[OperationDTO] = None

    def to_domain(self) -> Command:
        return Command(
            name=self.name,
            description=self.description,
            origin=self.origin,
            get=self.get.to_domain() if self.get else None,
            put=self.put.to_domain() if self.put else None,
        )


class CommandUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a command."""

    get: Optional[OperationDTO] = None
    put: Optional[OperationDTO] = None


class CommandResponseDTO(MetadataResponseDTO):
    """DTO for command responses."""

    get: Optional[OperationDTO] = None
    put: Optional[OperationDTO] = None

    @classmethod
    def from_domain(cls, command: Command) -> "CommandResponseDTO":
        return cls(
            **cls.base_fields(command),
            get=OperationDTO.from_domain(command.get),
            put=OperationDTO.from_domain(command.put),
        )


class DeviceProfileCreateDTO(MetadataCreateDTO):
    """DTO for creating a device profile."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    labels: List[str] = Field(default_factory=list)
    device_resources: List[Dict[str, Any]] = Field(default_factory=list)
    resources: List[Dict[str, Any]] = Field(default_factory=list)
    commands: List[CommandCreateDTO] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "camera-profile",
                "manufacturer": "ACME",
                "model": "CAM-200",
                "labels": ["camera"],
                "commands": [
                    {
                        "name": "snapshot",
                        "get": {
                            "path": "/api/v1/snapshot",
                            "responses": [
                                {"code": "200", "expected_values": ["image"]}
                            ],
                        },
                    }
                ],
            }
        }
    }


class DeviceProfileUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a device profile; a command list replaces the old one."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    labels: Optional[List[str]] = None
    device_resources: Optional[List[Dict[str, Any]]] = None
    resources: Optional[List[Dict[str, Any]]] = None
    commands: Optional[List[CommandCreateDTO]] = None


class DeviceProfileResponseDTO(MetadataResponseDTO):
    """DTO for device profile responses."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    labels: List[str] = Field(default_factory=list)
    device_resources: List[Dict[str, Any]] = Field(default_factory=list)
    resources: List[Dict[str, Any]] = Field(default_factory=list)
    commands: List[CommandResponseDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, profile: DeviceProfile) -> "DeviceProfileResponseDTO":
        return cls(
            **cls.base_fields(profile),
            manufacturer=profile.manufacturer,
            model=profile.model,
            labels=profile.labels,
            device_resources=profile.device_resources,
            resources=profile.resources,
            commands=[CommandResponseDTO.from_domain(c) for c in profile.commands],
        )
