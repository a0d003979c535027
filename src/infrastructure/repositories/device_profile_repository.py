"""
MongoDB Device Profile and Command Repositories - Infrastructure Layer

Commands live in their own collection; a profile document lists the
identifiers of the commands it owns.
"""

from typing import Any, Dict, List, Optional

from src.domain.entities.device_profile import (
    Command,
    CommandOperation,
    CommandResponse,
    DeviceProfile,
)
from src.domain.entities.metadata import EntityType
from src.infrastructure.database import MongoDatabase
from src.infrastructure.database.mongo_database import COMMANDS, DEVICE_PROFILES

from .base import MongoMetadataRepository


def _operation_to_document(
    operation: Optional[CommandOperation],
) -> Optional[Dict[str, Any]]:
    if operation is None:
        return None
    return {
        "path": operation.path,
        "parameter_names": list(operation.parameter_names),
        "responses": [
            {
                "code": response.code,
                "description": response.description,
                "expected_values": list(response.expected_values),
            }
            for response in operation.responses
        ],
    }


def _operation_from_document(
    payload: Optional[Dict[str, Any]],
) -> Optional[CommandOperation]:
    if payload is None:
        return None
    return CommandOperation(
        path=payload.get("path"),
        parameter_names=list(payload.get("parameter_names") or []),
        responses=[
            CommandResponse(
                code=response.get("code"),
                description=response.get("description"),
                expected_values=list(response.get("expected_values") or []),
            )
            for response in payload.get("responses") or []
        ],
    )


class CommandRepository(MongoMetadataRepository[Command]):
    """MongoDB implementation of the command repository."""

    COLLECTION_NAME = COMMANDS
    entity_type = EntityType.COMMAND

    def _to_document(self, command: Command) -> Dict[str, Any]:
        return {
            **self._base_document(command),
            "get": _operation_to_document(command.get),
            "put": _operation_to_document(command.put),
        }

    async def _to_entity(self, document: Dict[str, Any]) -> Command:
        return Command(
            **self._base_fields(document),
            get=_operation_from_document(document.get("get")),
            put=_operation_from_document(document.get("put")),
        )


class DeviceProfileRepository(MongoMetadataRepository[DeviceProfile]):
    """MongoDB implementation of the device profile repository."""

    COLLECTION_NAME = DEVICE_PROFILES
    FIELD_MAP = {"commands": "command_ids"}
    entity_type = EntityType.DEVICE_PROFILE

    def __init__(
        self, mongo_database: MongoDatabase, command_repository: CommandRepository
    ):
        super().__init__(mongo_database)
        self.commands = command_repository

    def _to_document(self, profile: DeviceProfile) -> Dict[str, Any]:
        return {
            **self._base_document(profile),
            "manufacturer": profile.manufacturer,
            "model": profile.model,
            "labels": list(profile.labels),
            "device_resources": list(profile.device_resources),
            "resources": list(profile.resources),
            "command_ids": [command.id for command in profile.commands],
        }

    async def _load_commands(self, command_ids: List[str]) -> List[Command]:
        commands = []
        for command_id in command_ids:
            command = await self.commands.find_by_id(command_id)
            if command is not None:
                commands.append(command)
        return commands

    async def _to_entity(self, document: Dict[str, Any]) -> DeviceProfile:
        return DeviceProfile(
            **self._base_fields(document),
            manufacturer=document.get("manufacturer"),
            model=document.get("model"),
            labels=list(document.get("labels") or []),
            device_resources=list(document.get("device_resources") or []),
            resources=list(document.get("resources") or []),
            commands=await self._load_commands(document.get("command_ids") or []),
        )
