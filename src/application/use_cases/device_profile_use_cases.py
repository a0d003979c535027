"""
Device Profile Use Cases - Application Layer

Profiles and the commands they own. A profile's commands are written before
the profile itself; when the profile write fails they are removed again.
"""

from typing import Iterable, List, Optional, Union

from dependency_injector.wiring import Provide, inject

from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.device_profile import Command, DeviceProfile
from src.domain.entities.errors import DataValidationError, DomainError
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import Reference
from src.domain.ports.change_notifier import IChangeNotifier
from src.domain.services import validate_command_names
from src.shared import get_logger

from ..dtos.device_profile_dto import (
    CommandCreateDTO,
    CommandResponseDTO,
    CommandUpdateDTO,
    DeviceProfileCreateDTO,
    DeviceProfileResponseDTO,
    DeviceProfileUpdateDTO,
)
from ..services.association_guard import AssociationGuard
from ..services.key_resolver import KeyResolver
from ..services.profile_document_importer import ProfileDocumentImporter
from .base import CatalogUseCase, merge_fields

logger = get_logger(__name__)


class DeviceProfileManagementUseCase(
    CatalogUseCase[DeviceProfile, DeviceProfileResponseDTO]
):
    """Use case for managing device profiles."""

    entity_type = EntityType.DEVICE_PROFILE
    response_dto = DeviceProfileResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        document_importer: ProfileDocumentImporter = Provide["document_importer"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)
        self.change_notifier = change_notifier
        self.document_importer = document_importer

    @property
    def commands(self):
        return self.key_resolver.repository(EntityType.COMMAND)

    async def list_by_manufacturer(
        self, manufacturer: str
    ) -> List[DeviceProfileResponseDTO]:
        return await self._list_where({"manufacturer": manufacturer})

    async def list_by_model(self, model: str) -> List[DeviceProfileResponseDTO]:
        return await self._list_where({"model": model})

    async def list_by_manufacturer_or_model(
        self, manufacturer: str, model: str
    ) -> List[DeviceProfileResponseDTO]:
        return await self._list_where(
            {"manufacturer": manufacturer, "model": model}, match_any=True
        )

    async def list_by_label(self, label: str) -> List[DeviceProfileResponseDTO]:
        return await self._list_where({"labels": label})

    async def create(self, dto: DeviceProfileCreateDTO) -> str:
        """
        Create a profile together with its commands.

        Returns:
            Identifier of the new profile

        Raises:
            DataValidationError: On duplicate command names or a taken name
        """
        commands = [command.to_domain() for command in dto.commands]
        validate_command_names(commands)

        profile = DeviceProfile(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            manufacturer=dto.manufacturer,
            model=dto.model,
            labels=list(dto.labels),
            device_resources=list(dto.device_resources),
            resources=list(dto.resources),
            commands=commands,
        )
        await self._save_commands(commands)
        try:
            await self.repository.create(profile)
        except DomainError:
            await self._delete_commands(commands)
            raise
        logger.info(
            "device_profile.created",
            id=profile.id,
            name=profile.name,
            commands=len(commands),
        )
        return profile.id

    async def upload(self, content: Union[str, bytes, None]) -> str:
        """
        Create a profile from a YAML document.

        Raises:
            ClientError: If the document is empty or malformed
            DataValidationError: On duplicate command names or a taken name
        """
        return await self.create(self.document_importer.parse(content))

    async def export(self, profile: Reference) -> str:
        """Render a stored profile as a YAML document."""
        return self.document_importer.render(await self._get(profile))

    async def update(self, dto: DeviceProfileUpdateDTO) -> bool:
        """
        Update a profile identified by id or name.

        A submitted command list replaces the stored commands.

        Raises:
            NotFoundError: If the profile does not exist
            DataValidationError: On duplicate command names or a taken name
        """
        profile = await self._for_update(dto)
        await self._apply_common(profile, dto)
        merge_fields(
            profile,
            dto,
            ("manufacturer", "model", "labels", "device_resources", "resources"),
        )

        replaced: List[Command] = []
        if dto.commands is not None:
            commands = [command.to_domain() for command in dto.commands]
            validate_command_names(commands)
            await self._save_commands(commands)
            replaced, profile.commands = profile.commands, commands

        try:
            await self.repository.update(profile)
        except DomainError:
            if dto.commands is not None:
                await self._delete_commands(profile.commands)
            raise
        await self._delete_commands(replaced)
        logger.info("device_profile.updated", id=profile.id, name=profile.name)

        await self._notify_owners(profile, ChangeAction.UPDATE)
        return True

    async def delete_by_id(self, profile_id: str) -> bool:
        return await self._delete(await self._get_by_id(profile_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, profile: DeviceProfile) -> bool:
        """
        Delete a profile no device or provision watcher uses, with its commands.

        Raises:
            DataValidationError: If a device, manager or watcher still uses it
        """
        await self.association_guard.may_delete(self.entity_type, profile)
        await self.association_guard.delete_guarded(self.entity_type, profile)
        await self._delete_commands(profile.commands)
        logger.info("device_profile.deleted", id=profile.id, name=profile.name)
        return True

    async def _notify_owners(self, profile: DeviceProfile, action: ChangeAction):
        devices = await self.key_resolver.repository(EntityType.DEVICE).find_by(
            "profile", profile
        )
        self.change_notifier.notify_services(
            [device.service for device in devices],
            profile.id,
            action,
            ActionType.PROFILE,
        )

    async def _save_commands(self, commands: Iterable[Command]) -> None:
        for command in commands:
            await self.commands.create(command)

    async def _delete_commands(self, commands: Optional[Iterable[Command]]) -> None:
        for command in commands or ():
            await self.commands.delete_where({"id": command.id})


class CommandManagementUseCase(CatalogUseCase[Command, CommandResponseDTO]):
    """Use case for managing the commands profiles are built from."""

    entity_type = EntityType.COMMAND
    response_dto = CommandResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)

    async def list_by_name(self, name: str) -> List[CommandResponseDTO]:
        return await self._list_where({"name": name})

    async def create(self, dto: CommandCreateDTO) -> str:
        command = dto.to_domain()
        await self.repository.create(command)
        logger.info("command.created", id=command.id, name=command.name)
        return command.id

    async def update(self, dto: CommandUpdateDTO) -> bool:
        """
        Update a command identified by id or name.

        Raises:
            NotFoundError: If the command does not exist
            DataValidationError: If a new name clashes inside an owning profile
        """
        command = await self._for_update(dto)
        new_name = dto.new_name()
        if new_name and new_name != command.name:
            profiles = await self.key_resolver.repository(
                EntityType.DEVICE_PROFILE
            ).find_by("commands", command)
            for profile in profiles:
                others = [c for c in profile.commands if c.id != command.id]
                validate_command_names(others, new_name)
            command.name = new_name
        merge_fields(command, dto, ("description", "origin"))
        if dto.get is not None:
            command.get = dto.get.to_domain()
        if dto.put is not None:
            command.put = dto.put.to_domain()
        await self.repository.update(command)
        logger.info("command.updated", id=command.id, name=command.name)
        return True

    async def delete_by_id(self, command_id: str) -> bool:
        """
        Raises:
            DataValidationError: If a profile still contains the command
        """
        command = await self._get_by_id(command_id)
        await self.association_guard.may_delete(self.entity_type, command)
        await self.association_guard.delete_guarded(self.entity_type, command)
        logger.info("command.deleted", id=command.id, name=command.name)
        return True

    async def delete_by_name(self, name: str) -> bool:
        command = await self._get_by_name(name)
        return await self.delete_by_id(command.id)
