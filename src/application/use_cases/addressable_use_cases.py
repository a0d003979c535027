"""
Addressable Use Cases - Application Layer

Network endpoints used to reach device services and devices.
"""

from typing import List

from dependency_injector.wiring import Provide, inject

from src.domain.entities.addressable import Addressable
from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.metadata import EntityType
from src.domain.ports.change_notifier import IChangeNotifier
from src.shared import get_logger

from ..dtos.addressable_dto import (
    AddressableCreateDTO,
    AddressableResponseDTO,
    AddressableUpdateDTO,
)
from ..services.association_guard import AssociationGuard
from ..services.key_resolver import KeyResolver
from .base import CatalogUseCase, merge_fields

logger = get_logger(__name__)

_UPDATABLE = (
    "protocol",
    "method",
    "address",
    "port",
    "path",
    "publisher",
    "topic",
    "user",
    "password",
)


class AddressableManagementUseCase(
    CatalogUseCase[Addressable, AddressableResponseDTO]
):
    """Use case for managing addressables."""

    entity_type = EntityType.ADDRESSABLE
    response_dto = AddressableResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)
        self.change_notifier = change_notifier

    async def list_by_address(self, address: str) -> List[AddressableResponseDTO]:
        return await self._list_where({"address": address})

    async def list_by_port(self, port: int) -> List[AddressableResponseDTO]:
        return await self._list_where({"port": port})

    async def list_by_topic(self, topic: str) -> List[AddressableResponseDTO]:
        return await self._list_where({"topic": topic})

    async def list_by_publisher(self, publisher: str) -> List[AddressableResponseDTO]:
        return await self._list_where({"publisher": publisher})

    async def create(self, dto: AddressableCreateDTO) -> str:
        """
        Create a new addressable.

        Returns:
            Identifier of the new addressable

        Raises:
            DataValidationError: If the name is already taken
        """
        addressable = Addressable(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            protocol=dto.protocol,
            method=dto.method,
            address=dto.address,
            port=dto.port,
            path=dto.path,
            publisher=dto.publisher,
            topic=dto.topic,
            user=dto.user,
            password=dto.password,
        )
        await self.repository.create(addressable)
        logger.info("addressable.created", id=addressable.id, name=addressable.name)
        return addressable.id

    async def update(self, dto: AddressableUpdateDTO) -> bool:
        """
        Update an addressable identified by id or name.

        Raises:
            NotFoundError: If the addressable does not exist
            DataValidationError: If a rename is blocked or the name is taken
        """
        addressable = await self._for_update(dto)
        await self._apply_common(addressable, dto)
        merge_fields(addressable, dto, _UPDATABLE)
        await self.repository.update(addressable)
        logger.info("addressable.updated", id=addressable.id, name=addressable.name)

        devices = await self.key_resolver.repository(EntityType.DEVICE).find_by(
            "addressable", addressable
        )
        self.change_notifier.notify_services(
            [device.service for device in devices],
            addressable.id,
            ChangeAction.UPDATE,
            ActionType.ADDRESSABLE,
        )
        return True

    async def delete_by_id(self, addressable_id: str) -> bool:
        return await self._delete(await self._get_by_id(addressable_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, addressable: Addressable) -> bool:
        """
        Delete an addressable nothing references anymore.

        Raises:
            DataValidationError: If a device, manager, service or event uses it
        """
        await self.association_guard.may_delete(self.entity_type, addressable)
        await self.association_guard.delete_guarded(self.entity_type, addressable)
        logger.info("addressable.deleted", id=addressable.id, name=addressable.name)
        return True
