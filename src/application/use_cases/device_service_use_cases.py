"""
Device Service Use Cases - Application Layer

Services owning devices. Deleting a service removes what only makes sense
with it: its devices, their reports and its provision watchers.
"""

from typing import Dict, List, Optional

from dependency_injector.wiring import Provide, inject

from src.domain.entities.device import DeviceService
from src.domain.entities.drafts import DeviceServiceDraft
from src.domain.entities.errors import DataValidationError
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.domain.entities.reference import UNSET, Reference
from src.shared import get_logger

from ..dtos.addressable_dto import AddressableResponseDTO
from ..dtos.common_dto import to_reference
from ..dtos.device_service_dto import (
    DeviceServiceCreateDTO,
    DeviceServiceResponseDTO,
    DeviceServiceUpdateDTO,
)
from ..services.association_guard import AssociationGuard
from ..services.graph_attacher import GraphAttacher
from ..services.key_resolver import KeyResolver
from .base import CatalogUseCase, merge_fields

logger = get_logger(__name__)

ADMIN_STATE_NULL = "Admin state cannot be set to null"
OP_STATE_NULL = "Op state cannot be set to null"


class DeviceServiceManagementUseCase(
    CatalogUseCase[DeviceService, DeviceServiceResponseDTO]
):
    """Use case for managing device services."""

    entity_type = EntityType.DEVICE_SERVICE
    response_dto = DeviceServiceResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        graph_attacher: GraphAttacher = Provide["graph_attacher"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)
        self.graph_attacher = graph_attacher

    async def list_by_label(self, label: str) -> List[DeviceServiceResponseDTO]:
        return await self._list_where({"labels": label})

    async def list_by_addressable(
        self, addressable: Reference
    ) -> List[DeviceServiceResponseDTO]:
        """
        List the services reached through an addressable.

        Raises:
            NotFoundError: If the addressable does not exist
        """
        found = await self.key_resolver.get(EntityType.ADDRESSABLE, addressable)
        return await self._list_where({"addressable": found})

    async def addressables_for_devices(
        self, service: Reference
    ) -> List[AddressableResponseDTO]:
        """List the distinct addressables of the devices a service owns."""
        found = await self._get(service)
        devices = await self._find_where(
            {"service": found}, entity_type=EntityType.DEVICE
        )
        addressables: Dict[str, AddressableResponseDTO] = {}
        for device in devices:
            addressable = device.addressable
            if addressable and addressable.id not in addressables:
                addressables[addressable.id] = AddressableResponseDTO.from_domain(
                    addressable
                )
        return list(addressables.values())

    async def create(self, dto: DeviceServiceCreateDTO) -> str:
        """
        Create a device service attached to a known addressable.

        Returns:
            Identifier of the new service

        Raises:
            DataValidationError: If the addressable is unknown or the name taken
        """
        service = DeviceService(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            admin_state=dto.admin_state,
            operating_state=dto.operating_state,
            labels=list(dto.labels),
            last_connected=dto.last_connected,
            last_reported=dto.last_reported,
        )
        service = await self.graph_attacher.attach_device_service(
            DeviceServiceDraft(service, to_reference(dto.addressable))
        )
        await self.repository.create(service)
        logger.info("device_service.created", id=service.id, name=service.name)
        return service.id

    async def update(self, dto: DeviceServiceUpdateDTO) -> bool:
        """
        Update a device service identified by id or name.

        Raises:
            NotFoundError: If the service does not exist
            DataValidationError: If a new addressable is unknown or the name taken
        """
        service = await self._for_update(dto)
        await self._apply_common(service, dto)
        merge_fields(
            service,
            dto,
            (
                "admin_state",
                "operating_state",
                "labels",
                "last_connected",
                "last_reported",
            ),
        )
        addressable = to_reference(dto.addressable) if dto.addressable else UNSET
        service = await self.graph_attacher.attach_device_service(
            DeviceServiceDraft(service, addressable)
        )
        await self.repository.update(service)
        logger.info("device_service.updated", id=service.id, name=service.name)
        return True

    async def set_last_connected(self, service: Reference, value: int) -> bool:
        found = await self._get(service)
        found.last_connected = value
        await self.repository.update(found)
        return True

    async def set_last_reported(self, service: Reference, value: int) -> bool:
        found = await self._get(service)
        found.last_reported = value
        await self.repository.update(found)
        return True

    async def set_operating_state(
        self, service: Reference, state: Optional[OperatingState]
    ) -> bool:
        """
        Raises:
            DataValidationError: If the state is null
        """
        if state is None:
            raise DataValidationError(OP_STATE_NULL)
        found = await self._get(service)
        found.operating_state = state
        await self.repository.update(found)
        return True

    async def set_admin_state(
        self, service: Reference, state: Optional[AdminState]
    ) -> bool:
        """
        Raises:
            DataValidationError: If the state is null
        """
        if state is None:
            raise DataValidationError(ADMIN_STATE_NULL)
        found = await self._get(service)
        found.admin_state = state
        await self.repository.update(found)
        return True

    async def delete_by_id(self, service_id: str) -> bool:
        return await self._delete(await self._get_by_id(service_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, service: DeviceService) -> bool:
        reports = self.key_resolver.repository(EntityType.DEVICE_REPORT)
        for device_type in (EntityType.DEVICE, EntityType.DEVICE_MANAGER):
            repository = self.key_resolver.repository(device_type)
            for device in await repository.find_by("service", service):
                if device_type is EntityType.DEVICE:
                    await reports.delete_where({"device": device.name})
                await repository.delete(device.id)
                logger.info(
                    "device_service.delete.cascade",
                    service_id=service.id,
                    device_type=device_type.value,
                    device_id=device.id,
                )

        removed = await self.key_resolver.repository(
            EntityType.PROVISION_WATCHER
        ).delete_where({"service": service})
        await self.repository.delete(service.id)
        logger.info(
            "device_service.deleted",
            id=service.id,
            name=service.name,
            provision_watchers=removed,
        )
        return True
