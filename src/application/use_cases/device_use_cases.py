"""
Device Use Cases - Application Layer

Devices and device managers. Every write is followed by a callback to the
owning device service and, when enabled, a device change notification.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from dependency_injector.wiring import Provide, inject

from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.device import Device, DeviceManager
from src.domain.entities.drafts import DeviceDraft, DeviceManagerDraft
from src.domain.entities.errors import DataValidationError
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.domain.entities.reference import UNSET, Reference
from src.domain.ports.change_notifier import IChangeNotifier
from src.shared import get_logger

from ..dtos.common_dto import to_reference
from ..dtos.device_dto import (
    DeviceCreateDTO,
    DeviceManagerCreateDTO,
    DeviceManagerResponseDTO,
    DeviceManagerUpdateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
)
from ..services.association_guard import AssociationGuard
from ..services.graph_attacher import GraphAttacher
from ..services.key_resolver import KeyResolver
from .base import CatalogUseCase, merge_fields
from .device_service_use_cases import ADMIN_STATE_NULL, OP_STATE_NULL

logger = get_logger(__name__)

STATES_NULL = "Device and Admin state cannot be null"

_UPDATABLE = (
    "admin_state",
    "operating_state",
    "labels",
    "location",
    "last_connected",
    "last_reported",
)


def _changed(dto: Any, name: str) -> Reference:
    value = getattr(dto, name)
    return to_reference(value) if value is not None else UNSET


class _DeviceCatalogUseCase(CatalogUseCase, ABC):
    """Operations shared by devices and device managers."""

    action_type: ActionType

    def __init__(
        self,
        key_resolver: KeyResolver,
        association_guard: AssociationGuard,
        graph_attacher: GraphAttacher,
        change_notifier: IChangeNotifier,
        read_max_limit: int,
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)
        self.graph_attacher = graph_attacher
        self.change_notifier = change_notifier

    @abstractmethod
    async def _attach(self, device: Any, dto: Any, creating: bool) -> Any:
        """Resolve the references of a create or update payload."""

    @abstractmethod
    def _new(self, dto: Any) -> Any:
        """Build the entity described by a create payload."""

    def _notify(self, device: Device, action: ChangeAction) -> None:
        addressable = device.service.addressable if device.service else None
        self.change_notifier.notify(addressable, device.id, action, self.action_type)
        self.change_notifier.notify_device_change(device.name, action)

    async def list_by_label(self, label: str) -> List[Any]:
        return await self._list_where({"labels": label})

    async def list_by_service(self, service: Reference) -> List[Any]:
        """
        Raises:
            NotFoundError: If the service does not exist
        """
        found = await self.key_resolver.get(EntityType.DEVICE_SERVICE, service)
        return await self._list_where({"service": found})

    async def list_by_profile(self, profile: Reference) -> List[Any]:
        """
        Raises:
            NotFoundError: If the profile does not exist
        """
        found = await self.key_resolver.get(EntityType.DEVICE_PROFILE, profile)
        return await self._list_where({"profile": found})

    async def list_by_addressable(self, addressable: Reference) -> List[Any]:
        """
        Raises:
            NotFoundError: If the addressable does not exist
        """
        found = await self.key_resolver.get(EntityType.ADDRESSABLE, addressable)
        return await self._list_where({"addressable": found})

    async def create(self, dto: Any) -> str:
        """
        Create a device attached to a known addressable, service and profile.

        Returns:
            Identifier of the new device

        Raises:
            DataValidationError: If a state is null, a reference is unknown or
                the name is taken
        """
        if dto.admin_state is None or dto.operating_state is None:
            raise DataValidationError(STATES_NULL)

        device = await self._attach(self._new(dto), dto, creating=True)
        await self.repository.create(device)
        logger.info(
            "device.created",
            type=self.entity_type.value,
            id=device.id,
            name=device.name,
        )
        self._notify(device, ChangeAction.CREATE)
        return device.id

    async def update(self, dto: Any) -> bool:
        """
        Update a device identified by id or name.

        Only the attributes and references present in the DTO change.

        Raises:
            NotFoundError: If the device does not exist
            DataValidationError: If a state is set to null, a new reference is
                unknown, a rename is blocked or the name is taken
        """
        if "admin_state" in dto.model_fields_set and dto.admin_state is None:
            raise DataValidationError(ADMIN_STATE_NULL)
        if "operating_state" in dto.model_fields_set and dto.operating_state is None:
            raise DataValidationError(OP_STATE_NULL)

        device = await self._for_update(dto)
        await self._apply_common(device, dto)
        merge_fields(device, dto, _UPDATABLE)
        device = await self._attach(device, dto, creating=False)
        await self.repository.update(device)
        logger.info(
            "device.updated",
            type=self.entity_type.value,
            id=device.id,
            name=device.name,
        )
        self._notify(device, ChangeAction.UPDATE)
        return True

    async def _save_field(
        self, device: Reference, field: str, value: Any, notify: bool
    ) -> bool:
        found = await self._get(device)
        setattr(found, field, value)
        await self.repository.update(found)
        if notify:
            self._notify(found, ChangeAction.UPDATE)
        return True

    async def set_last_connected(
        self, device: Reference, value: int, notify: bool = False
    ) -> bool:
        return await self._save_field(device, "last_connected", value, notify)

    async def set_last_reported(
        self, device: Reference, value: int, notify: bool = False
    ) -> bool:
        return await self._save_field(device, "last_reported", value, notify)

    async def set_operating_state(
        self,
        device: Reference,
        state: Optional[OperatingState],
        notify: bool = True,
    ) -> bool:
        """
        Raises:
            DataValidationError: If the state is null
        """
        if state is None:
            raise DataValidationError(OP_STATE_NULL)
        return await self._save_field(device, "operating_state", state, notify)

    async def set_admin_state(
        self,
        device: Reference,
        state: Optional[AdminState],
        notify: bool = True,
    ) -> bool:
        """
        Raises:
            DataValidationError: If the state is null
        """
        if state is None:
            raise DataValidationError(ADMIN_STATE_NULL)
        return await self._save_field(device, "admin_state", state, notify)

    async def delete_by_id(self, device_id: str) -> bool:
        return await self._delete(await self._get_by_id(device_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, device: Device) -> bool:
        reports = await self.key_resolver.repository(
            EntityType.DEVICE_REPORT
        ).delete_where({"device": device.name})
        await self.repository.delete(device.id)
        logger.info(
            "device.deleted",
            type=self.entity_type.value,
            id=device.id,
            name=device.name,
            reports=reports,
        )
        self._notify(device, ChangeAction.DELETE)
        return True


class DeviceManagementUseCase(_DeviceCatalogUseCase):
    """Use case for managing devices."""

    entity_type = EntityType.DEVICE
    response_dto = DeviceResponseDTO
    action_type = ActionType.DEVICE

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        graph_attacher: GraphAttacher = Provide["graph_attacher"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(
            key_resolver,
            association_guard,
            graph_attacher,
            change_notifier,
            read_max_limit,
        )

    def _new(self, dto: DeviceCreateDTO) -> Device:
        return Device(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            admin_state=dto.admin_state,
            operating_state=dto.operating_state,
            labels=list(dto.labels),
            location=dto.location,
            last_connected=dto.last_connected,
            last_reported=dto.last_reported,
        )

    async def _attach(self, device: Device, dto: Any, creating: bool) -> Device:
        return await self.graph_attacher.attach_device(
            DeviceDraft(
                device,
                addressable=_changed(dto, "addressable"),
                service=_changed(dto, "service"),
                profile=_changed(dto, "profile"),
            )
        )

    async def create(self, dto: DeviceCreateDTO) -> str:
        return await super().create(dto)

    async def update(self, dto: DeviceUpdateDTO) -> bool:
        return await super().update(dto)


class DeviceManagerManagementUseCase(_DeviceCatalogUseCase):
    """Use case for managing device managers (gateways owning devices)."""

    entity_type = EntityType.DEVICE_MANAGER
    response_dto = DeviceManagerResponseDTO
    action_type = ActionType.MANAGER

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        graph_attacher: GraphAttacher = Provide["graph_attacher"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(
            key_resolver,
            association_guard,
            graph_attacher,
            change_notifier,
            read_max_limit,
        )

    def _new(self, dto: DeviceManagerCreateDTO) -> DeviceManager:
        return DeviceManager(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            admin_state=dto.admin_state,
            operating_state=dto.operating_state,
            labels=list(dto.labels),
            location=dto.location,
            last_connected=dto.last_connected,
            last_reported=dto.last_reported,
        )

    async def _attach(
        self, manager: DeviceManager, dto: Any, creating: bool
    ) -> DeviceManager:
        devices = dto.devices
        managers = dto.managers
        return await self.graph_attacher.attach_device_manager(
            DeviceManagerDraft(
                manager,
                addressable=_changed(dto, "addressable"),
                service=_changed(dto, "service"),
                profile=_changed(dto, "profile"),
                devices=[to_reference(ref) for ref in devices or ()],
                managers=[to_reference(ref) for ref in managers or ()],
                replace_devices=creating or devices is not None,
                replace_managers=creating or managers is not None,
            )
        )

    async def create(self, dto: DeviceManagerCreateDTO) -> str:
        return await super().create(dto)

    async def update(self, dto: DeviceManagerUpdateDTO) -> bool:
        return await super().update(dto)
