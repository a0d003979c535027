"""
Provision Watcher Use Cases - Application Layer

Identifier matchers that let device services provision newly discovered
devices with a given profile.
"""

from typing import List

from dependency_injector.wiring import Provide, inject

from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.device import ProvisionWatcher
from src.domain.entities.drafts import ProvisionWatcherDraft
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import UNSET, Reference
from src.domain.ports.change_notifier import IChangeNotifier
from src.shared import get_logger

from ..dtos.common_dto import to_reference
from ..dtos.provision_watcher_dto import (
    ProvisionWatcherCreateDTO,
    ProvisionWatcherResponseDTO,
    ProvisionWatcherUpdateDTO,
)
from ..services.association_guard import AssociationGuard
from ..services.graph_attacher import GraphAttacher
from ..services.key_resolver import KeyResolver
from .base import CatalogUseCase

logger = get_logger(__name__)


class ProvisionWatcherManagementUseCase(
    CatalogUseCase[ProvisionWatcher, ProvisionWatcherResponseDTO]
):
    """Use case for managing provision watchers."""

    entity_type = EntityType.PROVISION_WATCHER
    response_dto = ProvisionWatcherResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        graph_attacher: GraphAttacher = Provide["graph_attacher"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)
        self.graph_attacher = graph_attacher
        self.change_notifier = change_notifier

    def _notify(self, watcher: ProvisionWatcher, action: ChangeAction) -> None:
        addressable = watcher.service.addressable if watcher.service else None
        self.change_notifier.notify(
            addressable, watcher.id, action, ActionType.PROVISIONWATCHER
        )

    async def list_by_profile(
        self, profile: Reference
    ) -> List[ProvisionWatcherResponseDTO]:
        """
        Raises:
            NotFoundError: If the profile does not exist
        """
        found = await self.key_resolver.get(EntityType.DEVICE_PROFILE, profile)
        return await self._list_where({"profile": found})

    async def list_by_service(
        self, service: Reference
    ) -> List[ProvisionWatcherResponseDTO]:
        """
        Raises:
            NotFoundError: If the service does not exist
        """
        found = await self.key_resolver.get(EntityType.DEVICE_SERVICE, service)
        return await self._list_where({"service": found})

    async def list_by_identifier(
        self, key: str, value: str
    ) -> List[ProvisionWatcherResponseDTO]:
        return await self._list_where({f"identifiers.{key}": value})

    async def create(self, dto: ProvisionWatcherCreateDTO) -> str:
        """
        Create a watcher attached to a known profile and service.

        Raises:
            DataValidationError: If a reference is unknown or the name is taken
        """
        watcher = ProvisionWatcher(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            identifiers=dict(dto.identifiers),
        )
        watcher = await self.graph_attacher.attach_provision_watcher(
            ProvisionWatcherDraft(
                watcher,
                profile=to_reference(dto.profile),
                service=to_reference(dto.service),
            )
        )
        await self.repository.create(watcher)
        logger.info("provision_watcher.created", id=watcher.id, name=watcher.name)
        self._notify(watcher, ChangeAction.CREATE)
        return watcher.id

    async def update(self, dto: ProvisionWatcherUpdateDTO) -> bool:
        """
        Update a watcher identified by id or name.

        Raises:
            NotFoundError: If the watcher does not exist
            DataValidationError: If a new reference is unknown or the name taken
        """
        watcher = await self._for_update(dto)
        await self._apply_common(watcher, dto)
        if dto.identifiers is not None:
            watcher.identifiers = dict(dto.identifiers)
        watcher = await self.graph_attacher.attach_provision_watcher(
            ProvisionWatcherDraft(
                watcher,
                profile=to_reference(dto.profile) if dto.profile else UNSET,
                service=to_reference(dto.service) if dto.service else UNSET,
            )
        )
        await self.repository.update(watcher)
        logger.info("provision_watcher.updated", id=watcher.id, name=watcher.name)
        self._notify(watcher, ChangeAction.UPDATE)
        return True

    async def delete_by_id(self, watcher_id: str) -> bool:
        return await self._delete(await self._get_by_id(watcher_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, watcher: ProvisionWatcher) -> bool:
        await self.repository.delete(watcher.id)
        logger.info("provision_watcher.deleted", id=watcher.id, name=watcher.name)
        self._notify(watcher, ChangeAction.DELETE)
        return True
