"""MongoDB Provision Watcher Repository - Infrastructure Layer"""

from typing import Any, Dict

from src.domain.entities.device import ProvisionWatcher
from src.domain.entities.metadata import EntityType
from src.infrastructure.database import MongoDatabase
from src.infrastructure.database.mongo_database import PROVISION_WATCHERS

from .base import MongoMetadataRepository
from .device_profile_repository import DeviceProfileRepository
from .device_service_repository import DeviceServiceRepository


class ProvisionWatcherRepository(MongoMetadataRepository[ProvisionWatcher]):
    """MongoDB implementation of the provision watcher repository.

    Identifier matchers are stored as a sub-document, so a single matcher is
    queried with the ``identifiers.<key>`` attribute.
    """

    COLLECTION_NAME = PROVISION_WATCHERS
    FIELD_MAP = {"profile": "profile_id", "service": "service_id"}
    entity_type = EntityType.PROVISION_WATCHER

    def __init__(
        self,
        mongo_database: MongoDatabase,
        device_profile_repository: DeviceProfileRepository,
        device_service_repository: DeviceServiceRepository,
    ):
        super().__init__(mongo_database)
        self.profiles = device_profile_repository
        self.services = device_service_repository

    def _to_document(self, watcher: ProvisionWatcher) -> Dict[str, Any]:
        return {
            **self._base_document(watcher),
            "identifiers": dict(watcher.identifiers),
            "profile_id": watcher.profile.id if watcher.profile else None,
            "service_id": watcher.service.id if watcher.service else None,
        }

    async def _to_entity(self, document: Dict[str, Any]) -> ProvisionWatcher:
        return ProvisionWatcher(
            **self._base_fields(document),
            identifiers=dict(document.get("identifiers") or {}),
            profile=await self.profiles.find_by_id(document.get("profile_id")),
            service=await self.services.find_by_id(document.get("service_id")),
        )
