"""MongoDB Device Service Repository - Infrastructure Layer"""

from typing import Any, Dict

from src.domain.entities.device import DeviceService
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.infrastructure.database import MongoDatabase
from src.infrastructure.database.mongo_database import DEVICE_SERVICES

from .addressable_repository import AddressableRepository
from .base import MongoMetadataRepository, enum_value


class DeviceServiceRepository(MongoMetadataRepository[DeviceService]):
    """MongoDB implementation of the device service repository."""

    COLLECTION_NAME = DEVICE_SERVICES
    FIELD_MAP = {"addressable": "addressable_id"}
    entity_type = EntityType.DEVICE_SERVICE

    def __init__(
        self,
        mongo_database: MongoDatabase,
        addressable_repository: AddressableRepository,
    ):
        super().__init__(mongo_database)
        self.addressables = addressable_repository

    def _to_document(self, service: DeviceService) -> Dict[str, Any]:
        return {
            **self._base_document(service),
            "admin_state": enum_value(service.admin_state),
            "operating_state": enum_value(service.operating_state),
            "labels": list(service.labels),
            "last_connected": service.last_connected,
            "last_reported": service.last_reported,
            "addressable_id": service.addressable.id if service.addressable else None,
        }

    async def _to_entity(self, document: Dict[str, Any]) -> DeviceService:
        admin_state = document.get("admin_state")
        operating_state = document.get("operating_state")
        return DeviceService(
            **self._base_fields(document),
            admin_state=AdminState(admin_state) if admin_state else None,
            operating_state=(
                OperatingState(operating_state) if operating_state else None
            ),
            labels=list(document.get("labels") or []),
            last_connected=document.get("last_connected") or 0,
            last_reported=document.get("last_reported") or 0,
            addressable=await self.addressables.find_by_id(
                document.get("addressable_id")
            ),
        )
