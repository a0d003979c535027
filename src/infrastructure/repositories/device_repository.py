"""
MongoDB Device and Device Manager Repositories - Infrastructure Layer

Device documents reference their addressable, service and profile by
identifier; manager documents also list the identifiers of the devices and
managers they aggregate.
"""

from typing import Any, Dict, List

from src.domain.entities.device import Device, DeviceManager
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.infrastructure.database import MongoDatabase
from src.infrastructure.database.mongo_database import DEVICE_MANAGERS, DEVICES

from .addressable_repository import AddressableRepository
from .base import MongoMetadataRepository, enum_value
from .device_profile_repository import DeviceProfileRepository
from .device_service_repository import DeviceServiceRepository

_DEVICE_FIELD_MAP = {
    "addressable": "addressable_id",
    "service": "service_id",
    "profile": "profile_id",
}


class _DeviceDocuments:
    """Document mapping shared by devices and device managers."""

    addressables: AddressableRepository
    services: DeviceServiceRepository
    profiles: DeviceProfileRepository

    @staticmethod
    def _device_document(device: Device) -> Dict[str, Any]:
        return {
            **MongoMetadataRepository._base_document(device),
            "admin_state": enum_value(device.admin_state),
            "operating_state": enum_value(device.operating_state),
            "labels": list(device.labels),
            "location": device.location,
            "last_connected": device.last_connected,
            "last_reported": device.last_reported,
            "addressable_id": device.addressable.id if device.addressable else None,
            "service_id": device.service.id if device.service else None,
            "profile_id": device.profile.id if device.profile else None,
        }

    async def _device_fields(self, document: Dict[str, Any]) -> Dict[str, Any]:
        admin_state = document.get("admin_state")
        operating_state = document.get("operating_state")
        return {
            **MongoMetadataRepository._base_fields(document),
            "admin_state": AdminState(admin_state) if admin_state else None,
            "operating_state": (
                OperatingState(operating_state) if operating_state else None
            ),
            "labels": list(document.get("labels") or []),
            "location": document.get("location"),
            "last_connected": document.get("last_connected") or 0,
            "last_reported": document.get("last_reported") or 0,
            "addressable": await self.addressables.find_by_id(
                document.get("addressable_id")
            ),
            "service": await self.services.find_by_id(document.get("service_id")),
            "profile": await self.profiles.find_by_id(document.get("profile_id")),
        }


class DeviceRepository(_DeviceDocuments, MongoMetadataRepository[Device]):
    """MongoDB implementation of the device repository."""

    COLLECTION_NAME = DEVICES
    FIELD_MAP = _DEVICE_FIELD_MAP
    entity_type = EntityType.DEVICE

    def __init__(
        self,
        mongo_database: MongoDatabase,
        addressable_repository: AddressableRepository,
        device_service_repository: DeviceServiceRepository,
        device_profile_repository: DeviceProfileRepository,
    ):
        super().__init__(mongo_database)
        self.addressables = addressable_repository
        self.services = device_service_repository
        self.profiles = device_profile_repository

    def _to_document(self, device: Device) -> Dict[str, Any]:
        return self._device_document(device)

    async def _to_entity(self, document: Dict[str, Any]) -> Device:
        return Device(**await self._device_fields(document))


class DeviceManagerRepository(
    _DeviceDocuments, MongoMetadataRepository[DeviceManager]
):
    """MongoDB implementation of the device manager repository.

    Sub-managers are hydrated one level deep so that managers referencing
    each other cannot recurse forever; their own sub-lists come back empty.
    """

    COLLECTION_NAME = DEVICE_MANAGERS
    FIELD_MAP = {
        **_DEVICE_FIELD_MAP,
        "devices": "device_ids",
        "managers": "manager_ids",
    }
    entity_type = EntityType.DEVICE_MANAGER

    def __init__(
        self,
        mongo_database: MongoDatabase,
        addressable_repository: AddressableRepository,
        device_service_repository: DeviceServiceRepository,
        device_profile_repository: DeviceProfileRepository,
        device_repository: DeviceRepository,
    ):
        super().__init__(mongo_database)
        self.addressables = addressable_repository
        self.services = device_service_repository
        self.profiles = device_profile_repository
        self.devices = device_repository

    def _to_document(self, manager: DeviceManager) -> Dict[str, Any]:
        return {
            **self._device_document(manager),
            "device_ids": [device.id for device in manager.devices],
            "manager_ids": [sub.id for sub in manager.managers],
        }

    async def _load_devices(self, device_ids: List[str]) -> List[Device]:
        devices = []
        for device_id in device_ids:
            device = await self.devices.find_by_id(device_id)
            if device is not None:
                devices.append(device)
        return devices

    async def _load_managers(self, manager_ids: List[str]) -> List[DeviceManager]:
        managers = []
        for manager_id in manager_ids:
            document = await self.db.find_one(self.COLLECTION_NAME, {"id": manager_id})
            if document is not None:
                managers.append(DeviceManager(**await self._device_fields(document)))
        return managers

    async def _to_entity(self, document: Dict[str, Any]) -> DeviceManager:
        return DeviceManager(
            **await self._device_fields(document),
            devices=await self._load_devices(document.get("device_ids") or []),
            managers=await self._load_managers(document.get("manager_ids") or []),
        )
