"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer. These implementations
handle the details of data persistence.
"""

from .addressable_repository import AddressableRepository
from .base import MongoMetadataRepository
from .device_profile_repository import CommandRepository, DeviceProfileRepository
from .device_repository import DeviceManagerRepository, DeviceRepository
from .device_service_repository import DeviceServiceRepository
from .provision_watcher_repository import ProvisionWatcherRepository
from .schedule_repository import (
    DeviceReportRepository,
    ScheduleEventRepository,
    ScheduleRepository,
)

__all__ = [
    "AddressableRepository",
    "CommandRepository",
    "DeviceManagerRepository",
    "DeviceProfileRepository",
    "DeviceReportRepository",
    "DeviceRepository",
    "DeviceServiceRepository",
    "MongoMetadataRepository",
    "ProvisionWatcherRepository",
    "ScheduleEventRepository",
    "ScheduleRepository",
]
