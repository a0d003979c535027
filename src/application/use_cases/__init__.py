"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Each entity family has one management use case that
orchestrates resolution, attachment, association checks, persistence and
change notification.
"""

from .addressable_use_cases import AddressableManagementUseCase
from .base import CatalogUseCase, merge_fields
from .device_profile_use_cases import (
    CommandManagementUseCase,
    DeviceProfileManagementUseCase,
)
from .device_service_use_cases import DeviceServiceManagementUseCase
from .device_use_cases import DeviceManagementUseCase, DeviceManagerManagementUseCase
from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .provision_watcher_use_cases import ProvisionWatcherManagementUseCase
from .schedule_use_cases import (
    DeviceReportManagementUseCase,
    ScheduleEventManagementUseCase,
    ScheduleManagementUseCase,
)

__all__ = [
    "CatalogUseCase",
    "merge_fields",
    "AddressableManagementUseCase",
    "DeviceServiceManagementUseCase",
    "DeviceProfileManagementUseCase",
    "CommandManagementUseCase",
    "DeviceManagementUseCase",
    "DeviceManagerManagementUseCase",
    "ProvisionWatcherManagementUseCase",
    "ScheduleManagementUseCase",
    "ScheduleEventManagementUseCase",
    "DeviceReportManagementUseCase",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
