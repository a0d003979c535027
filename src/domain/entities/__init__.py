"""
Domain Entities Package

Catalog entities, references, drafts and the domain error taxonomy.
"""

from .addressable import Addressable
from .callback import (
    ActionType,
    ChangeAction,
    Notification,
    NotificationCategory,
    NotificationSeverity,
)
from .device import Device, DeviceManager, DeviceService, ProvisionWatcher
from .device_profile import Command, CommandOperation, CommandResponse, DeviceProfile
from .drafts import (
    DeviceDraft,
    DeviceManagerDraft,
    DeviceServiceDraft,
    ProvisionWatcherDraft,
    ScheduleEventDraft,
)
from .errors import (
    ClientError,
    DataValidationError,
    DomainError,
    LimitExceededError,
    NotFoundError,
    ServiceError,
)
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .metadata import (
    AdminState,
    EntityType,
    MetadataEntity,
    OperatingState,
    Protocol,
)
from .reference import UNSET, ById, ByName, Reference, reference_of
from .schedule import DeviceReport, Schedule, ScheduleEvent

__all__ = [
    "Addressable",
    "ActionType",
    "ChangeAction",
    "Notification",
    "NotificationCategory",
    "NotificationSeverity",
    "Device",
    "DeviceManager",
    "DeviceService",
    "ProvisionWatcher",
    "Command",
    "CommandOperation",
    "CommandResponse",
    "DeviceProfile",
    "DeviceDraft",
    "DeviceManagerDraft",
    "DeviceServiceDraft",
    "ProvisionWatcherDraft",
    "ScheduleEventDraft",
    "ClientError",
    "DataValidationError",
    "DomainError",
    "LimitExceededError",
    "NotFoundError",
    "ServiceError",
    "ApplicationInfo",
    "DependencyStatus",
    "ServiceStatus",
    "SystemHealth",
    "AdminState",
    "EntityType",
    "MetadataEntity",
    "OperatingState",
    "Protocol",
    "UNSET",
    "ById",
    "ByName",
    "Reference",
    "reference_of",
    "DeviceReport",
    "Schedule",
    "ScheduleEvent",
]
