"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .addressable_dto import (
    AddressableCreateDTO,
    AddressableResponseDTO,
    AddressableUpdateDTO,
)
from .common_dto import (
    MetadataCreateDTO,
    MetadataResponseDTO,
    MetadataUpdateDTO,
    ReferenceDTO,
    to_reference,
)
from .device_dto import (
    DeviceCreateDTO,
    DeviceManagerCreateDTO,
    DeviceManagerResponseDTO,
    DeviceManagerUpdateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
)
from .device_profile_dto import (
    CommandCreateDTO,
    CommandResponseDTO,
    CommandUpdateDTO,
    DeviceProfileCreateDTO,
    DeviceProfileResponseDTO,
    DeviceProfileUpdateDTO,
    ExpectedResponseDTO,
    OperationDTO,
)
from .device_service_dto import (
    DeviceServiceCreateDTO,
    DeviceServiceResponseDTO,
    DeviceServiceUpdateDTO,
)
from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .provision_watcher_dto import (
    ProvisionWatcherCreateDTO,
    ProvisionWatcherResponseDTO,
    ProvisionWatcherUpdateDTO,
)
from .schedule_dto import (
    DeviceReportCreateDTO,
    DeviceReportResponseDTO,
    DeviceReportUpdateDTO,
    ScheduleCreateDTO,
    ScheduleEventCreateDTO,
    ScheduleEventResponseDTO,
    ScheduleEventUpdateDTO,
    ScheduleResponseDTO,
    ScheduleUpdateDTO,
)

__all__ = [
    "ReferenceDTO",
    "to_reference",
    "MetadataCreateDTO",
    "MetadataUpdateDTO",
    "MetadataResponseDTO",
    "AddressableCreateDTO",
    "AddressableUpdateDTO",
    "AddressableResponseDTO",
    "DeviceServiceCreateDTO",
    "DeviceServiceUpdateDTO",
    "DeviceServiceResponseDTO",
    "ExpectedResponseDTO",
    "OperationDTO",
    "CommandCreateDTO",
    "CommandUpdateDTO",
    "CommandResponseDTO",
    "DeviceProfileCreateDTO",
    "DeviceProfileUpdateDTO",
    "DeviceProfileResponseDTO",
    "DeviceCreateDTO",
    "DeviceUpdateDTO",
    "DeviceResponseDTO",
    "DeviceManagerCreateDTO",
    "DeviceManagerUpdateDTO",
    "DeviceManagerResponseDTO",
    "ProvisionWatcherCreateDTO",
    "ProvisionWatcherUpdateDTO",
    "ProvisionWatcherResponseDTO",
    "ScheduleCreateDTO",
    "ScheduleUpdateDTO",
    "ScheduleResponseDTO",
    "ScheduleEventCreateDTO",
    "ScheduleEventUpdateDTO",
    "ScheduleEventResponseDTO",
    "DeviceReportCreateDTO",
    "DeviceReportUpdateDTO",
    "DeviceReportResponseDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]
