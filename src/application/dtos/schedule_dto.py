"""
Schedule DTOs - Application Layer

Schedules, schedule events and device reports. Events name their schedule
and their device service; reports name their device and their event.
"""

from typing import List, Optional

from pydantic import Field

from src.domain.entities.schedule import DeviceReport, Schedule, ScheduleEvent

from .addressable_dto import AddressableResponseDTO
from .common_dto import (
    MetadataCreateDTO,
    MetadataResponseDTO,
    MetadataUpdateDTO,
    ReferenceDTO,
)


class ScheduleCreateDTO(MetadataCreateDTO):
    """DTO for creating a schedule."""

    start: Optional[str] = Field(None, description="Start, as YYYYMMDDTHHMMSS")
    end: Optional[str] = Field(None, description="End, as YYYYMMDDTHHMMSS")
    frequency: Optional[str] = Field(None, description="ISO-8601 duration")
    cron: Optional[str] = Field(None, description="Cron expression")
    run_once: bool = False

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "every-5-minutes",
                "start": "20240101T000000",
                "frequency": "PT5M",
                "cron": "0 */5 * * * ?",
            }
        }
    }


class ScheduleUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a schedule."""

    start: Optional[str] = None
    end: Optional[str] = None
    frequency: Optional[str] = None
    cron: Optional[str] = None
    run_once: Optional[bool] = None


class ScheduleResponseDTO(MetadataResponseDTO):
    """DTO for schedule responses."""

    start: Optional[str] = None
    end: Optional[str] = None
    frequency: Optional[str] = None
    cron: Optional[str] = None
    run_once: bool = False

    @classmethod
    def from_domain(cls, schedule: Schedule) -> "ScheduleResponseDTO":
        return cls(
            **cls.base_fields(schedule),
            start=schedule.start,
            end=schedule.end,
            frequency=schedule.frequency,
            cron=schedule.cron,
            run_once=schedule.run_once,
        )


class ScheduleEventCreateDTO(MetadataCreateDTO):
    """DTO for creating a schedule event."""

    schedule: Optional[str] = Field(None, description="Name of the schedule")
    addressable: Optional[ReferenceDTO] = None
    parameters: Optional[str] = None
    service: Optional[str] = Field(None, description="Name of the device service")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "snapshot-every-5-minutes",
                "schedule": "every-5-minutes",
                "addressable": {"name": "camera-01-addressable"},
                "service": "camera-service",
            }
        }
    }


class ScheduleEventUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a schedule event."""

    schedule: Optional[str] = None
    addressable: Optional[ReferenceDTO] = None
    parameters: Optional[str] = None
    service: Optional[str] = None


class ScheduleEventResponseDTO(MetadataResponseDTO):
    """DTO for schedule event responses."""

    schedule: Optional[str] = None
    addressable: Optional[AddressableResponseDTO] = None
    parameters: Optional[str] = None
    service: Optional[str] = None

    @classmethod
    def from_domain(cls, event: ScheduleEvent) -> "ScheduleEventResponseDTO":
        return cls(
            **cls.base_fields(event),
            schedule=event.schedule,
            addressable=(
                AddressableResponseDTO.from_domain(event.addressable)
                if event.addressable
                else None
            ),
            parameters=event.parameters,
            service=event.service,
        )


class DeviceReportCreateDTO(MetadataCreateDTO):
    """DTO for creating a device report."""

    device: Optional[str] = Field(None, description="Name of the device")
    event: Optional[str] = Field(None, description="Name of the schedule event")
    expected: List[str] = Field(default_factory=list)


class DeviceReportUpdateDTO(MetadataUpdateDTO):
    """DTO for updating a device report."""

    device: Optional[str] = None
    event: Optional[str] = None
    expected: Optional[List[str]] = None


class DeviceReportResponseDTO(MetadataResponseDTO):
    """DTO for device report responses."""

    device: Optional[str] = None
    event: Optional[str] = None
    expected: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, report: DeviceReport) -> "DeviceReportResponseDTO":
        return cls(
            **cls.base_fields(report),
            device=report.device,
            event=report.event,
            expected=report.expected,
        )
