"""
Schedules Router - Presentation Layer

This module defines the FastAPI routers for schedules, schedule events
and device reports.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.application.dtos.schedule_dto import (
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
from src.application.use_cases.schedule_use_cases import (
    DeviceReportManagementUseCase,
    ScheduleEventManagementUseCase,
    ScheduleManagementUseCase,
)
from src.domain.entities.reference import ById, ByName

from .errors import domain_errors

router = APIRouter(prefix="/schedule", tags=["Schedules"])
event_router = APIRouter(prefix="/scheduleevent", tags=["Schedule Events"])
report_router = APIRouter(prefix="/devicereport", tags=["Device Reports"])

USE_CASE = "schedule_use_case"
EVENT_USE_CASE = "schedule_event_use_case"
REPORT_USE_CASE = "device_report_use_case"


@router.get("/", response_model=List[ScheduleResponseDTO])
@inject
async def get_schedules(
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ScheduleResponseDTO]:
    with domain_errors("schedule.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=ScheduleResponseDTO)
@inject
async def get_schedule_by_name(
    name: str,
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> ScheduleResponseDTO:
    with domain_errors("schedule.get", name=name):
        return await use_case.get_by_name(name)


@router.get("/{schedule_id}", response_model=ScheduleResponseDTO)
@inject
async def get_schedule(
    schedule_id: str,
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> ScheduleResponseDTO:
    with domain_errors("schedule.get", id=schedule_id):
        return await use_case.get_by_id(schedule_id)


@router.post("/", response_model=str)
@inject
async def create_schedule(
    schedule_dto: ScheduleCreateDTO,
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """
    Create a schedule and return its identifier.

    The start and end must be ISO 8601 timestamps, the frequency an ISO 8601
    duration and the cron expression a valid crontab.
    """
    with domain_errors("schedule.create", name=schedule_dto.name):
        return await use_case.create(schedule_dto)


@router.put("/", response_model=bool)
@inject
async def update_schedule(
    schedule_dto: ScheduleUpdateDTO,
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("schedule.update", id=schedule_dto.id):
        return await use_case.update(schedule_dto)


@router.delete("/id/{schedule_id}", response_model=bool)
@inject
async def delete_schedule(
    schedule_id: str,
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    """Delete a schedule no schedule event refers to."""
    with domain_errors("schedule.delete", id=schedule_id):
        return await use_case.delete_by_id(schedule_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_schedule_by_name(
    name: str,
    use_case: ScheduleManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("schedule.delete", name=name):
        return await use_case.delete_by_name(name)


@event_router.get("/", response_model=List[ScheduleEventResponseDTO])
@inject
async def get_schedule_events(
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> List[ScheduleEventResponseDTO]:
    with domain_errors("schedule_event.list"):
        return await use_case.list_all()


@event_router.get("/name/{name}", response_model=ScheduleEventResponseDTO)
@inject
async def get_schedule_event_by_name(
    name: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> ScheduleEventResponseDTO:
    with domain_errors("schedule_event.get", name=name):
        return await use_case.get_by_name(name)


@event_router.get(
    "/addressable/{addressable_id}", response_model=List[ScheduleEventResponseDTO]
)
@inject
async def get_schedule_events_by_addressable(
    addressable_id: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> List[ScheduleEventResponseDTO]:
    with domain_errors("schedule_event.list", addressable_id=addressable_id):
        return await use_case.list_by_addressable(ById(addressable_id))


@event_router.get(
    "/addressablename/{addressable_name}",
    response_model=List[ScheduleEventResponseDTO],
)
@inject
async def get_schedule_events_by_addressable_name(
    addressable_name: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> List[ScheduleEventResponseDTO]:
    with domain_errors("schedule_event.list", addressable_name=addressable_name):
        return await use_case.list_by_addressable(ByName(addressable_name))


@event_router.get(
    "/servicename/{service_name}", response_model=List[ScheduleEventResponseDTO]
)
@inject
async def get_schedule_events_by_service(
    service_name: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> List[ScheduleEventResponseDTO]:
    with domain_errors("schedule_event.list", service_name=service_name):
        return await use_case.list_by_service(service_name)


@event_router.get(
    "/schedulename/{schedule_name}", response_model=List[ScheduleEventResponseDTO]
)
@inject
async def get_schedule_events_by_schedule(
    schedule_name: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> List[ScheduleEventResponseDTO]:
    with domain_errors("schedule_event.list", schedule_name=schedule_name):
        return await use_case.list_by_schedule(schedule_name)


@event_router.get("/{event_id}", response_model=ScheduleEventResponseDTO)
@inject
async def get_schedule_event(
    event_id: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> ScheduleEventResponseDTO:
    with domain_errors("schedule_event.get", id=event_id):
        return await use_case.get_by_id(event_id)


@event_router.post("/", response_model=str)
@inject
async def create_schedule_event(
    event_dto: ScheduleEventCreateDTO,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> str:
    """Create an event on an existing schedule and addressable."""
    with domain_errors("schedule_event.create", name=event_dto.name):
        return await use_case.create(event_dto)


@event_router.put("/", response_model=bool)
@inject
async def update_schedule_event(
    event_dto: ScheduleEventUpdateDTO,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> bool:
    with domain_errors("schedule_event.update", id=event_dto.id):
        return await use_case.update(event_dto)


@event_router.delete("/id/{event_id}", response_model=bool)
@inject
async def delete_schedule_event(
    event_id: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> bool:
    with domain_errors("schedule_event.delete", id=event_id):
        return await use_case.delete_by_id(event_id)


@event_router.delete("/name/{name}", response_model=bool)
@inject
async def delete_schedule_event_by_name(
    name: str,
    use_case: ScheduleEventManagementUseCase = Depends(Provide[EVENT_USE_CASE]),
) -> bool:
    with domain_errors("schedule_event.delete", name=name):
        return await use_case.delete_by_name(name)


@report_router.get("/", response_model=List[DeviceReportResponseDTO])
@inject
async def get_device_reports(
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> List[DeviceReportResponseDTO]:
    with domain_errors("device_report.list"):
        return await use_case.list_all()


@report_router.get("/name/{name}", response_model=DeviceReportResponseDTO)
@inject
async def get_device_report_by_name(
    name: str,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> DeviceReportResponseDTO:
    with domain_errors("device_report.get", name=name):
        return await use_case.get_by_name(name)


@report_router.get(
    "/devicename/{device_name}", response_model=List[DeviceReportResponseDTO]
)
@inject
async def get_device_reports_by_device(
    device_name: str,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> List[DeviceReportResponseDTO]:
    with domain_errors("device_report.list", device=device_name):
        return await use_case.list_by_device(device_name)


@report_router.get("/valueDescriptorsFor/{device_name}", response_model=List[str])
@inject
async def get_value_descriptors_for_device(
    device_name: str,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> List[str]:
    """List the value descriptor names expected by a device's reports."""
    with domain_errors("device_report.value_descriptors", device=device_name):
        return await use_case.value_descriptors_for_device(device_name)


@report_router.get("/{report_id}", response_model=DeviceReportResponseDTO)
@inject
async def get_device_report(
    report_id: str,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> DeviceReportResponseDTO:
    with domain_errors("device_report.get", id=report_id):
        return await use_case.get_by_id(report_id)


@report_router.post("/", response_model=str)
@inject
async def create_device_report(
    report_dto: DeviceReportCreateDTO,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> str:
    with domain_errors("device_report.create", name=report_dto.name):
        return await use_case.create(report_dto)


@report_router.put("/", response_model=bool)
@inject
async def update_device_report(
    report_dto: DeviceReportUpdateDTO,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> bool:
    with domain_errors("device_report.update", id=report_dto.id):
        return await use_case.update(report_dto)


@report_router.delete("/id/{report_id}", response_model=bool)
@inject
async def delete_device_report(
    report_id: str,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> bool:
    with domain_errors("device_report.delete", id=report_id):
        return await use_case.delete_by_id(report_id)


@report_router.delete("/name/{name}", response_model=bool)
@inject
async def delete_device_report_by_name(
    name: str,
    use_case: DeviceReportManagementUseCase = Depends(Provide[REPORT_USE_CASE]),
) -> bool:
    with domain_errors("device_report.delete", name=name):
        return await use_case.delete_by_name(name)
