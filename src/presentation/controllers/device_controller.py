"""
Devices Router - Presentation Layer

This module defines the FastAPI router for device endpoints.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, Query

from src.application.dtos.device_dto import (
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
)
from src.application.use_cases.device_use_cases import DeviceManagementUseCase
from src.domain.entities.metadata import AdminState, OperatingState
from src.domain.entities.reference import ById, ByName

from .errors import domain_errors

router = APIRouter(prefix="/device", tags=["Devices"])

USE_CASE = "device_use_case"


@router.get("/", response_model=List[DeviceResponseDTO])
@inject
async def get_devices(
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    """List devices, newest first (413 above the read limit)."""
    with domain_errors("device.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=DeviceResponseDTO)
@inject
async def get_device_by_name(
    name: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceResponseDTO:
    with domain_errors("device.get", name=name):
        return await use_case.get_by_name(name)


@router.get("/label/{label}", response_model=List[DeviceResponseDTO])
@inject
async def get_devices_by_label(
    label: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", label=label):
        return await use_case.list_by_label(label)


@router.get("/service/{service_id}", response_model=List[DeviceResponseDTO])
@inject
async def get_devices_by_service(
    service_id: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", service_id=service_id):
        return await use_case.list_by_service(ById(service_id))


@router.get("/servicename/{service_name}", response_model=List[DeviceResponseDTO])
@inject
async def get_devices_by_service_name(
    service_name: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", service_name=service_name):
        return await use_case.list_by_service(ByName(service_name))


@router.get("/profile/{profile_id}", response_model=List[DeviceResponseDTO])
@inject
async def get_devices_by_profile(
    profile_id: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", profile_id=profile_id):
        return await use_case.list_by_profile(ById(profile_id))


@router.get("/profilename/{profile_name}", response_model=List[DeviceResponseDTO])
@inject
async def get_devices_by_profile_name(
    profile_name: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", profile_name=profile_name):
        return await use_case.list_by_profile(ByName(profile_name))


@router.get("/addressable/{addressable_id}", response_model=List[DeviceResponseDTO])
@inject
async def get_devices_by_addressable(
    addressable_id: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", addressable_id=addressable_id):
        return await use_case.list_by_addressable(ById(addressable_id))


@router.get(
    "/addressablename/{addressable_name}", response_model=List[DeviceResponseDTO]
)
@inject
async def get_devices_by_addressable_name(
    addressable_name: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceResponseDTO]:
    with domain_errors("device.list", addressable_name=addressable_name):
        return await use_case.list_by_addressable(ByName(addressable_name))


@router.get("/{device_id}", response_model=DeviceResponseDTO)
@inject
async def get_device(
    device_id: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceResponseDTO:
    with domain_errors("device.get", id=device_id):
        return await use_case.get_by_id(device_id)


@router.post("/", response_model=str)
@inject
async def create_device(
    device_dto: DeviceCreateDTO,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """
    Create a device and return its identifier.

    The addressable, service and profile must already exist; they may be
    given by id or by name.
    """
    with domain_errors("device.create", name=device_dto.name):
        return await use_case.create(device_dto)


@router.put("/", response_model=bool)
@inject
async def update_device(
    device_dto: DeviceUpdateDTO,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.update", id=device_dto.id):
        return await use_case.update(device_dto)


@router.put("/{device_id}/lastconnected/{time}", response_model=bool)
@inject
async def update_last_connected(
    device_id: str,
    time: int = Path(..., ge=0),
    notify: bool = Query(False, description="Call back the owning service"),
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.last_connected", id=device_id):
        return await use_case.set_last_connected(ById(device_id), time, notify)


@router.put("/name/{name}/lastconnected/{time}", response_model=bool)
@inject
async def update_last_connected_by_name(
    name: str,
    time: int = Path(..., ge=0),
    notify: bool = Query(False, description="Call back the owning service"),
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.last_connected", name=name):
        return await use_case.set_last_connected(ByName(name), time, notify)


@router.put("/{device_id}/lastreported/{time}", response_model=bool)
@inject
async def update_last_reported(
    device_id: str,
    time: int = Path(..., ge=0),
    notify: bool = Query(False, description="Call back the owning service"),
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.last_reported", id=device_id):
        return await use_case.set_last_reported(ById(device_id), time, notify)


@router.put("/name/{name}/lastreported/{time}", response_model=bool)
@inject
async def update_last_reported_by_name(
    name: str,
    time: int = Path(..., ge=0),
    notify: bool = Query(False, description="Call back the owning service"),
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.last_reported", name=name):
        return await use_case.set_last_reported(ByName(name), time, notify)


@router.put("/{device_id}/opstate/{state}", response_model=bool)
@inject
async def update_operating_state(
    device_id: str,
    state: OperatingState,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.op_state", id=device_id):
        return await use_case.set_operating_state(ById(device_id), state)


@router.put("/name/{name}/opstate/{state}", response_model=bool)
@inject
async def update_operating_state_by_name(
    name: str,
    state: OperatingState,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.op_state", name=name):
        return await use_case.set_operating_state(ByName(name), state)


@router.put("/{device_id}/adminstate/{state}", response_model=bool)
@inject
async def update_admin_state(
    device_id: str,
    state: AdminState,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.admin_state", id=device_id):
        return await use_case.set_admin_state(ById(device_id), state)


@router.put("/name/{name}/adminstate/{state}", response_model=bool)
@inject
async def update_admin_state_by_name(
    name: str,
    state: AdminState,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.admin_state", name=name):
        return await use_case.set_admin_state(ByName(name), state)


@router.delete("/id/{device_id}", response_model=bool)
@inject
async def delete_device(
    device_id: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    """Delete a device together with its device reports."""
    with domain_errors("device.delete", id=device_id):
        return await use_case.delete_by_id(device_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_device_by_name(
    name: str,
    use_case: DeviceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device.delete", name=name):
        return await use_case.delete_by_name(name)
