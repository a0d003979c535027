"""
Device Managers Router - Presentation Layer

This module defines the FastAPI router for device manager endpoints.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, Query

from src.application.dtos.device_dto import (
    DeviceManagerCreateDTO,
    DeviceManagerResponseDTO,
    DeviceManagerUpdateDTO,
)
from src.application.use_cases.device_use_cases import DeviceManagerManagementUseCase
from src.domain.entities.metadata import AdminState, OperatingState
from src.domain.entities.reference import ById, ByName

from .errors import domain_errors

router = APIRouter(prefix="/devicemanager", tags=["Device Managers"])

USE_CASE = "device_manager_use_case"


@router.get("/", response_model=List[DeviceManagerResponseDTO])
@inject
async def get_device_managers(
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=DeviceManagerResponseDTO)
@inject
async def get_device_manager_by_name(
    name: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceManagerResponseDTO:
    with domain_errors("device_manager.get", name=name):
        return await use_case.get_by_name(name)


@router.get("/label/{label}", response_model=List[DeviceManagerResponseDTO])
@inject
async def get_device_managers_by_label(
    label: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", label=label):
        return await use_case.list_by_label(label)


@router.get("/service/{service_id}", response_model=List[DeviceManagerResponseDTO])
@inject
async def get_device_managers_by_service(
    service_id: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", service_id=service_id):
        return await use_case.list_by_service(ById(service_id))


@router.get(
    "/servicename/{service_name}", response_model=List[DeviceManagerResponseDTO]
)
@inject
async def get_device_managers_by_service_name(
    service_name: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", service_name=service_name):
        return await use_case.list_by_service(ByName(service_name))


@router.get("/profile/{profile_id}", response_model=List[DeviceManagerResponseDTO])
@inject
async def get_device_managers_by_profile(
    profile_id: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", profile_id=profile_id):
        return await use_case.list_by_profile(ById(profile_id))


@router.get(
    "/profilename/{profile_name}", response_model=List[DeviceManagerResponseDTO]
)
@inject
async def get_device_managers_by_profile_name(
    profile_name: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", profile_name=profile_name):
        return await use_case.list_by_profile(ByName(profile_name))


@router.get(
    "/addressable/{addressable_id}", response_model=List[DeviceManagerResponseDTO]
)
@inject
async def get_device_managers_by_addressable(
    addressable_id: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", addressable_id=addressable_id):
        return await use_case.list_by_addressable(ById(addressable_id))


@router.get(
    "/addressablename/{addressable_name}",
    response_model=List[DeviceManagerResponseDTO],
)
@inject
async def get_device_managers_by_addressable_name(
    addressable_name: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceManagerResponseDTO]:
    with domain_errors("device_manager.list", addressable_name=addressable_name):
        return await use_case.list_by_addressable(ByName(addressable_name))


@router.get("/{manager_id}", response_model=DeviceManagerResponseDTO)
@inject
async def get_device_manager(
    manager_id: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceManagerResponseDTO:
    with domain_errors("device_manager.get", id=manager_id):
        return await use_case.get_by_id(manager_id)


@router.post("/", response_model=str)
@inject
async def create_device_manager(
    manager_dto: DeviceManagerCreateDTO,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """
    Create a device manager and return its identifier.

    Devices and sub-managers that cannot be found are left out.
    """
    with domain_errors("device_manager.create", name=manager_dto.name):
        return await use_case.create(manager_dto)


@router.put("/", response_model=bool)
@inject
async def update_device_manager(
    manager_dto: DeviceManagerUpdateDTO,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.update", id=manager_dto.id):
        return await use_case.update(manager_dto)


@router.put("/{manager_id}/lastconnected/{time}", response_model=bool)
@inject
async def update_last_connected(
    manager_id: str,
    time: int = Path(..., ge=0),
    notify: bool = Query(False, description="Call back the owning service"),
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.last_connected", id=manager_id):
        return await use_case.set_last_connected(ById(manager_id), time, notify)


@router.put("/{manager_id}/lastreported/{time}", response_model=bool)
@inject
async def update_last_reported(
    manager_id: str,
    time: int = Path(..., ge=0),
    notify: bool = Query(False, description="Call back the owning service"),
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.last_reported", id=manager_id):
        return await use_case.set_last_reported(ById(manager_id), time, notify)


@router.put("/{manager_id}/opstate/{state}", response_model=bool)
@inject
async def update_operating_state(
    manager_id: str,
    state: OperatingState,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.op_state", id=manager_id):
        return await use_case.set_operating_state(ById(manager_id), state)


@router.put("/{manager_id}/adminstate/{state}", response_model=bool)
@inject
async def update_admin_state(
    manager_id: str,
    state: AdminState,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.admin_state", id=manager_id):
        return await use_case.set_admin_state(ById(manager_id), state)


@router.delete("/id/{manager_id}", response_model=bool)
@inject
async def delete_device_manager(
    manager_id: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.delete", id=manager_id):
        return await use_case.delete_by_id(manager_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_device_manager_by_name(
    name: str,
    use_case: DeviceManagerManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_manager.delete", name=name):
        return await use_case.delete_by_name(name)
