"""
Device Services Router - Presentation Layer

This module defines the FastAPI router for device service endpoints.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path

from src.application.dtos.addressable_dto import AddressableResponseDTO
from src.application.dtos.device_service_dto import (
    DeviceServiceCreateDTO,
    DeviceServiceResponseDTO,
    DeviceServiceUpdateDTO,
)
from src.application.use_cases.device_service_use_cases import (
    DeviceServiceManagementUseCase,
)
from src.domain.entities.metadata import AdminState, OperatingState
from src.domain.entities.reference import ById, ByName

from .errors import domain_errors

router = APIRouter(prefix="/deviceservice", tags=["Device Services"])

USE_CASE = "device_service_use_case"


@router.get("/", response_model=List[DeviceServiceResponseDTO])
@inject
async def get_device_services(
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceServiceResponseDTO]:
    """List device services, newest first (413 above the read limit)."""
    with domain_errors("device_service.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=DeviceServiceResponseDTO)
@inject
async def get_device_service_by_name(
    name: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceServiceResponseDTO:
    with domain_errors("device_service.get", name=name):
        return await use_case.get_by_name(name)


@router.get("/label/{label}", response_model=List[DeviceServiceResponseDTO])
@inject
async def get_device_services_by_label(
    label: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceServiceResponseDTO]:
    with domain_errors("device_service.list", label=label):
        return await use_case.list_by_label(label)


@router.get(
    "/addressable/{addressable_id}", response_model=List[DeviceServiceResponseDTO]
)
@inject
async def get_device_services_by_addressable(
    addressable_id: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceServiceResponseDTO]:
    with domain_errors("device_service.list", addressable_id=addressable_id):
        return await use_case.list_by_addressable(ById(addressable_id))


@router.get(
    "/addressablename/{addressable_name}",
    response_model=List[DeviceServiceResponseDTO],
)
@inject
async def get_device_services_by_addressable_name(
    addressable_name: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceServiceResponseDTO]:
    with domain_errors("device_service.list", addressable_name=addressable_name):
        return await use_case.list_by_addressable(ByName(addressable_name))


@router.get(
    "/addressables/{service_id}", response_model=List[AddressableResponseDTO]
)
@inject
async def get_device_addressables(
    service_id: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    """List the addressables of the devices a service owns."""
    with domain_errors("device_service.addressables", id=service_id):
        return await use_case.addressables_for_devices(ById(service_id))


@router.get(
    "/addressablesbyname/{name}", response_model=List[AddressableResponseDTO]
)
@inject
async def get_device_addressables_by_name(
    name: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    with domain_errors("device_service.addressables", name=name):
        return await use_case.addressables_for_devices(ByName(name))


@router.get("/{service_id}", response_model=DeviceServiceResponseDTO)
@inject
async def get_device_service(
    service_id: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceServiceResponseDTO:
    with domain_errors("device_service.get", id=service_id):
        return await use_case.get_by_id(service_id)


@router.post("/", response_model=str)
@inject
async def create_device_service(
    service_dto: DeviceServiceCreateDTO,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """Create a device service and return its identifier."""
    with domain_errors("device_service.create", name=service_dto.name):
        return await use_case.create(service_dto)


@router.put("/", response_model=bool)
@inject
async def update_device_service(
    service_dto: DeviceServiceUpdateDTO,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.update", id=service_dto.id):
        return await use_case.update(service_dto)


@router.put("/{service_id}/lastconnected/{time}", response_model=bool)
@inject
async def update_last_connected(
    service_id: str,
    time: int = Path(..., ge=0),
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.last_connected", id=service_id):
        return await use_case.set_last_connected(ById(service_id), time)


@router.put("/name/{name}/lastconnected/{time}", response_model=bool)
@inject
async def update_last_connected_by_name(
    name: str,
    time: int = Path(..., ge=0),
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.last_connected", name=name):
        return await use_case.set_last_connected(ByName(name), time)


@router.put("/{service_id}/lastreported/{time}", response_model=bool)
@inject
async def update_last_reported(
    service_id: str,
    time: int = Path(..., ge=0),
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.last_reported", id=service_id):
        return await use_case.set_last_reported(ById(service_id), time)


@router.put("/name/{name}/lastreported/{time}", response_model=bool)
@inject
async def update_last_reported_by_name(
    name: str,
    time: int = Path(..., ge=0),
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.last_reported", name=name):
        return await use_case.set_last_reported(ByName(name), time)


@router.put("/{service_id}/opstate/{state}", response_model=bool)
@inject
async def update_operating_state(
    service_id: str,
    state: OperatingState,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.op_state", id=service_id):
        return await use_case.set_operating_state(ById(service_id), state)


@router.put("/name/{name}/opstate/{state}", response_model=bool)
@inject
async def update_operating_state_by_name(
    name: str,
    state: OperatingState,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.op_state", name=name):
        return await use_case.set_operating_state(ByName(name), state)


@router.put("/{service_id}/adminstate/{state}", response_model=bool)
@inject
async def update_admin_state(
    service_id: str,
    state: AdminState,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.admin_state", id=service_id):
        return await use_case.set_admin_state(ById(service_id), state)


@router.put("/name/{name}/adminstate/{state}", response_model=bool)
@inject
async def update_admin_state_by_name(
    name: str,
    state: AdminState,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.admin_state", name=name):
        return await use_case.set_admin_state(ByName(name), state)


@router.delete("/id/{service_id}", response_model=bool)
@inject
async def delete_device_service(
    service_id: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    """Delete a service together with its devices and provision watchers."""
    with domain_errors("device_service.delete", id=service_id):
        return await use_case.delete_by_id(service_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_device_service_by_name(
    name: str,
    use_case: DeviceServiceManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_service.delete", name=name):
        return await use_case.delete_by_name(name)
