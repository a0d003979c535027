"""
Provision Watchers Router - Presentation Layer

This module defines the FastAPI router for provision watcher endpoints.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.application.dtos.provision_watcher_dto import (
    ProvisionWatcherCreateDTO,
    ProvisionWatcherResponseDTO,
    ProvisionWatcherUpdateDTO,
)
from src.application.use_cases.provision_watcher_use_cases import (
    ProvisionWatcherManagementUseCase,
)
from src.domain.entities.reference import ById, ByName

from .errors import domain_errors

router = APIRouter(prefix="/provisionwatcher", tags=["Provision Watchers"])

USE_CASE = "provision_watcher_use_case"


@router.get("/", response_model=List[ProvisionWatcherResponseDTO])
@inject
async def get_provision_watchers(
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ProvisionWatcherResponseDTO]:
    with domain_errors("provision_watcher.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=ProvisionWatcherResponseDTO)
@inject
async def get_provision_watcher_by_name(
    name: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> ProvisionWatcherResponseDTO:
    with domain_errors("provision_watcher.get", name=name):
        return await use_case.get_by_name(name)


@router.get(
    "/profile/{profile_id}", response_model=List[ProvisionWatcherResponseDTO]
)
@inject
async def get_provision_watchers_by_profile(
    profile_id: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ProvisionWatcherResponseDTO]:
    with domain_errors("provision_watcher.list", profile_id=profile_id):
        return await use_case.list_by_profile(ById(profile_id))


@router.get(
    "/profilename/{profile_name}",
    response_model=List[ProvisionWatcherResponseDTO],
)
@inject
async def get_provision_watchers_by_profile_name(
    profile_name: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ProvisionWatcherResponseDTO]:
    with domain_errors("provision_watcher.list", profile_name=profile_name):
        return await use_case.list_by_profile(ByName(profile_name))


@router.get(
    "/service/{service_id}", response_model=List[ProvisionWatcherResponseDTO]
)
@inject
async def get_provision_watchers_by_service(
    service_id: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ProvisionWatcherResponseDTO]:
    with domain_errors("provision_watcher.list", service_id=service_id):
        return await use_case.list_by_service(ById(service_id))


@router.get(
    "/servicename/{service_name}",
    response_model=List[ProvisionWatcherResponseDTO],
)
@inject
async def get_provision_watchers_by_service_name(
    service_name: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ProvisionWatcherResponseDTO]:
    with domain_errors("provision_watcher.list", service_name=service_name):
        return await use_case.list_by_service(ByName(service_name))


@router.get(
    "/identifier/{key}/{value}",
    response_model=List[ProvisionWatcherResponseDTO],
)
@inject
async def get_provision_watchers_by_identifier(
    key: str,
    value: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[ProvisionWatcherResponseDTO]:
    """List watchers whose identifier ``key`` equals ``value``."""
    with domain_errors("provision_watcher.list", key=key, value=value):
        return await use_case.list_by_identifier(key, value)


@router.get("/{watcher_id}", response_model=ProvisionWatcherResponseDTO)
@inject
async def get_provision_watcher(
    watcher_id: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> ProvisionWatcherResponseDTO:
    with domain_errors("provision_watcher.get", id=watcher_id):
        return await use_case.get_by_id(watcher_id)


@router.post("/", response_model=str)
@inject
async def create_provision_watcher(
    watcher_dto: ProvisionWatcherCreateDTO,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """Create a provision watcher on an existing profile and service."""
    with domain_errors("provision_watcher.create", name=watcher_dto.name):
        return await use_case.create(watcher_dto)


@router.put("/", response_model=bool)
@inject
async def update_provision_watcher(
    watcher_dto: ProvisionWatcherUpdateDTO,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("provision_watcher.update", id=watcher_dto.id):
        return await use_case.update(watcher_dto)


@router.delete("/id/{watcher_id}", response_model=bool)
@inject
async def delete_provision_watcher(
    watcher_id: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("provision_watcher.delete", id=watcher_id):
        return await use_case.delete_by_id(watcher_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_provision_watcher_by_name(
    name: str,
    use_case: ProvisionWatcherManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("provision_watcher.delete", name=name):
        return await use_case.delete_by_name(name)
