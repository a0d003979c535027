"""
Addressables Router - Presentation Layer

This module defines the FastAPI router for addressable endpoints.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path

from src.application.dtos.addressable_dto import (
    AddressableCreateDTO,
    AddressableResponseDTO,
    AddressableUpdateDTO,
)
from src.application.use_cases.addressable_use_cases import (
    AddressableManagementUseCase,
)

from .errors import domain_errors

router = APIRouter(prefix="/addressable", tags=["Addressables"])

USE_CASE = "addressable_use_case"


@router.get("/", response_model=List[AddressableResponseDTO])
@inject
async def get_addressables(
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    """List addressables, newest first (413 above the read limit)."""
    with domain_errors("addressable.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=AddressableResponseDTO)
@inject
async def get_addressable_by_name(
    name: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> AddressableResponseDTO:
    with domain_errors("addressable.get", name=name):
        return await use_case.get_by_name(name)


@router.get("/address/{address}", response_model=List[AddressableResponseDTO])
@inject
async def get_addressables_by_address(
    address: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    with domain_errors("addressable.list", address=address):
        return await use_case.list_by_address(address)


@router.get("/port/{port}", response_model=List[AddressableResponseDTO])
@inject
async def get_addressables_by_port(
    port: int = Path(..., ge=0, le=65535),
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    with domain_errors("addressable.list", port=port):
        return await use_case.list_by_port(port)


@router.get("/topic/{topic}", response_model=List[AddressableResponseDTO])
@inject
async def get_addressables_by_topic(
    topic: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    with domain_errors("addressable.list", topic=topic):
        return await use_case.list_by_topic(topic)


@router.get("/publisher/{publisher}", response_model=List[AddressableResponseDTO])
@inject
async def get_addressables_by_publisher(
    publisher: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[AddressableResponseDTO]:
    with domain_errors("addressable.list", publisher=publisher):
        return await use_case.list_by_publisher(publisher)


@router.get("/{addressable_id}", response_model=AddressableResponseDTO)
@inject
async def get_addressable(
    addressable_id: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> AddressableResponseDTO:
    with domain_errors("addressable.get", id=addressable_id):
        return await use_case.get_by_id(addressable_id)


@router.post("/", response_model=str)
@inject
async def create_addressable(
    addressable_dto: AddressableCreateDTO,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """Create an addressable and return its identifier."""
    with domain_errors("addressable.create", name=addressable_dto.name):
        return await use_case.create(addressable_dto)


@router.put("/", response_model=bool)
@inject
async def update_addressable(
    addressable_dto: AddressableUpdateDTO,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    """Update the addressable identified by the embedded id or name."""
    with domain_errors("addressable.update", id=addressable_dto.id):
        return await use_case.update(addressable_dto)


@router.delete("/id/{addressable_id}", response_model=bool)
@inject
async def delete_addressable(
    addressable_id: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("addressable.delete", id=addressable_id):
        return await use_case.delete_by_id(addressable_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_addressable_by_name(
    name: str,
    use_case: AddressableManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("addressable.delete", name=name):
        return await use_case.delete_by_name(name)
