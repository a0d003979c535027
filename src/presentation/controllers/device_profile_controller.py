"""
Device Profiles Router - Presentation Layer

This module defines the FastAPI routers for device profile and command
endpoints, including YAML document upload and export.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import PlainTextResponse

from src.application.dtos.device_profile_dto import (
    CommandCreateDTO,
    CommandResponseDTO,
    CommandUpdateDTO,
    DeviceProfileCreateDTO,
    DeviceProfileResponseDTO,
    DeviceProfileUpdateDTO,
)
from src.application.use_cases.device_profile_use_cases import (
    CommandManagementUseCase,
    DeviceProfileManagementUseCase,
)
from src.domain.entities.reference import ById, ByName

from .errors import domain_errors

router = APIRouter(prefix="/deviceprofile", tags=["Device Profiles"])
command_router = APIRouter(prefix="/command", tags=["Commands"])

USE_CASE = "device_profile_use_case"
COMMAND_USE_CASE = "command_use_case"

YAML_MEDIA_TYPE = "application/x-yaml"


@router.get("/", response_model=List[DeviceProfileResponseDTO])
@inject
async def get_device_profiles(
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceProfileResponseDTO]:
    """List device profiles, newest first (413 above the read limit)."""
    with domain_errors("device_profile.list"):
        return await use_case.list_all()


@router.get("/name/{name}", response_model=DeviceProfileResponseDTO)
@inject
async def get_device_profile_by_name(
    name: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceProfileResponseDTO:
    with domain_errors("device_profile.get", name=name):
        return await use_case.get_by_name(name)


@router.get(
    "/manufacturer/{manufacturer}/model/{model}",
    response_model=List[DeviceProfileResponseDTO],
)
@inject
async def get_device_profiles_by_manufacturer_or_model(
    manufacturer: str,
    model: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceProfileResponseDTO]:
    """List profiles matching the manufacturer or the model."""
    with domain_errors(
        "device_profile.list", manufacturer=manufacturer, model=model
    ):
        return await use_case.list_by_manufacturer_or_model(manufacturer, model)


@router.get(
    "/manufacturer/{manufacturer}", response_model=List[DeviceProfileResponseDTO]
)
@inject
async def get_device_profiles_by_manufacturer(
    manufacturer: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceProfileResponseDTO]:
    with domain_errors("device_profile.list", manufacturer=manufacturer):
        return await use_case.list_by_manufacturer(manufacturer)


@router.get("/model/{model}", response_model=List[DeviceProfileResponseDTO])
@inject
async def get_device_profiles_by_model(
    model: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceProfileResponseDTO]:
    with domain_errors("device_profile.list", model=model):
        return await use_case.list_by_model(model)


@router.get("/label/{label}", response_model=List[DeviceProfileResponseDTO])
@inject
async def get_device_profiles_by_label(
    label: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> List[DeviceProfileResponseDTO]:
    with domain_errors("device_profile.list", label=label):
        return await use_case.list_by_label(label)


@router.get("/yaml/name/{name}", response_class=PlainTextResponse)
@inject
async def export_device_profile_by_name(
    name: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> PlainTextResponse:
    with domain_errors("device_profile.export", name=name):
        document = await use_case.export(ByName(name))
    return PlainTextResponse(document, media_type=YAML_MEDIA_TYPE)


@router.get("/yaml/{profile_id}", response_class=PlainTextResponse)
@inject
async def export_device_profile(
    profile_id: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> PlainTextResponse:
    """Return a profile as a YAML document."""
    with domain_errors("device_profile.export", id=profile_id):
        document = await use_case.export(ById(profile_id))
    return PlainTextResponse(document, media_type=YAML_MEDIA_TYPE)


@router.get("/{profile_id}", response_model=DeviceProfileResponseDTO)
@inject
async def get_device_profile(
    profile_id: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> DeviceProfileResponseDTO:
    with domain_errors("device_profile.get", id=profile_id):
        return await use_case.get_by_id(profile_id)


@router.post("/", response_model=str)
@inject
async def create_device_profile(
    profile_dto: DeviceProfileCreateDTO,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """Create a profile with its commands and return its identifier."""
    with domain_errors("device_profile.create", name=profile_dto.name):
        return await use_case.create(profile_dto)


@router.post("/upload", response_model=str)
@inject
async def upload_device_profile(
    request: Request,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """Create a profile from a YAML document sent as the raw request body."""
    content = await request.body()
    with domain_errors("device_profile.upload"):
        return await use_case.upload(content)


@router.post("/uploadfile", response_model=str)
@inject
async def upload_device_profile_file(
    file: UploadFile = File(...),
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> str:
    """Create a profile from an uploaded YAML file."""
    content = await file.read()
    with domain_errors("device_profile.upload", filename=file.filename):
        return await use_case.upload(content)


@router.put("/", response_model=bool)
@inject
async def update_device_profile(
    profile_dto: DeviceProfileUpdateDTO,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    """Update a profile; a submitted command list replaces the stored one."""
    with domain_errors("device_profile.update", id=profile_dto.id):
        return await use_case.update(profile_dto)


@router.delete("/id/{profile_id}", response_model=bool)
@inject
async def delete_device_profile(
    profile_id: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_profile.delete", id=profile_id):
        return await use_case.delete_by_id(profile_id)


@router.delete("/name/{name}", response_model=bool)
@inject
async def delete_device_profile_by_name(
    name: str,
    use_case: DeviceProfileManagementUseCase = Depends(Provide[USE_CASE]),
) -> bool:
    with domain_errors("device_profile.delete", name=name):
        return await use_case.delete_by_name(name)


@command_router.get("/", response_model=List[CommandResponseDTO])
@inject
async def get_commands(
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> List[CommandResponseDTO]:
    with domain_errors("command.list"):
        return await use_case.list_all()


@command_router.get("/name/{name}", response_model=List[CommandResponseDTO])
@inject
async def get_commands_by_name(
    name: str,
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> List[CommandResponseDTO]:
    """List commands with a name; names are unique per profile only."""
    with domain_errors("command.list", name=name):
        return await use_case.list_by_name(name)


@command_router.get("/{command_id}", response_model=CommandResponseDTO)
@inject
async def get_command(
    command_id: str,
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> CommandResponseDTO:
    with domain_errors("command.get", id=command_id):
        return await use_case.get_by_id(command_id)


@command_router.post("/", response_model=str)
@inject
async def create_command(
    command_dto: CommandCreateDTO,
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> str:
    with domain_errors("command.create", name=command_dto.name):
        return await use_case.create(command_dto)


@command_router.put("/", response_model=bool)
@inject
async def update_command(
    command_dto: CommandUpdateDTO,
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> bool:
    """Update a command; a rename must stay unique in every owning profile."""
    with domain_errors("command.update", id=command_dto.id):
        return await use_case.update(command_dto)


@command_router.delete("/id/{command_id}", response_model=bool)
@inject
async def delete_command(
    command_id: str,
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> bool:
    with domain_errors("command.delete", id=command_id):
        return await use_case.delete_by_id(command_id)


@command_router.delete("/name/{name}", response_model=bool)
@inject
async def delete_command_by_name(
    name: str,
    use_case: CommandManagementUseCase = Depends(Provide[COMMAND_USE_CASE]),
) -> bool:
    with domain_errors("command.delete", name=name):
        return await use_case.delete_by_name(name)
