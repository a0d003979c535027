from __future__ import annotations

import pytest

from src.application.services.association_guard import (
    COMMAND_IN_USE,
    DEVICE_IN_USE,
    SCHEDULE_RENAME,
)
from src.domain.entities.addressable import Addressable
from src.domain.entities.device import Device, DeviceManager, DeviceService
from src.domain.entities.device_profile import Command, DeviceProfile
from src.domain.entities.errors import DataValidationError
from src.domain.entities.metadata import EntityType
from src.domain.entities.schedule import DeviceReport, Schedule, ScheduleEvent


@pytest.mark.asyncio
async def test_unreferenced_addressable_may_be_deleted(
    repositories, association_guard
) -> None:
    addressable = await repositories[EntityType.ADDRESSABLE].create(
        Addressable(name="A1")
    )

    assert await association_guard.may_delete(EntityType.ADDRESSABLE, addressable)


@pytest.mark.asyncio
async def test_referenced_addressable_is_protected(
    repositories, association_guard
) -> None:
    addressable = await repositories[EntityType.ADDRESSABLE].create(
        Addressable(name="A1")
    )
    await repositories[EntityType.DEVICE_SERVICE].create(
        DeviceService(name="S1", addressable=addressable)
    )

    with pytest.raises(DataValidationError) as exc:
        await association_guard.may_delete(EntityType.ADDRESSABLE, addressable)
    assert f"id: {addressable.id}" in exc.value.message
    assert exc.value.details == {"dependent": "DeviceService"}

    with pytest.raises(DataValidationError) as exc:
        await association_guard.may_rename(EntityType.ADDRESSABLE, addressable, "A2")
    assert "name: A1" in exc.value.message


@pytest.mark.asyncio
async def test_keeping_the_same_name_is_always_allowed(
    repositories, association_guard
) -> None:
    addressable = await repositories[EntityType.ADDRESSABLE].create(
        Addressable(name="A1")
    )
    await repositories[EntityType.DEVICE_SERVICE].create(
        DeviceService(name="S1", addressable=addressable)
    )

    assert await association_guard.may_rename(EntityType.ADDRESSABLE, addressable, "A1")


@pytest.mark.asyncio
async def test_schedule_referenced_by_name(repositories, association_guard) -> None:
    schedule = await repositories[EntityType.SCHEDULE].create(Schedule(name="hourly"))
    await repositories[EntityType.SCHEDULE_EVENT].create(
        ScheduleEvent(name="E1", schedule="hourly")
    )

    with pytest.raises(DataValidationError) as exc:
        await association_guard.may_rename(EntityType.SCHEDULE, schedule, "daily")
    assert exc.value.message == SCHEDULE_RENAME

    with pytest.raises(DataValidationError):
        await association_guard.may_delete(EntityType.SCHEDULE, schedule)


@pytest.mark.asyncio
async def test_command_in_a_profile_is_protected(
    repositories, association_guard
) -> None:
    command = await repositories[EntityType.COMMAND].create(Command(name="on"))
    await repositories[EntityType.DEVICE_PROFILE].create(
        DeviceProfile(name="P1", commands=[command])
    )

    with pytest.raises(DataValidationError) as exc:
        await association_guard.delete_guarded(EntityType.COMMAND, command)
    assert exc.value.message == COMMAND_IN_USE
    assert await repositories[EntityType.COMMAND].find_by_id(command.id) is not None


@pytest.mark.asyncio
async def test_delete_guarded_removes_free_entity(
    repositories, association_guard
) -> None:
    schedule = await repositories[EntityType.SCHEDULE].create(Schedule(name="hourly"))

    await association_guard.delete_guarded(EntityType.SCHEDULE, schedule)

    assert await repositories[EntityType.SCHEDULE].find_by_id(schedule.id) is None


@pytest.mark.asyncio
async def test_families_without_rules_are_unguarded(
    repositories, association_guard
) -> None:
    service = await repositories[EntityType.DEVICE_SERVICE].create(
        DeviceService(name="S1")
    )

    assert await association_guard.may_delete(EntityType.DEVICE_SERVICE, service)
    assert await association_guard.may_rename(
        EntityType.DEVICE_SERVICE, service, "S2"
    )


@pytest.mark.asyncio
async def test_reported_device_rename_is_blocked_but_manager_rename_is_not(
    repositories, association_guard
) -> None:
    device = await repositories[EntityType.DEVICE].create(Device(name="D1"))
    manager = await repositories[EntityType.DEVICE_MANAGER].create(
        DeviceManager(name="M1")
    )
    for name in ("D1", "M1"):
        await repositories[EntityType.DEVICE_REPORT].create(
            DeviceReport(name=f"R-{name}", device=name, event="E1")
        )

    with pytest.raises(DataValidationError) as exc:
        await association_guard.may_rename(EntityType.DEVICE, device, "D2")
    assert exc.value.message == DEVICE_IN_USE.format(key="name", value="D1")

    assert await association_guard.may_rename(
        EntityType.DEVICE_MANAGER, manager, "M2"
    )
