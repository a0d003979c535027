from __future__ import annotations

import pytest

from src.application.dtos.common_dto import ReferenceDTO
from src.application.dtos.device_dto import (
    DeviceCreateDTO,
    DeviceManagerCreateDTO,
    DeviceManagerUpdateDTO,
    DeviceUpdateDTO,
)
from src.application.use_cases.device_service_use_cases import ADMIN_STATE_NULL
from src.application.use_cases.device_use_cases import (
    STATES_NULL,
    _DeviceCatalogUseCase,
)
from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.errors import DataValidationError, NotFoundError
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.domain.entities.reference import ById, ByName


@pytest.mark.asyncio
async def test_create_notifies_owning_service(seeder, catalog, notifier) -> None:
    ids = await seeder.device_graph()

    device = await catalog.devices.get_by_id(ids.device)

    assert device.service.name == "S1"
    assert device.profile.name == "P1"
    assert notifier.callbacks[-1] == (
        "A1",
        ids.device,
        ChangeAction.CREATE,
        ActionType.DEVICE,
    )
    assert notifier.device_changes[-1] == ("D1", ChangeAction.CREATE)


@pytest.mark.asyncio
async def test_null_states_rejected_before_lookups(catalog, repositories) -> None:
    dto = DeviceCreateDTO(
        name="D1",
        admin_state=None,
        operating_state=OperatingState.ENABLED,
        profile=ReferenceDTO(name="missing"),
    )

    with pytest.raises(DataValidationError) as exc:
        await catalog.devices.create(dto)

    assert exc.value.message == STATES_NULL
    assert await repositories[EntityType.DEVICE].count() == 0


@pytest.mark.asyncio
async def test_missing_mandatory_reference(seeder, catalog) -> None:
    await seeder.addressable("A1")
    await seeder.profile("P1")

    with pytest.raises(DataValidationError) as exc:
        await catalog.devices.create(
            DeviceCreateDTO(
                name="D1",
                admin_state=AdminState.UNLOCKED,
                operating_state=OperatingState.ENABLED,
                addressable=ReferenceDTO(name="A1"),
                profile=ReferenceDTO(name="P1"),
            )
        )
    assert exc.value.message == "A device must be associated to a known device service."


@pytest.mark.asyncio
async def test_listings(seeder, catalog) -> None:
    ids = await seeder.device_graph()
    await seeder.addressable("A2")
    await seeder.profile("P2")
    await seeder.device("D2", "A2", "S1", "P2", labels=["lobby"])

    def names(devices):
        return sorted(d.name for d in devices)

    assert names(await catalog.devices.list_all()) == ["D1", "D2"]
    assert names(await catalog.devices.list_by_label("lobby")) == ["D2"]
    assert names(await catalog.devices.list_by_service(ById(ids.service))) == [
        "D1",
        "D2",
    ]
    assert names(await catalog.devices.list_by_profile(ByName("P2"))) == ["D2"]
    assert names(await catalog.devices.list_by_addressable(ByName("A1"))) == ["D1"]
    with pytest.raises(NotFoundError):
        await catalog.devices.list_by_profile(ByName("missing"))


@pytest.mark.asyncio
async def test_update_changes_only_given_fields(seeder, catalog) -> None:
    ids = await seeder.device_graph()
    await seeder.profile("P2")

    await catalog.devices.update(
        DeviceUpdateDTO(
            id=ids.device,
            operating_state=OperatingState.DISABLED,
            profile=ReferenceDTO(name="P2"),
        )
    )

    device = await catalog.devices.get_by_id(ids.device)
    assert device.operating_state is OperatingState.DISABLED
    assert device.admin_state is AdminState.UNLOCKED
    assert device.profile.name == "P2"
    assert device.service.name == "S1"


@pytest.mark.asyncio
async def test_update_with_explicit_null_state(seeder, catalog) -> None:
    ids = await seeder.device_graph()

    with pytest.raises(DataValidationError) as exc:
        await catalog.devices.update(DeviceUpdateDTO(id=ids.device, admin_state=None))
    assert exc.value.message == ADMIN_STATE_NULL


@pytest.mark.asyncio
async def test_rename_blocked_while_reported(seeder, catalog) -> None:
    ids = await seeder.device_graph()
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")
    await seeder.report("R1", "D1", "E1")

    with pytest.raises(DataValidationError):
        await catalog.devices.update(DeviceUpdateDTO(id=ids.device, name="D9"))


@pytest.mark.asyncio
async def test_timestamps_do_not_notify_by_default(seeder, catalog, notifier) -> None:
    ids = await seeder.device_graph()
    sent = len(notifier.callbacks)

    await catalog.devices.set_last_connected(ById(ids.device), 1000)
    await catalog.devices.set_last_reported(ByName("D1"), 2000)
    assert len(notifier.callbacks) == sent

    await catalog.devices.set_last_reported(ByName("D1"), 3000, notify=True)
    assert len(notifier.callbacks) == sent + 1

    device = await catalog.devices.get_by_id(ids.device)
    assert device.last_connected == 1000
    assert device.last_reported == 3000


@pytest.mark.asyncio
async def test_state_changes_notify_by_default(seeder, catalog, notifier) -> None:
    ids = await seeder.device_graph()
    sent = len(notifier.callbacks)

    await catalog.devices.set_operating_state(
        ById(ids.device), OperatingState.DISABLED
    )
    await catalog.devices.set_admin_state(
        ByName("D1"), AdminState.LOCKED, notify=False
    )

    assert len(notifier.callbacks) == sent + 1
    device = await catalog.devices.get_by_id(ids.device)
    assert device.operating_state is OperatingState.DISABLED
    assert device.admin_state is AdminState.LOCKED

    with pytest.raises(DataValidationError):
        await catalog.devices.set_operating_state(ById(ids.device), None)


@pytest.mark.asyncio
async def test_delete_removes_reports_and_notifies(
    seeder, catalog, notifier, repositories
) -> None:
    ids = await seeder.device_graph()
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")
    await seeder.report("R1", "D1", "E1")

    assert await catalog.devices.delete_by_name("D1")

    assert await repositories[EntityType.DEVICE_REPORT].count() == 0
    assert notifier.callbacks[-1][1:] == (
        ids.device,
        ChangeAction.DELETE,
        ActionType.DEVICE,
    )
    assert notifier.device_changes[-1] == ("D1", ChangeAction.DELETE)


@pytest.mark.asyncio
async def test_manager_aggregates_devices(seeder, catalog, notifier) -> None:
    ids = await seeder.device_graph()
    manager_id = await catalog.managers.create(
        DeviceManagerCreateDTO(
            **seeder.device_dto("M1", "A1", "S1", "P1"),
            devices=[ReferenceDTO(id=ids.device), ReferenceDTO(name="ghost")],
        )
    )

    manager = await catalog.managers.get_by_id(manager_id)
    assert [d.name for d in manager.devices] == ["D1"]
    assert notifier.callbacks[-1][2:] == (ChangeAction.CREATE, ActionType.MANAGER)


@pytest.mark.asyncio
async def test_manager_update_replaces_only_given_lists(seeder, catalog) -> None:
    ids = await seeder.device_graph()
    inner_id = await catalog.managers.create(
        DeviceManagerCreateDTO(**seeder.device_dto("M-inner", "A1", "S1", "P1"))
    )
    manager_id = await catalog.managers.create(
        DeviceManagerCreateDTO(
            **seeder.device_dto("M1", "A1", "S1", "P1"),
            devices=[ReferenceDTO(id=ids.device)],
        )
    )

    await catalog.managers.update(
        DeviceManagerUpdateDTO(id=manager_id, managers=[ReferenceDTO(id=inner_id)])
    )
    manager = await catalog.managers.get_by_id(manager_id)
    assert [d.name for d in manager.devices] == ["D1"]
    assert [m.name for m in manager.managers] == ["M-inner"]

    await catalog.managers.update(DeviceManagerUpdateDTO(id=manager_id, devices=[]))
    manager = await catalog.managers.get_by_id(manager_id)
    assert manager.devices == []
    assert [m.name for m in manager.managers] == ["M-inner"]


@pytest.mark.asyncio
async def test_manager_delete(seeder, catalog, repositories) -> None:
    await seeder.device_graph()
    await catalog.managers.create(
        DeviceManagerCreateDTO(**seeder.device_dto("M1", "A1", "S1", "P1"))
    )

    assert await catalog.managers.delete_by_name("M1")
    assert await repositories[EntityType.DEVICE_MANAGER].count() == 0
    assert await repositories[EntityType.DEVICE].count() == 1


def test_shared_device_catalog_requires_attach_and_new(
    key_resolver, association_guard, notifier
) -> None:
    with pytest.raises(TypeError, match="abstract"):
        _DeviceCatalogUseCase(
            key_resolver, association_guard, None, notifier, read_max_limit=100
        )
