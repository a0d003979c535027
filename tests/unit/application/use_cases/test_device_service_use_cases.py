from __future__ import annotations

import pytest

from src.application.dtos.common_dto import ReferenceDTO
from src.application.dtos.device_service_dto import (
    DeviceServiceCreateDTO,
    DeviceServiceUpdateDTO,
)
from src.application.dtos.provision_watcher_dto import ProvisionWatcherCreateDTO
from src.application.use_cases.device_service_use_cases import (
    ADMIN_STATE_NULL,
    OP_STATE_NULL,
)
from src.domain.entities.errors import DataValidationError, NotFoundError
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.domain.entities.reference import ById, ByName


@pytest.mark.asyncio
async def test_create_requires_known_addressable(catalog) -> None:
    with pytest.raises(DataValidationError) as exc:
        await catalog.services.create(
            DeviceServiceCreateDTO(name="S1", addressable=ReferenceDTO(name="nope"))
        )
    assert exc.value.message == (
        "A device service must be associated to a known addressable."
    )

    with pytest.raises(DataValidationError):
        await catalog.services.create(DeviceServiceCreateDTO(name="S1"))


@pytest.mark.asyncio
async def test_create_and_get_hydrates_addressable(seeder, catalog) -> None:
    await seeder.addressable("A1")
    service_id = await seeder.service("S1", "A1", labels=["camera"])

    service = await catalog.services.get_by_id(service_id)

    assert service.addressable.name == "A1"
    assert service.admin_state is AdminState.UNLOCKED
    assert [s.name for s in await catalog.services.list_by_label("camera")] == ["S1"]


@pytest.mark.asyncio
async def test_list_by_addressable(seeder, catalog) -> None:
    addressable_id = await seeder.addressable("A1")
    await seeder.addressable("A2")
    await seeder.service("S1", "A1")
    await seeder.service("S2", "A2")

    found = await catalog.services.list_by_addressable(ById(addressable_id))

    assert [s.name for s in found] == ["S1"]
    with pytest.raises(NotFoundError):
        await catalog.services.list_by_addressable(ByName("missing"))


@pytest.mark.asyncio
async def test_update_moves_service_to_other_addressable(seeder, catalog) -> None:
    await seeder.addressable("A1")
    await seeder.addressable("A2")
    await seeder.service("S1", "A1")

    await catalog.services.update(
        DeviceServiceUpdateDTO(name="S1", addressable=ReferenceDTO(name="A2"))
    )

    assert (await catalog.services.get_by_name("S1")).addressable.name == "A2"


@pytest.mark.asyncio
async def test_update_keeps_addressable_when_not_given(seeder, catalog) -> None:
    await seeder.addressable("A1")
    await seeder.service("S1", "A1")

    await catalog.services.update(DeviceServiceUpdateDTO(name="S1", labels=["x"]))

    service = await catalog.services.get_by_name("S1")
    assert service.addressable.name == "A1"
    assert service.labels == ["x"]


@pytest.mark.asyncio
async def test_set_fields(seeder, catalog) -> None:
    await seeder.addressable("A1")
    service_id = await seeder.service("S1", "A1")
    reference = ById(service_id)

    await catalog.services.set_last_connected(reference, 1000)
    await catalog.services.set_last_reported(ByName("S1"), 2000)
    await catalog.services.set_operating_state(reference, OperatingState.DISABLED)
    await catalog.services.set_admin_state(reference, AdminState.LOCKED)

    service = await catalog.services.get_by_id(service_id)
    assert service.last_connected == 1000
    assert service.last_reported == 2000
    assert service.operating_state is OperatingState.DISABLED
    assert service.admin_state is AdminState.LOCKED


@pytest.mark.asyncio
async def test_null_states_are_rejected_before_lookup(catalog) -> None:
    with pytest.raises(DataValidationError) as exc:
        await catalog.services.set_operating_state(ByName("missing"), None)
    assert exc.value.message == OP_STATE_NULL

    with pytest.raises(DataValidationError) as exc:
        await catalog.services.set_admin_state(ByName("missing"), None)
    assert exc.value.message == ADMIN_STATE_NULL


@pytest.mark.asyncio
async def test_addressables_for_devices(seeder, catalog) -> None:
    ids = await seeder.device_graph()
    await seeder.addressable("A2")
    await seeder.device("D2", "A2", "S1", "P1")
    await seeder.device("D3", "A2", "S1", "P1")

    found = await catalog.services.addressables_for_devices(ById(ids.service))

    assert sorted(a.name for a in found) == ["A1", "A2"]


@pytest.mark.asyncio
async def test_delete_cascades_to_devices_reports_and_watchers(
    seeder, catalog, repositories
) -> None:
    ids = await seeder.device_graph()
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")
    await seeder.report("R1", "D1", "E1")
    await catalog.watchers.create(
        ProvisionWatcherCreateDTO(
            name="W1",
            profile=ReferenceDTO(name="P1"),
            service=ReferenceDTO(name="S1"),
        )
    )

    assert await catalog.services.delete_by_id(ids.service)

    for entity_type in (
        EntityType.DEVICE_SERVICE,
        EntityType.DEVICE,
        EntityType.DEVICE_REPORT,
        EntityType.PROVISION_WATCHER,
    ):
        assert await repositories[entity_type].count() == 0
    assert await repositories[EntityType.DEVICE_PROFILE].count() == 1
    assert await repositories[EntityType.SCHEDULE_EVENT].count() == 1
