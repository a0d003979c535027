from __future__ import annotations

import pytest

from src.application.dtos.common_dto import ReferenceDTO
from src.application.dtos.schedule_dto import (
    DeviceReportCreateDTO,
    DeviceReportUpdateDTO,
    ScheduleCreateDTO,
    ScheduleEventUpdateDTO,
    ScheduleUpdateDTO,
)
from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.errors import DataValidationError, NotFoundError
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import ByName


@pytest.mark.asyncio
async def test_create_schedule_with_cron(catalog) -> None:
    schedule_id = await catalog.schedules.create(
        ScheduleCreateDTO(name="nightly", cron="0 0 2 * * ?", start="20240101T000000")
    )

    schedule = await catalog.schedules.get_by_name("nightly")
    assert schedule.id == schedule_id
    assert schedule.cron == "0 0 2 * * ?"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"cron": "not a cron"},
        {"frequency": "5 minutes"},
        {"start": "2024-01-01"},
        {"start": "20240102T000000", "end": "20240101T000000"},
    ],
)
async def test_create_schedule_rejects_invalid_values(
    catalog, repositories, fields
) -> None:
    with pytest.raises(DataValidationError):
        await catalog.schedules.create(ScheduleCreateDTO(name="bad", **fields))

    assert await repositories[EntityType.SCHEDULE].count() == 0


@pytest.mark.asyncio
async def test_update_schedule_notifies_services_of_its_events(
    seeder, catalog, notifier
) -> None:
    await seeder.addressable("A1")
    await seeder.addressable("A2")
    await seeder.service("S1", "A1")
    schedule_id = await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A2", service="S1")
    await seeder.event("E2", "hourly", "A2", service="S1")
    await seeder.event("E3", "hourly", "A2")
    sent = len(notifier.callbacks)

    await catalog.schedules.update(ScheduleUpdateDTO(id=schedule_id, frequency="PT1H"))

    assert notifier.callbacks[sent:] == [
        ("A1", schedule_id, ChangeAction.UPDATE, ActionType.SCHEDULE)
    ]
    schedule = await catalog.schedules.get_by_id(schedule_id)
    assert schedule.frequency == "PT1H"


@pytest.mark.asyncio
async def test_schedule_update_rejects_invalid_result(seeder, catalog) -> None:
    await seeder.schedule("hourly")

    with pytest.raises(DataValidationError):
        await catalog.schedules.update(ScheduleUpdateDTO(name="hourly", cron="bad"))

    schedule = await catalog.schedules.get_by_name("hourly")
    assert schedule.cron is None


@pytest.mark.asyncio
async def test_schedule_rename_and_delete_guarded_by_events(seeder, catalog) -> None:
    await seeder.addressable("A1")
    schedule_id = await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")

    with pytest.raises(DataValidationError):
        await catalog.schedules.update(ScheduleUpdateDTO(id=schedule_id, name="daily"))
    with pytest.raises(DataValidationError):
        await catalog.schedules.delete_by_id(schedule_id)

    assert await catalog.events.delete_by_name("E1")
    assert await catalog.schedules.delete_by_name("hourly")
    with pytest.raises(NotFoundError):
        await catalog.schedules.get_by_id(schedule_id)


@pytest.mark.asyncio
async def test_event_requires_known_schedule_and_addressable(seeder, catalog) -> None:
    await seeder.addressable("A1")
    await seeder.schedule("hourly")

    with pytest.raises(DataValidationError):
        await seeder.event("E1", "missing", "A1")
    with pytest.raises(DataValidationError):
        await seeder.event("E1", "hourly", "missing")


@pytest.mark.asyncio
async def test_event_listings(seeder, catalog) -> None:
    await seeder.addressable("A1")
    await seeder.addressable("A2")
    await seeder.schedule("hourly")
    await seeder.schedule("daily")
    await seeder.event("E1", "hourly", "A1", service="S1")
    await seeder.event("E2", "daily", "A2", service="S1")
    await seeder.event("E3", "daily", "A1")

    def names(events):
        return sorted(e.name for e in events)

    assert names(await catalog.events.list_by_schedule("daily")) == ["E2", "E3"]
    assert names(await catalog.events.list_by_service("S1")) == ["E1", "E2"]
    assert names(await catalog.events.list_by_addressable(ByName("A1"))) == [
        "E1",
        "E3",
    ]
    with pytest.raises(NotFoundError):
        await catalog.events.list_by_addressable(ByName("missing"))


@pytest.mark.asyncio
async def test_event_create_notifies_named_service(seeder, catalog, notifier) -> None:
    await seeder.addressable("A1")
    await seeder.service("S1", "A1")
    await seeder.schedule("hourly")

    event_id = await seeder.event("E1", "hourly", "A1", service="S1")

    assert notifier.callbacks[-1] == (
        "A1",
        event_id,
        ChangeAction.CREATE,
        ActionType.SCHEDULEEVENT,
    )


@pytest.mark.asyncio
async def test_event_service_change_notifies_both_services(
    seeder, catalog, notifier
) -> None:
    await seeder.addressable("A1")
    await seeder.addressable("A2")
    await seeder.service("S1", "A1")
    await seeder.service("S2", "A2")
    await seeder.schedule("hourly")
    event_id = await seeder.event("E1", "hourly", "A1", service="S1")
    sent = len(notifier.callbacks)

    await catalog.events.update(ScheduleEventUpdateDTO(id=event_id, service="S2"))

    assert notifier.callbacks[sent:] == [
        ("A1", event_id, ChangeAction.DELETE, ActionType.SCHEDULEEVENT),
        ("A2", event_id, ChangeAction.CREATE, ActionType.SCHEDULEEVENT),
    ]

    await catalog.events.update(
        ScheduleEventUpdateDTO(id=event_id, parameters="{}")
    )
    assert notifier.callbacks[-1] == (
        "A2",
        event_id,
        ChangeAction.UPDATE,
        ActionType.SCHEDULEEVENT,
    )


@pytest.mark.asyncio
async def test_event_update_moves_addressable(seeder, catalog) -> None:
    await seeder.addressable("A1")
    await seeder.addressable("A2")
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")

    await catalog.events.update(
        ScheduleEventUpdateDTO(name="E1", addressable=ReferenceDTO(name="A2"))
    )

    event = await catalog.events.get_by_name("E1")
    assert event.addressable.name == "A2"
    assert event.schedule == "hourly"


@pytest.mark.asyncio
async def test_event_rename_and_delete_guarded_by_reports(seeder, catalog) -> None:
    await seeder.device_graph()
    await seeder.schedule("hourly")
    event_id = await seeder.event("E1", "hourly", "A1")
    await seeder.report("R1", "D1", "E1")

    with pytest.raises(DataValidationError):
        await catalog.events.update(ScheduleEventUpdateDTO(id=event_id, name="E9"))
    with pytest.raises(DataValidationError):
        await catalog.events.delete_by_id(event_id)

    assert await catalog.reports.delete_by_name("R1")
    assert await catalog.events.delete_by_id(event_id)


@pytest.mark.asyncio
async def test_report_requires_known_device_and_event(seeder, catalog) -> None:
    await seeder.device_graph()
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")

    with pytest.raises(DataValidationError):
        await seeder.report("R1", "missing", "E1")
    with pytest.raises(DataValidationError):
        await seeder.report("R1", "D1", "missing")
    with pytest.raises(DataValidationError):
        await catalog.reports.create(DeviceReportCreateDTO(name="R1", event="E1"))


@pytest.mark.asyncio
async def test_report_notifies_device_service(seeder, catalog, notifier) -> None:
    await seeder.device_graph()
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")

    report_id = await seeder.report("R1", "D1", "E1", expected=["temperature"])
    await catalog.reports.update(
        DeviceReportUpdateDTO(id=report_id, expected=["temperature", "humidity"])
    )
    await catalog.reports.delete_by_id(report_id)

    assert notifier.callbacks[-3:] == [
        ("A1", report_id, ChangeAction.CREATE, ActionType.REPORT),
        ("A1", report_id, ChangeAction.UPDATE, ActionType.REPORT),
        ("A1", report_id, ChangeAction.DELETE, ActionType.REPORT),
    ]


@pytest.mark.asyncio
async def test_value_descriptors_for_device(seeder, catalog) -> None:
    await seeder.device_graph()
    await seeder.schedule("hourly")
    await seeder.event("E1", "hourly", "A1")
    await seeder.report("R1", "D1", "E1", expected=["temperature", "humidity"])
    await seeder.report("R2", "D1", "E1", expected=["humidity", "pressure"])

    descriptors = await catalog.reports.value_descriptors_for_device("D1")

    assert sorted(descriptors) == ["humidity", "pressure", "temperature"]
    assert len(descriptors) == 3
    assert await catalog.reports.value_descriptors_for_device("D9") == []
    reports = await catalog.reports.list_by_device("D1")
    assert sorted(r.name for r in reports) == ["R1", "R2"]
