from __future__ import annotations

import pytest
from fastapi import HTTPException

from src.application.dtos.schedule_dto import ScheduleCreateDTO
from src.domain.entities.errors import DataValidationError
from src.domain.entities.reference import ById, ByName
from src.presentation.controllers import schedule_controller


@pytest.mark.asyncio
async def test_invalid_schedule_is_409(use_case) -> None:
    use_case.raises["create"] = DataValidationError(
        "Data integrity issue. Schedule's cron expression is invalid: bad"
    )

    with pytest.raises(HTTPException) as exc:
        await schedule_controller.create_schedule(
            ScheduleCreateDTO(name="nightly", cron="bad"), use_case=use_case
        )
    assert exc.value.status_code == 409
    assert "cron" in exc.value.detail


@pytest.mark.asyncio
async def test_events_by_addressable(use_case) -> None:
    use_case.returns["list_by_addressable"] = []

    await schedule_controller.get_schedule_events_by_addressable(
        "a-1", use_case=use_case
    )
    await schedule_controller.get_schedule_events_by_addressable_name(
        "A1", use_case=use_case
    )

    assert use_case.calls == [
        ("list_by_addressable", (ById("a-1"),)),
        ("list_by_addressable", (ByName("A1"),)),
    ]


@pytest.mark.asyncio
async def test_events_by_service_and_schedule_use_names(use_case) -> None:
    await schedule_controller.get_schedule_events_by_service("S1", use_case=use_case)
    await schedule_controller.get_schedule_events_by_schedule(
        "hourly", use_case=use_case
    )

    assert use_case.calls == [
        ("list_by_service", ("S1",)),
        ("list_by_schedule", ("hourly",)),
    ]


@pytest.mark.asyncio
async def test_value_descriptors_for_device(use_case) -> None:
    use_case.returns["value_descriptors_for_device"] = ["temperature"]

    result = await schedule_controller.get_value_descriptors_for_device(
        "D1", use_case=use_case
    )

    assert result == ["temperature"]


@pytest.mark.asyncio
async def test_delete_event_in_use_is_409(use_case) -> None:
    use_case.raises["delete_by_name"] = DataValidationError("in use")

    with pytest.raises(HTTPException) as exc:
        await schedule_controller.delete_schedule_event_by_name(
            "E1", use_case=use_case
        )
    assert exc.value.status_code == 409
