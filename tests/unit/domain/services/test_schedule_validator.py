from __future__ import annotations

import pytest

from src.domain.entities.errors import DataValidationError
from src.domain.entities.schedule import Schedule
from src.domain.services import is_valid_cron, validate_cron, validate_schedule


@pytest.mark.parametrize(
    "expression",
    [
        "*/5 * * * *",
        "0 12 * * 1-5",
        "0 */5 * * * ?",
        "0 0/15 8-17 ? * MON-FRI",
        "0 0 12 1 1 ? 2030",
    ],
)
def test_valid_cron_expressions(expression: str) -> None:
    assert is_valid_cron(expression)


@pytest.mark.parametrize(
    "expression",
    ["61 * * * *", "* 25 * * *", "not a cron", "* * * *", "0 0 0 32 * ?"],
)
def test_invalid_cron_expressions(expression: str) -> None:
    assert not is_valid_cron(expression)


def test_validate_cron_ignores_missing_expression() -> None:
    validate_cron(None)


def test_validate_cron_names_the_expression() -> None:
    with pytest.raises(DataValidationError) as exc:
        validate_cron("61 * * * *")
    assert exc.value.message.endswith("61 * * * *")


def test_valid_schedule() -> None:
    validate_schedule(
        Schedule(
            name="every-5-minutes",
            start="20240101T000000",
            end="20241231T235959",
            frequency="PT5M",
            cron="0 */5 * * * ?",
        )
    )


@pytest.mark.parametrize(
    "fields",
    [
        {"frequency": "5 minutes"},
        {"frequency": "P"},
        {"start": "2024-01-01"},
        {"end": "20240101T250000"},
        {"start": "20240201T000000", "end": "20240101T000000"},
        {"cron": "* * *"},
    ],
)
def test_invalid_schedules(fields) -> None:
    with pytest.raises(DataValidationError):
        validate_schedule(Schedule(name="broken", **fields))
