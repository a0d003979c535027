from __future__ import annotations

import pytest

from src.domain.entities.device_profile import Command
from src.domain.entities.errors import DataValidationError
from src.domain.services import DUPLICATE_COMMAND_NAMES, validate_command_names


def test_distinct_names_pass() -> None:
    validate_command_names([Command(name="on"), Command(name="off")])


def test_empty_lists_always_pass() -> None:
    validate_command_names(None)
    validate_command_names([], proposed_name="on")


def test_duplicate_names_are_reported() -> None:
    commands = [Command(name="on"), Command(name="off"), Command(name="on")]

    with pytest.raises(DataValidationError) as exc:
        validate_command_names(commands)

    assert exc.value.message == DUPLICATE_COMMAND_NAMES
    assert exc.value.details == {"duplicates": ["on"]}


def test_proposed_name_is_checked_against_the_list() -> None:
    commands = [Command(name="on"), Command(name="off")]

    validate_command_names(commands, proposed_name="toggle")
    with pytest.raises(DataValidationError):
        validate_command_names(commands, proposed_name="off")
