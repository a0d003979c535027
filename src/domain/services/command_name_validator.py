"""Domain service enforcing per-profile command name uniqueness."""

from collections import Counter
from typing import Iterable, Optional

from src.domain.entities.device_profile import Command
from src.domain.entities.errors import DataValidationError

DUPLICATE_COMMAND_NAMES = "Command names must be unique per DeviceProfile"


def validate_command_names(
    commands: Optional[Iterable[Command]], proposed_name: Optional[str] = None
) -> None:
    """Reject a command list in which some name occurs more than once.

    Args:
        commands: Commands of one profile; ``None`` or empty is always valid.
        proposed_name: Name being introduced into the list, checked against it.

    Raises:
        DataValidationError: If a name appears more than once.
    """

    counts: Counter = Counter(command.name for command in commands or ())
    if not counts:
        return
    if proposed_name is not None:
        counts[proposed_name] += 1

    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise DataValidationError(
            DUPLICATE_COMMAND_NAMES, details={"duplicates": duplicates}
        )
