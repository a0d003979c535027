"""Domain services package."""

from .command_name_validator import DUPLICATE_COMMAND_NAMES, validate_command_names
from .schedule_validator import is_valid_cron, validate_cron, validate_schedule

__all__ = [
    "DUPLICATE_COMMAND_NAMES",
    "validate_command_names",
    "is_valid_cron",
    "validate_cron",
    "validate_schedule",
]
