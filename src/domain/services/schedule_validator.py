"""Domain service helpers for validating schedules."""

import re
from datetime import datetime
from typing import List, Optional, Tuple

from celery.schedules import ParseException, crontab_parser

from src.domain.entities.errors import DataValidationError
from src.domain.entities.schedule import SCHEDULE_TIME_FORMAT, Schedule

INVALID_CRON = "Data integrity issue. Schedule's cron expression is invalid: "

_ISO_DURATION = re.compile(
    r"^P(?!$)(\d+Y)?(\d+M)?(\d+W)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?$"
)
_START_STEP = re.compile(r"^(\d+)/(\d+)$")

# (max, min) per cron field, minute first.
_UNIX_FIELDS: List[Tuple[int, int]] = [
    (60, 0),  # minute
    (24, 0),  # hour
    (31, 1),  # day of month
    (12, 1),  # month
    (8, 0),  # day of week, 0 and 7 are both Sunday
]
_SECONDS_FIELD = (60, 0)
_YEAR_FIELD = (200, 1970)


def _cron_fields(expression: str) -> List[Tuple[str, Tuple[int, int]]]:
    parts = expression.split()
    if len(parts) == 5:
        return list(zip(parts, _UNIX_FIELDS))
    if len(parts) == 6:
        return list(zip(parts, [_SECONDS_FIELD, *_UNIX_FIELDS]))
    if len(parts) == 7:
        return list(zip(parts, [_SECONDS_FIELD, *_UNIX_FIELDS, _YEAR_FIELD]))
    raise ValueError(f"unexpected number of cron fields: {len(parts)}")


def is_valid_cron(expression: str) -> bool:
    """Check a cron expression of 5 fields, or 6/7 with leading seconds (and year).

    ``?`` is accepted as "no specific value" in the day fields.
    """

    try:
        for part, (max_, min_) in _cron_fields(expression):
            part = part.replace("?", "*")
            # "start/step" means "start-last/step"
            part = _START_STEP.sub(rf"\1-{max_ + min_ - 1}/\2", part)
            crontab_parser(max_, min_).parse(part)
    except (ParseException, ValueError):
        return False
    return True


def _is_valid_timestamp(value: str) -> bool:
    try:
        datetime.strptime(value, SCHEDULE_TIME_FORMAT)
    except ValueError:
        return False
    return True


def validate_cron(expression: Optional[str]) -> None:
    """Raise if a cron expression is present and invalid."""
    if expression is not None and not is_valid_cron(expression):
        raise DataValidationError(INVALID_CRON + expression)


def validate_schedule(schedule: Schedule) -> None:
    """Validate a schedule's cron, frequency and time window.

    Raises:
        DataValidationError: On the first rule that fails.
    """

    validate_cron(schedule.cron)

    if schedule.frequency and not _ISO_DURATION.match(schedule.frequency):
        raise DataValidationError(
            "Data integrity issue. Schedule's frequency is not an ISO-8601 "
            f"duration: {schedule.frequency}"
        )

    for label, value in (("start", schedule.start), ("end", schedule.end)):
        if value and not _is_valid_timestamp(value):
            raise DataValidationError(
                f"Data integrity issue. Schedule's {label} must match "
                f"YYYYMMDDTHHMMSS: {value}"
            )

    if schedule.start and schedule.end and schedule.end < schedule.start:
        raise DataValidationError(
            "Data integrity issue. Schedule's end precedes its start."
        )
