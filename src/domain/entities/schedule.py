"""
Domain Entities - Scheduling

Schedules, the events fired on them and the device reports expecting values
from those events. Schedule events and reports refer to their targets by
name.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .addressable import Addressable
from .metadata import MetadataEntity

SCHEDULE_TIME_FORMAT = "%Y%m%dT%H%M%S"


@dataclass
class Schedule(MetadataEntity):
    """When something should run: a window plus a frequency or cron."""

    start: Optional[str] = None
    end: Optional[str] = None
    frequency: Optional[str] = None
    cron: Optional[str] = None
    run_once: bool = False


@dataclass
class ScheduleEvent(MetadataEntity):
    """An action fired on a schedule against an addressable."""

    schedule: Optional[str] = None
    addressable: Optional[Addressable] = None
    parameters: Optional[str] = None
    service: Optional[str] = None


@dataclass
class DeviceReport(MetadataEntity):
    """Values a device is expected to report when an event fires."""

    device: Optional[str] = None
    event: Optional[str] = None
    expected: List[str] = field(default_factory=list)
