"""
Domain Entities - Drafts

A draft pairs an entity's own attributes with the unresolved references a
caller submitted for it. Drafts are the only place where an entity may be
incomplete; attaching a draft yields a fully resolved entity or an error.

On an update the draft carries the merged existing entity, and only the
references the caller actually changed are set.
"""

from dataclasses import dataclass, field
from typing import List

from .device import Device, DeviceManager, DeviceService, ProvisionWatcher
from .reference import UNSET, Reference
from .schedule import ScheduleEvent


@dataclass
class DeviceServiceDraft:
    service: DeviceService
    addressable: Reference = UNSET


@dataclass
class DeviceDraft:
    device: Device
    addressable: Reference = UNSET
    service: Reference = UNSET
    profile: Reference = UNSET


@dataclass
class DeviceManagerDraft:
    manager: DeviceManager
    addressable: Reference = UNSET
    service: Reference = UNSET
    profile: Reference = UNSET
    devices: List[Reference] = field(default_factory=list)
    managers: List[Reference] = field(default_factory=list)
    replace_devices: bool = True
    replace_managers: bool = True


@dataclass
class ProvisionWatcherDraft:
    watcher: ProvisionWatcher
    profile: Reference = UNSET
    service: Reference = UNSET


@dataclass
class ScheduleEventDraft:
    event: ScheduleEvent
    addressable: Reference = UNSET
