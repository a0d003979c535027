"""
Graph Attacher - Application Layer

Turns a draft whose references are still ids or names into a fully attached
entity. Attachment reads only; it never writes.
"""

from dataclasses import replace
from typing import Any, List, Optional

from src.domain.entities.device import (
    Device,
    DeviceManager,
    DeviceService,
    ProvisionWatcher,
)
from src.domain.entities.drafts import (
    DeviceDraft,
    DeviceManagerDraft,
    DeviceServiceDraft,
    ProvisionWatcherDraft,
    ScheduleEventDraft,
)
from src.domain.entities.errors import DataValidationError
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import Reference, describe, is_set, reference_of
from src.domain.entities.schedule import DeviceReport, ScheduleEvent
from src.shared import get_logger

from .key_resolver import KeyResolver

logger = get_logger(__name__)

_LABELS = {
    EntityType.ADDRESSABLE: "addressable",
    EntityType.DEVICE_SERVICE: "device service",
    EntityType.DEVICE_PROFILE: "device profile",
    EntityType.DEVICE: "device",
    EntityType.SCHEDULE: "schedule",
    EntityType.SCHEDULE_EVENT: "schedule event",
}


def unknown_association(subject: str, entity_type: EntityType) -> DataValidationError:
    return DataValidationError(
        f"A {subject} must be associated to a known {_LABELS[entity_type]}.",
        details={"association": entity_type.value},
    )


class GraphAttacher:
    """Resolve a draft's references or fail before anything is persisted.

    A mandatory reference that is not set keeps the entity's current
    association; this is how a partial update leaves untouched references
    alone. On a new entity there is no current association, so an unset
    reference fails exactly like one that does not resolve.
    """

    def __init__(self, key_resolver: KeyResolver):
        self.key_resolver = key_resolver

    async def _mandatory(
        self,
        subject: str,
        entity_type: EntityType,
        reference: Reference,
        current: Optional[Any],
    ) -> Any:
        if not is_set(reference):
            if current is not None:
                return current
            raise unknown_association(subject, entity_type)

        entity = await self.key_resolver.resolve(entity_type, reference)
        if entity is None:
            logger.info(
                "attach.reference.unresolved",
                subject=subject,
                association=entity_type.value,
                reference=describe(reference),
            )
            raise unknown_association(subject, entity_type)
        return entity

    async def _optional_list(
        self, subject: str, entity_type: EntityType, references: List[Reference]
    ) -> List[Any]:
        attached = []
        for reference in references:
            entity = await self.key_resolver.resolve(entity_type, reference)
            if entity is None:
                logger.warning(
                    "attach.reference.dropped",
                    subject=subject,
                    association=entity_type.value,
                    reference=describe(reference),
                )
                continue
            attached.append(entity)
        return attached

    async def attach_device_service(self, draft: DeviceServiceDraft) -> DeviceService:
        service = draft.service
        addressable = await self._mandatory(
            "device service",
            EntityType.ADDRESSABLE,
            draft.addressable,
            service.addressable,
        )
        return replace(service, addressable=addressable)

    async def attach_device(self, draft: DeviceDraft) -> Device:
        return await self._attach_device_fields("device", draft.device, draft)

    async def attach_device_manager(self, draft: DeviceManagerDraft) -> DeviceManager:
        manager = await self._attach_device_fields(
            "device manager", draft.manager, draft
        )
        devices = manager.devices
        if draft.replace_devices:
            devices = await self._optional_list(
                "device manager", EntityType.DEVICE, draft.devices
            )
        managers = manager.managers
        if draft.replace_managers:
            managers = await self._optional_list(
                "device manager", EntityType.DEVICE_MANAGER, draft.managers
            )
        return replace(manager, devices=devices, managers=managers)

    async def _attach_device_fields(self, subject: str, device: Any, draft: Any) -> Any:
        addressable = await self._mandatory(
            subject, EntityType.ADDRESSABLE, draft.addressable, device.addressable
        )
        service = await self._mandatory(
            subject, EntityType.DEVICE_SERVICE, draft.service, device.service
        )
        profile = await self._mandatory(
            subject, EntityType.DEVICE_PROFILE, draft.profile, device.profile
        )
        return replace(
            device, addressable=addressable, service=service, profile=profile
        )

    async def attach_provision_watcher(
        self, draft: ProvisionWatcherDraft
    ) -> ProvisionWatcher:
        watcher = draft.watcher
        subject = "provision watcher"
        service = await self._mandatory(
            subject, EntityType.DEVICE_SERVICE, draft.service, watcher.service
        )
        profile = await self._mandatory(
            subject, EntityType.DEVICE_PROFILE, draft.profile, watcher.profile
        )
        return replace(watcher, service=service, profile=profile)

    async def attach_schedule_event(self, draft: ScheduleEventDraft) -> ScheduleEvent:
        event = draft.event
        subject = "schedule event"
        addressable = await self._mandatory(
            subject, EntityType.ADDRESSABLE, draft.addressable, event.addressable
        )
        await self._mandatory(
            subject, EntityType.SCHEDULE, reference_of(name=event.schedule), None
        )
        return replace(event, addressable=addressable)

    async def attach_device_report(self, report: DeviceReport) -> DeviceReport:
        """Check the named device and schedule event of a report exist."""
        subject = "device report"
        await self._mandatory(
            subject, EntityType.DEVICE, reference_of(name=report.device), None
        )
        await self._mandatory(
            subject, EntityType.SCHEDULE_EVENT, reference_of(name=report.event), None
        )
        return report
