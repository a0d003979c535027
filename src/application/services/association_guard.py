"""
Association Guard - Application Layer

Blocks deletes and renames that would leave dependents pointing at nothing.
The store offers no cross-document transactions: a dependent created between
a check and the write it gates is not seen. ``delete_guarded`` re-runs the
check right before deleting to narrow, not close, that window.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from src.domain.entities.errors import DataValidationError
from src.domain.entities.metadata import EntityType, MetadataEntity
from src.shared import get_logger

from .key_resolver import KeyResolver

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dependency:
    """A dependent collection and the attribute holding the reference."""

    entity_type: EntityType
    attribute: str
    by_name: bool = False


ADDRESSABLE_IN_USE = (
    "Data integrity issue. Addressable with {key}: {value} is still referenced "
    "by existing devices, device services or schedule events."
)
PROFILE_DEVICES = (
    "Cannot delete profile. Associated devices still associated to profile "
    "with id: {value}"
)
PROFILE_WATCHERS = (
    "Cannot delete profile. Associated provision watchers still associated to "
    "profile with id: {value}"
)
COMMAND_IN_USE = "Command is still referenced by DeviceProfiles - cannot be deleted"
SCHEDULE_IN_USE = (
    "Data integrity issue. Schedule with id: {value} is still referenced by "
    "existing ScheduleEvents."
)
SCHEDULE_RENAME = (
    "Schedule's name cannot be changed while associated to an existing ScheduleEvent"
)
SCHEDULE_EVENT_IN_USE = (
    "Data integrity issue. ScheduleEvent with {key}: {value} is still referenced "
    "by existing DeviceReport."
)
DEVICE_IN_USE = (
    "Data integrity issue. Device with {key}: {value} is still referenced by "
    "existing DeviceReport."
)

Rule = Tuple[Dependency, str]

_ADDRESSABLE_RULES: List[Rule] = [
    (Dependency(EntityType.DEVICE, "addressable"), ADDRESSABLE_IN_USE),
    (Dependency(EntityType.DEVICE_MANAGER, "addressable"), ADDRESSABLE_IN_USE),
    (Dependency(EntityType.DEVICE_SERVICE, "addressable"), ADDRESSABLE_IN_USE),
    (Dependency(EntityType.SCHEDULE_EVENT, "addressable"), ADDRESSABLE_IN_USE),
]

DELETE_RULES: Dict[EntityType, List[Rule]] = {
    EntityType.ADDRESSABLE: _ADDRESSABLE_RULES,
    EntityType.DEVICE_PROFILE: [
        (Dependency(EntityType.DEVICE, "profile"), PROFILE_DEVICES),
        (Dependency(EntityType.DEVICE_MANAGER, "profile"), PROFILE_DEVICES),
        (Dependency(EntityType.PROVISION_WATCHER, "profile"), PROFILE_WATCHERS),
    ],
    EntityType.COMMAND: [
        (Dependency(EntityType.DEVICE_PROFILE, "commands"), COMMAND_IN_USE),
    ],
    EntityType.SCHEDULE: [
        (Dependency(EntityType.SCHEDULE_EVENT, "schedule", True), SCHEDULE_IN_USE),
    ],
    EntityType.SCHEDULE_EVENT: [
        (Dependency(EntityType.DEVICE_REPORT, "event", True), SCHEDULE_EVENT_IN_USE),
    ],
}

RENAME_RULES: Dict[EntityType, List[Rule]] = {
    EntityType.ADDRESSABLE: _ADDRESSABLE_RULES,
    EntityType.SCHEDULE: [
        (Dependency(EntityType.SCHEDULE_EVENT, "schedule", True), SCHEDULE_RENAME),
    ],
    EntityType.SCHEDULE_EVENT: [
        (Dependency(EntityType.DEVICE_REPORT, "event", True), SCHEDULE_EVENT_IN_USE),
    ],
    EntityType.DEVICE: [
        (Dependency(EntityType.DEVICE_REPORT, "device", True), DEVICE_IN_USE),
    ],
}


class AssociationGuard:
    """Existence checks on the dependents of an entity."""

    def __init__(self, key_resolver: KeyResolver):
        self.key_resolver = key_resolver

    async def _check(
        self,
        rules: List[Rule],
        entity: MetadataEntity,
        key: str,
        operation: str,
    ) -> bool:
        value = entity.id if key == "id" else entity.name
        for dependency, message in rules:
            reference = entity.name if dependency.by_name else entity
            repository = self.key_resolver.repository(dependency.entity_type)
            if await repository.exists_by(dependency.attribute, reference):
                logger.info(
                    "guard.rejected",
                    operation=operation,
                    entity_id=entity.id,
                    entity_name=entity.name,
                    dependent=dependency.entity_type.value,
                )
                raise DataValidationError(
                    message.format(key=key, value=value),
                    details={"dependent": dependency.entity_type.value},
                )
        return True

    async def may_delete(self, entity_type: EntityType, entity: MetadataEntity) -> bool:
        """
        Check that nothing references the entity.

        Raises:
            DataValidationError: On the first dependent found
        """
        return await self._check(
            DELETE_RULES.get(entity_type, []), entity, "id", "delete"
        )

    async def may_rename(
        self, entity_type: EntityType, entity: MetadataEntity, new_name: str
    ) -> bool:
        """
        Check that the entity's current name can change to ``new_name``.

        Keeping the same name is always allowed.

        Raises:
            DataValidationError: On the first dependent found
        """
        if not new_name or new_name == entity.name:
            return True
        return await self._check(
            RENAME_RULES.get(entity_type, []), entity, "name", "rename"
        )

    async def delete_guarded(
        self, entity_type: EntityType, entity: MetadataEntity
    ) -> None:
        """Re-check the entity's dependents and delete it."""
        await self.may_delete(entity_type, entity)
        await self.key_resolver.repository(entity_type).delete(entity.id)
