"""
MongoDB Scheduling Repositories - Infrastructure Layer

Schedules, schedule events and device reports. Events name their schedule
and reports name their device and event; only the event's addressable is
stored by identifier.
"""

from typing import Any, Dict

from src.domain.entities.metadata import EntityType
from src.domain.entities.schedule import DeviceReport, Schedule, ScheduleEvent
from src.infrastructure.database import MongoDatabase
from src.infrastructure.database.mongo_database import (
    DEVICE_REPORTS,
    SCHEDULE_EVENTS,
    SCHEDULES,
)

from .addressable_repository import AddressableRepository
from .base import MongoMetadataRepository


class ScheduleRepository(MongoMetadataRepository[Schedule]):
    """MongoDB implementation of the schedule repository."""

    COLLECTION_NAME = SCHEDULES
    entity_type = EntityType.SCHEDULE

    def _to_document(self, schedule: Schedule) -> Dict[str, Any]:
        return {
            **self._base_document(schedule),
            "start": schedule.start,
            "end": schedule.end,
            "frequency": schedule.frequency,
            "cron": schedule.cron,
            "run_once": schedule.run_once,
        }

    async def _to_entity(self, document: Dict[str, Any]) -> Schedule:
        return Schedule(
            **self._base_fields(document),
            start=document.get("start"),
            end=document.get("end"),
            frequency=document.get("frequency"),
            cron=document.get("cron"),
            run_once=bool(document.get("run_once", False)),
        )


class ScheduleEventRepository(MongoMetadataRepository[ScheduleEvent]):
    """MongoDB implementation of the schedule event repository."""

    COLLECTION_NAME = SCHEDULE_EVENTS
    FIELD_MAP = {"addressable": "addressable_id"}
    entity_type = EntityType.SCHEDULE_EVENT

    def __init__(
        self,
        mongo_database: MongoDatabase,
        addressable_repository: AddressableRepository,
    ):
        super().__init__(mongo_database)
        self.addressables = addressable_repository

    def _to_document(self, event: ScheduleEvent) -> Dict[str, Any]:
        return {
            **self._base_document(event),
            "schedule": event.schedule,
            "addressable_id": event.addressable.id if event.addressable else None,
            "parameters": event.parameters,
            "service": event.service,
        }

    async def _to_entity(self, document: Dict[str, Any]) -> ScheduleEvent:
        return ScheduleEvent(
            **self._base_fields(document),
            schedule=document.get("schedule"),
            addressable=await self.addressables.find_by_id(
                document.get("addressable_id")
            ),
            parameters=document.get("parameters"),
            service=document.get("service"),
        )


class DeviceReportRepository(MongoMetadataRepository[DeviceReport]):
    """MongoDB implementation of the device report repository."""

    COLLECTION_NAME = DEVICE_REPORTS
    entity_type = EntityType.DEVICE_REPORT

    def _to_document(self, report: DeviceReport) -> Dict[str, Any]:
        return {
            **self._base_document(report),
            "device": report.device,
            "event": report.event,
            "expected": list(report.expected),
        }

    async def _to_entity(self, document: Dict[str, Any]) -> DeviceReport:
        return DeviceReport(
            **self._base_fields(document),
            device=document.get("device"),
            event=document.get("event"),
            expected=list(document.get("expected") or []),
        )
