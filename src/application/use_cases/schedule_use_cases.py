"""
Scheduling Use Cases - Application Layer

Schedules, the events fired on them and the device reports tied to those
events. Events and reports refer to their targets by name, so renames of the
targets are guarded while they are referenced.
"""

from typing import Iterable, List, Optional

from dependency_injector.wiring import Provide, inject

from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.device import DeviceService
from src.domain.entities.drafts import ScheduleEventDraft
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import UNSET, ByName, Reference
from src.domain.entities.schedule import DeviceReport, Schedule, ScheduleEvent
from src.domain.ports.change_notifier import IChangeNotifier
from src.domain.services import validate_schedule
from src.shared import get_logger

from ..dtos.common_dto import to_reference
from ..dtos.schedule_dto import (
    DeviceReportCreateDTO,
    DeviceReportResponseDTO,
    DeviceReportUpdateDTO,
    ScheduleCreateDTO,
    ScheduleEventCreateDTO,
    ScheduleEventResponseDTO,
    ScheduleEventUpdateDTO,
    ScheduleResponseDTO,
    ScheduleUpdateDTO,
)
from ..services.association_guard import AssociationGuard
from ..services.graph_attacher import GraphAttacher
from ..services.key_resolver import KeyResolver
from .base import CatalogUseCase, merge_fields

logger = get_logger(__name__)


class _NotifyingUseCase(CatalogUseCase):
    def __init__(
        self,
        key_resolver: KeyResolver,
        association_guard: AssociationGuard,
        change_notifier: IChangeNotifier,
        read_max_limit: int,
    ):
        super().__init__(key_resolver, association_guard, read_max_limit)
        self.change_notifier = change_notifier

    async def _service_named(self, name: Optional[str]) -> Optional[DeviceService]:
        return await self.key_resolver.resolve(
            EntityType.DEVICE_SERVICE, ByName(name) if name else UNSET
        )

    async def _services_named(
        self, names: Iterable[Optional[str]]
    ) -> List[DeviceService]:
        services = []
        for name in names:
            service = await self._service_named(name)
            if service is not None:
                services.append(service)
        return services


class ScheduleManagementUseCase(_NotifyingUseCase):
    """Use case for managing schedules."""

    entity_type = EntityType.SCHEDULE
    response_dto = ScheduleResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(
            key_resolver, association_guard, change_notifier, read_max_limit
        )

    async def create(self, dto: ScheduleCreateDTO) -> str:
        """
        Create a schedule.

        Raises:
            DataValidationError: If the cron, frequency or window is invalid, or
                the name is taken
        """
        schedule = Schedule(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            start=dto.start,
            end=dto.end,
            frequency=dto.frequency,
            cron=dto.cron,
            run_once=dto.run_once,
        )
        validate_schedule(schedule)
        await self.repository.create(schedule)
        logger.info("schedule.created", id=schedule.id, name=schedule.name)
        return schedule.id

    async def update(self, dto: ScheduleUpdateDTO) -> bool:
        """
        Update a schedule identified by id or name.

        Raises:
            NotFoundError: If the schedule does not exist
            DataValidationError: If the result is invalid, or a rename is
                blocked by schedule events
        """
        schedule = await self._for_update(dto)
        await self._apply_common(schedule, dto)
        merge_fields(schedule, dto, ("start", "end", "frequency", "cron", "run_once"))
        validate_schedule(schedule)
        await self.repository.update(schedule)
        logger.info("schedule.updated", id=schedule.id, name=schedule.name)

        events = await self.key_resolver.repository(
            EntityType.SCHEDULE_EVENT
        ).find_by("schedule", schedule.name)
        services = await self._services_named(event.service for event in events)
        self.change_notifier.notify_services(
            services, schedule.id, ChangeAction.UPDATE, ActionType.SCHEDULE
        )
        return True

    async def delete_by_id(self, schedule_id: str) -> bool:
        return await self._delete(await self._get_by_id(schedule_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, schedule: Schedule) -> bool:
        """
        Raises:
            DataValidationError: If a schedule event still names the schedule
        """
        await self.association_guard.may_delete(self.entity_type, schedule)
        await self.association_guard.delete_guarded(self.entity_type, schedule)
        logger.info("schedule.deleted", id=schedule.id, name=schedule.name)
        return True


class ScheduleEventManagementUseCase(_NotifyingUseCase):
    """Use case for managing schedule events."""

    entity_type = EntityType.SCHEDULE_EVENT
    response_dto = ScheduleEventResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        graph_attacher: GraphAttacher = Provide["graph_attacher"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(
            key_resolver, association_guard, change_notifier, read_max_limit
        )
        self.graph_attacher = graph_attacher

    async def _notify_service(
        self, name: Optional[str], event: ScheduleEvent, action: ChangeAction
    ) -> None:
        service = await self._service_named(name)
        self.change_notifier.notify(
            service.addressable if service else None,
            event.id,
            action,
            ActionType.SCHEDULEEVENT,
        )

    async def list_by_addressable(
        self, addressable: Reference
    ) -> List[ScheduleEventResponseDTO]:
        """
        Raises:
            NotFoundError: If the addressable does not exist
        """
        found = await self.key_resolver.get(EntityType.ADDRESSABLE, addressable)
        return await self._list_where({"addressable": found})

    async def list_by_service(self, service: str) -> List[ScheduleEventResponseDTO]:
        return await self._list_where({"service": service})

    async def list_by_schedule(self, schedule: str) -> List[ScheduleEventResponseDTO]:
        return await self._list_where({"schedule": schedule})

    async def create(self, dto: ScheduleEventCreateDTO) -> str:
        """
        Create a schedule event on a known schedule and addressable.

        Raises:
            DataValidationError: If the schedule or addressable is unknown, or
                the name is taken
        """
        event = ScheduleEvent(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            schedule=dto.schedule,
            parameters=dto.parameters,
            service=dto.service,
        )
        event = await self.graph_attacher.attach_schedule_event(
            ScheduleEventDraft(event, to_reference(dto.addressable))
        )
        await self.repository.create(event)
        logger.info("schedule_event.created", id=event.id, name=event.name)
        await self._notify_service(event.service, event, ChangeAction.CREATE)
        return event.id

    async def update(self, dto: ScheduleEventUpdateDTO) -> bool:
        """
        Update a schedule event identified by id or name.

        Moving the event to another service tells the old service it is gone
        and the new one that it exists.

        Raises:
            NotFoundError: If the event does not exist
            DataValidationError: If a reference is unknown or a rename is
                blocked by device reports
        """
        event = await self._for_update(dto)
        previous_service = event.service
        await self._apply_common(event, dto)
        merge_fields(event, dto, ("schedule", "parameters", "service"))
        addressable = to_reference(dto.addressable) if dto.addressable else UNSET
        event = await self.graph_attacher.attach_schedule_event(
            ScheduleEventDraft(event, addressable)
        )
        await self.repository.update(event)
        logger.info("schedule_event.updated", id=event.id, name=event.name)

        if event.service != previous_service:
            await self._notify_service(previous_service, event, ChangeAction.DELETE)
            await self._notify_service(event.service, event, ChangeAction.CREATE)
        else:
            await self._notify_service(event.service, event, ChangeAction.UPDATE)
        return True

    async def delete_by_id(self, event_id: str) -> bool:
        return await self._delete(await self._get_by_id(event_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, event: ScheduleEvent) -> bool:
        """
        Raises:
            DataValidationError: If a device report still names the event
        """
        await self.association_guard.may_delete(self.entity_type, event)
        await self.association_guard.delete_guarded(self.entity_type, event)
        logger.info("schedule_event.deleted", id=event.id, name=event.name)
        await self._notify_service(event.service, event, ChangeAction.DELETE)
        return True


class DeviceReportManagementUseCase(_NotifyingUseCase):
    """Use case for managing device reports."""

    entity_type = EntityType.DEVICE_REPORT
    response_dto = DeviceReportResponseDTO

    @inject
    def __init__(
        self,
        key_resolver: KeyResolver = Provide["key_resolver"],
        association_guard: AssociationGuard = Provide["association_guard"],
        graph_attacher: GraphAttacher = Provide["graph_attacher"],
        change_notifier: IChangeNotifier = Provide["change_notifier"],
        read_max_limit: int = Provide["config.service.read_max_limit"],
    ):
        super().__init__(
            key_resolver, association_guard, change_notifier, read_max_limit
        )
        self.graph_attacher = graph_attacher

    async def _notify_device_service(
        self, report: DeviceReport, action: ChangeAction
    ) -> None:
        device = await self.key_resolver.resolve(
            EntityType.DEVICE, ByName(report.device) if report.device else UNSET
        )
        service = device.service if device else None
        self.change_notifier.notify(
            service.addressable if service else None,
            report.id,
            action,
            ActionType.REPORT,
        )

    async def list_by_device(self, device: str) -> List[DeviceReportResponseDTO]:
        return await self._list_where({"device": device})

    async def value_descriptors_for_device(self, device: str) -> List[str]:
        """Names of the values the reports of a device expect, without repeats."""
        reports = await self._find_where({"device": device})
        names: List[str] = []
        for report in reports:
            for name in report.expected:
                if name not in names:
                    names.append(name)
        return names

    async def create(self, dto: DeviceReportCreateDTO) -> str:
        """
        Create a report for a known device and schedule event.

        Raises:
            DataValidationError: If the device or event is unknown, or the name
                is taken
        """
        report = DeviceReport(
            name=dto.name,
            description=dto.description,
            origin=dto.origin,
            device=dto.device,
            event=dto.event,
            expected=list(dto.expected),
        )
        report = await self.graph_attacher.attach_device_report(report)
        await self.repository.create(report)
        logger.info("device_report.created", id=report.id, name=report.name)
        await self._notify_device_service(report, ChangeAction.CREATE)
        return report.id

    async def update(self, dto: DeviceReportUpdateDTO) -> bool:
        """
        Update a report identified by id or name.

        Raises:
            NotFoundError: If the report does not exist
            DataValidationError: If the device or event is unknown
        """
        report = await self._for_update(dto)
        await self._apply_common(report, dto)
        merge_fields(report, dto, ("device", "event", "expected"))
        report = await self.graph_attacher.attach_device_report(report)
        await self.repository.update(report)
        logger.info("device_report.updated", id=report.id, name=report.name)
        await self._notify_device_service(report, ChangeAction.UPDATE)
        return True

    async def delete_by_id(self, report_id: str) -> bool:
        return await self._delete(await self._get_by_id(report_id))

    async def delete_by_name(self, name: str) -> bool:
        return await self._delete(await self._get_by_name(name))

    async def _delete(self, report: DeviceReport) -> bool:
        await self.repository.delete(report.id)
        logger.info("device_report.deleted", id=report.id, name=report.name)
        await self._notify_device_service(report, ChangeAction.DELETE)
        return True
