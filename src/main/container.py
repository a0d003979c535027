"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.services import (
    AssociationGuard,
    GraphAttacher,
    KeyResolver,
    ProfileDocumentImporter,
)
from src.application.use_cases.addressable_use_cases import (
    AddressableManagementUseCase,
)
from src.application.use_cases.device_profile_use_cases import (
    CommandManagementUseCase,
    DeviceProfileManagementUseCase,
)
from src.application.use_cases.device_service_use_cases import (
    DeviceServiceManagementUseCase,
)
from src.application.use_cases.device_use_cases import (
    DeviceManagementUseCase,
    DeviceManagerManagementUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.provision_watcher_use_cases import (
    ProvisionWatcherManagementUseCase,
)
from src.application.use_cases.schedule_use_cases import (
    DeviceReportManagementUseCase,
    ScheduleEventManagementUseCase,
    ScheduleManagementUseCase,
)
from src.domain.entities.metadata import EntityType
from src.infrastructure.database import MongoDatabase
from src.infrastructure.gateways.device_service_gateway import DeviceServiceGateway
from src.infrastructure.gateways.notifications_gateway import NotificationsGateway
from src.infrastructure.repositories import (
    AddressableRepository,
    CommandRepository,
    DeviceManagerRepository,
    DeviceProfileRepository,
    DeviceReportRepository,
    DeviceRepository,
    DeviceServiceRepository,
    ProvisionWatcherRepository,
    ScheduleEventRepository,
    ScheduleRepository,
)
from src.infrastructure.services.change_notifier import QueuedChangeNotifier
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _environment_name(env) -> str:
    return env.value if hasattr(env, "value") else str(env)


def _enabled_url(enabled: bool, url: str):
    return url if enabled else None


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    addressable_repository = providers.Singleton(
        AddressableRepository,
        mongo_database=mongo_database,
    )

    device_service_repository = providers.Singleton(
        DeviceServiceRepository,
        mongo_database=mongo_database,
        addressable_repository=addressable_repository,
    )

    command_repository = providers.Singleton(
        CommandRepository,
        mongo_database=mongo_database,
    )

    device_profile_repository = providers.Singleton(
        DeviceProfileRepository,
        mongo_database=mongo_database,
        command_repository=command_repository,
    )

    device_repository = providers.Singleton(
        DeviceRepository,
        mongo_database=mongo_database,
        addressable_repository=addressable_repository,
        device_service_repository=device_service_repository,
        device_profile_repository=device_profile_repository,
    )

    device_manager_repository = providers.Singleton(
        DeviceManagerRepository,
        mongo_database=mongo_database,
        addressable_repository=addressable_repository,
        device_service_repository=device_service_repository,
        device_profile_repository=device_profile_repository,
        device_repository=device_repository,
    )

    schedule_repository = providers.Singleton(
        ScheduleRepository,
        mongo_database=mongo_database,
    )

    schedule_event_repository = providers.Singleton(
        ScheduleEventRepository,
        mongo_database=mongo_database,
        addressable_repository=addressable_repository,
    )

    device_report_repository = providers.Singleton(
        DeviceReportRepository,
        mongo_database=mongo_database,
    )

    provision_watcher_repository = providers.Singleton(
        ProvisionWatcherRepository,
        mongo_database=mongo_database,
        device_profile_repository=device_profile_repository,
        device_service_repository=device_service_repository,
    )

    # Gateways
    device_service_gateway = providers.Singleton(
        DeviceServiceGateway,
        timeout=config.callback.timeout,
    )

    notifications_gateway = providers.Singleton(
        NotificationsGateway,
        notifications_url=config.notification.url,
        timeout=config.callback.timeout,
    )

    change_notifier = providers.Singleton(
        QueuedChangeNotifier,
        device_service_gateway=device_service_gateway,
        notifications_gateway=notifications_gateway,
        queue_size=config.callback.queue_size,
        workers=config.callback.workers,
        post_device_changes=config.notification.post_device_changes,
        notification_sender=config.notification.sender,
        notification_slug_prefix=config.notification.slug_prefix,
        notification_content=config.notification.content,
        notification_description=config.notification.description,
        notification_labels=config.notification.labels,
    )

    # Application services
    key_resolver = providers.Singleton(
        KeyResolver,
        repositories=providers.Dict(
            {
                EntityType.ADDRESSABLE: addressable_repository,
                EntityType.DEVICE_SERVICE: device_service_repository,
                EntityType.DEVICE_PROFILE: device_profile_repository,
                EntityType.COMMAND: command_repository,
                EntityType.DEVICE: device_repository,
                EntityType.DEVICE_MANAGER: device_manager_repository,
                EntityType.SCHEDULE: schedule_repository,
                EntityType.SCHEDULE_EVENT: schedule_event_repository,
                EntityType.DEVICE_REPORT: device_report_repository,
                EntityType.PROVISION_WATCHER: provision_watcher_repository,
            }
        ),
    )

    graph_attacher = providers.Singleton(GraphAttacher, key_resolver=key_resolver)

    association_guard = providers.Singleton(
        AssociationGuard, key_resolver=key_resolver
    )

    document_importer = providers.Singleton(ProfileDocumentImporter)

    # Application (use cases)
    addressable_use_case = providers.Factory(
        AddressableManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    device_service_use_case = providers.Factory(
        DeviceServiceManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        graph_attacher=graph_attacher,
        read_max_limit=config.service.read_max_limit,
    )

    device_profile_use_case = providers.Factory(
        DeviceProfileManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        change_notifier=change_notifier,
        document_importer=document_importer,
        read_max_limit=config.service.read_max_limit,
    )

    command_use_case = providers.Factory(
        CommandManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        read_max_limit=config.service.read_max_limit,
    )

    device_use_case = providers.Factory(
        DeviceManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        graph_attacher=graph_attacher,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    device_manager_use_case = providers.Factory(
        DeviceManagerManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        graph_attacher=graph_attacher,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    schedule_use_case = providers.Factory(
        ScheduleManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    schedule_event_use_case = providers.Factory(
        ScheduleEventManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        graph_attacher=graph_attacher,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    device_report_use_case = providers.Factory(
        DeviceReportManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        graph_attacher=graph_attacher,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    provision_watcher_use_case = providers.Factory(
        ProvisionWatcherManagementUseCase,
        key_resolver=key_resolver,
        association_guard=association_guard,
        graph_attacher=graph_attacher,
        change_notifier=change_notifier,
        read_max_limit=config.service.read_max_limit,
    )

    # System
    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
        notifications_url=providers.Callable(
            _enabled_url,
            config.notification.post_device_changes,
            config.notification.url,
        ),
        http_timeout=config.callback.timeout,
    )

    system_info = providers.Singleton(
        SystemInfo,
        name=config.service.name,
        version=config.service.version,
        environment=providers.Callable(_environment_name, config.environment),
        read_max_limit=config.service.read_max_limit,
        settings=providers.Dict(
            mongo_uri=config.database.mongo_uri,
            database_name=config.database.database_name,
            callback_timeout=config.callback.timeout,
            callback_queue_size=config.callback.queue_size,
            callback_workers=config.callback.workers,
            post_device_changes=config.notification.post_device_changes,
            notifications_url=config.notification.url,
        ),
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Creates the MongoDB indexes, runs the change notifier workers for the
    lifetime of the application and closes the MongoDB client on shutdown.
    """
    container = get_container()

    mongo_database = container.mongo_database()
    change_notifier = container.change_notifier()

    try:
        logger.info("container.mongo.ensure_connection")
        await mongo_database.create_indexes()

        await change_notifier.start()

        logger.info("container.resources.initialized")
        yield container

    finally:
        await change_notifier.stop()

        logger.info("container.mongo.close")
        mongo_database.close()

        logger.info("container.resources.shutdown")
