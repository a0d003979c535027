from __future__ import annotations

import copy
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import pymongo.errors
import pytest

from src.application.dtos.addressable_dto import AddressableCreateDTO
from src.application.dtos.common_dto import ReferenceDTO
from src.application.dtos.device_dto import DeviceCreateDTO
from src.application.dtos.device_profile_dto import (
    CommandCreateDTO,
    DeviceProfileCreateDTO,
)
from src.application.dtos.device_service_dto import DeviceServiceCreateDTO
from src.application.dtos.schedule_dto import (
    DeviceReportCreateDTO,
    ScheduleCreateDTO,
    ScheduleEventCreateDTO,
)
from src.application.services.association_guard import AssociationGuard
from src.application.services.graph_attacher import GraphAttacher
from src.application.services.key_resolver import KeyResolver
from src.application.services.profile_document_importer import (
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
from src.application.use_cases.provision_watcher_use_cases import (
    ProvisionWatcherManagementUseCase,
)
from src.application.use_cases.schedule_use_cases import (
    DeviceReportManagementUseCase,
    ScheduleEventManagementUseCase,
    ScheduleManagementUseCase,
)
from src.domain.entities.metadata import AdminState, EntityType, OperatingState
from src.infrastructure.database.mongo_database import (
    NAME_UNIQUE_COLLECTIONS,
    MongoDatabase,
)
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

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_MISSING = object()


def _lookup(document: Dict[str, Any], path: str) -> Any:
    value: Any = document
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    """Subset of the MongoDB query language used by the repositories."""
    for key, expected in query.items():
        if key == "$or":
            if not any(matches(document, clause) for clause in expected):
                return False
            continue
        actual = _lookup(document, key)
        if isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual is _MISSING:
            if expected is not None:
                return False
        elif actual != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)
        self._skip = 0
        self._limit = 0

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(
            key=lambda doc: (doc.get(key) is not None, doc.get(key)),
            reverse=direction < 0,
        )
        return self

    def skip(self, amount: int) -> "FakeCursor":
        self._skip = amount
        return self

    def limit(self, amount: int) -> "FakeCursor":
        self._limit = amount
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        docs = self._documents[self._skip :]
        if self._limit:
            docs = docs[: self._limit]
        return iter(docs)


class FakeCollection:
    """In-memory collection speaking the slice of pymongo the store uses."""

    def __init__(self, unique_names: bool = False) -> None:
        self.unique_names = unique_names
        self.documents: List[Dict[str, Any]] = []
        self.last_query: Optional[Dict[str, Any]] = None
        self.last_projection: Optional[Dict[str, Any]] = None
        self.dropped_indexes: List[str] = []
        self.created_indexes: List[Tuple[Any, ...]] = []
        self.acknowledge = True

    def _check_name(self, document: Dict[str, Any], ignore: Any = None) -> None:
        if not self.unique_names:
            return
        for existing in self.documents:
            if existing is ignore:
                continue
            if existing.get("name") == document.get("name"):
                raise pymongo.errors.DuplicateKeyError(
                    f"E11000 duplicate key error dup key: {document.get('name')}",
                    11000,
                )

    def _first(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if matches(document, query):
                return document
        return None

    def find_one(
        self, query: Dict[str, Any], projection: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        self.last_query = query
        self.last_projection = projection
        found = self._first(query)
        return copy.deepcopy(found) if found is not None else None

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.last_query = query
        return FakeCursor(
            [copy.deepcopy(doc) for doc in self.documents if matches(doc, query)]
        )

    def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for doc in self.documents if matches(doc, query))

    def insert_one(self, document: Dict[str, Any]) -> Any:
        self._check_name(document)
        if self.acknowledge:
            self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(acknowledged=self.acknowledge)

    def replace_one(self, query: Dict[str, Any], document: Dict[str, Any]) -> Any:
        found = self._first(query)
        if found is None:
            return SimpleNamespace(matched_count=0)
        self._check_name(document, ignore=found)
        self.documents[self.documents.index(found)] = copy.deepcopy(document)
        return SimpleNamespace(matched_count=1)

    def delete_one(self, query: Dict[str, Any]) -> Any:
        found = self._first(query)
        if found is None:
            return SimpleNamespace(deleted_count=0)
        self.documents.remove(found)
        return SimpleNamespace(deleted_count=1)

    def delete_many(self, query: Dict[str, Any]) -> Any:
        kept = [doc for doc in self.documents if not matches(doc, query)]
        removed = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=removed)

    def drop_index(self, index_name: str) -> None:
        if index_name not in [name for _, name, _ in self.created_indexes]:
            raise pymongo.errors.OperationFailure(f"index not found: {index_name}")
        self.dropped_indexes.append(index_name)

    def create_index(self, keys: Any, name: Optional[str] = None, **kwargs: Any):
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


class FakeDatabaseHandle(dict):
    def __missing__(self, name: str) -> FakeCollection:
        collection = FakeCollection(unique_names=name in NAME_UNIQUE_COLLECTIONS)
        self[name] = collection
        return collection


class FakeClient:
    def __init__(self) -> None:
        self.closed = False
        self.handle = FakeDatabaseHandle()

    def __getitem__(self, name: str) -> FakeDatabaseHandle:
        return self.handle

    def close(self) -> None:
        self.closed = True


class FakeMongoDatabase(MongoDatabase):
    """The real client wrapper running on in-memory collections."""

    def __init__(self) -> None:
        self.client = FakeClient()
        self.db = self.client["metadata"]

    def collection(self, name: str) -> FakeCollection:
        return self.db[name]


class RecordingNotifier:
    """Change notifier double remembering what it was asked to send."""

    def __init__(self) -> None:
        self.callbacks: List[Tuple[Any, str, Any, Any]] = []
        self.device_changes: List[Tuple[str, Any]] = []

    def notify(self, addressable, subject_id, action, subject_type) -> None:
        if addressable is None:
            return
        self.callbacks.append((addressable.name, subject_id, action, subject_type))

    def notify_services(self, services, subject_id, action, subject_type) -> None:
        seen = set()
        for service in services:
            if service is None or service.id in seen:
                continue
            seen.add(service.id)
            self.notify(service.addressable, subject_id, action, subject_type)

    def notify_device_change(self, device_name, action) -> None:
        self.device_changes.append((device_name, action))


def build_repositories(database: MongoDatabase) -> Dict[EntityType, Any]:
    addressables = AddressableRepository(database)
    commands = CommandRepository(database)
    services = DeviceServiceRepository(database, addressables)
    profiles = DeviceProfileRepository(database, commands)
    devices = DeviceRepository(database, addressables, services, profiles)
    return {
        EntityType.ADDRESSABLE: addressables,
        EntityType.COMMAND: commands,
        EntityType.DEVICE_SERVICE: services,
        EntityType.DEVICE_PROFILE: profiles,
        EntityType.DEVICE: devices,
        EntityType.DEVICE_MANAGER: DeviceManagerRepository(
            database, addressables, services, profiles, devices
        ),
        EntityType.SCHEDULE: ScheduleRepository(database),
        EntityType.SCHEDULE_EVENT: ScheduleEventRepository(database, addressables),
        EntityType.DEVICE_REPORT: DeviceReportRepository(database),
        EntityType.PROVISION_WATCHER: ProvisionWatcherRepository(
            database, profiles, services
        ),
    }


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def repositories(fake_mongo_database) -> Dict[EntityType, Any]:
    return build_repositories(fake_mongo_database)


@pytest.fixture()
def key_resolver(repositories) -> KeyResolver:
    return KeyResolver(repositories)


@pytest.fixture()
def graph_attacher(key_resolver) -> GraphAttacher:
    return GraphAttacher(key_resolver)


@pytest.fixture()
def association_guard(key_resolver) -> AssociationGuard:
    return AssociationGuard(key_resolver)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def catalog(key_resolver, graph_attacher, association_guard, notifier):
    """Every management use case wired on the in-memory store."""
    common = {
        "key_resolver": key_resolver,
        "association_guard": association_guard,
        "read_max_limit": 100,
    }
    return SimpleNamespace(
        addressables=AddressableManagementUseCase(
            change_notifier=notifier, **common
        ),
        services=DeviceServiceManagementUseCase(
            graph_attacher=graph_attacher, **common
        ),
        profiles=DeviceProfileManagementUseCase(
            change_notifier=notifier,
            document_importer=ProfileDocumentImporter(),
            **common,
        ),
        commands=CommandManagementUseCase(**common),
        devices=DeviceManagementUseCase(
            graph_attacher=graph_attacher, change_notifier=notifier, **common
        ),
        managers=DeviceManagerManagementUseCase(
            graph_attacher=graph_attacher, change_notifier=notifier, **common
        ),
        schedules=ScheduleManagementUseCase(change_notifier=notifier, **common),
        events=ScheduleEventManagementUseCase(
            graph_attacher=graph_attacher, change_notifier=notifier, **common
        ),
        reports=DeviceReportManagementUseCase(
            graph_attacher=graph_attacher, change_notifier=notifier, **common
        ),
        watchers=ProvisionWatcherManagementUseCase(
            graph_attacher=graph_attacher, change_notifier=notifier, **common
        ),
    )


class CatalogSeeder:
    """Creates catalog entries through the use cases, by name."""

    def __init__(self, catalog: SimpleNamespace) -> None:
        self.catalog = catalog

    async def addressable(self, name: str, **fields: Any) -> str:
        fields.setdefault("address", "localhost")
        fields.setdefault("port", 49990)
        fields.setdefault("path", "/api/v1/callback")
        return await self.catalog.addressables.create(
            AddressableCreateDTO(name=name, **fields)
        )

    async def service(self, name: str, addressable: str, **fields: Any) -> str:
        fields.setdefault("admin_state", AdminState.UNLOCKED)
        fields.setdefault("operating_state", OperatingState.ENABLED)
        return await self.catalog.services.create(
            DeviceServiceCreateDTO(
                name=name, addressable=ReferenceDTO(name=addressable), **fields
            )
        )

    async def profile(
        self, name: str, commands: Sequence[str] = (), **fields: Any
    ) -> str:
        return await self.catalog.profiles.create(
            DeviceProfileCreateDTO(
                name=name,
                commands=[CommandCreateDTO(name=command) for command in commands],
                **fields,
            )
        )

    def device_dto(
        self, name: str, addressable: str, service: str, profile: str, **fields: Any
    ) -> Dict[str, Any]:
        fields.setdefault("admin_state", AdminState.UNLOCKED)
        fields.setdefault("operating_state", OperatingState.ENABLED)
        return {
            "name": name,
            "addressable": ReferenceDTO(name=addressable),
            "service": ReferenceDTO(name=service),
            "profile": ReferenceDTO(name=profile),
            **fields,
        }

    async def device(
        self, name: str, addressable: str, service: str, profile: str, **fields: Any
    ) -> str:
        return await self.catalog.devices.create(
            DeviceCreateDTO(
                **self.device_dto(name, addressable, service, profile, **fields)
            )
        )

    async def schedule(self, name: str, **fields: Any) -> str:
        fields.setdefault("frequency", "PT5M")
        return await self.catalog.schedules.create(
            ScheduleCreateDTO(name=name, **fields)
        )

    async def event(
        self,
        name: str,
        schedule: str,
        addressable: str,
        service: Optional[str] = None,
    ) -> str:
        return await self.catalog.events.create(
            ScheduleEventCreateDTO(
                name=name,
                schedule=schedule,
                addressable=ReferenceDTO(name=addressable),
                service=service,
            )
        )

    async def report(
        self, name: str, device: str, event: str, expected: Sequence[str] = ()
    ) -> str:
        return await self.catalog.reports.create(
            DeviceReportCreateDTO(
                name=name, device=device, event=event, expected=list(expected)
            )
        )

    async def device_graph(self) -> SimpleNamespace:
        """Addressable A1, service S1 on A1, profile P1 and device D1 on all three."""
        ids = SimpleNamespace()
        ids.addressable = await self.addressable("A1")
        ids.service = await self.service("S1", "A1")
        ids.profile = await self.profile("P1", commands=("on", "off"))
        ids.device = await self.device("D1", "A1", "S1", "P1")
        return ids


@pytest.fixture()
def seeder(catalog) -> CatalogSeeder:
    return CatalogSeeder(catalog)
