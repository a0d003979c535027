from __future__ import annotations

import asyncio
from dataclasses import dataclass

import pytest
from dependency_injector import providers

from src.application.use_cases.device_use_cases import DeviceManagementUseCase
from src.main.config import AppSettings
from src.main.container import app_lifespan, get_container, init_container


@dataclass
class _StubMongoDatabase:
    ensured_indexes: bool = False
    closed: bool = False

    async def create_indexes(self) -> None:
        self.ensured_indexes = True

    def close(self) -> None:
        self.closed = True


@dataclass
class _StubNotifier:
    started: bool = False
    stopped: bool = False

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.stopped = True


@pytest.mark.asyncio
async def test_init_and_get_container(monkeypatch) -> None:
    settings = AppSettings()
    container = init_container(settings)
    assert hasattr(container, "mongo_database")
    assert get_container() is container

    container.mongo_database.override(providers.Object(_StubMongoDatabase()))
    container.change_notifier.override(providers.Object(_StubNotifier()))

    async with app_lifespan():
        pass


@pytest.mark.asyncio
async def test_app_lifespan_manages_resources(monkeypatch) -> None:
    container = init_container(AppSettings())
    stub_db = _StubMongoDatabase()
    notifier = _StubNotifier()
    container.mongo_database.override(providers.Object(stub_db))
    container.change_notifier.override(providers.Object(notifier))

    async with app_lifespan():
        await asyncio.sleep(0)
        assert notifier.started is True

    assert stub_db.ensured_indexes is True
    assert stub_db.closed is True
    assert notifier.stopped is True


def test_use_cases_share_read_limit(fake_mongo_database, monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_READ_MAX_LIMIT", "7")
    container = init_container(AppSettings())
    container.mongo_database.override(providers.Object(fake_mongo_database))

    use_case = container.device_use_case()

    assert isinstance(use_case, DeviceManagementUseCase)
    assert use_case.read_max_limit == 7
    assert use_case.key_resolver is container.key_resolver()


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
