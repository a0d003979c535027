from __future__ import annotations

from types import SimpleNamespace
from typing import cast
from unittest.mock import AsyncMock

import httpx
import pytest

from src.domain.entities.health import DependencyStatus, ServiceStatus
from src.infrastructure.database.mongo_database import MongoDatabase
from src.infrastructure.services.health_check_service import HealthCheckService

NOTIFICATIONS_URL = "http://notifications:48060/api/v1/notification"


class _StubMongoDatabase:
    def __init__(self, error: Exception | None = None) -> None:
        def command(cmd: str) -> None:
            if error is not None:
                raise error
            if cmd != "ping":
                raise ValueError("Unexpected command")

        self.client = SimpleNamespace(admin=SimpleNamespace(command=command))


def _make_service(
    notifications_url: str | None = NOTIFICATIONS_URL,
    error: Exception | None = None,
) -> HealthCheckService:
    return HealthCheckService(
        mongo_database=cast(MongoDatabase, _StubMongoDatabase(error)),
        notifications_url=notifications_url,
        http_timeout=1.0,
    )


class _Response:
    def __init__(self, status_code: int):
        self.status_code = status_code


class _Client:
    def __init__(self, outcome):
        self._outcome = outcome

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def get(self, url):
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


@pytest.mark.asyncio
async def test_evaluate_without_notifications_checks_only_mongo() -> None:
    service = _make_service(notifications_url=None)

    health = await service.evaluate()

    assert [dep.name for dep in health.dependencies] == ["mongo"]
    assert health.status is ServiceStatus.UP


@pytest.mark.asyncio
async def test_evaluate_collects_dependency_statuses(monkeypatch) -> None:
    service = _make_service()
    monkeypatch.setattr(
        service,
        "_check_mongo",
        AsyncMock(return_value=DependencyStatus("mongo", ServiceStatus.UP)),
    )
    monkeypatch.setattr(
        service,
        "_check_notifications",
        AsyncMock(
            return_value=DependencyStatus("notifications", ServiceStatus.DEGRADED)
        ),
    )

    health = await service.evaluate()

    assert len(health.dependencies) == 2
    assert health.status is ServiceStatus.DEGRADED


@pytest.mark.asyncio
async def test_check_mongo_handles_failure() -> None:
    service = _make_service(error=RuntimeError("mongo error"))

    status = await service._check_mongo()

    assert status.status is ServiceStatus.DOWN
    assert "mongo error" in status.message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (200, ServiceStatus.UP),
        (405, ServiceStatus.UP),
        (404, ServiceStatus.DEGRADED),
        (502, ServiceStatus.DOWN),
    ],
)
async def test_check_notifications_maps_status_codes(
    monkeypatch, status_code, expected
) -> None:
    monkeypatch.setattr(
        "httpx.AsyncClient", lambda timeout: _Client(_Response(status_code))
    )

    status = await _make_service()._check_notifications()

    assert status.status is expected
    assert status.message == f"HTTP {status_code}"


@pytest.mark.asyncio
async def test_check_notifications_unreachable(monkeypatch) -> None:
    error = httpx.ConnectError("refused", request=httpx.Request("GET", "http://x"))
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: _Client(error))

    status = await _make_service()._check_notifications()

    assert status.status is ServiceStatus.DOWN
