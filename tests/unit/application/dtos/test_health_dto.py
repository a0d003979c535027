from __future__ import annotations

from datetime import datetime, timezone

from src.application.dtos.health_dto import (
    ApplicationInfoDTO,
    DependencyStatusDTO,
    SystemHealthDTO,
)
from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


def test_dependency_status_dto_from_domain() -> None:
    domain = DependencyStatus(name="mongo", status=ServiceStatus.UP, latency_ms=1.5)
    dto = DependencyStatusDTO.from_domain(domain)
    assert dto.name == "mongo"
    assert dto.status is ServiceStatus.UP
    assert dto.latency_ms == 1.5


def test_system_health_dto_from_domain() -> None:
    domain = SystemHealth(status=ServiceStatus.UP, dependencies=[])
    dto = SystemHealthDTO.from_domain(domain)
    assert dto.status is ServiceStatus.UP
    assert dto.dependencies == []


def test_application_info_dto_from_domain() -> None:
    now = datetime.now(timezone.utc)
    info = ApplicationInfo(
        name="edge-metadata",
        version="1.0.0",
        environment="development",
        started_at=now,
        uptime_seconds=42.0,
        status=ServiceStatus.UP,
        read_max_limit=100,
        dependencies=[DependencyStatus(name="mongo", status=ServiceStatus.UP)],
        settings={"database": "metadata"},
    )

    dto = ApplicationInfoDTO.from_domain(info)
    assert dto.name == "edge-metadata"
    assert dto.status is ServiceStatus.UP
    assert dto.settings == {"database": "metadata"}
    assert dto.dependencies[0].name == "mongo"
