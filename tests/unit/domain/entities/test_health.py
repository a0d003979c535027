from __future__ import annotations

from datetime import timezone

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth


def test_dependency_status_defaults() -> None:
    status = DependencyStatus(name="mongo", status=ServiceStatus.UP)
    assert status.checked_at.tzinfo == timezone.utc
    assert status.message is None


def test_system_health_takes_worst_dependency() -> None:
    health = SystemHealth.aggregate(
        [
            DependencyStatus(name="mongo", status=ServiceStatus.UP),
            DependencyStatus(name="notifications", status=ServiceStatus.DEGRADED),
        ]
    )
    assert health.status is ServiceStatus.DEGRADED
    assert len(health.dependencies) == 2


def test_system_health_down_beats_degraded() -> None:
    health = SystemHealth.aggregate(
        [
            DependencyStatus(name="notifications", status=ServiceStatus.DEGRADED),
            DependencyStatus(name="mongo", status=ServiceStatus.DOWN),
        ]
    )
    assert health.status is ServiceStatus.DOWN


def test_system_health_without_dependencies_is_unknown() -> None:
    assert SystemHealth.aggregate([]).status is ServiceStatus.UNKNOWN
