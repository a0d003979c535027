"""
Health domain entities.

Value objects describing the availability of the catalog's own
dependencies (the document store and the optional outbound services).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def aggregate(cls, dependencies: List[DependencyStatus]) -> "SystemHealth":
        """Worst dependency wins; no dependencies is ``UNKNOWN``."""
        if not dependencies:
            return cls(status=ServiceStatus.UNKNOWN)
        ranking = [
            ServiceStatus.DOWN,
            ServiceStatus.DEGRADED,
            ServiceStatus.UNKNOWN,
            ServiceStatus.UP,
        ]
        worst = min(dependencies, key=lambda dep: ranking.index(dep.status))
        return cls(status=worst.status, dependencies=list(dependencies))


@dataclass(slots=True)
class ApplicationInfo:
    """Operational metadata returned by the /info endpoint."""

    name: str
    version: str
    environment: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    read_max_limit: int
    dependencies: List[DependencyStatus] = field(default_factory=list)
    settings: Dict[str, Any] = field(default_factory=dict)
