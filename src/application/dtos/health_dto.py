"""DTOs for system health and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Serializable representation of a dependency health check."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Status of the dependency")
    message: Optional[str] = Field(
        default=None, description="Human readable status note"
    )
    checked_at: datetime = Field(description="Timestamp of the check")
    latency_ms: Optional[float] = Field(
        default=None, description="Latency in milliseconds"
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "mongo",
                "status": "up",
                "message": "MongoDB ping successful",
                "checked_at": "2024-09-09T12:00:00Z",
                "latency_ms": 3.1,
            }
        }
    }


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="Detailed dependency information"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /info."""

    name: str = Field(description="Service name")
    version: str = Field(description="Service version")
    environment: str = Field(description="Current deployment environment")
    started_at: datetime = Field(description="Service start timestamp")
    uptime_seconds: float = Field(description="Uptime in seconds")
    status: ServiceStatus = Field(description="Overall system status")
    read_max_limit: int = Field(description="Maximum entries returned by a read")
    dependencies: List[DependencyStatusDTO] = Field(
        default_factory=list, description="Dependency status snapshot"
    )
    settings: Dict[str, Any] = Field(
        default_factory=dict, description="Non secret runtime settings"
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            version=info.version,
            environment=info.environment,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            read_max_limit=info.read_max_limit,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in info.dependencies
            ],
            settings=info.settings,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "edge-metadata",
                "version": "1.0.0",
                "environment": "development",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "up",
                "read_max_limit": 100,
                "dependencies": [],
                "settings": {
                    "database": "metadata",
                    "notifications_url": "http://notifications:48060",
                },
            }
        }
    }
