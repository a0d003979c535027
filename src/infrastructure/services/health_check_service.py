"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import List, Optional

import httpx

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.ports.health_check import IHealthCheckService
from src.infrastructure.database.mongo_database import MongoDatabase


class HealthCheckService(IHealthCheckService):
    """Check the document store and, when configured, the notifications service."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        notifications_url: Optional[str] = None,
        *,
        http_timeout: float = 5.0,
    ) -> None:
        self._mongo_database = mongo_database
        self._notifications_url = notifications_url
        self._http_timeout = http_timeout

    async def evaluate(self) -> SystemHealth:
        """Run checks concurrently and aggregate system health."""
        checks = [self._check_mongo()]
        if self._notifications_url:
            checks.append(self._check_notifications())
        statuses: List[DependencyStatus] = list(await asyncio.gather(*checks))
        return SystemHealth.aggregate(statuses)

    async def _check_mongo(self) -> DependencyStatus:
        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.client.admin.command, "ping")
        except Exception as exc:
            return DependencyStatus(
                name="mongo",
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
            )
        return DependencyStatus(
            name="mongo",
            status=ServiceStatus.UP,
            message="MongoDB ping successful",
            latency_ms=(perf_counter() - start) * 1000,
        )

    async def _check_notifications(self) -> DependencyStatus:
        start = perf_counter()
        url = self._notifications_url or ""
        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            return DependencyStatus(
                name="notifications",
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
            )

        if response.status_code >= 500:
            status = ServiceStatus.DOWN
        elif response.status_code >= 400 and response.status_code != 405:
            # 405: reachable, the endpoint only accepts POST
            status = ServiceStatus.DEGRADED
        else:
            status = ServiceStatus.UP
        return DependencyStatus(
            name="notifications",
            status=status,
            message=f"HTTP {response.status_code}",
            latency_ms=(perf_counter() - start) * 1000,
        )
