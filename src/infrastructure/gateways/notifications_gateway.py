"""Support-notifications gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict

import httpx

from src.domain.entities.callback import Notification
from src.domain.entities.errors import ServiceError
from src.domain.gateways.notifications_gateway import INotificationsGateway
from src.shared import get_logger

logger = get_logger(__name__)


class NotificationsGateway(INotificationsGateway):
    """HTTP client for the support-notifications service."""

    def __init__(self, notifications_url: str, timeout: float = 5.0):
        """
        Initialize the notifications gateway.

        Args:
            notifications_url: Full URL notifications are posted to
            timeout: Per-request timeout in seconds
        """
        self.notifications_url = notifications_url
        self.timeout = timeout

    @staticmethod
    def _to_payload(notification: Notification) -> Dict[str, Any]:
        return {
            "slug": notification.slug,
            "sender": notification.sender,
            "category": notification.category.value,
            "severity": notification.severity.value,
            "content": notification.content,
            "description": notification.description,
            "labels": list(notification.labels),
        }

    async def post(self, notification: Notification) -> None:
        """
        Post a notification document.

        Raises:
            ServiceError: If the request fails or the service answers an error
        """
        url = self.notifications_url
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=self._to_payload(notification))
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "notifications.post.http_error",
                status_code=e.response.status_code,
                url=url,
                slug=notification.slug,
                exc_info=e,
            )
            raise ServiceError(
                f"Notifications service returned HTTP {e.response.status_code}"
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "notifications.post.request_error",
                error=str(e),
                url=url,
                slug=notification.slug,
                exc_info=e,
            )
            raise ServiceError(
                f"Failed to reach notifications service: {str(e)}"
            ) from e

        logger.info("notifications.post.sent", slug=notification.slug)
