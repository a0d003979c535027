"""Device service callback gateway implementation - Infrastructure layer."""

from __future__ import annotations

import httpx

from src.domain.entities.addressable import Addressable
from src.domain.entities.callback import ActionType, ChangeAction
from src.domain.entities.errors import ServiceError
from src.domain.gateways.device_service_gateway import IDeviceServiceGateway
from src.shared import get_logger

logger = get_logger(__name__)


class DeviceServiceGateway(IDeviceServiceGateway):
    """HTTP client calling back device services on catalog changes."""

    def __init__(self, timeout: float = 5.0):
        """
        Initialize the callback gateway.

        Args:
            timeout: Per-request timeout in seconds
        """
        self.timeout = timeout

    async def send_callback(
        self,
        addressable: Addressable,
        subject_id: str,
        action: ChangeAction,
        subject_type: ActionType,
    ) -> None:
        """
        Issue ``<action> <protocol>://<address>:<port><path>`` with a JSON body
        ``{"type": <subject_type>, "id": <subject_id>}``.

        Raises:
            ServiceError: If the request fails or the service answers an error
        """
        url = addressable.url
        payload = {"type": subject_type.value, "id": subject_id}

        logger.debug(
            "device_service.callback.request",
            url=url,
            method=action.value,
            subject_type=subject_type.value,
            subject_id=subject_id,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(action.value, url, json=payload)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "device_service.callback.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
                exc_info=e,
            )
            raise ServiceError(
                f"Device service returned HTTP {e.response.status_code}",
                details={"url": url},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "device_service.callback.request_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise ServiceError(
                f"Failed to reach device service: {str(e)}", details={"url": url}
            ) from e

        logger.info(
            "device_service.callback.sent",
            url=url,
            method=action.value,
            status_code=response.status_code,
        )
