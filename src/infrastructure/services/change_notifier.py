"""
Queued change notifier - Infrastructure layer.

Change notifications are handed to a bounded ``asyncio.Queue`` consumed by a
fixed pool of worker tasks. Callers never wait for delivery: a full queue
drops the message, and delivery failures are logged and forgotten.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Union

from src.domain.entities.addressable import Addressable
from src.domain.entities.callback import ActionType, ChangeAction, Notification
from src.domain.entities.device import DeviceService
from src.domain.gateways.device_service_gateway import IDeviceServiceGateway
from src.domain.gateways.notifications_gateway import INotificationsGateway
from src.shared import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CallbackMessage:
    addressable: Addressable
    subject_id: str
    action: ChangeAction
    subject_type: ActionType


Message = Union[CallbackMessage, Notification]


class QueuedChangeNotifier:
    """Fire-and-forget dispatcher for device service callbacks and notices."""

    def __init__(
        self,
        device_service_gateway: IDeviceServiceGateway,
        notifications_gateway: INotificationsGateway,
        queue_size: int = 100,
        workers: int = 2,
        post_device_changes: bool = False,
        notification_sender: str = "edge-metadata",
        notification_slug_prefix: str = "device-change-",
        notification_content: str = "Device update: ",
        notification_description: str = "Metadata device notice",
        notification_labels: Optional[List[str]] = None,
    ):
        self.device_service_gateway = device_service_gateway
        self.notifications_gateway = notifications_gateway
        self.queue_size = queue_size
        self.worker_count = max(1, workers)
        self.post_device_changes = post_device_changes
        self.notification_sender = notification_sender
        self.notification_slug_prefix = notification_slug_prefix
        self.notification_content = notification_content
        self.notification_description = notification_description
        self.notification_labels = list(notification_labels or [])
        self._queue: Optional[asyncio.Queue] = None
        self._workers: List[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return bool(self._workers)

    async def start(self) -> None:
        """Create the queue and spawn the worker pool on the running loop."""
        if self.running:
            return
        self._queue = asyncio.Queue(maxsize=self.queue_size)
        self._workers = [
            asyncio.create_task(self._work(index), name=f"change-notifier-{index}")
            for index in range(self.worker_count)
        ]
        logger.info(
            "notifier.started", workers=self.worker_count, queue_size=self.queue_size
        )

    async def stop(self) -> None:
        """Cancel the workers; messages still queued are dropped."""
        workers, self._workers = self._workers, []
        for worker in workers:
            worker.cancel()
        await asyncio.gather(*workers, return_exceptions=True)
        pending = self._queue.qsize() if self._queue is not None else 0
        self._queue = None
        logger.info("notifier.stopped", dropped=pending)

    async def drain(self) -> None:
        """Wait until every queued message has been handled."""
        if self._queue is not None:
            await self._queue.join()

    def notify(
        self,
        addressable: Optional[Addressable],
        subject_id: str,
        action: ChangeAction,
        subject_type: ActionType,
    ) -> None:
        if addressable is None:
            logger.debug(
                "notifier.callback.skipped",
                reason="no addressable",
                subject_id=subject_id,
                subject_type=subject_type.value,
            )
            return
        self._enqueue(CallbackMessage(addressable, subject_id, action, subject_type))

    def notify_services(
        self,
        services: Iterable[Optional[DeviceService]],
        subject_id: str,
        action: ChangeAction,
        subject_type: ActionType,
    ) -> None:
        seen: Set[str] = set()
        for service in services:
            if service is None or service.id in seen:
                continue
            seen.add(service.id)
            self.notify(service.addressable, subject_id, action, subject_type)

    def notify_device_change(self, device_name: str, action: ChangeAction) -> None:
        if not self.post_device_changes:
            return
        timestamp = int(time.time() * 1000)
        self._enqueue(
            Notification(
                slug=f"{self.notification_slug_prefix}{timestamp}",
                sender=self.notification_sender,
                content=f"{self.notification_content}{device_name}-{action.value}",
                description=self.notification_description,
                labels=list(self.notification_labels),
            )
        )

    def _enqueue(self, message: Message) -> None:
        if self._queue is None:
            logger.warning("notifier.message.dropped", reason="notifier not started")
            return
        try:
            self._queue.put_nowait(message)
        except asyncio.QueueFull:
            logger.warning(
                "notifier.message.dropped",
                reason="queue full",
                queue_size=self.queue_size,
            )

    async def _deliver(self, message: Message) -> None:
        if isinstance(message, CallbackMessage):
            await self.device_service_gateway.send_callback(
                message.addressable,
                message.subject_id,
                message.action,
                message.subject_type,
            )
        else:
            await self.notifications_gateway.post(message)

    async def _work(self, index: int) -> None:
        queue = self._queue
        assert queue is not None
        while True:
            message = await queue.get()
            try:
                await self._deliver(message)
            except Exception as e:
                logger.warning(
                    "notifier.delivery.failed",
                    worker=index,
                    error=str(e),
                    exc_info=e,
                )
            finally:
                queue.task_done()
