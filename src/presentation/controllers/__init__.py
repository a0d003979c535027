"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that map the
metadata REST resources onto the application use cases and translate
domain errors into HTTP status codes.
"""

from .addressable_controller import router as addressable_router
from .device_controller import router as device_router
from .device_manager_controller import router as device_manager_router
from .device_profile_controller import command_router
from .device_profile_controller import router as device_profile_router
from .device_service_controller import router as device_service_router
from .provision_watcher_controller import router as provision_watcher_router
from .schedule_controller import event_router as schedule_event_router
from .schedule_controller import report_router as device_report_router
from .schedule_controller import router as schedule_router
from .system_controller import router as system_router

METADATA_ROUTERS = [
    addressable_router,
    device_service_router,
    device_profile_router,
    command_router,
    device_router,
    device_manager_router,
    schedule_router,
    schedule_event_router,
    device_report_router,
    provision_watcher_router,
]

__all__ = [
    "METADATA_ROUTERS",
    "addressable_router",
    "command_router",
    "device_manager_router",
    "device_profile_router",
    "device_report_router",
    "device_router",
    "device_service_router",
    "provision_watcher_router",
    "schedule_event_router",
    "schedule_router",
    "system_router",
]
