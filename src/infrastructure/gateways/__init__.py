"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .device_service_gateway import DeviceServiceGateway
from .notifications_gateway import NotificationsGateway

__all__ = ["DeviceServiceGateway", "NotificationsGateway"]
