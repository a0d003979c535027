"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .device_service_gateway import IDeviceServiceGateway
from .notifications_gateway import INotificationsGateway

__all__ = ["IDeviceServiceGateway", "INotificationsGateway"]
