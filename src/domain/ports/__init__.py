"""Domain ports package."""

from .change_notifier import IChangeNotifier
from .health_check import IHealthCheckService

__all__ = ["IChangeNotifier", "IHealthCheckService"]
