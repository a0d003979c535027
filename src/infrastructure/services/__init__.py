"""Infrastructure services package."""

from .change_notifier import QueuedChangeNotifier
from .health_check_service import HealthCheckService

__all__ = ["HealthCheckService", "QueuedChangeNotifier"]
