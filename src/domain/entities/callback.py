"""
Domain Entities - Change callbacks

Values exchanged with the device services and the notifications service when
catalog entities change.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ChangeAction(str, Enum):
    """Kind of change; the value doubles as the callback HTTP method."""

    CREATE = "POST"
    UPDATE = "PUT"
    DELETE = "DELETE"


class ActionType(str, Enum):
    """Kind of entity a callback is about."""

    DEVICE = "DEVICE"
    MANAGER = "MANAGER"
    PROFILE = "PROFILE"
    ADDRESSABLE = "ADDRESSABLE"
    SCHEDULE = "SCHEDULE"
    SCHEDULEEVENT = "SCHEDULEEVENT"
    PROVISIONWATCHER = "PROVISIONWATCHER"
    REPORT = "REPORT"


class NotificationCategory(str, Enum):
    SECURITY = "SECURITY"
    HW_HEALTH = "HW_HEALTH"
    SW_HEALTH = "SW_HEALTH"


class NotificationSeverity(str, Enum):
    CRITICAL = "CRITICAL"
    NORMAL = "NORMAL"


@dataclass
class Notification:
    """Document posted to the support-notifications service."""

    slug: str
    sender: str
    content: str
    category: NotificationCategory = NotificationCategory.SW_HEALTH
    severity: NotificationSeverity = NotificationSeverity.NORMAL
    description: Optional[str] = None
    labels: List[str] = field(default_factory=list)
