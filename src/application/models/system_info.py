"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    name: str
    version: str
    environment: str
    read_max_limit: int
    settings: Dict[str, Any] = field(default_factory=dict)
