"""
Domain Entities - Device Profile

Profiles describe a class of device: who makes it, what resources it exposes
and which commands can be issued against it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .metadata import MetadataEntity


@dataclass
class CommandResponse:
    """An expected response of a command operation."""

    code: Optional[str] = None
    description: Optional[str] = None
    expected_values: List[str] = field(default_factory=list)


@dataclass
class CommandOperation:
    """Request shape of a command's ``get`` or ``put`` operation."""

    path: Optional[str] = None
    parameter_names: List[str] = field(default_factory=list)
    responses: List[CommandResponse] = field(default_factory=list)


@dataclass
class Command(MetadataEntity):
    """A named operation defined inside exactly one device profile."""

    get: Optional[CommandOperation] = None
    put: Optional[CommandOperation] = None


@dataclass
class DeviceProfile(MetadataEntity):
    """Template describing a class of device's capabilities."""

    manufacturer: Optional[str] = None
    model: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    device_resources: List[Dict[str, Any]] = field(default_factory=list)
    resources: List[Dict[str, Any]] = field(default_factory=list)
    commands: List[Command] = field(default_factory=list)

    def command_names(self) -> List[str]:
        return [command.name for command in self.commands]
