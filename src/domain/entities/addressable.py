"""
Domain Entities - Addressable

A network endpoint used to reach a device, a device service or a
schedule event target.
"""

from dataclasses import dataclass
from typing import Optional

from .metadata import MetadataEntity, Protocol


@dataclass
class Addressable(MetadataEntity):
    """Network endpoint (protocol, host, port, path, topic)."""

    protocol: Protocol = Protocol.HTTP
    method: str = "POST"
    address: str = ""
    port: int = 0
    path: str = ""
    publisher: Optional[str] = None
    topic: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None

    @property
    def base_url(self) -> str:
        return f"{self.protocol.value.lower()}://{self.address}:{self.port}"

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path or ''}"
