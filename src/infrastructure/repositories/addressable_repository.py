"""MongoDB Addressable Repository - Infrastructure Layer"""

from typing import Any, Dict

from src.domain.entities.addressable import Addressable
from src.domain.entities.metadata import EntityType, Protocol
from src.infrastructure.database.mongo_database import ADDRESSABLES

from .base import MongoMetadataRepository


class AddressableRepository(MongoMetadataRepository[Addressable]):
    """MongoDB implementation of the addressable repository."""

    COLLECTION_NAME = ADDRESSABLES
    entity_type = EntityType.ADDRESSABLE

    def _to_document(self, addressable: Addressable) -> Dict[str, Any]:
        return {
            **self._base_document(addressable),
            "protocol": addressable.protocol.value,
            "method": addressable.method,
            "address": addressable.address,
            "port": addressable.port,
            "path": addressable.path,
            "publisher": addressable.publisher,
            "topic": addressable.topic,
            "user": addressable.user,
            "password": addressable.password,
        }

    async def _to_entity(self, document: Dict[str, Any]) -> Addressable:
        return Addressable(
            **self._base_fields(document),
            protocol=Protocol(document.get("protocol") or Protocol.HTTP.value),
            method=document.get("method") or "POST",
            address=document.get("address") or "",
            port=document.get("port") or 0,
            path=document.get("path") or "",
            publisher=document.get("publisher"),
            topic=document.get("topic"),
            user=document.get("user"),
            password=document.get("password"),
        )
