"""
MongoDB Metadata Repository - Infrastructure Layer

Shared implementation of the catalog repository interface. Subclasses
describe their collection, their document layout and how referenced
identifiers are hydrated back into entities.
"""

from abc import abstractmethod
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pymongo

from src.domain.entities.errors import NotFoundError
from src.domain.entities.metadata import MetadataEntity
from src.domain.repositories.metadata_repository import IMetadataRepository, T
from src.infrastructure.database import (
    DocumentNotFoundError,
    MongoDatabase,
    translate_name_collision,
)


def enum_value(value: Optional[Enum]) -> Optional[str]:
    return value.value if value is not None else None


class MongoMetadataRepository(IMetadataRepository[T]):
    """MongoDB implementation of the catalog repository contract."""

    COLLECTION_NAME: str = ""
    # Domain attribute name to document key, for attributes stored differently.
    FIELD_MAP: Dict[str, str] = {}

    def __init__(self, mongo_database: MongoDatabase):
        """
        Initialize the repository.

        Args:
            mongo_database: MongoDB database client
        """
        self.db = mongo_database

    @abstractmethod
    def _to_document(self, entity: T) -> Dict[str, Any]:
        """Convert an entity to a MongoDB document."""

    @abstractmethod
    async def _to_entity(self, document: Dict[str, Any]) -> T:
        """Convert a MongoDB document to a hydrated entity."""

    @staticmethod
    def _base_document(entity: MetadataEntity) -> Dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "description": entity.description,
            "origin": entity.origin,
            "created": entity.created,
            "modified": entity.modified,
        }

    @staticmethod
    def _base_fields(document: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": document["id"],
            "name": document["name"],
            "description": document.get("description"),
            "origin": document.get("origin") or 0,
            "created": document.get("created"),
            "modified": document.get("modified"),
        }

    def _criterion(self, attribute: str, value: Any) -> Tuple[str, Any]:
        key = self.FIELD_MAP.get(attribute, attribute)
        if isinstance(value, MetadataEntity):
            value = value.id
        elif isinstance(value, Enum):
            value = value.value
        return key, value

    def _query(
        self, criteria: Mapping[str, Any], match_any: bool = False
    ) -> Dict[str, Any]:
        clauses = dict(self._criterion(attr, value) for attr, value in criteria.items())
        if match_any and len(clauses) > 1:
            return {"$or": [{key: value} for key, value in clauses.items()]}
        return clauses

    async def _to_entities(self, documents: List[Dict[str, Any]]) -> List[T]:
        entities = []
        for document in documents:
            entities.append(await self._to_entity(document))
        return entities

    async def find_by_id(self, entity_id: Optional[str]) -> Optional[T]:
        if not entity_id:
            return None
        document = await self.db.find_one(self.COLLECTION_NAME, {"id": entity_id})
        if document is None:
            return None
        return await self._to_entity(document)

    async def find_by_name(self, name: Optional[str]) -> Optional[T]:
        if not name:
            return None
        document = await self.db.find_one(self.COLLECTION_NAME, {"name": name})
        if document is None:
            return None
        return await self._to_entity(document)

    async def find_all(self, skip: int = 0, limit: int = 0) -> List[T]:
        documents = await self.db.find_many(
            self.COLLECTION_NAME,
            {},
            sort_by="created",
            sort_direction=pymongo.DESCENDING,
            skip=skip,
            limit=limit,
        )
        return await self._to_entities(documents)

    async def count(self) -> int:
        return await self.db.count(self.COLLECTION_NAME)

    async def find_where(
        self,
        criteria: Mapping[str, Any],
        match_any: bool = False,
        limit: int = 0,
    ) -> List[T]:
        documents = await self.db.find_many(
            self.COLLECTION_NAME,
            self._query(criteria, match_any),
            sort_by="created",
            sort_direction=pymongo.DESCENDING,
            limit=limit,
        )
        return await self._to_entities(documents)

    async def exists_where(self, criteria: Mapping[str, Any]) -> bool:
        return await self.db.exists(self.COLLECTION_NAME, self._query(criteria))

    async def create(self, entity: T) -> T:
        """
        Persist a new entity, stamping ``created`` and ``modified``.

        Raises:
            DataValidationError: If the name is already taken
        """
        entity.mark_created()
        with translate_name_collision(self.COLLECTION_NAME, entity.name):
            await self.db.insert_one(self.COLLECTION_NAME, self._to_document(entity))
        return entity

    async def update(self, entity: T) -> T:
        """
        Replace a persisted entity, advancing ``modified``.

        Raises:
            NotFoundError: If the entity does not exist
            DataValidationError: If the new name is already taken
        """
        entity.touch()
        try:
            with translate_name_collision(self.COLLECTION_NAME, entity.name):
                await self.db.replace_one(
                    self.COLLECTION_NAME, {"id": entity.id}, self._to_document(entity)
                )
        except DocumentNotFoundError as e:
            raise NotFoundError(self.entity_type.value, entity.id) from e
        return entity

    async def delete(self, entity_id: str) -> None:
        """
        Delete an entity by its identifier.

        Raises:
            NotFoundError: If the entity does not exist
        """
        try:
            await self.db.delete_one(self.COLLECTION_NAME, {"id": entity_id})
        except DocumentNotFoundError as e:
            raise NotFoundError(self.entity_type.value, entity_id) from e

    async def delete_where(self, criteria: Mapping[str, Any]) -> int:
        return await self.db.delete_many(self.COLLECTION_NAME, self._query(criteria))
