"""
Key Resolver - Application Layer

Resolves an id-or-name reference to a persisted entity of a given type.
"""

from typing import Any, Mapping, Optional

from src.domain.entities.errors import NotFoundError
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import ById, ByName, Reference, describe
from src.domain.repositories.metadata_repository import IMetadataRepository


class KeyResolver:
    """Direct lookups by identifier or by unique name; no side effects."""

    def __init__(self, repositories: Mapping[EntityType, IMetadataRepository]):
        self._repositories = dict(repositories)

    def repository(self, entity_type: EntityType) -> IMetadataRepository:
        return self._repositories[entity_type]

    async def resolve(
        self, entity_type: EntityType, reference: Optional[Reference]
    ) -> Optional[Any]:
        """
        Look an entity up by the key its reference carries.

        A by-id reference is never retried by name.

        Returns:
            The entity, or None when nothing matches or no reference is set
        """
        repository = self.repository(entity_type)
        if isinstance(reference, ById):
            return await repository.find_by_id(reference.id)
        if isinstance(reference, ByName):
            return await repository.find_by_name(reference.name)
        return None

    async def get(self, entity_type: EntityType, reference: Optional[Reference]) -> Any:
        """
        Resolve a reference that must exist.

        Raises:
            NotFoundError: If nothing matches
        """
        entity = await self.resolve(entity_type, reference)
        if entity is None:
            raise NotFoundError(entity_type.value, describe(reference))
        return entity
