"""
Metadata Repository Interface

This module defines the contract shared by every catalog repository.
Criteria are expressed with domain attribute names (``addressable``,
``service``, ``labels``...); implementations translate them to their own
storage layout.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from src.domain.entities.metadata import EntityType, MetadataEntity

T = TypeVar("T", bound=MetadataEntity)


class IMetadataRepository(ABC, Generic[T]):
    """Interface for catalog repository implementations."""

    entity_type: EntityType

    @abstractmethod
    async def find_by_id(self, entity_id: str) -> Optional[T]:
        """
        Find an entity by its durable identifier.

        Returns:
            The hydrated entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[T]:
        """
        Find an entity by its unique name.

        Returns:
            The hydrated entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int = 0) -> List[T]:
        """
        Find entities, newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return, 0 for no limit
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all stored entities."""
        pass

    @abstractmethod
    async def find_where(
        self,
        criteria: Mapping[str, Any],
        match_any: bool = False,
        limit: int = 0,
    ) -> List[T]:
        """
        Find entities whose attributes equal the given values.

        A list attribute (``labels``, ``devices``...) matches when it contains
        the value. Referenced entities are matched by identifier.

        Args:
            criteria: Attribute name to expected value
            match_any: Match when any criterion holds instead of all
            limit: Maximum number of records to return, 0 for no limit
        """
        pass

    @abstractmethod
    async def exists_where(self, criteria: Mapping[str, Any]) -> bool:
        """Tell whether at least one entity matches all criteria."""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """
        Persist a new entity.

        Raises:
            DataValidationError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Replace a persisted entity.

        Raises:
            NotFoundError: If the entity does not exist
            DataValidationError: If the new name is already taken
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """
        Delete an entity by its identifier.

        Raises:
            NotFoundError: If the entity does not exist
        """
        pass

    @abstractmethod
    async def delete_where(self, criteria: Mapping[str, Any]) -> int:
        """Delete every entity matching all criteria and return how many."""
        pass

    async def find_by(self, attribute: str, value: Any, limit: int = 0) -> List[T]:
        return await self.find_where({attribute: value}, limit=limit)

    async def exists_by(self, attribute: str, value: Any) -> bool:
        return await self.exists_where({attribute: value})
