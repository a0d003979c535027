"""
Catalog Use Cases - Application Layer

Behaviour shared by every entity family: direct lookups, bounded listings,
partial-update merging and rename checks.
"""

from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from src.domain.entities.errors import LimitExceededError
from src.domain.entities.metadata import EntityType, MetadataEntity
from src.domain.entities.reference import ById, ByName, Reference
from src.domain.repositories.metadata_repository import IMetadataRepository

from ..dtos.common_dto import MetadataUpdateDTO
from ..services.association_guard import AssociationGuard
from ..services.key_resolver import KeyResolver

E = TypeVar("E", bound=MetadataEntity)
D = TypeVar("D", bound=BaseModel)


def merge_fields(entity: Any, dto: BaseModel, fields: Iterable[str]) -> None:
    """Copy the DTO values that are set onto the entity.

    ``None`` and a numeric ``0`` mean "leave unchanged"; booleans always apply.
    """
    for name in fields:
        value = getattr(dto, name)
        if value is None:
            continue
        if isinstance(value, int) and not isinstance(value, bool) and value == 0:
            continue
        setattr(entity, name, value)


class CatalogUseCase(Generic[E, D]):
    """Read operations and update helpers for one entity family."""

    entity_type: EntityType
    response_dto: Type[Any]

    def __init__(
        self,
        key_resolver: KeyResolver,
        association_guard: AssociationGuard,
        read_max_limit: int = 100,
    ):
        self.key_resolver = key_resolver
        self.association_guard = association_guard
        self.read_max_limit = read_max_limit

    def to_response(self, entity: E) -> D:
        return self.response_dto.from_domain(entity)

    @property
    def repository(self) -> IMetadataRepository:
        return self.key_resolver.repository(self.entity_type)

    async def _get(self, reference: Reference) -> E:
        return await self.key_resolver.get(self.entity_type, reference)

    async def _get_by_id(self, entity_id: str) -> E:
        return await self._get(ById(entity_id))

    async def _get_by_name(self, name: str) -> E:
        return await self._get(ByName(name))

    async def get_by_id(self, entity_id: str) -> D:
        """
        Retrieve an entity by identifier.

        Raises:
            NotFoundError: If no entity has that identifier
        """
        return self.to_response(await self._get_by_id(entity_id))

    async def get_by_name(self, name: str) -> D:
        """
        Retrieve an entity by unique name.

        Raises:
            NotFoundError: If no entity has that name
        """
        return self.to_response(await self._get_by_name(name))

    async def list_all(self) -> List[D]:
        """
        Retrieve every entity, newest first.

        Raises:
            LimitExceededError: If more than ``read_max_limit`` entities exist
        """
        if await self.repository.count() > self.read_max_limit:
            raise LimitExceededError(self.entity_type.value, self.read_max_limit)
        entities = await self.repository.find_all(limit=self.read_max_limit)
        return [self.to_response(entity) for entity in entities]

    async def _list_where(
        self, criteria: Mapping[str, Any], match_any: bool = False
    ) -> List[D]:
        entities = await self._find_where(criteria, match_any)
        return [self.to_response(entity) for entity in entities]

    async def _find_where(
        self,
        criteria: Mapping[str, Any],
        match_any: bool = False,
        entity_type: Optional[EntityType] = None,
    ) -> List[Any]:
        entity_type = entity_type or self.entity_type
        repository = self.key_resolver.repository(entity_type)
        entities = await repository.find_where(
            criteria, match_any=match_any, limit=self.read_max_limit + 1
        )
        if len(entities) > self.read_max_limit:
            raise LimitExceededError(entity_type.value, self.read_max_limit)
        return entities

    async def _for_update(self, dto: MetadataUpdateDTO) -> E:
        return await self._get(dto.identity())

    async def _apply_rename(self, entity: E, dto: MetadataUpdateDTO) -> None:
        new_name = dto.new_name()
        if not new_name or new_name == entity.name:
            return
        await self.association_guard.may_rename(self.entity_type, entity, new_name)
        entity.name = new_name

    async def _apply_common(self, entity: E, dto: MetadataUpdateDTO) -> None:
        await self._apply_rename(entity, dto)
        merge_fields(entity, dto, ("description", "origin"))
