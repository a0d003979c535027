from __future__ import annotations

import pytest

from src.domain.entities.addressable import Addressable
from src.domain.entities.errors import NotFoundError
from src.domain.entities.metadata import EntityType
from src.domain.entities.reference import UNSET, ById, ByName


@pytest.mark.asyncio
async def test_resolve_by_id_and_by_name(repositories, key_resolver) -> None:
    stored = await repositories[EntityType.ADDRESSABLE].create(Addressable(name="A1"))

    by_id = await key_resolver.resolve(EntityType.ADDRESSABLE, ById(stored.id))
    by_name = await key_resolver.resolve(EntityType.ADDRESSABLE, ByName("A1"))

    assert by_id.id == by_name.id == stored.id


@pytest.mark.asyncio
async def test_by_id_is_never_retried_by_name(repositories, key_resolver) -> None:
    await repositories[EntityType.ADDRESSABLE].create(Addressable(name="A1"))

    assert await key_resolver.resolve(EntityType.ADDRESSABLE, ById("A1")) is None


@pytest.mark.asyncio
async def test_unset_reference_resolves_to_none(key_resolver) -> None:
    assert await key_resolver.resolve(EntityType.DEVICE, UNSET) is None
    assert await key_resolver.resolve(EntityType.DEVICE, None) is None


@pytest.mark.asyncio
async def test_get_raises_not_found(key_resolver) -> None:
    with pytest.raises(NotFoundError) as exc:
        await key_resolver.get(EntityType.DEVICE, ByName("ghost"))

    assert exc.value.message == "Device with id or name ghost not found"


def test_repository_lookup(repositories, key_resolver) -> None:
    assert (
        key_resolver.repository(EntityType.SCHEDULE)
        is repositories[EntityType.SCHEDULE]
    )
