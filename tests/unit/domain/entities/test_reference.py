from __future__ import annotations

from src.domain.entities.reference import (
    UNSET,
    ById,
    ByName,
    describe,
    is_set,
    reference_of,
)


def test_reference_prefers_id_over_name() -> None:
    assert reference_of("abc", "sensor") == ById("abc")


def test_reference_by_name_when_no_id() -> None:
    assert reference_of(None, "sensor") == ByName("sensor")


def test_reference_without_keys_is_unset() -> None:
    reference = reference_of()
    assert reference is UNSET
    assert not reference
    assert not is_set(reference)
    assert describe(reference) is None


def test_describe_returns_the_carried_key() -> None:
    assert describe(ById("abc")) == "abc"
    assert describe(ByName("sensor")) == "sensor"
    assert is_set(ByName("sensor"))
