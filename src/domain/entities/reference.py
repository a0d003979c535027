"""
Entity references.

A reference names a persisted entity either by its durable identifier or by
its unique name. It is modelled as a small tagged union so resolution code
checks the tag instead of juggling two nullable fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class ById:
    """Reference by durable identifier."""

    id: str


@dataclass(frozen=True, slots=True)
class ByName:
    """Reference by unique name."""

    name: str


class _Unset:
    """Marker for an absent reference."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

Reference = Union[ById, ByName, _Unset]


def reference_of(id: Optional[str] = None, name: Optional[str] = None) -> Reference:
    """Build a reference from an id/name pair; the id wins when both are set."""
    if id:
        return ById(id)
    if name:
        return ByName(name)
    return UNSET


def is_set(reference: Optional[Reference]) -> bool:
    return isinstance(reference, (ById, ByName))


def describe(reference: Optional[Reference]) -> Optional[str]:
    """Return the id or name carried by a reference, for messages and logs."""
    if isinstance(reference, ById):
        return reference.id
    if isinstance(reference, ByName):
        return reference.name
    return None
