"""
Common DTOs - Application Layer

Building blocks shared by every entity family: references, the attributes
common to all catalog entities and the update identification rule.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from src.domain.entities.metadata import MetadataEntity
from src.domain.entities.reference import Reference, reference_of


class ReferenceDTO(BaseModel):
    """Reference to another entity by id or by name; the id wins."""

    id: Optional[str] = Field(None, description="Identifier of the entity")
    name: Optional[str] = Field(None, description="Unique name of the entity")

    def to_reference(self) -> Reference:
        return reference_of(self.id, self.name)

    model_config = {"json_schema_extra": {"example": {"name": "camera-addressable"}}}


def to_reference(dto: Optional[ReferenceDTO]) -> Reference:
    return reference_of() if dto is None else dto.to_reference()


class MetadataCreateDTO(BaseModel):
    """Attributes accepted when creating any catalog entity."""

    name: str = Field(..., description="Unique name", min_length=1)
    description: Optional[str] = Field(None, description="Free text description")
    origin: int = Field(0, description="Caller supplied epoch millis", ge=0)


class MetadataUpdateDTO(BaseModel):
    """Attributes accepted when updating; only set values are applied.

    The entity is identified by ``id`` when given, otherwise by ``name``.
    When identified by ``id``, a different ``name`` renames it.
    """

    id: Optional[str] = Field(None, description="Identifier of the entity")
    name: Optional[str] = Field(None, description="Current or new name", min_length=1)
    description: Optional[str] = None
    origin: int = Field(0, ge=0)

    @model_validator(mode="after")
    def require_id_or_name(self) -> "MetadataUpdateDTO":
        if not self.id and not self.name:
            raise ValueError("An id or a name is required to identify the entity")
        return self

    def identity(self) -> Reference:
        return reference_of(self.id, self.name)

    def new_name(self) -> Optional[str]:
        """Name to apply, set only when the entity is identified by id."""
        return self.name if self.id else None


class MetadataResponseDTO(BaseModel):
    """Attributes returned for any catalog entity."""

    id: str
    name: str
    description: Optional[str] = None
    origin: int = 0
    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    @staticmethod
    def base_fields(entity: MetadataEntity) -> Dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "description": entity.description,
            "origin": entity.origin,
            "created": entity.created,
            "modified": entity.modified,
        }
