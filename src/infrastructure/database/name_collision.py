"""Translation of store duplicate-key violations into domain errors."""

from contextlib import contextmanager
from typing import Iterator

import pymongo.errors

from src.domain.entities.errors import DataValidationError
from src.shared import get_logger

logger = get_logger(__name__)


@contextmanager
def translate_name_collision(collection_name: str, name: str) -> Iterator[None]:
    """
    Turn a unique index violation raised inside the block into a
    ``DataValidationError`` naming the colliding entity. Nothing is retried.
    """
    try:
        yield
    except pymongo.errors.DuplicateKeyError as e:
        logger.info(
            "mongo.write.name_collision",
            collection=collection_name,
            name=name,
            error=str(e),
        )
        raise DataValidationError(
            f"Name is not unique: {name}", details={"name": name}
        ) from e
