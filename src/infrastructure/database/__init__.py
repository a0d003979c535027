"""
Database package - Infrastructure Layer

MongoDB client wrapper, collection names and the duplicate-key translator
used by the catalog repositories.
"""

from src.infrastructure.database.mongo_database import (
    DocumentNotFoundError,
    MongoDatabase,
)
from src.infrastructure.database.name_collision import translate_name_collision

__all__ = ["DocumentNotFoundError", "MongoDatabase", "translate_name_collision"]
