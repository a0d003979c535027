"""
MongoDB Database - Infrastructure Layer

This module provides a MongoDB database client for interacting with MongoDB.
It handles connection, collections, indexes and basic CRUD operations.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pymongo
import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger

logger = get_logger(__name__)

ADDRESSABLES = "addressables"
DEVICE_SERVICES = "device_services"
DEVICE_PROFILES = "device_profiles"
COMMANDS = "commands"
DEVICES = "devices"
DEVICE_MANAGERS = "device_managers"
SCHEDULES = "schedules"
SCHEDULE_EVENTS = "schedule_events"
DEVICE_REPORTS = "device_reports"
PROVISION_WATCHERS = "provision_watchers"

# Commands are only unique per owning profile.
NAME_UNIQUE_COLLECTIONS: Tuple[str, ...] = (
    ADDRESSABLES,
    DEVICE_SERVICES,
    DEVICE_PROFILES,
    DEVICES,
    DEVICE_MANAGERS,
    SCHEDULES,
    SCHEDULE_EVENTS,
    DEVICE_REPORTS,
    PROVISION_WATCHERS,
)

# Lookup indexes backing the association checks.
REFERENCE_INDEXES: Dict[str, Tuple[str, ...]] = {
    DEVICE_SERVICES: ("addressable_id",),
    DEVICE_PROFILES: ("command_ids", "labels"),
    COMMANDS: ("id", "name"),
    DEVICES: ("addressable_id", "service_id", "profile_id", "labels"),
    DEVICE_MANAGERS: ("addressable_id", "service_id", "profile_id", "labels"),
    SCHEDULE_EVENTS: ("schedule", "addressable_id", "service"),
    DEVICE_REPORTS: ("device", "event"),
    PROVISION_WATCHERS: ("service_id", "profile_id"),
}


class DocumentNotFoundError(Exception):
    """No document matched a replace or delete."""


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Find a single document in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents

        Returns:
            The document if found, None otherwise
        """
        return await asyncio.to_thread(self.db[collection_name].find_one, query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = 1,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: Sort direction (1 for ascending, -1 for descending)
            skip: Number of documents to skip
            limit: Maximum number of documents to return, 0 for no limit

        Returns:
            List of documents
        """
        def fetch() -> List[Dict[str, Any]]:
            cursor = self.db[collection_name].find(query)

            if sort_by:
                cursor = cursor.sort(sort_by, sort_direction)

            cursor = cursor.skip(skip).limit(limit)

            return list(cursor)

        return await asyncio.to_thread(fetch)

    async def exists(self, collection_name: str, query: Dict[str, Any]) -> bool:
        """Tell whether at least one document matches, fetching only its key."""
        found = await asyncio.to_thread(
            self.db[collection_name].find_one, query, projection={"_id": 1}
        )
        return found is not None

    async def count(
        self, collection_name: str, query: Optional[Dict[str, Any]] = None
    ) -> int:
        return await asyncio.to_thread(
            self.db[collection_name].count_documents, query or {}
        )

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Returns:
            The inserted document with any generated fields

        Raises:
            pymongo.errors.DuplicateKeyError: If a unique index is violated
            pymongo.errors.PyMongoError: If the insert fails
        """
        result = await asyncio.to_thread(self.db[collection_name].insert_one, document)
        if not result.acknowledged:
            raise pymongo.errors.OperationFailure(
                f"Failed to insert document in {collection_name}"
            )
        return document

    async def replace_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace a document in a collection.

        Raises:
            DocumentNotFoundError: If no document matches the query
            pymongo.errors.DuplicateKeyError: If a unique index is violated
        """
        result = await asyncio.to_thread(
            self.db[collection_name].replace_one, query, document
        )
        if result.matched_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> None:
        """
        Delete a document from a collection.

        Raises:
            DocumentNotFoundError: If no document matches the query
        """
        result = await asyncio.to_thread(self.db[collection_name].delete_one, query)
        if result.deleted_count == 0:
            raise DocumentNotFoundError(f"Document not found in {collection_name}")

    async def delete_many(self, collection_name: str, query: Dict[str, Any]) -> int:
        """Delete every matching document and return how many were removed."""
        result = await asyncio.to_thread(self.db[collection_name].delete_many, query)
        return result.deleted_count

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    def _safe_drop_index(self, collection_name: str, index_name: str) -> None:
        """
        Safely drop an index if it exists.

        Args:
            collection_name: Name of the collection
            index_name: Name of the index to drop
        """
        try:
            self.db[collection_name].drop_index(index_name)
        except pymongo.errors.OperationFailure:
            # Index doesn't exist, nothing to do
            pass

    async def create_indexes(self) -> None:
        """
        Create the unique name indexes and the reference lookup indexes.
        Called during application startup.
        """
        for collection_name in NAME_UNIQUE_COLLECTIONS:
            try:
                self.db[collection_name].create_index(
                    [("name", pymongo.ASCENDING)], name="name_unique_idx", unique=True
                )
                self.db[collection_name].create_index("id", name="id_idx", unique=True)
            except pymongo.errors.OperationFailure as e:
                logger.warning(
                    "mongo.indexes.unique_failed",
                    collection=collection_name,
                    error=str(e),
                )

        self._safe_drop_index(COMMANDS, "name_unique_idx")
        for collection_name, fields in REFERENCE_INDEXES.items():
            for field in fields:
                try:
                    self.db[collection_name].create_index(
                        field, name=f"{field}_idx", background=True
                    )
                except pymongo.errors.OperationFailure as e:
                    logger.warning(
                        "mongo.indexes.reference_failed",
                        collection=collection_name,
                        field=field,
                        error=str(e),
                    )

        logger.info("mongo.indexes.created")
