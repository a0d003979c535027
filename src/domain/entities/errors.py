"""
Domain Errors

Error taxonomy of the metadata service. Every failed operation surfaces
exactly one of these classes; the presentation layer maps each class to a
single HTTP status code.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    """A direct lookup by id or name found nothing."""

    def __init__(
        self,
        entity_type: str,
        identifier: Optional[str],
        details: Optional[Dict[str, Any]] = None,
    ):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} with id or name {identifier} not found"
        super().__init__(message, details)


class DataValidationError(DomainError):
    """A structural or association rule was violated (client correctable)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ClientError(DomainError):
    """The request payload itself is empty or cannot be parsed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class LimitExceededError(DomainError):
    """A collection listing would exceed the configured maximum."""

    def __init__(
        self, entity_type: str, limit: int, details: Optional[Dict[str, Any]] = None
    ):
        self.entity_type = entity_type
        self.limit = limit
        message = f"Max limit of {limit} exceeded requesting {entity_type} entries"
        super().__init__(message, details)


class ServiceError(DomainError):
    """Any other failure (infrastructure outage, unexpected exception)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
