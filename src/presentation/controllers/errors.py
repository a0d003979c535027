"""
Error mapping - Presentation Layer

Translates domain errors into HTTP errors. Each error class maps to exactly
one status code; anything unanticipated is logged with its cause and
reported as 503.
"""

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, status

from src.domain.entities.errors import (
    ClientError,
    DataValidationError,
    DomainError,
    LimitExceededError,
    NotFoundError,
)
from src.shared import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DataValidationError, status.HTTP_409_CONFLICT),
    (LimitExceededError, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE),
    (ClientError, status.HTTP_400_BAD_REQUEST),
)


def status_for(error: DomainError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_503_SERVICE_UNAVAILABLE


@contextmanager
def domain_errors(operation: str, **context) -> Iterator[None]:
    """Raise the HTTP error matching a domain error raised in the block."""
    try:
        yield
    except HTTPException:
        raise
    except DomainError as e:
        status_code = status_for(e)
        if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
            logger.error(
                f"{operation}.failed", error=e.message, exc_info=e, **context
            )
        else:
            logger.info(
                f"{operation}.rejected",
                status_code=status_code,
                error=e.message,
                **context,
            )
        raise HTTPException(status_code=status_code, detail=e.message) from e
    except Exception as e:
        logger.error(f"{operation}.failed", error=str(e), exc_info=e, **context)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unavailable",
        ) from e
