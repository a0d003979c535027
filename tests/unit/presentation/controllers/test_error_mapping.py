from __future__ import annotations

import pytest
from fastapi import HTTPException

from src.domain.entities.errors import (
    ClientError,
    DataValidationError,
    LimitExceededError,
    NotFoundError,
    ServiceError,
)
from src.presentation.controllers.errors import domain_errors, status_for


@pytest.mark.parametrize(
    "error, status_code",
    [
        (NotFoundError("Device", "D1"), 404),
        (DataValidationError("Name is not unique: D1"), 409),
        (LimitExceededError("Device", 100), 413),
        (ClientError("Empty document"), 400),
        (ServiceError("mongo unreachable"), 503),
    ],
)
def test_status_for_each_error_class(error, status_code) -> None:
    assert status_for(error) == status_code


def test_domain_error_becomes_http_error_with_message() -> None:
    with pytest.raises(HTTPException) as exc:
        with domain_errors("device.get", name="D1"):
            raise NotFoundError("Device", "D1")

    assert exc.value.status_code == 404
    assert exc.value.detail == "Device with id or name D1 not found"
    assert isinstance(exc.value.__cause__, NotFoundError)


def test_unexpected_error_is_reported_as_unavailable() -> None:
    with pytest.raises(HTTPException) as exc:
        with domain_errors("device.list"):
            raise RuntimeError("boom")

    assert exc.value.status_code == 503
    assert exc.value.detail == "Service unavailable"


def test_http_errors_pass_through() -> None:
    with pytest.raises(HTTPException) as exc:
        with domain_errors("device.list"):
            raise HTTPException(status_code=418, detail="teapot")

    assert exc.value.status_code == 418


def test_no_error_leaves_block_result_alone() -> None:
    with domain_errors("device.list"):
        result = 1 + 1
    assert result == 2
