"""Unit tests for domain error to HTTP translation."""

import pytest

from nexus.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from nexus.interface.error import to_http_exception


@pytest.mark.parametrize(
    "error,status_code",
    [
        (NotFoundError("Contact", "42"), 404),
        (ValidationError("start_date must be YYYY-MM"), 400),
        (BusinessRuleViolationError("Failed to generate unique code"), 409),
        (DomainError("unexpected"), 500),
    ],
)
def test_status_codes(error, status_code):
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == str(error)
