"""Unit tests for the auth cookie check shared by protected routes."""

from fastapi import HTTPException
import pytest

from nexus.config import AuthSettings
from nexus.domain.service import JWTService
from nexus.interface.api.dependencies import require_user_id


@pytest.fixture
def jwt_service():
    settings = AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef")
    return JWTService(auth_settings=settings)


class TestRequireUserId:
    """Tests for require_user_id."""

    def test_valid_token_yields_user_id(self, jwt_service):
        token = jwt_service.create_token("user-123", "ada@example.com")

        assert require_user_id(jwt_service, token) == "user-123"

    def test_missing_cookie_is_401(self, jwt_service):
        with pytest.raises(HTTPException) as exc_info:
            require_user_id(jwt_service, None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Not authenticated"

    def test_token_signed_with_other_secret_is_401(self, jwt_service):
        other_settings = AuthSettings(jwt_secret="other-test-secret-0123456789abcdef")
        other = JWTService(auth_settings=other_settings)
        token = other.create_token("user-123", "ada@example.com")

        with pytest.raises(HTTPException) as exc_info:
            require_user_id(jwt_service, token)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid token"
