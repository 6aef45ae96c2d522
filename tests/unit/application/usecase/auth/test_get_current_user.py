"""Unit tests for GetCurrentUserUseCase."""

from dishka import AsyncContainer
import pytest

from nexus.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from nexus.domain.error import NotFoundError
from nexus.domain.repository import ProfileRepository
from nexus.domain.service import JWTService
from nexus.util.jwt import JWTError
from tests.conftest import create_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_profile_for_valid_token(self, unit_env: AsyncContainer):
        # Arrange
        profile_repository = await unit_env.get(ProfileRepository)
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentUserUseCase)

        profile = await create_profile(
            profile_repository, "Ada Lovelace", headline="Analyst"
        )
        token = jwt_service.create_token(str(profile.id), profile.email)

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.user_id == str(profile.id)
        assert response.email == "ada.lovelace@example.com"
        assert response.full_name == "Ada Lovelace"
        assert response.headline == "Analyst"

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))

    @pytest.mark.asyncio
    async def test_deleted_profile_raises_not_found(self, unit_env: AsyncContainer):
        """A valid token for a user without a profile should not resolve."""
        jwt_service = await unit_env.get(JWTService)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        token = jwt_service.create_token(
            "00000000-0000-0000-0000-000000000001", "gone@example.com"
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(token=token))
