"""Unit tests for HandleCallbackUseCase."""

from uuid import UUID

from dishka import AsyncContainer
import pytest

from nexus.adapter.identity import MockIdentityClient
from nexus.application.usecase.auth.handle_callback import (
    DEFAULT_NEXT,
    FAILURE_PATH,
    HandleCallbackRequest,
    HandleCallbackUseCase,
    safe_next_path,
)
from nexus.config import Settings
from nexus.domain.repository import ContactRepository, ProfileRepository
from nexus.domain.service import (
    ConnectionService,
    IdentityClient,
    JWTService,
)
from nexus.domain.value import ConnectionStatus, RedemptionOutcome, UserId
from tests.conftest import create_contact, create_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSafeNextPath:
    """Tests for the post-login redirect guard."""

    @pytest.mark.parametrize(
        "next_path,expected",
        [
            (None, DEFAULT_NEXT),
            ("", DEFAULT_NEXT),
            ("/contacts/42", "/contacts/42"),
            ("/chronicle?view=canvas", "/chronicle?view=canvas"),
            ("https://evil.example.com", DEFAULT_NEXT),
            ("//evil.example.com/path", DEFAULT_NEXT),
            ("/\\evil.example.com", DEFAULT_NEXT),
            ("contacts", DEFAULT_NEXT),
        ],
    )
    def test_only_relative_paths_are_kept(self, next_path, expected):
        assert safe_next_path(next_path) == expected


class TestHandleCallbackUseCase:
    """Tests for HandleCallbackUseCase."""

    @pytest.mark.asyncio
    async def test_missing_code_redirects_to_login_error(self, unit_env: AsyncContainer):
        """A callback without a code should fail without calling the provider."""
        # Arrange
        use_case = await unit_env.get(HandleCallbackUseCase)
        settings = await unit_env.get(Settings)

        # Act
        response = await use_case.execute(HandleCallbackRequest(code=None))

        # Assert
        assert response.redirect_url == f"{settings.api.frontend_url}{FAILURE_PATH}"
        assert response.token is None

    @pytest.mark.asyncio
    async def test_rejected_code_redirects_to_login_error(self, unit_env: AsyncContainer):
        """A code the provider rejects should fail the login."""
        use_case = await unit_env.get(HandleCallbackUseCase)
        settings = await unit_env.get(Settings)

        response = await use_case.execute(
            HandleCallbackRequest(code=MockIdentityClient.INVALID_CODE)
        )

        assert response.redirect_url == f"{settings.api.frontend_url}{FAILURE_PATH}"
        assert response.token is None

    @pytest.mark.asyncio
    async def test_first_login_creates_profile_and_issues_token(
        self, unit_env: AsyncContainer
    ):
        """A first login should create the profile and redirect to the default page."""
        # Arrange
        use_case = await unit_env.get(HandleCallbackUseCase)
        jwt_service = await unit_env.get(JWTService)
        profile_repository = await unit_env.get(ProfileRepository)
        settings = await unit_env.get(Settings)

        # Act
        response = await use_case.execute(HandleCallbackRequest(code="ada"))

        # Assert
        expected_user_id = MockIdentityClient.user_id_for("ada")
        assert response.redirect_url == f"{settings.api.frontend_url}{DEFAULT_NEXT}"
        assert response.user_id == expected_user_id
        assert response.redemption is None
        assert jwt_service.verify_token(response.token).user_id == expected_user_id

        profile = await profile_repository.find_by_id(UserId(UUID(response.user_id)))
        assert profile is not None
        assert profile.email == "ada@example.com"
        assert profile.full_name == "ada"

    @pytest.mark.asyncio
    async def test_repeat_login_keeps_existing_profile(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(HandleCallbackUseCase)

        first = await use_case.execute(HandleCallbackRequest(code="ada"))
        second = await use_case.execute(
            HandleCallbackRequest(code="ada", next="/contacts")
        )

        assert first.user_id == second.user_id
        assert second.redirect_url.endswith("/contacts")

    @pytest.mark.asyncio
    async def test_signup_invite_is_redeemed_and_cleared(self, unit_env: AsyncContainer):
        """An invite code from signup metadata should connect both users."""
        # Arrange
        use_case = await unit_env.get(HandleCallbackUseCase)
        identity_client = await unit_env.get(IdentityClient)
        connection_service = await unit_env.get(ConnectionService)
        profile_repository = await unit_env.get(ProfileRepository)
        contact_repository = await unit_env.get(ContactRepository)

        inviter = await create_profile(profile_repository, "Grace Hopper")
        placeholder = await create_contact(contact_repository, inviter.id, "Ada")
        code = await connection_service.create_invite(inviter.id, placeholder.id)
        identity_client.metadata["ada"] = {"invite_code": f"  {code.lower()} "}

        # Act
        response = await use_case.execute(HandleCallbackRequest(code="ada"))

        # Assert
        assert response.token is not None
        assert response.redemption == RedemptionOutcome.OK
        assert identity_client.updates == [("mock-access-ada", {"invite_code": None})]

        connections = await connection_service.list_connections(inviter.id)
        assert len(connections) == 1
        assert connections[0].status == ConnectionStatus.ACCEPTED
        assert str(connections[0].invitee_id) == response.user_id

    @pytest.mark.asyncio
    async def test_unusable_invite_does_not_block_login(self, unit_env: AsyncContainer):
        """A bad signup code should still log the user in and be cleared."""
        use_case = await unit_env.get(HandleCallbackUseCase)
        identity_client = await unit_env.get(IdentityClient)
        identity_client.metadata["ada"] = {"invite_code": "NEXUS-ZZZZZZ"}

        response = await use_case.execute(HandleCallbackRequest(code="ada"))

        assert response.token is not None
        assert response.redemption == RedemptionOutcome.NOT_FOUND
        assert len(identity_client.updates) == 1
