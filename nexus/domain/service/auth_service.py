"""Authentication domain service."""

import logfire

from nexus.domain.value import IdentitySession

from .base import Service


class IdentityClient:
    """Hosted identity provider interface."""

    async def exchange_code(
        self, code: str, code_verifier: str | None = None
    ) -> IdentitySession:
        """Exchange an authorization code for a session.

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE verifier stored when the flow started

        Returns:
            The authenticated session

        Raises:
            IdentityProviderError: If the provider rejects the code
        """
        raise NotImplementedError

    async def update_user_metadata(
        self, access_token: str, data: dict[str, object]
    ) -> None:
        """Merge fields into the user's metadata.

        Args:
            access_token: Session token of the user being updated
            data: Metadata fields to set; None clears a field
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for authentication against the identity provider."""

    def __init__(self, identity_client: IdentityClient) -> None:
        """Initialize auth service.

        Args:
            identity_client: Identity provider client
        """
        self.identity_client = identity_client

    async def exchange_code(
        self, code: str, code_verifier: str | None = None
    ) -> IdentitySession:
        """Complete login by exchanging the callback code.

        Args:
            code: Authorization code from the callback
            code_verifier: PKCE verifier, if the flow used one

        Returns:
            The authenticated session
        """
        with logfire.span("auth_service.exchange_code", has_verifier=bool(code_verifier)):
            session = await self.identity_client.exchange_code(code, code_verifier)
            logfire.info("Authorization code exchanged", user_id=session.user_id)
            return session

    async def clear_invite_code(self, session: IdentitySession) -> None:
        """Remove the signup invite code so it is not redeemed again.

        Args:
            session: Session of the user whose metadata is cleared
        """
        with logfire.span("auth_service.clear_invite_code", user_id=session.user_id):
            await self.identity_client.update_user_metadata(
                session.access_token, {"invite_code": None}
            )
            logfire.info("Invite code cleared from metadata", user_id=session.user_id)
