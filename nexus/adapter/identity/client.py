"""GoTrue identity provider client.

Exchanges PKCE authorization codes for sessions and updates user
metadata over the provider's REST API.
"""

from typing import Any
from uuid import NAMESPACE_URL, uuid5

import httpx
import logfire

from nexus.adapter.error import IdentityProviderError
from nexus.domain.service.auth_service import IdentityClient
from nexus.domain.value import IdentitySession


class RealIdentityClient(IdentityClient):
    """GoTrue REST client."""

    def __init__(self, base_url: str, anon_key: str, timeout: float = 30.0) -> None:
        """Initialize identity client.

        Args:
            base_url: Identity provider URL (without ``/auth/v1``)
            anon_key: Public API key sent with every request
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout

        self.token_url = f"{self.base_url}/auth/v1/token"
        self.user_url = f"{self.base_url}/auth/v1/user"

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
            IdentityProviderError: If the exchange fails
        """
        body: dict[str, Any] = {"auth_code": code}
        if code_verifier:
            body["code_verifier"] = code_verifier

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    params={"grant_type": "pkce"},
                    json=body,
                    headers={"apikey": self.anon_key},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Identity provider HTTP error", error=str(e))
            raise IdentityProviderError(f"HTTP error during code exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Code exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityProviderError(
                f"Code exchange failed: {response.status_code}"
            )

        result = response.json()
        user = result.get("user") or {}
        if not user.get("id") or not result.get("access_token"):
            raise IdentityProviderError("Code exchange returned no user session")

        return IdentitySession(
            user_id=user["id"],
            email=user.get("email") or "",
            access_token=result["access_token"],
            user_metadata=user.get("user_metadata") or {},
        )

    async def update_user_metadata(
        self, access_token: str, data: dict[str, object]
    ) -> None:
        """Merge fields into the user's metadata.

        Raises:
            IdentityProviderError: If the update fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.put(
                    self.user_url,
                    json={"data": data},
                    headers={
                        "apikey": self.anon_key,
                        "Authorization": f"Bearer {access_token}",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Identity provider HTTP error", error=str(e))
            raise IdentityProviderError(f"HTTP error updating user: {e}")

        if response.status_code != 200:
            logfire.error(
                "User metadata update failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityProviderError(
                f"User metadata update failed: {response.status_code}"
            )


class MockIdentityClient(IdentityClient):
    """Mock identity client for testing.

    Every code maps to a deterministic user; the code ``invalid`` is
    rejected. Metadata can be preset per code and updates are recorded.
    """

    INVALID_CODE = "invalid"

    def __init__(self) -> None:
        self.metadata: dict[str, dict[str, Any]] = {}
        self.updates: list[tuple[str, dict[str, object]]] = []

    @staticmethod
    def user_id_for(code: str) -> str:
        """User id the mock issues for a code."""
        return str(uuid5(NAMESPACE_URL, f"mock-identity:{code}"))

    async def exchange_code(
        self, code: str, code_verifier: str | None = None
    ) -> IdentitySession:
        """Return a session for the code."""
        if code == self.INVALID_CODE:
            raise IdentityProviderError("Code exchange failed: 400")
        return IdentitySession(
            user_id=self.user_id_for(code),
            email=f"{code}@example.com",
            access_token=f"mock-access-{code}",
            user_metadata=dict(self.metadata.get(code, {})),
        )

    async def update_user_metadata(
        self, access_token: str, data: dict[str, object]
    ) -> None:
        """Record the update."""
        self.updates.append((access_token, data))
