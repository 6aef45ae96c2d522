"""Auth callback use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from nexus.adapter.error import AdapterError
from nexus.config import Settings
from nexus.domain.service import (
    AuthService,
    ConnectionService,
    JWTService,
    ProfileService,
)
from nexus.domain.value import RedemptionOutcome, UserId

DEFAULT_NEXT = "/dashboard"
FAILURE_PATH = "/login?error=auth_callback_failed"


class HandleCallbackRequest(BaseModel):
    """Callback parameters from the identity provider redirect."""

    code: str | None = None
    next: str | None = None
    code_verifier: str | None = None  # PKCE verifier cookie


class HandleCallbackResponse(BaseModel):
    """Where to send the browser, and the session token if login succeeded."""

    redirect_url: str
    token: str | None = None
    user_id: str | None = None
    redemption: RedemptionOutcome | None = None


def safe_next_path(next_path: str | None) -> str:
    """Return ``next_path`` if it is a same-site relative path, else the default.

    Rejects absolute URLs and protocol-relative ``//host`` paths.
    """
    if not next_path or not next_path.startswith("/") or next_path.startswith("//"):
        return DEFAULT_NEXT
    if "\\" in next_path:
        return DEFAULT_NEXT
    return next_path


class HandleCallbackUseCase:
    """Use case for completing login after the identity provider redirect."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
        connection_service: ConnectionService,
        settings: Settings,
    ) -> None:
        """Initialize callback use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
            profile_service: Profile domain service
            connection_service: Connection domain service
            settings: Application settings
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.profile_service = profile_service
        self.connection_service = connection_service
        self.settings = settings

    async def execute(self, request: HandleCallbackRequest) -> HandleCallbackResponse:
        """Execute the callback flow.

        Steps:
        1. Exchange the code for a session
        2. Ensure the user has a profile
        3. Redeem the signup invite code, if any, and clear it
        4. Issue a JWT and redirect to ``next``

        An invite that cannot be redeemed never blocks the login.

        Args:
            request: Callback parameters

        Returns:
            Redirect target, plus the token on success
        """
        frontend = self.settings.api.frontend_url
        failure = HandleCallbackResponse(redirect_url=f"{frontend}{FAILURE_PATH}")

        if not request.code:
            logfire.warn("Auth callback without code")
            return failure

        with logfire.span("handle_callback.execute"):
            try:
                session = await self.auth_service.exchange_code(
                    request.code, request.code_verifier
                )
            except AdapterError as e:
                logfire.error("Auth code exchange failed", error=str(e))
                return failure

            profile = await self.profile_service.ensure_profile(session)

            redemption = None
            invite_code = session.invite_code
            if invite_code:
                result = await self.connection_service.redeem_invite(
                    UserId(UUID(session.user_id)), invite_code
                )
                redemption = result.outcome
                if not result.ok:
                    logfire.warn(
                        "Signup invite not redeemed",
                        user_id=session.user_id,
                        outcome=result.outcome.value,
                    )

                try:
                    await self.auth_service.clear_invite_code(session)
                except AdapterError as e:
                    logfire.error(
                        "Failed to clear signup invite code",
                        user_id=session.user_id,
                        error=str(e),
                    )

            token = self.jwt_service.create_token(str(profile.id), profile.email)
            logfire.info(
                "Login completed",
                user_id=str(profile.id),
                redemption=redemption.value if redemption else None,
            )

            return HandleCallbackResponse(
                redirect_url=f"{frontend}{safe_next_path(request.next)}",
                token=token,
                user_id=str(profile.id),
                redemption=redemption,
            )
