"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from nexus.application.usecase.auth import GetCurrentUserUseCase, HandleCallbackUseCase
from nexus.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from nexus.application.usecase.auth.handle_callback import HandleCallbackRequest
from nexus.config import Settings
from nexus.domain.error import NotFoundError
from nexus.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _cookie_options(settings: Settings) -> dict:
    # Production (cross-subdomain) needs samesite="none", which requires secure
    is_production = settings.environment == "production"
    return {
        "domain": settings.auth.cookie_domain,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
    }


@router.get("/callback")
async def auth_callback(
    handle_callback_use_case: FromDishka[HandleCallbackUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    next_path: str | None = Query(default=None, alias="next"),
    code_verifier: str | None = Cookie(default=None),
):
    """Complete login after the identity provider redirect.

    Exchanges the code, makes sure the user has a profile, redeems a
    signup invite code if one was stored, then sets the auth cookie and
    redirects to ``next`` on the frontend.

    Args:
        handle_callback_use_case: Callback use case from DI
        settings: Application settings from DI
        code: Authorization code
        next_path: Relative frontend path to land on (default /dashboard)
        code_verifier: PKCE verifier cookie set when login started

    Returns:
        HTTP 302 redirect to the frontend, with Set-Cookie on success

    Example:
        GET /auth/callback?code=abc123&next=/contacts

        Redirects to: http://localhost:3000/contacts
        Sets cookie: auth_token
    """
    logger.info(f"Auth callback received: has_code={bool(code)}, next={next_path}")

    result = await handle_callback_use_case.execute(
        HandleCallbackRequest(code=code, next=next_path, code_verifier=code_verifier)
    )

    # Cookies must be set on the returned response object itself
    redirect_response = RedirectResponse(
        url=result.redirect_url,
        status_code=status.HTTP_302_FOUND,
    )

    if result.token is None:
        logger.warning(f"Auth callback failed, redirecting to: {result.redirect_url}")
        return redirect_response

    redirect_response.set_cookie(
        key=settings.auth.cookie_name,
        value=result.token,
        httponly=True,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        **_cookie_options(settings),
    )
    if code_verifier:
        redirect_response.delete_cookie(key="code_verifier", path="/")

    logger.info(
        f"Login complete for user {result.user_id}, "
        f"redemption={result.redemption.value if result.redemption else None}, "
        f"redirecting to: {result.redirect_url}"
    )
    return redirect_response


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie.

    Args:
        response: FastAPI response object
        settings: Application settings from DI

    Returns:
        Logout success message
    """
    # Delete cookie with same domain/path as when it was created
    response.delete_cookie(
        key=settings.auth.cookie_name,
        domain=settings.auth.cookie_domain,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication: returns ``authenticated=false``
    instead of raising.

    Args:
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Authentication status with user information if authenticated
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but profile gone (orphaned token)
        return AuthStatusResponse(authenticated=False)
