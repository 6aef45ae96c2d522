"""Shared request helpers for routes."""

from fastapi import HTTPException, status

from nexus.domain.service import JWTService
from nexus.util.jwt import JWTError


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the caller's user id from the auth cookie.

    Args:
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        Authenticated user id

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(auth_token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return payload.user_id
