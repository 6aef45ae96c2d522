"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from nexus.domain.error import NotFoundError
from nexus.domain.service import JWTService, ProfileService
from nexus.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    full_name: str
    slug: str | None
    avatar_url: str | None
    headline: str | None
    location: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user's profile."""

    def __init__(self, jwt_service: JWTService, profile_service: ProfileService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Resolve the token to a profile.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the profile no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)

        profile = await self.profile_service.get_by_id(UserId(UUID(payload.user_id)))
        if profile is None:
            raise NotFoundError("Profile", payload.user_id)

        return GetCurrentUserResponse(
            user_id=str(profile.id),
            email=profile.email,
            full_name=profile.full_name,
            slug=profile.slug,
            avatar_url=profile.avatar_url,
            headline=profile.headline,
            location=profile.location,
            created_at=profile.created_at,
        )
