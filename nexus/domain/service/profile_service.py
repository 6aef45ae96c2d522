"""Profile domain service."""

from datetime import datetime
from uuid import UUID

import logfire

from nexus.domain.model import Profile
from nexus.domain.repository import ProfileRepository
from nexus.domain.value import IdentitySession, UserId

from .base import Service


def default_full_name(email: str) -> str:
    """Name used when signup metadata has none: the email's local part."""
    return email.split("@", 1)[0]


def make_slug(full_name: str, user_id: UserId) -> str:
    """Public URL slug: dashed lower-case name plus the id's first 8 chars."""
    return f"{full_name.lower().replace(' ', '-')}-{str(user_id)[:8]}"


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, user_id: UserId) -> Profile | None:
        """Get a profile by user ID.

        Args:
            user_id: User ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_by_id", user_id=str(user_id)):
            return await self.profile_repository.find_by_id(user_id)

    async def ensure_profile(self, session: IdentitySession) -> Profile:
        """Return the session user's profile, creating it on first login.

        Args:
            session: Authenticated identity session

        Returns:
            The existing or newly created profile
        """
        user_id = UserId(UUID(session.user_id))
        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            existing = await self.profile_repository.find_by_id(user_id)
            if existing:
                return existing

            full_name = session.full_name or default_full_name(session.email)
            now = datetime.now()
            profile = Profile(
                id=user_id,
                email=session.email,
                full_name=full_name,
                slug=make_slug(full_name, user_id),
                created_at=now,
                updated_at=now,
            )
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile created", user_id=str(user_id))
            return saved
