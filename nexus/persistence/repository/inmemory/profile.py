"""In-memory profile repository for testing."""

from typing import Optional

from nexus.domain.model import Profile
from nexus.domain.repository import ProfileRepository
from nexus.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        self._profiles[profile.id] = profile
        return profile
