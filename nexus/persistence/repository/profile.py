"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nexus.domain.model import Profile
from nexus.domain.repository import ProfileRepository
from nexus.domain.value import UserId
from nexus.persistence.mappers import profile_to_dict, row_to_profile
from nexus.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == user_id).limit(1)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        profile_dict = profile_to_dict(profile)

        existing = await self.find_by_id(profile.id)
        if existing:
            stmt = (
                update(profiles_table)
                .where(profiles_table.c.id == profile.id)
                .values(**profile_dict)
            )
        else:
            stmt = insert(profiles_table).values(**profile_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return profile
