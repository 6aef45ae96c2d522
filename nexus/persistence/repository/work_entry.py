"""PostgreSQL implementation of WorkEntry repository."""

from typing import Any

from sqlalchemy import and_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nexus.domain.model import WorkEntry
from nexus.domain.repository import WorkEntryRepository
from nexus.domain.value import UserId, WorkEntryId
from nexus.persistence.mappers import row_to_work_entry
from nexus.persistence.tables import work_entries_table


class PostgresWorkEntryRepository(WorkEntryRepository):
    """PostgreSQL implementation of WorkEntryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> list[WorkEntry]:
        """Find a user's work entries ordered by start date."""
        stmt = (
            select(work_entries_table)
            .where(work_entries_table.c.user_id == user_id)
            .order_by(work_entries_table.c.start_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_work_entry(dict(row)) for row in result.mappings()]

    async def update_chronicle(
        self, entry_id: WorkEntryId, user_id: UserId, fields: dict[str, Any]
    ) -> bool:
        """Update chronicle columns of one of the user's work entries."""
        stmt = (
            update(work_entries_table)
            .where(
                and_(
                    work_entries_table.c.id == entry_id,
                    work_entries_table.c.user_id == user_id,
                )
            )
            .values(**fields)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
