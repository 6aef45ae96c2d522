"""PostgreSQL implementation of Chronicle repository."""

from typing import Any, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nexus.domain.model import ChronicleEntry, ChroniclePlace
from nexus.domain.repository import ChronicleRepository
from nexus.domain.value import ChronicleEntryId, ChroniclePlaceId, UserId
from nexus.persistence.mappers import (
    chronicle_entry_to_dict,
    chronicle_place_to_dict,
    row_to_chronicle_entry,
    row_to_chronicle_place,
)
from nexus.persistence.tables import chronicle_entries_table, chronicle_places_table

entries = chronicle_entries_table
places = chronicle_places_table


class PostgresChronicleRepository(ChronicleRepository):
    """PostgreSQL implementation of ChronicleRepository.

    Every statement filters on ``user_id`` as well as the row id.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_entries(self, user_id: UserId) -> list[ChronicleEntry]:
        """Find a user's entries ordered by start date."""
        stmt = (
            select(entries)
            .where(entries.c.user_id == user_id)
            .order_by(entries.c.start_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_chronicle_entry(dict(row)) for row in result.mappings()]

    async def find_entry(
        self, entry_id: ChronicleEntryId, user_id: UserId
    ) -> Optional[ChronicleEntry]:
        """Find one of the user's entries."""
        stmt = select(entries).where(
            and_(entries.c.id == entry_id, entries.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_chronicle_entry(dict(row)) if row else None

    async def save_entry(self, entry: ChronicleEntry) -> ChronicleEntry:
        """Save an entry (create or update)."""
        entry_dict = chronicle_entry_to_dict(entry)

        existing = await self.find_entry(entry.id, entry.user_id)
        if existing:
            stmt = (
                update(entries)
                .where(
                    and_(entries.c.id == entry.id, entries.c.user_id == entry.user_id)
                )
                .values(**entry_dict)
            )
        else:
            stmt = insert(entries).values(**entry_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return entry

    async def update_entry_dates(
        self,
        entry_id: ChronicleEntryId,
        user_id: UserId,
        start_date: str,
        end_date: str | None,
    ) -> bool:
        """Move or resize an entry."""
        stmt = (
            update(entries)
            .where(and_(entries.c.id == entry_id, entries.c.user_id == user_id))
            .values(start_date=start_date, end_date=end_date, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_entry(self, entry_id: ChronicleEntryId, user_id: UserId) -> bool:
        """Delete an entry."""
        stmt = delete(entries).where(
            and_(entries.c.id == entry_id, entries.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_places(self, user_id: UserId) -> list[ChroniclePlace]:
        """Find a user's places ordered by start date."""
        stmt = (
            select(places)
            .where(places.c.user_id == user_id)
            .order_by(places.c.start_date)
        )
        result = await self.session.execute(stmt)
        return [row_to_chronicle_place(dict(row)) for row in result.mappings()]

    async def find_place(
        self, place_id: ChroniclePlaceId, user_id: UserId
    ) -> Optional[ChroniclePlace]:
        """Find one of the user's places."""
        stmt = select(places).where(
            and_(places.c.id == place_id, places.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_chronicle_place(dict(row)) if row else None

    async def insert_place(self, place: ChroniclePlace) -> ChroniclePlace:
        """Insert a new place."""
        stmt = insert(places).values(**chronicle_place_to_dict(place))
        await self.session.execute(stmt)
        await self.session.flush()
        return place

    async def update_place(
        self, place_id: ChroniclePlaceId, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[ChroniclePlace]:
        """Write only the given columns of a place."""
        stmt = (
            update(places)
            .where(and_(places.c.id == place_id, places.c.user_id == user_id))
            .values(**fields)
            .returning(*places.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_chronicle_place(dict(row)) if row else None

    async def delete_place(self, place_id: ChroniclePlaceId, user_id: UserId) -> bool:
        """Delete a place."""
        stmt = delete(places).where(
            and_(places.c.id == place_id, places.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
