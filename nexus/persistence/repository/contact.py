"""PostgreSQL implementation of Contact repository."""

from typing import Any, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from nexus.domain.model import Contact
from nexus.domain.repository import ContactRepository
from nexus.domain.value import ContactId, UserId
from nexus.persistence.mappers import contact_to_dict, row_to_contact
from nexus.persistence.tables import contacts_table


class PostgresContactRepository(ContactRepository):
    """PostgreSQL implementation of ContactRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        """Find a contact by ID."""
        stmt = select(contacts_table).where(contacts_table.c.id == contact_id).limit(1)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_contact(dict(row)) if row else None

    async def find_by_owner_and_linked_profile(
        self, owner_id: UserId, linked_profile_id: UserId
    ) -> Optional[Contact]:
        """Find the owner's card linked to a profile."""
        stmt = (
            select(contacts_table)
            .where(
                and_(
                    contacts_table.c.owner_id == owner_id,
                    contacts_table.c.linked_profile_id == linked_profile_id,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_contact(dict(row)) if row else None

    async def link_profile(
        self, contact_id: ContactId, linked_profile_id: UserId
    ) -> None:
        """Link an existing card to a profile."""
        stmt = (
            update(contacts_table)
            .where(contacts_table.c.id == contact_id)
            .values(linked_profile_id=linked_profile_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def insert_if_absent(self, contact: Contact) -> Contact:
        """Insert a linked card unless its natural key is taken.

        Uses ``ON CONFLICT DO NOTHING`` against the partial unique index on
        ``(owner_id, linked_profile_id)``, then reads back whichever card
        holds the key.
        """
        stmt = (
            pg_insert(contacts_table)
            .values(**contact_to_dict(contact))
            .on_conflict_do_nothing(
                index_elements=[
                    contacts_table.c.owner_id,
                    contacts_table.c.linked_profile_id,
                ],
                index_where=contacts_table.c.linked_profile_id.isnot(None),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

        stored = await self.find_by_owner_and_linked_profile(
            contact.owner_id, contact.linked_profile_id
        )
        return stored if stored else contact

    async def save(self, contact: Contact) -> Contact:
        """Save a contact (create or update)."""
        contact_dict = contact_to_dict(contact)

        existing = await self.find_by_id(contact.id)
        if existing:
            stmt = (
                update(contacts_table)
                .where(contacts_table.c.id == contact.id)
                .values(**contact_dict)
            )
        else:
            stmt = insert(contacts_table).values(**contact_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return contact

    async def find_on_chronicle(self, owner_id: UserId) -> list[Contact]:
        """Find the owner's chronicle contacts ordered by name."""
        stmt = (
            select(contacts_table)
            .where(
                and_(
                    contacts_table.c.owner_id == owner_id,
                    contacts_table.c.show_on_chronicle.is_(True),
                )
            )
            .order_by(contacts_table.c.full_name)
        )
        result = await self.session.execute(stmt)
        return [row_to_contact(dict(row)) for row in result.mappings()]

    async def update_chronicle(
        self, contact_id: ContactId, owner_id: UserId, fields: dict[str, Any]
    ) -> bool:
        """Update chronicle columns of one of the owner's contacts."""
        stmt = (
            update(contacts_table)
            .where(
                and_(
                    contacts_table.c.id == contact_id,
                    contacts_table.c.owner_id == owner_id,
                )
            )
            .values(**fields)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
