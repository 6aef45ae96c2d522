"""PostgreSQL implementation of Connection repository."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nexus.domain.error import DuplicateInviteCodeError
from nexus.domain.model import Connection
from nexus.domain.repository import ConnectionRepository
from nexus.domain.value import (
    ConnectionId,
    ConnectionStatus,
    ContactId,
    InviteCode,
    UserId,
)
from nexus.persistence.mappers import connection_to_dict, row_to_connection
from nexus.persistence.tables import connections_table

PENDING = ConnectionStatus.PENDING.value
ACCEPTED = ConnectionStatus.ACCEPTED.value


class PostgresConnectionRepository(ConnectionRepository):
    """PostgreSQL implementation of ConnectionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block in a savepoint of the request transaction.

        Repositories of one request share the session, so contact and profile
        writes inside the block are covered too. On error only the savepoint
        is rolled back and the request transaction stays usable.
        """
        async with self.session.begin_nested():
            yield

    async def find_pending_by_code(self, code: InviteCode) -> Optional[Connection]:
        """Find the pending connection holding an invite code."""
        stmt = (
            select(connections_table)
            .where(
                and_(
                    connections_table.c.invite_code == code.root,
                    connections_table.c.status == PENDING,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_connection(dict(row)) if row else None

    async def find_pending_by_inviter_and_contact(
        self, inviter_id: UserId, contact_id: ContactId
    ) -> Optional[Connection]:
        """Find a pending invite already issued for a contact."""
        stmt = (
            select(connections_table)
            .where(
                and_(
                    connections_table.c.inviter_id == inviter_id,
                    connections_table.c.contact_id == contact_id,
                    connections_table.c.status == PENDING,
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_connection(dict(row)) if row else None

    async def exists_accepted_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for an accepted connection between two users, either direction."""
        stmt = (
            select(connections_table.c.id)
            .where(
                and_(
                    connections_table.c.status == ACCEPTED,
                    or_(
                        and_(
                            connections_table.c.inviter_id == user_a,
                            connections_table.c.invitee_id == user_b,
                        ),
                        and_(
                            connections_table.c.inviter_id == user_b,
                            connections_table.c.invitee_id == user_a,
                        ),
                    ),
                )
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def insert(self, connection: Connection) -> Connection:
        """Insert a new pending connection.

        The insert runs in a savepoint so a code collision leaves the
        request transaction usable for the next attempt.

        Raises:
            DuplicateInviteCodeError: If the invite code is already taken
        """
        stmt = insert(connections_table).values(**connection_to_dict(connection))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise DuplicateInviteCodeError(connection.invite_code.root) from e
        return connection

    async def mark_accepted(
        self,
        connection_id: ConnectionId,
        invitee_id: UserId,
        contact_id: ContactId | None,
        accepted_at: datetime,
    ) -> bool:
        """Accept a connection if it is still pending."""
        values = {
            "invitee_id": invitee_id,
            "status": ACCEPTED,
            "accepted_at": accepted_at,
        }
        if contact_id is not None:
            values["contact_id"] = contact_id

        stmt = (
            update(connections_table)
            .where(
                and_(
                    connections_table.c.id == connection_id,
                    connections_table.c.status == PENDING,
                )
            )
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def find_accepted_for_user(self, user_id: UserId) -> list[Connection]:
        """Find accepted connections on either side of a user."""
        stmt = (
            select(connections_table)
            .where(
                and_(
                    connections_table.c.status == ACCEPTED,
                    or_(
                        connections_table.c.inviter_id == user_id,
                        connections_table.c.invitee_id == user_id,
                    ),
                )
            )
            .order_by(connections_table.c.accepted_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_connection(dict(row)) for row in result.mappings()]

    async def find_pending_by_inviter(self, inviter_id: UserId) -> list[Connection]:
        """Find pending invites issued by a user."""
        stmt = (
            select(connections_table)
            .where(
                and_(
                    connections_table.c.inviter_id == inviter_id,
                    connections_table.c.status == PENDING,
                )
            )
            .order_by(connections_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_connection(dict(row)) for row in result.mappings()]
