"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from nexus.config import Settings
from nexus.domain.repository import (
    ChronicleRepository,
    ConnectionRepository,
    ContactRepository,
    ProfileRepository,
    WorkEntryRepository,
)
from nexus.persistence.database import create_engine, create_session_factory
from nexus.persistence.repository import (
    PostgresChronicleRepository,
    PostgresConnectionRepository,
    PostgresContactRepository,
    PostgresProfileRepository,
    PostgresWorkEntryRepository,
)
from nexus.util.di.base import ProviderBase
from nexus.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        All store calls of one request share this session. It is committed
        when the request ends without an exception and rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(self, session: AsyncSession) -> ContactRepository:
        """Provide Contact repository."""
        return PostgresContactRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_connection_repository(
        self, session: AsyncSession
    ) -> ConnectionRepository:
        """Provide Connection repository."""
        return PostgresConnectionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_work_entry_repository(
        self, session: AsyncSession
    ) -> WorkEntryRepository:
        """Provide WorkEntry repository."""
        return PostgresWorkEntryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chronicle_repository(self, session: AsyncSession) -> ChronicleRepository:
        """Provide Chronicle repository."""
        return PostgresChronicleRepository(session)
