"""PostgreSQL repository implementations."""

from nexus.persistence.repository.chronicle import PostgresChronicleRepository
from nexus.persistence.repository.connection import PostgresConnectionRepository
from nexus.persistence.repository.contact import PostgresContactRepository
from nexus.persistence.repository.profile import PostgresProfileRepository
from nexus.persistence.repository.work_entry import PostgresWorkEntryRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresContactRepository",
    "PostgresConnectionRepository",
    "PostgresWorkEntryRepository",
    "PostgresChronicleRepository",
]
