"""Repository interfaces for the Nexus domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from nexus.domain.repository.chronicle import ChronicleRepository
from nexus.domain.repository.connection import ConnectionRepository
from nexus.domain.repository.contact import ContactRepository
from nexus.domain.repository.profile import ProfileRepository
from nexus.domain.repository.work_entry import WorkEntryRepository

__all__ = [
    "ProfileRepository",
    "ContactRepository",
    "ConnectionRepository",
    "WorkEntryRepository",
    "ChronicleRepository",
]
