"""In-memory repository implementations for testing."""

from .chronicle import InMemoryChronicleRepository
from .connection import InMemoryConnectionRepository
from .contact import InMemoryContactRepository
from .profile import InMemoryProfileRepository
from .work_entry import InMemoryWorkEntryRepository

__all__ = [
    "InMemoryChronicleRepository",
    "InMemoryConnectionRepository",
    "InMemoryContactRepository",
    "InMemoryProfileRepository",
    "InMemoryWorkEntryRepository",
]
