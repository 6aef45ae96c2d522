"""Domain model entities for Nexus."""

from nexus.domain.model.chronicle import ChronicleEntry, ChroniclePlace
from nexus.domain.model.connection import Connection
from nexus.domain.model.contact import Contact
from nexus.domain.model.profile import Profile
from nexus.domain.model.work_entry import WorkEntry

__all__ = [
    "Profile",
    "Contact",
    "Connection",
    "WorkEntry",
    "ChronicleEntry",
    "ChroniclePlace",
]
