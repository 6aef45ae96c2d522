"""Strongly typed identifiers for Nexus domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# A user id is also the id of that user's profile row
UserId = NewType("UserId", UUID)
ContactId = NewType("ContactId", UUID)
ConnectionId = NewType("ConnectionId", UUID)
WorkEntryId = NewType("WorkEntryId", UUID)
ChronicleEntryId = NewType("ChronicleEntryId", UUID)
ChroniclePlaceId = NewType("ChroniclePlaceId", UUID)
