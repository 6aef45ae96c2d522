"""Domain value objects for Nexus."""

from nexus.domain.value.identifiers import (
    ChronicleEntryId,
    ChroniclePlaceId,
    ConnectionId,
    ContactId,
    UserId,
    WorkEntryId,
)
from nexus.domain.value.types import (
    CONNECTION_RELATIONSHIP,
    ChronicleAnnotation,
    ConnectionStatus,
    ContactChronicleAnnotation,
    ContactSummary,
    IdentitySession,
    InviteCode,
    RedemptionOutcome,
    RedemptionResult,
    SourcePage,
    SynergyNote,
)

__all__ = [
    # Identifiers
    "UserId",
    "ContactId",
    "ConnectionId",
    "WorkEntryId",
    "ChronicleEntryId",
    "ChroniclePlaceId",
    # Types
    "CONNECTION_RELATIONSHIP",
    "ChronicleAnnotation",
    "ConnectionStatus",
    "ContactChronicleAnnotation",
    "ContactSummary",
    "IdentitySession",
    "InviteCode",
    "RedemptionOutcome",
    "RedemptionResult",
    "SourcePage",
    "SynergyNote",
]
