"""Contact entity.

Contacts are owner-scoped cards. A card may describe someone who is not
(yet) a user, or be linked to another user's profile once they connect.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus.domain.model.common import DomainModel
from nexus.domain.model.profile import Profile
from nexus.domain.value import CONNECTION_RELATIONSHIP, ContactId, UserId


class Contact(DomainModel):
    """Contact card owned by one user.

    Business rules:
    - At most one card per (owner_id, linked_profile_id) when linked
    - Every accepted connection has a linked card in each direction
    """

    id: ContactId
    owner_id: UserId
    linked_profile_id: Optional[UserId] = None
    full_name: str
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    relationship_type: Optional[str] = None

    # Chronicle display columns
    chronicle_color: Optional[str] = None
    chronicle_fuzzy_start: bool = False
    chronicle_fuzzy_end: bool = False
    chronicle_note: Optional[str] = None
    show_on_chronicle: bool = False
    met_date: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_profile(
        cls, contact_id: ContactId, owner_id: UserId, profile: Profile
    ) -> "Contact":
        """Build a connection card for ``owner_id`` from a profile snapshot."""
        return cls(
            id=contact_id,
            owner_id=owner_id,
            linked_profile_id=profile.id,
            full_name=profile.full_name,
            email=profile.email,
            avatar_url=profile.avatar_url,
            location=profile.location,
            bio=profile.bio,
            website=profile.website,
            relationship_type=CONNECTION_RELATIONSHIP,
        )
