"""Profile entity.

Every authenticated user owns exactly one profile. Its id is the user id
issued by the identity provider.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus.domain.model.common import DomainModel
from nexus.domain.value import UserId


class Profile(DomainModel):
    """A user's public card.

    The fields other than ``id``, ``is_public`` and the timestamps form the
    snapshot copied onto a counterpart's contact card when an invite is
    accepted.
    """

    id: UserId
    email: str
    full_name: str
    slug: Optional[str] = None  # Public URL segment
    avatar_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    headline: Optional[str] = None
    website: Optional[str] = None
    is_public: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
