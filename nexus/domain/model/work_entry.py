"""Work history entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus.domain.model.common import DomainModel
from nexus.domain.value import UserId, WorkEntryId


class WorkEntry(DomainModel):
    """A role held by the user, shown on the resume and the chronicle."""

    id: WorkEntryId
    user_id: UserId
    title: str
    company: str
    start_date: str
    end_date: Optional[str] = None
    is_current: bool = False
    location: Optional[str] = None
    description: Optional[str] = None

    chronicle_color: Optional[str] = None
    chronicle_fuzzy_start: bool = False
    chronicle_fuzzy_end: bool = False
    chronicle_note: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.now)
