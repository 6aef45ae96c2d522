"""Chronicle timeline entities.

Dates are ``YYYY-MM`` strings; an open ``end_date`` means ongoing.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus.domain.model.common import DomainModel
from nexus.domain.value import ChronicleEntryId, ChroniclePlaceId, UserId

YEAR_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class ChronicleEntry(DomainModel):
    """A free-form event bar on the user's timeline."""

    id: ChronicleEntryId
    user_id: UserId
    type: str
    title: str
    description: Optional[str] = None
    start_date: str = Field(pattern=YEAR_MONTH_PATTERN)
    end_date: Optional[str] = Field(default=None, pattern=YEAR_MONTH_PATTERN)
    canvas_col: str
    color: str
    fuzzy_start: bool = False
    fuzzy_end: bool = False
    note: Optional[str] = None
    show_on_resume: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class ChroniclePlace(DomainModel):
    """A period the user lived somewhere."""

    id: ChroniclePlaceId
    user_id: UserId
    title: str
    start_date: str = Field(pattern=YEAR_MONTH_PATTERN)
    end_date: Optional[str] = Field(default=None, pattern=YEAR_MONTH_PATTERN)
    color: str = "#888888"
    fuzzy_start: bool = False
    fuzzy_end: bool = False
    note: Optional[str] = None
    show_on_resume: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
