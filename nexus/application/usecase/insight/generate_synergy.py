"""Generate synergy note use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from nexus.domain.service import InsightService


class GenerateSynergyRequest(BaseModel):
    """Two profiles rendered as text; empty sections are allowed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    my_profile: str
    contact_info: str
    my_skills: Optional[str] = None
    my_work: Optional[str] = None
    my_education: Optional[str] = None
    contact_work: Optional[str] = None
    contact_education: Optional[str] = None
    contact_chronicle: Optional[str] = None


class GenerateSynergyResponse(BaseModel):
    """Synergy note, serialized as ``helpThem`` / ``helpMe`` / ``commonGround``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    help_them: str
    help_me: str
    common_ground: str


class GenerateSynergyUseCase:
    """Use case for drafting talking points between the user and a contact."""

    def __init__(self, insight_service: InsightService) -> None:
        """Initialize generate synergy use case.

        Args:
            insight_service: Insight domain service
        """
        self.insight_service = insight_service

    async def execute(self, request: GenerateSynergyRequest) -> GenerateSynergyResponse:
        """Draft the three synergy paragraphs.

        Raises:
            LanguageModelError: If the model is unconfigured or fails
        """
        with logfire.span("generate_synergy.execute"):
            note = await self.insight_service.generate_synergy(
                my_profile=request.my_profile,
                contact_info=request.contact_info,
                my_skills=request.my_skills,
                my_work=request.my_work,
                my_education=request.my_education,
                contact_work=request.contact_work,
                contact_education=request.contact_education,
                contact_chronicle=request.contact_chronicle,
            )
            return GenerateSynergyResponse(
                help_them=note.help_them,
                help_me=note.help_me,
                common_ground=note.common_ground,
            )
