"""Summarize contact use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nexus.domain.service import InsightService


class SummarizeContactRequest(BaseModel):
    """Summarize contact request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    contact_info: str
    notes: Optional[str] = None
    urls: list[str] = Field(default_factory=list)


class SummarizeContactResponse(BaseModel):
    """Summarize contact response."""

    summary: str
    oneliner: str


class SummarizeContactUseCase:
    """Use case for drafting a summary of a contact from their linked pages."""

    def __init__(self, insight_service: InsightService) -> None:
        self.insight_service = insight_service

    async def execute(
        self, request: SummarizeContactRequest
    ) -> SummarizeContactResponse:
        """Fetch the contact's pages and draft a summary and one-liner.

        Raises:
            LanguageModelError: If the model is unconfigured or fails
        """
        urls = [url.strip() for url in request.urls if url and url.strip()]
        with logfire.span("summarize_contact.execute", url_count=len(urls)):
            result = await self.insight_service.summarize_contact(
                request.contact_info, request.notes, urls
            )
            return SummarizeContactResponse(
                summary=result.summary, oneliner=result.oneliner
            )
