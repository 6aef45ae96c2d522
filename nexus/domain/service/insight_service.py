"""Insight domain service.

Drafts synergy notes between two people and summaries of a contact with
a language model, and parses the labelled replies.
"""

import asyncio
import re

import logfire

from nexus.domain.value import ContactSummary, SourcePage, SynergyNote

from .base import Service
from .prompts import (
    NO_SOURCES_NOTE,
    SUMMARY_PROMPT,
    SYNERGY_PROMPT,
    or_none_listed,
)

SYNERGY_MAX_TOKENS = 800
SUMMARY_MAX_TOKENS = 400

_HELP_THEM = re.compile(r"HELP_THEM:\s*(.*?)(?=HELP_ME:|\Z)", re.IGNORECASE | re.DOTALL)
_HELP_ME = re.compile(r"HELP_ME:\s*(.*?)(?=COMMON_GROUND:|\Z)", re.IGNORECASE | re.DOTALL)
_COMMON_GROUND = re.compile(r"COMMON_GROUND:\s*(.*?)\Z", re.IGNORECASE | re.DOTALL)
_SUMMARY = re.compile(r"SUMMARY:\s*(.*?)(?=ONELINER:|\Z)", re.IGNORECASE | re.DOTALL)
_ONELINER = re.compile(r"ONELINER:\s*(.*)", re.IGNORECASE)

_SCRIPT = re.compile(r"<script.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE = re.compile(r"<style.*?</style>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]+>")
_WHITESPACE = re.compile(r"\s+")


class LanguageModelClient:
    """Text completion interface."""

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Send a single user prompt and return the first text block.

        Args:
            prompt: Prompt text
            max_tokens: Reply length limit

        Returns:
            Reply text, or "" if the reply has no leading text block

        Raises:
            LanguageModelError: If unconfigured or the upstream call fails
        """
        raise NotImplementedError


class PageFetcher:
    """Fetches pages linked from a contact."""

    async def fetch(self, url: str) -> SourcePage:
        """Fetch a page.

        Never raises for network failures; they are reported as a page
        without a status.
        """
        raise NotImplementedError


def _section(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1).strip() if match else None


def parse_synergy(text: str) -> SynergyNote:
    """Split a reply into its HELP_THEM / HELP_ME / COMMON_GROUND sections.

    Labels are matched case-insensitively; a missing label yields "".
    """
    return SynergyNote(
        help_them=_section(_HELP_THEM, text) or "",
        help_me=_section(_HELP_ME, text) or "",
        common_ground=_section(_COMMON_GROUND, text) or "",
    )


def parse_summary(text: str) -> ContactSummary:
    """Split a reply into SUMMARY and ONELINER.

    Without a SUMMARY label the whole reply is the summary.
    """
    summary = _section(_SUMMARY, text)
    return ContactSummary(
        summary=summary if summary is not None else text.strip(),
        oneliner=_section(_ONELINER, text) or "",
    )


def html_to_text(html: str, limit: int) -> str:
    """Reduce HTML to at most ``limit`` characters of visible text."""
    text = _SCRIPT.sub("", html)
    text = _STYLE.sub("", text)
    text = _TAG.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()
    return text[:limit]


def render_source(page: SourcePage, limit: int) -> str:
    """Render a fetched page as a labelled prompt block."""
    if page.status is None:
        return f"[{page.url}: could not be retrieved]"
    if not page.ok:
        return f"[{page.url}: failed to fetch, status {page.status}]"
    return f"[Content from {page.url}]:\n{html_to_text(page.body or '', limit)}"


class InsightService(Service):
    """Domain service for AI-drafted notes."""

    def __init__(
        self,
        language_model: LanguageModelClient,
        page_fetcher: PageFetcher,
        max_source_urls: int = 5,
        max_source_chars: int = 4000,
    ) -> None:
        """Initialize insight service.

        Args:
            language_model: Language model client
            page_fetcher: Fetcher for contact source pages
            max_source_urls: Most URLs fetched per summary
            max_source_chars: Most characters of text kept per page
        """
        self.language_model = language_model
        self.page_fetcher = page_fetcher
        self.max_source_urls = max_source_urls
        self.max_source_chars = max_source_chars

    async def generate_synergy(
        self,
        my_profile: str,
        contact_info: str,
        my_skills: str | None = None,
        my_work: str | None = None,
        my_education: str | None = None,
        contact_work: str | None = None,
        contact_education: str | None = None,
        contact_chronicle: str | None = None,
    ) -> SynergyNote:
        """Draft how two people could help each other.

        Returns:
            Parsed synergy note

        Raises:
            LanguageModelError: If the model call fails
        """
        with logfire.span("insight_service.generate_synergy"):
            prompt = SYNERGY_PROMPT.format(
                my_profile=my_profile,
                my_skills=or_none_listed(my_skills),
                my_work=or_none_listed(my_work),
                my_education=or_none_listed(my_education),
                contact_info=contact_info,
                contact_work=or_none_listed(contact_work),
                contact_education=or_none_listed(contact_education),
                contact_chronicle=or_none_listed(contact_chronicle),
            )
            reply = await self.language_model.complete(prompt, SYNERGY_MAX_TOKENS)
            note = parse_synergy(reply)
            logfire.info(
                "Synergy note generated",
                reply_chars=len(reply),
                has_common_ground=bool(note.common_ground),
            )
            return note

    async def summarize_contact(
        self,
        contact_info: str,
        notes: str | None = None,
        urls: list[str] | None = None,
    ) -> ContactSummary:
        """Draft a summary and one-liner for a contact from linked pages.

        Args:
            contact_info: Contact fields rendered as text
            notes: Owner's free-form notes, appended to the contact context
            urls: Linked pages; only the first few are fetched

        Returns:
            Parsed summary

        Raises:
            LanguageModelError: If the model call fails
        """
        urls = (urls or [])[: self.max_source_urls]
        with logfire.span("insight_service.summarize_contact", url_count=len(urls)):
            pages = await asyncio.gather(*(self.page_fetcher.fetch(url) for url in urls))
            sources = [render_source(page, self.max_source_chars) for page in pages]

            context = contact_info
            if notes:
                context = f"{contact_info}\nNotes: {notes}"
            source_section = (
                "\n\nSource material from linked pages:\n" + "\n\n".join(sources)
                if sources
                else ""
            )
            prompt = SUMMARY_PROMPT.format(
                contact_info=context,
                source_section=source_section,
                no_sources_note="" if sources else NO_SOURCES_NOTE,
            )

            reply = await self.language_model.complete(prompt, SUMMARY_MAX_TOKENS)
            summary = parse_summary(reply)
            logfire.info(
                "Contact summary generated",
                sources=len(sources),
                retrieved=sum(1 for page in pages if page.ok),
            )
            return summary
