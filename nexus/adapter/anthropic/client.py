"""Anthropic Messages API client.

Sends a single user message and returns the first text block of the reply.
"""

import httpx
import logfire

from nexus.adapter.error import LanguageModelError
from nexus.domain.service.insight_service import LanguageModelClient

MESSAGES_URL = "https://api.anthropic.com/v1/messages"
API_VERSION = "2023-06-01"
MODEL = "claude-3-haiku-20240307"


class AnthropicClient(LanguageModelClient):
    """Language model client backed by the Anthropic Messages API.

    Calls are not retried; any failure surfaces as LanguageModelError.
    """

    def __init__(self, api_key: str | None, timeout: float = 60.0) -> None:
        """Initialize Anthropic client.

        Args:
            api_key: API key; None leaves the client unconfigured
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.timeout = timeout

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Send a prompt and return the reply text.

        Args:
            prompt: User message
            max_tokens: Reply length limit

        Returns:
            Text of the first content block, or "" if it is not text

        Raises:
            LanguageModelError: If no API key is configured, the request
                fails, or the API answers with a non-2xx status
        """
        if not self.api_key:
            logfire.error("Language model called without API key")
            raise LanguageModelError("ANTHROPIC_API_KEY not configured")

        payload = {
            "model": MODEL,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": API_VERSION,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    MESSAGES_URL,
                    json=payload,
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Anthropic HTTP error", error=str(e))
            raise LanguageModelError(f"Anthropic request failed: {e}")

        if not response.is_success:
            logfire.error(
                "Anthropic API error",
                status_code=response.status_code,
                error=response.text,
            )
            raise LanguageModelError(
                f"Anthropic API error {response.status_code}: {response.text}"
            )

        data = response.json()
        content = data.get("content") or []
        first = content[0] if content else {}
        text = first.get("text", "") if first.get("type") == "text" else ""

        logfire.info(
            "Anthropic completion received",
            model=MODEL,
            max_tokens=max_tokens,
            reply_chars=len(text),
        )
        return text


class MockLanguageModelClient(LanguageModelClient):
    """Mock language model client for testing.

    Returns a canned reply and records every prompt it receives. Setting
    ``error`` makes every call raise it instead.
    """

    DEFAULT_REPLY = "HELP_THEM: A\nHELP_ME: B\nCOMMON_GROUND: C"

    def __init__(self, reply: str = DEFAULT_REPLY) -> None:
        self.reply = reply
        self.error: LanguageModelError | None = None
        self.prompts: list[tuple[str, int]] = []

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """Return the canned reply."""
        self.prompts.append((prompt, max_tokens))
        if self.error is not None:
            raise self.error
        return self.reply
