"""Anthropic Messages API adapter."""

from .client import AnthropicClient, MockLanguageModelClient

__all__ = ["AnthropicClient", "MockLanguageModelClient"]
