"""Production dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from nexus.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API serves from.

    Every component uses its production provider: PostgreSQL, the GoTrue
    identity provider, Anthropic and live page fetching. Tests build theirs
    with ``tests.di.build_test_container`` instead.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())
