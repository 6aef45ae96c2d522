"""Hosted identity provider adapter."""

from .client import MockIdentityClient, RealIdentityClient

__all__ = ["MockIdentityClient", "RealIdentityClient"]
