"""Domain services."""

from .auth_service import AuthService, IdentityClient
from .base import Service
from .chronicle_service import ChronicleData, ChronicleService
from .connection_service import ConnectionService, PendingInvite
from .insight_service import InsightService, LanguageModelClient, PageFetcher
from .jwt_service import JWTService
from .profile_service import ProfileService

__all__ = [
    "AuthService",
    "ChronicleData",
    "ChronicleService",
    "ConnectionService",
    "IdentityClient",
    "InsightService",
    "JWTService",
    "LanguageModelClient",
    "PageFetcher",
    "PendingInvite",
    "ProfileService",
    "Service",
]
