"""Auth use cases."""

from nexus.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from nexus.application.usecase.auth.handle_callback import (
    HandleCallbackRequest,
    HandleCallbackResponse,
    HandleCallbackUseCase,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "HandleCallbackRequest",
    "HandleCallbackResponse",
    "HandleCallbackUseCase",
]
