"""Pydantic request/response schemas for the API."""

from voicehub.presentation.api.schemas.auth import (
    AuthorizationUrlResponse,
    AuthResultResponse,
    OAuthCallbackRequest,
    UserResponse,
)
from voicehub.presentation.api.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "AuthResultResponse",
    "AuthorizationUrlResponse",
    "ErrorResponse",
    "HealthResponse",
    "OAuthCallbackRequest",
    "UserResponse",
]
