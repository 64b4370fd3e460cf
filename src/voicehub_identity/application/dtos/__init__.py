"""Data transfer objects for the identity application layer."""

from voicehub_identity.application.dtos.oauth import (
    AuthResult,
    OAuthIntent,
    OAuthProviderName,
    ProviderEmail,
    ProviderProfile,
    ProviderTokens,
)

__all__ = [
    "AuthResult",
    "OAuthIntent",
    "OAuthProviderName",
    "ProviderEmail",
    "ProviderProfile",
    "ProviderTokens",
]
