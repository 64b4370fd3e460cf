"""OAuth provider adapters."""

from voicehub_identity.infrastructure.oauth.base import HttpxOAuthAdapter
from voicehub_identity.infrastructure.oauth.factory import build_oauth_providers
from voicehub_identity.infrastructure.oauth.github import GitHubOAuthAdapter
from voicehub_identity.infrastructure.oauth.google import GoogleOAuthAdapter

__all__ = [
    "GitHubOAuthAdapter",
    "GoogleOAuthAdapter",
    "HttpxOAuthAdapter",
    "build_oauth_providers",
]
