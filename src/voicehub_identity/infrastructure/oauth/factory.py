"""Build the configured provider adapters from settings."""

import logging

from voicehub_config.settings import Settings
from voicehub_identity.application.dtos import OAuthProviderName
from voicehub_identity.application.ports import OAuthProviderAdapter
from voicehub_identity.infrastructure.oauth.github import GitHubOAuthAdapter
from voicehub_identity.infrastructure.oauth.google import GoogleOAuthAdapter

logger = logging.getLogger(__name__)


def build_oauth_providers(
    settings: Settings,
) -> dict[OAuthProviderName, OAuthProviderAdapter]:
    """Return adapters for every provider with a client id and secret."""
    providers: dict[OAuthProviderName, OAuthProviderAdapter] = {}

    if settings.google_client_id and settings.google_client_secret:
        providers[OAuthProviderName.GOOGLE] = GoogleOAuthAdapter(
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret.get_secret_value(),
            timeout=settings.oauth_http_timeout,
        )
    else:
        logger.debug("Google OAuth not configured")

    if settings.github_client_id and settings.github_client_secret:
        providers[OAuthProviderName.GITHUB] = GitHubOAuthAdapter(
            client_id=settings.github_client_id,
            client_secret=settings.github_client_secret.get_secret_value(),
            timeout=settings.oauth_http_timeout,
        )
    else:
        logger.debug("GitHub OAuth not configured")

    return providers
