"""Port implemented by each OAuth identity provider."""

from abc import ABC, abstractmethod

from voicehub_identity.application.dtos import (
    OAuthProviderName,
    ProviderEmail,
    ProviderProfile,
    ProviderTokens,
)


class OAuthProviderAdapter(ABC):
    """Capability the sign-in flow needs from a provider.

    Adapters raise ``ProviderExchangeFailedError`` when the code exchange
    fails. ``fetch_emails`` is only called when the profile carries no
    email address.
    """

    name: OAuthProviderName

    @abstractmethod
    def authorization_url(self, redirect_uri: str, state: str) -> str:
        """Build the consent page URL the browser is sent to."""

    @abstractmethod
    async def exchange_code(self, code: str, redirect_uri: str) -> ProviderTokens:
        """Exchange an authorization code for tokens."""

    @abstractmethod
    async def fetch_profile(self, tokens: ProviderTokens) -> ProviderProfile:
        """Fetch the authenticated user's profile."""

    @abstractmethod
    async def fetch_emails(self, tokens: ProviderTokens) -> list[ProviderEmail]:
        """Fetch all email addresses of the authenticated user."""
