"""Google OAuth adapter (OpenID Connect authorization code flow)."""

import logging

from voicehub_identity.application.dtos import (
    OAuthProviderName,
    ProviderEmail,
    ProviderProfile,
    ProviderTokens,
)
from voicehub_identity.exceptions import ProviderExchangeFailedError
from voicehub_identity.infrastructure.oauth.base import HttpxOAuthAdapter

logger = logging.getLogger(__name__)


class GoogleOAuthAdapter(HttpxOAuthAdapter):
    """Google sign-in.

    The profile is read from the OpenID Connect userinfo endpoint, which
    always carries the email for the ``email`` scope. Google has no
    separate email list.
    """

    name = OAuthProviderName.GOOGLE
    display_name = "Google"
    authorize_endpoint = "https://accounts.google.com/o/oauth2/v2/auth"
    token_endpoint = "https://oauth2.googleapis.com/token"
    userinfo_endpoint = "https://openidconnect.googleapis.com/v1/userinfo"
    scope = "openid email profile"

    def authorization_url(self, redirect_uri: str, state: str) -> str:
        return self._build_authorization_url(
            {
                "client_id": self._client_id,
                "redirect_uri": redirect_uri,
                "response_type": "code",
                "scope": self.scope,
                "state": state,
            }
        )

    async def exchange_code(self, code: str, redirect_uri: str) -> ProviderTokens:
        response = await self._request(
            "POST",
            self.token_endpoint,
            stage="token",
            headers={"Accept": "application/json"},
            data={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "code": code,
                "redirect_uri": redirect_uri,
                "grant_type": "authorization_code",
            },
        )
        payload = self._payload(response)

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            logger.warning("Google returned no access token: %s", payload)
            msg = "Failed to get access token"
            raise ProviderExchangeFailedError(msg, details=payload)

        return ProviderTokens(
            access_token=access_token,
            id_token=payload.get("id_token"),
            raw=payload,
        )

    async def fetch_profile(self, tokens: ProviderTokens) -> ProviderProfile:
        response = await self._request(
            "GET",
            self.userinfo_endpoint,
            stage="userinfo",
            headers={"Authorization": f"Bearer {tokens.access_token}"},
        )
        data = self._payload(response)
        if not isinstance(data, dict):
            msg = "Invalid token"
            raise ProviderExchangeFailedError(msg, details=data)

        return ProviderProfile(
            provider_user_id=str(data.get("sub", "")),
            email=data.get("email") or None,
            display_name=data.get("name") or None,
        )

    async def fetch_emails(self, tokens: ProviderTokens) -> list[ProviderEmail]:
        return []
