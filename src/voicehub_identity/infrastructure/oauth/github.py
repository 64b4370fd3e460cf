"""GitHub OAuth adapter."""

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

GITHUB_API_HEADERS = {
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
}


class GitHubOAuthAdapter(HttpxOAuthAdapter):
    """GitHub OAuth app flow.

    GitHub leaves ``email`` empty on the user object when the address is
    private, so the user:email scope is requested to read the email list.
    """

    name = OAuthProviderName.GITHUB
    display_name = "GitHub"
    authorize_endpoint = "https://github.com/login/oauth/authorize"
    token_endpoint = "https://github.com/login/oauth/access_token"
    api_base_url = "https://api.github.com"
    scope = "user:email"

    def authorization_url(self, redirect_uri: str, state: str) -> str:
        return self._build_authorization_url(
            {
                "client_id": self._client_id,
                "scope": self.scope,
                "redirect_uri": redirect_uri,
                "state": state,
            }
        )

    async def exchange_code(self, code: str, redirect_uri: str) -> ProviderTokens:
        response = await self._request(
            "POST",
            self.token_endpoint,
            stage="token",
            headers={"Accept": "application/json"},
            json={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "code": code,
                "redirect_uri": redirect_uri,
            },
        )
        payload = self._payload(response)

        # GitHub answers 200 with an "error" field for bad or expired codes
        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            logger.warning("GitHub returned no access token: %s", payload)
            msg = "Failed to get access token"
            raise ProviderExchangeFailedError(msg, details=payload)

        return ProviderTokens(access_token=access_token, raw=payload)

    async def fetch_profile(self, tokens: ProviderTokens) -> ProviderProfile:
        response = await self._request(
            "GET",
            f"{self.api_base_url}/user",
            stage="user",
            headers=self._auth_headers(tokens),
        )
        data = self._payload(response)
        if not isinstance(data, dict):
            msg = "Unexpected GitHub user response"
            raise ProviderExchangeFailedError(msg, details=data)

        return ProviderProfile(
            provider_user_id=str(data.get("id", "")),
            email=data.get("email") or None,
            display_name=data.get("name") or None,
            login=data.get("login") or None,
        )

    async def fetch_emails(self, tokens: ProviderTokens) -> list[ProviderEmail]:
        response = await self._request(
            "GET",
            f"{self.api_base_url}/user/emails",
            stage="emails",
            headers=self._auth_headers(tokens),
        )
        data = self._payload(response)
        if not isinstance(data, list):
            return []

        return [
            ProviderEmail(
                email=entry["email"],
                primary=bool(entry.get("primary")),
                verified=bool(entry.get("verified")),
            )
            for entry in data
            if isinstance(entry, dict) and entry.get("email")
        ]

    @staticmethod
    def _auth_headers(tokens: ProviderTokens) -> dict[str, str]:
        return {**GITHUB_API_HEADERS, "Authorization": f"Bearer {tokens.access_token}"}
