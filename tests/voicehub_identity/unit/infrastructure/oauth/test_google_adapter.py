"""Tests for the Google OAuth adapter against a mocked transport."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from voicehub_identity.application.dtos import ProviderTokens
from voicehub_identity.exceptions import ProviderExchangeFailedError
from voicehub_identity.infrastructure.oauth import GoogleOAuthAdapter

REDIRECT_URI = "https://voice.example.com/auth/google/callback"


def make_adapter(handler) -> GoogleOAuthAdapter:
    return GoogleOAuthAdapter(
        client_id="google-client",
        client_secret="google-secret",
        transport=httpx.MockTransport(handler),
    )


def test_authorization_url():
    adapter = GoogleOAuthAdapter(client_id="google-client", client_secret="s")

    url = adapter.authorization_url(REDIRECT_URI, "state-1")

    parsed = urlparse(url)
    query = parse_qs(parsed.query)
    assert parsed.netloc == "accounts.google.com"
    assert query["response_type"] == ["code"]
    assert query["scope"] == ["openid email profile"]
    assert query["redirect_uri"] == [REDIRECT_URI]
    assert query["state"] == ["state-1"]


@pytest.mark.asyncio
async def test_exchange_code_posts_form():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(200, json={"access_token": "ya29", "id_token": "jwt"})

    tokens = await make_adapter(handler).exchange_code("code-1", REDIRECT_URI)

    assert tokens.access_token == "ya29"
    assert tokens.id_token == "jwt"
    assert seen["url"] == "https://oauth2.googleapis.com/token"
    assert seen["form"]["grant_type"] == ["authorization_code"]
    assert seen["form"]["code"] == ["code-1"]
    assert seen["form"]["redirect_uri"] == [REDIRECT_URI]


@pytest.mark.asyncio
async def test_invalid_grant():
    payload = {"error": "invalid_grant", "error_description": "Bad Request"}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json=payload)

    with pytest.raises(ProviderExchangeFailedError) as exc_info:
        await make_adapter(handler).exchange_code("used-code", REDIRECT_URI)

    assert exc_info.value.details == payload
    assert exc_info.value.retryable is False
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_fetch_profile():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["authorization"] == "Bearer ya29"
        return httpx.Response(
            200,
            json={"sub": "1093", "email": "x@y.com", "name": "X Y"},
        )

    profile = await make_adapter(handler).fetch_profile(ProviderTokens("ya29"))

    assert profile.provider_user_id == "1093"
    assert profile.email == "x@y.com"
    assert profile.display_name == "X Y"


@pytest.mark.asyncio
async def test_no_email_list():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assert await make_adapter(handler).fetch_emails(ProviderTokens("ya29")) == []
