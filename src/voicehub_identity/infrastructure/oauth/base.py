"""Shared HTTP plumbing for OAuth provider adapters."""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from voicehub_identity.application.ports import OAuthProviderAdapter
from voicehub_identity.exceptions import ProviderExchangeFailedError

logger = logging.getLogger(__name__)


class HttpxOAuthAdapter(OAuthProviderAdapter):
    """Base class for adapters talking to a provider over HTTP.

    Transport errors and 5xx answers become transient
    ``ProviderExchangeFailedError``; 4xx answers become permanent ones
    carrying the provider's payload.
    """

    display_name: str = "OAuth provider"
    authorize_endpoint: str = ""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._timeout = timeout
        self._transport = transport

    def _build_authorization_url(self, params: dict[str, str]) -> str:
        return f"{self.authorize_endpoint}?{urlencode(params)}"

    async def _request(
        self,
        method: str,
        url: str,
        stage: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("%s %s request timed out", self.display_name, stage)
            msg = f"{self.display_name} {stage} request timed out"
            raise ProviderExchangeFailedError(
                msg,
                details={"error": str(e)},
                transient=True,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s request failed: %s", self.display_name, stage, e)
            msg = f"{self.display_name} {stage} request failed"
            raise ProviderExchangeFailedError(
                msg,
                details={"error": str(e)},
                transient=True,
            ) from e

        if response.is_error:
            payload = self._payload(response)
            logger.warning(
                "%s %s endpoint error (status %s): %s",
                self.display_name,
                stage,
                response.status_code,
                payload,
            )
            msg = f"{self.display_name} {stage} endpoint error"
            raise ProviderExchangeFailedError(
                msg,
                details=payload,
                transient=response.status_code >= 500,
            )

        return response

    @staticmethod
    def _payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text}
