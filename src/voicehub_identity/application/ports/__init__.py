"""Ports implemented by the identity infrastructure."""

from voicehub_identity.application.ports.oauth_provider import OAuthProviderAdapter

__all__ = ["OAuthProviderAdapter"]
