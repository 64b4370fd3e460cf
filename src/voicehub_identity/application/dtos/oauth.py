"""Data passed between the OAuth sign-in flow and provider adapters."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from voicehub_identity.domain.account import Account


class OAuthProviderName(str, Enum):
    """Supported OAuth identity providers."""

    GOOGLE = "google"
    GITHUB = "github"


class OAuthIntent(str, Enum):
    """Page the OAuth round-trip was started from."""

    SIGNIN = "signin"
    SIGNUP = "signup"


@dataclass(frozen=True)
class ProviderTokens:
    """Tokens returned by a provider's token endpoint."""

    access_token: str
    id_token: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class ProviderProfile:
    """Identity reported by the provider for the authenticated user."""

    provider_user_id: str
    email: str | None = None
    display_name: str | None = None
    login: str | None = None


@dataclass(frozen=True)
class ProviderEmail:
    """One entry of a provider account's email list."""

    email: str
    primary: bool = False
    verified: bool = False


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful OAuth sign-in."""

    account: Account
    is_new_user: bool
