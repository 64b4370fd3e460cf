"""OAuth sign-in and account provisioning.

One provider-agnostic flow shared by all OAuth providers:

1. exchange the authorization code for tokens
2. resolve the account's email (profile first, then the email list)
3. look up the account by (email, role)
4. sign in through the ordered gate table, or provision a pending reviewer
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from voicehub_identity.application.dtos import (
    AuthResult,
    OAuthIntent,
    OAuthProviderName,
    ProviderEmail,
    ProviderProfile,
    ProviderTokens,
)
from voicehub_identity.domain.account import (
    Account,
    AccountRole,
    AccountStatus,
    AccountStoreError,
    Email,
    InvalidEmailError,
)
from voicehub_identity.exceptions import (
    AccountDeactivatedError,
    AdminMustUseAdminLoginError,
    ApplicationRejectedError,
    InvalidInputError,
    NoEmailAvailableError,
    OAuthError,
    PendingApprovalError,
    ProviderExchangeFailedError,
    StoreFailureError,
)

if TYPE_CHECKING:
    from voicehub_identity.application.ports import OAuthProviderAdapter
    from voicehub_identity.domain.account import AccountRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignInGate:
    """A rule that blocks sign-in for matching accounts."""

    name: str
    applies: Callable[[Account], bool]
    error: Callable[[], OAuthError]


# Evaluated top to bottom, the first matching gate wins.
SIGN_IN_GATES: tuple[SignInGate, ...] = (
    SignInGate(
        name="admin",
        applies=lambda account: account.is_admin,
        error=AdminMustUseAdminLoginError,
    ),
    SignInGate(
        name="pending",
        applies=lambda account: (
            account.is_reviewer and account.status == AccountStatus.PENDING
        ),
        error=PendingApprovalError,
    ),
    SignInGate(
        name="rejected",
        applies=lambda account: (
            account.is_reviewer and account.status == AccountStatus.REJECTED
        ),
        error=ApplicationRejectedError,
    ),
    SignInGate(
        name="deactivated",
        applies=lambda account: not account.is_active,
        error=AccountDeactivatedError,
    ),
)


def check_sign_in_gates(
    account: Account,
    gates: Sequence[SignInGate] = SIGN_IN_GATES,
) -> None:
    """Raise the error of the first gate that applies to ``account``."""
    for gate in gates:
        if gate.applies(account):
            logger.info(
                "Sign-in blocked by '%s' gate for %s (%s)",
                gate.name,
                account.email,
                account.role.value,
            )
            raise gate.error()


def select_email(emails: Sequence[ProviderEmail]) -> str | None:
    """Pick the best address from a provider's email list.

    Priority: primary and verified, then first verified, then first entry.
    """
    for entry in emails:
        if entry.primary and entry.verified:
            return entry.email
    for entry in emails:
        if entry.verified:
            return entry.email
    if emails:
        return emails[0].email
    return None


class OAuthIdentityResolver:
    """Signs users in through an OAuth provider, provisioning new reviewers."""

    def __init__(
        self,
        account_repository: AccountRepository,
        providers: Mapping[OAuthProviderName, OAuthProviderAdapter],
        frontend_base_url: str,
    ):
        self._account_repo = account_repository
        self._providers = dict(providers)
        self._frontend_base_url = frontend_base_url.rstrip("/")

    def redirect_uri(self, provider: OAuthProviderName) -> str:
        # Must match the redirect_uri of the authorize request exactly
        return f"{self._frontend_base_url}/auth/{provider.value}/callback"

    def authorization_url(
        self,
        provider: Union[str, OAuthProviderName],
        requested_role: Union[str, AccountRole, None],
        intent: Union[str, OAuthIntent] = OAuthIntent.SIGNIN,
    ) -> tuple[str, str]:
        """Return the provider consent URL and the state it carries."""
        provider_name, adapter = self._get_provider(provider)
        role = self._validate_role(requested_role)
        try:
            intent_value = OAuthIntent(intent)
        except ValueError as e:
            msg = f"Invalid intent provided: {intent}"
            raise InvalidInputError(msg) from e

        state = json.dumps({"role": role.value, "type": intent_value.value})
        url = adapter.authorization_url(self.redirect_uri(provider_name), state)
        return url, state

    async def authenticate(
        self,
        provider: Union[str, OAuthProviderName],
        code: str | None,
        requested_role: Union[str, AccountRole, None],
    ) -> AuthResult:
        if not code or not code.strip():
            msg = "No authorization code provided"
            raise InvalidInputError(msg)
        role = self._validate_role(requested_role)
        provider_name, adapter = self._get_provider(provider)

        tokens = await adapter.exchange_code(code, self.redirect_uri(provider_name))
        profile = await adapter.fetch_profile(tokens)
        email = await self._resolve_email(adapter, tokens, profile)

        account = await self._find_account(email, role)
        if account is not None:
            return await self._sign_in(account)
        return await self._provision(email, profile)

    async def _sign_in(self, account: Account) -> AuthResult:
        check_sign_in_gates(account)

        account.record_login()
        await self._store(account)

        logger.info("Account signed in via OAuth: %s", account.email)
        return AuthResult(account=account, is_new_user=False)

    async def _provision(self, email: Email, profile: ProviderProfile) -> AuthResult:
        account = Account.register_oauth_reviewer(
            email,
            name=profile.display_name or profile.login,
        )
        await self._store(account)

        logger.info("Reviewer account created via OAuth: %s", account.email)
        return AuthResult(account=account, is_new_user=True)

    async def _resolve_email(
        self,
        adapter: OAuthProviderAdapter,
        tokens: ProviderTokens,
        profile: ProviderProfile,
    ) -> Email:
        raw_email = profile.email
        if not raw_email:
            # Some providers hide the email on the profile when it is private
            try:
                emails = await adapter.fetch_emails(tokens)
            except ProviderExchangeFailedError as e:
                logger.warning(
                    "Could not fetch email list from %s: %s",
                    adapter.name.value,
                    e.message,
                )
                emails = []
            raw_email = select_email(emails)

        if not raw_email:
            raise NoEmailAvailableError

        try:
            return Email(raw_email)
        except InvalidEmailError as e:
            logger.warning("Provider returned an unusable email: %r", raw_email)
            raise NoEmailAvailableError from e

    async def _find_account(self, email: Email, role: AccountRole) -> Account | None:
        try:
            return await self._account_repo.find_by_email_and_role(email, role)
        except AccountStoreError as e:
            logger.error("Account lookup failed for %s: %s", email, e)
            raise StoreFailureError from e

    async def _store(self, account: Account) -> None:
        try:
            await self._account_repo.save(account)
        except AccountStoreError as e:
            logger.error("Saving account %s failed: %s", account.email, e)
            raise StoreFailureError from e

    def _get_provider(
        self,
        provider: Union[str, OAuthProviderName],
    ) -> tuple[OAuthProviderName, OAuthProviderAdapter]:
        try:
            provider_name = OAuthProviderName(provider)
        except ValueError as e:
            msg = f"Unsupported provider: {provider}"
            raise InvalidInputError(msg) from e

        adapter = self._providers.get(provider_name)
        if adapter is None:
            msg = f"Provider not configured: {provider_name.value}"
            raise InvalidInputError(msg)
        return provider_name, adapter

    @staticmethod
    def _validate_role(requested_role: Union[str, AccountRole, None]) -> AccountRole:
        try:
            role = AccountRole(requested_role)
        except ValueError as e:
            msg = "Invalid role provided"
            raise InvalidInputError(msg) from e

        if not role.is_self_service:
            msg = "Invalid role provided"
            raise InvalidInputError(msg)
        return role
