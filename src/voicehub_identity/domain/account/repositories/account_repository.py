"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from voicehub_identity.domain.account.aggregates.account import Account
from voicehub_identity.domain.account.value_objects import (
    AccountRole,
    AccountStatus,
    Email,
)


class AccountRepository(ABC):
    """Repository interface for Account aggregates.

    Implementations raise ``AccountStoreError`` (or its subclass
    ``AccountAlreadyExistsError``) when the underlying store fails.
    """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        """Find an account by its ID."""

    @abstractmethod
    async def find_by_email_and_role(
        self,
        email: Union[str, Email],
        role: AccountRole,
    ) -> Optional[Account]:
        """Find the account holding ``role`` for an email address."""

    @abstractmethod
    async def save(self, account: Account) -> None:
        """Create or update an account."""

    @abstractmethod
    async def list_by_role(
        self,
        role: AccountRole,
        status: AccountStatus | None = None,
    ) -> list[Account]:
        """List accounts of a role, oldest first."""

    @abstractmethod
    async def count(self) -> int:
        """Count total accounts."""
