"""Account domain.

This domain handles:
- Account aggregate (identity, role, approval status, demographic profile)
- The (email, role) uniqueness rule
- Reviewer approval status transitions
"""

from voicehub_identity.domain.account.aggregates import Account
from voicehub_identity.domain.account.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AccountStoreError,
    InvalidEmailError,
    InvalidStatusTransitionError,
)
from voicehub_identity.domain.account.repositories import AccountRepository
from voicehub_identity.domain.account.value_objects import (
    AccountRole,
    AccountStatus,
    DemographicProfile,
    Email,
)

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "AccountRepository",
    "AccountRole",
    "AccountStatus",
    "AccountStoreError",
    "DemographicProfile",
    "Email",
    "InvalidEmailError",
    "InvalidStatusTransitionError",
]
