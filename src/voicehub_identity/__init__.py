"""VoiceHub Identity - accounts, OAuth sign-in and reviewer approval.

This module handles all identity-related concerns:
- Account management ((email, role) identities, approval status)
- OAuth sign-in and provisioning (Google, GitHub)
- Reviewer application decisions
- Email notifications (approval, rejection)
"""

from voicehub_identity.application.dtos import (
    AuthResult,
    OAuthIntent,
    OAuthProviderName,
    ProviderEmail,
    ProviderProfile,
    ProviderTokens,
)
from voicehub_identity.application.ports import OAuthProviderAdapter
from voicehub_identity.application.services import (
    OAuthIdentityResolver,
    ReviewerReviewService,
)
from voicehub_identity.domain.account import (
    Account,
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AccountRepository,
    AccountRole,
    AccountStatus,
    AccountStoreError,
    DemographicProfile,
    Email,
    InvalidEmailError,
    InvalidStatusTransitionError,
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

__all__ = [
    # Domain - Account
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
    # Exceptions
    "AccountDeactivatedError",
    "AdminMustUseAdminLoginError",
    "ApplicationRejectedError",
    "InvalidInputError",
    "NoEmailAvailableError",
    "OAuthError",
    "PendingApprovalError",
    "ProviderExchangeFailedError",
    "StoreFailureError",
    # DTOs and ports
    "AuthResult",
    "OAuthIntent",
    "OAuthProviderAdapter",
    "OAuthProviderName",
    "ProviderEmail",
    "ProviderProfile",
    "ProviderTokens",
    # Application Services
    "OAuthIdentityResolver",
    "ReviewerReviewService",
]
