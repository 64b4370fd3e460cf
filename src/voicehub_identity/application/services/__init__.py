"""Application services for identity management."""

from voicehub_identity.application.services.oauth_identity_resolver import (
    SIGN_IN_GATES,
    OAuthIdentityResolver,
    SignInGate,
    check_sign_in_gates,
    select_email,
)
from voicehub_identity.application.services.reviewer_review_service import (
    ReviewerReviewService,
)

__all__ = [
    "SIGN_IN_GATES",
    "OAuthIdentityResolver",
    "ReviewerReviewService",
    "SignInGate",
    "check_sign_in_gates",
    "select_email",
]
