"""OAuth sign-in exceptions.

Every failure of the OAuth sign-in flow is raised as one of these
exceptions. The presentation layer turns them into an error response
using ``kind``, ``status_code`` and ``retryable``.
"""

from typing import Any


class OAuthError(Exception):
    """Base exception for all OAuth sign-in errors."""

    kind = "OAuthError"
    status_code = 400

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Any = None,
    ):
        self.message = message
        self.details = details
        super().__init__(self.message)

    @property
    def retryable(self) -> bool:
        """Whether repeating the same request may succeed."""
        return False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, kind={self.kind!r}, "
            f"details={self.details!r})"
        )


class InvalidInputError(OAuthError):
    """Raised when the code, role or provider of a request is invalid."""

    kind = "InvalidInput"
    status_code = 400

    def __init__(self, message: str = "Invalid input", details: Any = None):
        super().__init__(message, details)


class ProviderExchangeFailedError(OAuthError):
    """Raised when the provider rejects the authorization code exchange.

    ``transient`` is set when the provider could not be reached or answered
    with a server error; only then is a retry worthwhile, since a rejected
    authorization code stays rejected.
    """

    kind = "ProviderExchangeFailed"
    status_code = 400

    def __init__(
        self,
        message: str = "Token exchange with the provider failed",
        details: Any = None,
        transient: bool = False,
    ):
        self.transient = transient
        super().__init__(message, details)

    @property
    def retryable(self) -> bool:
        return self.transient


class NoEmailAvailableError(OAuthError):
    """Raised when the provider account exposes no email address."""

    kind = "NoEmailAvailable"
    status_code = 400

    def __init__(
        self,
        message: str = (
            "No email found in the provider account. Please add an email to "
            "your account or make one available to applications."
        ),
    ):
        super().__init__(message)


class AdminMustUseAdminLoginError(OAuthError):
    """Raised when an admin account tries to sign in through OAuth."""

    kind = "AdminMustUseAdminLogin"
    status_code = 403

    def __init__(self, message: str = "Admin users must use admin login"):
        super().__init__(message)


class PendingApprovalError(OAuthError):
    """Raised when a reviewer account still awaits admin approval."""

    kind = "PendingApproval"
    status_code = 403

    def __init__(
        self,
        message: str = (
            "Your reviewer account is pending approval. "
            "Please wait for admin approval."
        ),
    ):
        super().__init__(message)


class ApplicationRejectedError(OAuthError):
    """Raised when a reviewer application was rejected."""

    kind = "ApplicationRejected"
    status_code = 403

    def __init__(self, message: str = "Your reviewer application has been rejected."):
        super().__init__(message)


class AccountDeactivatedError(OAuthError):
    """Raised when the account has been deactivated."""

    kind = "AccountDeactivated"
    status_code = 403

    def __init__(
        self,
        message: str = (
            "Your account has been deactivated. Please contact support."
        ),
    ):
        super().__init__(message)


class StoreFailureError(OAuthError):
    """Raised when looking up, creating or updating the account failed."""

    kind = "StoreFailure"
    status_code = 500

    def __init__(self, message: str = "Authentication failed", details: Any = None):
        super().__init__(message, details)

    @property
    def retryable(self) -> bool:
        return True
