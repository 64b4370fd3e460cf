"""Account domain exceptions.

Custom exceptions for the account domain, used for validation
and business rule violations.
"""


class InvalidEmailError(ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class AccountStoreError(Exception):
    """The account store failed to read or write an account."""

    def __init__(self, message: str = "Account store operation failed") -> None:
        self.message = message
        super().__init__(message)


class AccountAlreadyExistsError(AccountStoreError):
    """An account with the same email already exists for this role."""

    def __init__(self, email: str, role: str) -> None:
        self.email = email
        self.role = role
        super().__init__(f"Account already exists: {email} ({role})")


class AccountNotFoundError(Exception):
    """Account not found."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Account not found: {identifier}")


class InvalidStatusTransitionError(Exception):
    """Status change not allowed from the account's current status."""

    def __init__(self, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot change account status from {current} to {target}")
