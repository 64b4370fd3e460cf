"""
Pytest configuration for voicehub_identity tests.

Provides accounts in each status the OAuth sign-in gates care about.
"""

import pytest

from voicehub_identity.domain.account import Account, AccountRole, AccountStatus

REVIEWER_EMAIL = "reviewer@example.com"
ADMIN_EMAIL = "admin@example.com"


@pytest.fixture
def pending_reviewer() -> Account:
    return Account.register_oauth_reviewer(REVIEWER_EMAIL, name="Pending Reviewer")


@pytest.fixture
def active_reviewer() -> Account:
    return Account(
        email=REVIEWER_EMAIL,
        role=AccountRole.REVIEWER,
        status=AccountStatus.ACTIVE,
        name="Active Reviewer",
    )


@pytest.fixture
def rejected_reviewer() -> Account:
    return Account(
        email=REVIEWER_EMAIL,
        role=AccountRole.REVIEWER,
        status=AccountStatus.REJECTED,
        name="Rejected Reviewer",
    )


@pytest.fixture
def deactivated_reviewer() -> Account:
    return Account(
        email=REVIEWER_EMAIL,
        role=AccountRole.REVIEWER,
        status=AccountStatus.ACTIVE,
        is_active=False,
    )


@pytest.fixture
def admin_account() -> Account:
    return Account(
        email=ADMIN_EMAIL,
        role=AccountRole.ADMIN,
        status=AccountStatus.ACTIVE,
        password_hash="$2b$12$hash",
    )
