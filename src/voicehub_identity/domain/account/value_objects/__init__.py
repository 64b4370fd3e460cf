"""Value objects for the account domain."""

from voicehub_identity.domain.account.value_objects.account_role import AccountRole
from voicehub_identity.domain.account.value_objects.account_status import (
    AccountStatus,
)
from voicehub_identity.domain.account.value_objects.demographic_profile import (
    DemographicProfile,
)
from voicehub_identity.domain.account.value_objects.email import Email

__all__ = [
    "AccountRole",
    "AccountStatus",
    "DemographicProfile",
    "Email",
]
