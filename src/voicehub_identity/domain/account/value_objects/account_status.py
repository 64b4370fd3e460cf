from enum import Enum


class AccountStatus(str, Enum):
    """Approval state of an account, independent of ``is_active``.

    Self-registered reviewers start as PENDING. Only an administrator moves
    them to ACTIVE or REJECTED.
    """

    ACTIVE = "active"
    PENDING = "pending"
    REJECTED = "rejected"
