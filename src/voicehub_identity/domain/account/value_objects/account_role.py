from enum import Enum


class AccountRole(str, Enum):
    """Application roles. Only reviewers can sign themselves up."""

    REVIEWER = "reviewer"
    ADMIN = "admin"

    @property
    def is_self_service(self) -> bool:
        return self is AccountRole.REVIEWER
