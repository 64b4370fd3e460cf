"""Account aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from voicehub.domain.shared.time import utc_now
from voicehub_identity.domain.account.exceptions import InvalidStatusTransitionError
from voicehub_identity.domain.account.value_objects import (
    AccountRole,
    AccountStatus,
    DemographicProfile,
    Email,
)


class Account:
    """
    Account aggregate root.

    An account is identified by the pair (email, role): the same person may
    hold a reviewer account and an admin account as two separate accounts.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email],
        role: Union[str, AccountRole] = AccountRole.REVIEWER,
        status: Union[str, AccountStatus] = AccountStatus.PENDING,
        id: UUID | None = None,
        name: str | None = None,
        password_hash: str | None = None,
        is_active: bool = True,
        profile_complete: bool = False,
        profile: DemographicProfile | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        last_login_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._role = role if isinstance(role, AccountRole) else AccountRole(role)
        self._status = (
            status if isinstance(status, AccountStatus) else AccountStatus(status)
        )
        self._name = name
        self._password_hash = password_hash
        self._is_active = is_active
        self._profile_complete = profile_complete
        self._profile = profile or DemographicProfile.empty()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()
        self._last_login_at = last_login_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def role(self) -> AccountRole:
        return self._role

    @property
    def status(self) -> AccountStatus:
        return self._status

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_admin(self) -> bool:
        return self._role == AccountRole.ADMIN

    @property
    def is_reviewer(self) -> bool:
        return self._role == AccountRole.REVIEWER

    @property
    def profile_complete(self) -> bool:
        return self._profile_complete

    @property
    def profile(self) -> DemographicProfile:
        return self._profile

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def last_login_at(self) -> datetime | None:
        return self._last_login_at

    def record_login(self, at: datetime | None = None) -> None:
        self._last_login_at = at or utc_now()
        self._updated_at = self._last_login_at

    def approve(self) -> None:
        self._transition(AccountStatus.ACTIVE)

    def reject(self) -> None:
        self._transition(AccountStatus.REJECTED)

    def _transition(self, target: AccountStatus) -> None:
        # Only pending applications can be decided
        if self._status != AccountStatus.PENDING:
            raise InvalidStatusTransitionError(self._status.value, target.value)
        self._status = target
        self._updated_at = utc_now()

    @classmethod
    def register_oauth_reviewer(
        cls,
        email: Union[str, Email],
        name: str | None = None,
    ) -> "Account":
        """Provision a self-registered reviewer that signed up through OAuth.

        OAuth accounts have no password. The name falls back to the local
        part of the email address.
        """
        email_obj = email if isinstance(email, Email) else Email(email)
        return cls(
            email=email_obj,
            role=AccountRole.REVIEWER,
            status=AccountStatus.PENDING,
            name=name or email_obj.local_part,
            password_hash=None,
            is_active=True,
            profile_complete=False,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        role: Union[str, AccountRole],
        status: Union[str, AccountStatus],
        name: str | None,
        password_hash: str | None,
        is_active: bool,
        profile_complete: bool,
        profile: DemographicProfile,
        created_at: datetime,
        updated_at: datetime,
        last_login_at: datetime | None,
    ) -> "Account":
        return cls(
            id=id,
            email=email,
            role=role,
            status=status,
            name=name,
            password_hash=password_hash,
            is_active=is_active,
            profile_complete=profile_complete,
            profile=profile,
            created_at=created_at,
            updated_at=updated_at,
            last_login_at=last_login_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id}, email={self._email.value}, "
            f"role={self._role.value}, status={self._status.value})"
        )
