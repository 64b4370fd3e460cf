"""SQLAlchemy implementation of AccountRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from voicehub.domain.shared.time import ensure_tz_aware
from voicehub_identity.domain.account import (
    Account,
    AccountAlreadyExistsError,
    AccountRepository,
    AccountRole,
    AccountStatus,
    AccountStoreError,
    DemographicProfile,
    Email,
)
from voicehub_identity.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
)

logger = logging.getLogger(__name__)


class AccountRepositorySQLAlchemy(AccountRepository):
    """SQLAlchemy implementation of the AccountRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        model = await self._find_model_by_id(account_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email_and_role(
        self,
        email: Union[str, Email],
        role: AccountRole,
    ) -> Account | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(AccountModel).where(
            AccountModel.email == email_value,
            AccountModel.role == role.value,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = f"Failed to look up account {email_value} ({role.value})"
            raise AccountStoreError(msg) from e
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, account: Account) -> None:
        try:
            existing = await self._find_model_by_id(account.id)
            if existing:
                self._update_model(existing, account)
                logger.debug("Updated account: %s", account.id)
            else:
                model = self._map_to_model(account)
                self._session.add(model)
                logger.info(
                    "Created account: %s (email: %s, role: %s)",
                    account.id,
                    account.email,
                    account.role.value,
                )

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise AccountAlreadyExistsError(account.email, account.role.value) from e
            msg = f"Failed to save account {account.id}"
            raise AccountStoreError(msg) from e
        except SQLAlchemyError as e:
            msg = f"Failed to save account {account.id}"
            raise AccountStoreError(msg) from e

    async def list_by_role(
        self,
        role: AccountRole,
        status: AccountStatus | None = None,
    ) -> list[Account]:
        stmt = select(AccountModel).where(AccountModel.role == role.value)
        if status is not None:
            stmt = stmt.where(AccountModel.status == status.value)
        stmt = stmt.order_by(AccountModel.created_at)

        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(AccountModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, account_id: UUID) -> AccountModel | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AccountModel) -> Account:
        return Account.reconstitute(
            id=model.id,
            email=model.email,
            role=model.role,
            status=model.status,
            name=model.name,
            password_hash=model.password_hash,
            is_active=model.is_active,
            profile_complete=model.profile_complete,
            profile=DemographicProfile(
                age=model.age,
                gender=model.gender,
                languages=model.languages,
                location=model.location,
                constituency=model.constituency,
                educational_background=model.educational_background,
                employment_status=model.employment_status,
                phone_number=model.phone_number,
                id_number=model.id_number,
            ),
            # SQLite drops tzinfo
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
        )

    def _map_to_model(self, account: Account) -> AccountModel:
        model = AccountModel(
            id=account.id,
            email=account.email,
            role=account.role.value,
            created_at=account.created_at,
        )
        self._update_model(model, account)
        return model

    def _update_model(self, model: AccountModel, account: Account) -> None:
        profile = account.profile
        model.email = account.email
        model.role = account.role.value
        model.status = account.status.value
        model.name = account.name
        model.password_hash = account.password_hash
        model.is_active = account.is_active
        model.profile_complete = account.profile_complete
        model.last_login_at = account.last_login_at
        model.updated_at = account.updated_at
        model.age = profile.age
        model.gender = profile.gender
        model.languages = list(profile.languages) if profile.languages else None
        model.location = profile.location
        model.constituency = profile.constituency
        model.educational_background = profile.educational_background
        model.employment_status = profile.employment_status
        model.phone_number = profile.phone_number
        model.id_number = profile.id_number
