"""SQLAlchemy model for the Account aggregate."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from voicehub.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from voicehub_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class AccountModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting Account aggregates.

    (email, role) is unique: one person can hold a reviewer and an admin
    account with the same email as two rows.
    """

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("email", "role", name="uq_accounts_email_role"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    profile_complete: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # Demographic profile
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age: Mapped[str | None] = mapped_column(String(20), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    languages: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    constituency: Mapped[str | None] = mapped_column(String(255), nullable=True)
    educational_background: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    employment_status: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    id_number: Mapped[str | None] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<AccountModel(id={self.id}, email={self.email}, "
            f"role={self.role}, status={self.status})>"
        )
