"""SQLAlchemy implementation for voicehub_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- AccountModel: SQLAlchemy model for accounts
- AccountRepositorySQLAlchemy: Repository implementation for accounts
"""

from voicehub_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from voicehub_identity.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
)
from voicehub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
)

__all__ = [
    "AccountModel",
    "AccountRepositorySQLAlchemy",
    "IdentityBase",
]
