from voicehub_identity.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # noqa: E501
    AccountRepositorySQLAlchemy,
)

__all__ = ["AccountRepositorySQLAlchemy"]
