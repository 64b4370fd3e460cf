"""SQLAlchemy declarative base for voicehub_identity models.

Uses the same metadata as voicehub's Base so all tables are created together.
"""

from voicehub.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
