"""Model module imports for SQLAlchemy metadata registration."""

from users_api.db.models.user import Base
from users_api.db.models.user import User

__all__ = [
    "Base",
    "User",
]
