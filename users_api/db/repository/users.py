"""Repository primitives for user entities."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from users_api.db.models.user import User


def create_user(session: Session, *, name: str, email: str, password: str) -> User:
    """Create and return a user row."""
    user = User(name=name, email=email, password=password)
    session.add(user)
    session.flush()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: str) -> User | None:
    """Fetch a user by id."""
    return session.get(User, user_id)


def list_users(session: Session) -> list[User]:
    """List every stored user."""
    stmt = select(User).order_by(User.name, User.id)
    return list(session.scalars(stmt))


def update_user(session: Session, user: User, *, name: str, email: str, password: str) -> User:
    """Replace the mutable fields of an existing user."""
    user.name = name
    user.email = email
    user.password = password
    session.flush()
    session.refresh(user)
    return user


def delete_user(session: Session, user: User) -> None:
    """Remove a user row."""
    session.delete(user)
    session.flush()
