"""Service helpers for user API operations."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from users_api.core.errors import DuplicateEmailError
from users_api.core.errors import NotFoundError
from users_api.db.models.user import User
from users_api.db.repository.users import create_user
from users_api.db.repository.users import delete_user
from users_api.db.repository.users import get_user
from users_api.db.repository.users import list_users
from users_api.db.repository.users import update_user
from users_api.schemas.user import UserRequest

logger = logging.getLogger(__name__)


def create_user_service(session: Session, payload: UserRequest) -> User:
    """Create and persist a new user."""
    try:
        user = create_user(
            session,
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
        session.commit()
    except IntegrityError:
        session.rollback()
        raise DuplicateEmailError() from None
    logger.info("Created user id=%s", user.id)
    return user


def get_user_service(session: Session, user_id: str) -> User:
    """Fetch a user or raise not found."""
    user = get_user(session, user_id)
    if user is None:
        raise NotFoundError(object_id=user_id, object_type=User.__name__)
    return user


def list_users_service(session: Session) -> list[User]:
    return list_users(session)


def update_user_service(session: Session, user_id: str, payload: UserRequest) -> User:
    """Apply a user payload to an existing user."""
    user = get_user_service(session, user_id)
    try:
        user = update_user(
            session,
            user,
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
        session.commit()
    except IntegrityError:
        session.rollback()
        raise DuplicateEmailError() from None
    logger.info("Updated user id=%s", user.id)
    return user


def delete_user_service(session: Session, user_id: str) -> User:
    """Delete an existing user and return the removed record."""
    user = get_user_service(session, user_id)
    delete_user(session, user)
    session.commit()
    logger.info("Deleted user id=%s", user_id)
    return user
