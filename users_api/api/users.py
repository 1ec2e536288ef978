"""User API routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Response
from sqlalchemy.orm import Session

from users_api.core.errors import RequestValidationFailed
from users_api.db.base import get_db_session
from users_api.schemas.error import ErrorResponse
from users_api.schemas.error import ValidationErrorResponse
from users_api.schemas.user import UserRequest
from users_api.schemas.user import UserResponse
from users_api.schemas.user import validate_user_request
from users_api.services.users import create_user_service
from users_api.services.users import delete_user_service
from users_api.services.users import get_user_service
from users_api.services.users import list_users_service
from users_api.services.users import update_user_service

router = APIRouter(prefix="/users", tags=["users"])

_VALIDATION_RESPONSES = {400: {"model": ValidationErrorResponse}}
_NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse}}


def valid_user_request(payload: UserRequest) -> UserRequest:
    """Reject the request before it reaches the service if any constraint fails."""
    violations = validate_user_request(payload)
    if violations:
        raise RequestValidationFailed(violations)
    return payload


@router.post("", status_code=201, responses=_VALIDATION_RESPONSES)
def create_user_endpoint(
    payload: UserRequest = Depends(valid_user_request),
    session: Session = Depends(get_db_session),
) -> Response:
    """Create a user."""
    create_user_service(session, payload)
    return Response(status_code=201)


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND_RESPONSES)
def get_user_endpoint(
    user_id: str,
    session: Session = Depends(get_db_session),
) -> UserResponse:
    """Get a single user by id."""
    return get_user_service(session, user_id)


@router.get("", response_model=list[UserResponse])
def list_users_endpoint(session: Session = Depends(get_db_session)) -> list[UserResponse]:
    """List all users."""
    return list_users_service(session)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_VALIDATION_RESPONSES, **_NOT_FOUND_RESPONSES},
)
def update_user_endpoint(
    user_id: str,
    payload: UserRequest = Depends(valid_user_request),
    session: Session = Depends(get_db_session),
) -> UserResponse:
    """Update a user."""
    return update_user_service(session, user_id, payload)


@router.delete("/{user_id}", status_code=200, responses=_NOT_FOUND_RESPONSES)
def delete_user_endpoint(
    user_id: str,
    session: Session = Depends(get_db_session),
) -> Response:
    """Delete a user."""
    delete_user_service(session, user_id)
    return Response(status_code=200)
