"""API error envelope and exception handler registration."""

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPStatus
import logging
from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.schemas.error import ErrorResponse
from users_api.schemas.error import FieldError
from users_api.schemas.error import ValidationErrorResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base application exception for explicit API error responses."""

    def __init__(self, *, status_code: int, message: str, error: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error or _reason_phrase(status_code)
        self.message = message


class NotFoundError(APIError):
    """Raised when a requested object does not exist."""

    def __init__(self, *, object_id: str, object_type: str) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            message=f"Object not found. Id: {object_id}, Type: {object_type}",
        )


class DuplicateEmailError(APIError):
    """Raised when an e-mail is already bound to another user."""

    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, message="E-mail already registered")


class RequestValidationFailed(Exception):
    """Carries constraint violations from the route layer to the error handler."""

    def __init__(self, violations: Sequence[FieldError]) -> None:
        super().__init__(f"{len(violations)} constraint violation(s)")
        self.violations = list(violations)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _build_error_response(request: Request, *, status_code: int, message: str, error: str | None = None) -> JSONResponse:
    payload = ErrorResponse(
        path=request.url.path,
        status=status_code,
        error=error or _reason_phrase(status_code),
        message=message,
    )
    return JSONResponse(status_code=status_code, content=payload.to_payload())


def _internal_error_response(request: Request) -> JSONResponse:
    return _build_error_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal server error",
    )


def _build_validation_response(request: Request, envelope: ValidationErrorResponse) -> JSONResponse:
    if not envelope.is_populated:
        logger.error("Validation error response for %s built without violations", envelope.path)
        return _internal_error_response(request)

    logger.info(
        "Rejected %s %s with %d violation(s)",
        request.method,
        envelope.path,
        len(envelope.errors),
    )
    return JSONResponse(status_code=envelope.status, content=envelope.to_payload())


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)
    return "request"


async def request_validation_failed_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    """Render constraint violations as the validation error envelope."""

    envelope = ValidationErrorResponse(path=request.url.path)
    for violation in exc.violations:
        envelope.add_error(violation.field_name, violation.message)
    return _build_validation_response(request, envelope)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report undecodable payloads with the same envelope as constraint failures."""

    envelope = ValidationErrorResponse(path=request.url.path)
    for issue in exc.errors():
        envelope.add_error(
            _format_location(issue.get("loc", ())),
            str(issue.get("msg", "Invalid value")),
        )
    return _build_validation_response(request, envelope)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalize HTTP exceptions to the shared envelope."""

    message = str(exc.detail) if isinstance(exc.detail, str) and exc.detail else _reason_phrase(exc.status_code)
    return _build_error_response(request, status_code=exc.status_code, message=message)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Return explicit domain errors in the shared envelope."""

    return _build_error_response(
        request,
        status_code=exc.status_code,
        error=exc.error,
        message=exc.message,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Avoid leaking internal exceptions while keeping response shape stable."""

    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _internal_error_response(request)


def register_error_handlers(app: FastAPI) -> None:
    """Attach all users API error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationFailed, request_validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
