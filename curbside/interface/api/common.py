"""Helpers shared by the API routes."""

from collections.abc import Mapping, Sequence
from typing import Any

import logfire
import pydantic
from fastapi import HTTPException, status

from curbside.domain.error import (
    AccessDeniedError,
    BusinessRuleViolationError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from curbside.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the authenticated user's ID or fail with 401."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id


def http_error(error: DomainError) -> HTTPException:
    """Map a domain error onto the HTTP status the API reports for it."""
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
        detail = f"{error.resource} not found"
    elif isinstance(error, (AccessDeniedError, NotAuthorizedError)):
        code = status.HTTP_403_FORBIDDEN
        detail = str(error)
    elif isinstance(error, InvalidCredentialsError):
        code = status.HTTP_401_UNAUTHORIZED
        detail = str(error)
    elif isinstance(error, (ValidationError, BusinessRuleViolationError)):
        code = status.HTTP_400_BAD_REQUEST
        detail = str(error)
    else:
        logfire.error("Unmapped domain error", error=str(error))
        code = status.HTTP_400_BAD_REQUEST
        detail = str(error)

    logfire.warn(
        "Request rejected",
        status_code=code,
        error_type=type(error).__name__,
        error=str(error),
    )
    return HTTPException(status_code=code, detail=detail)


def validation_message(errors: Sequence[Mapping[str, Any]]) -> str:
    """One-line summary of the first pydantic error: "<field>: <message>"."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def bad_request(error: ValueError) -> HTTPException:
    """400 for input that failed value-object or model validation."""
    if isinstance(error, pydantic.ValidationError):
        detail = validation_message(error.errors())
    else:
        detail = str(error)
    logfire.warn("Validation error", error=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
