"""Interface layer errors.

Maps domain and adapter errors onto HTTP responses.
"""

import logfire
from fastapi import HTTPException, status

from feed.adapter.error import AdapterError
from feed.domain.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def http_error(error: DomainError, action: str) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Args:
        error: Error raised by a use case
        action: Short description of what was attempted, for the log

    Returns:
        HTTPException carrying the matching status code
    """
    code = next(
        (code for kind, code in _STATUS_BY_ERROR if isinstance(error, kind)),
        status.HTTP_400_BAD_REQUEST,
    )
    if isinstance(error, AuthorizationError):
        detail = "Unauthorized"
    else:
        detail = str(error)

    logfire.warn(
        f"{action} rejected",
        error=str(error),
        error_type=type(error).__name__,
        status_code=code,
    )
    return HTTPException(status_code=code, detail=detail)


def invalid_identifier(error: ValueError) -> HTTPException:
    """Reject a malformed UUID in a path or body."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Invalid identifier: {error}",
    )


def storage_error(error: AdapterError, action: str) -> HTTPException:
    """Translate an infrastructure failure into a 503.

    Args:
        error: Error raised by an adapter
        action: Short description of what was attempted, for the log

    Returns:
        HTTPException with a generic detail message
    """
    logfire.error(
        f"{action} failed",
        error=str(error),
        error_type=type(error).__name__,
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Media storage is unavailable",
    )
