"""Mapping from domain errors to HTTP responses."""

import math

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from jerga.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    DuplicateFlagError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    RateLimitedError,
    UnauthenticatedError,
    ValidationError,
)
from jerga.domain.model.common import utcnow

# Looked up along the exception MRO, so a subclass entry wins over its base.
STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    BusinessRuleViolationError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateFlagError: status.HTTP_409_CONFLICT,
    RateLimitedError: status.HTTP_429_TOO_MANY_REQUESTS,
    PersistenceError: status.HTTP_503_SERVICE_UNAVAILABLE,
    DomainError: status.HTTP_400_BAD_REQUEST,
}


def retry_after_seconds(error: RateLimitedError) -> int:
    """Whole seconds until the caller's window resets, at least 1."""
    remaining = (error.reset_at - utcnow()).total_seconds()
    return max(1, math.ceil(remaining))


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as ``{"detail": ...}`` with its mapped status."""
    status_code = next(
        (STATUS_BY_ERROR[cls] for cls in type(exc).__mro__ if cls in STATUS_BY_ERROR),
        status.HTTP_400_BAD_REQUEST,
    )

    headers: dict[str, str] = {}
    if isinstance(exc, RateLimitedError):
        headers["Retry-After"] = str(retry_after_seconds(exc))

    if status_code >= 500:
        logfire.error(
            "Request failed on persistence",
            path=request.url.path,
            error=str(exc),
        )
    else:
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
        )

    return JSONResponse(
        status_code=status_code, content={"detail": str(exc)}, headers=headers
    )


async def handle_value_error(request: Request, exc: Exception) -> JSONResponse:
    """Value objects raise ValueError on malformed input."""
    logfire.warn("Invalid value", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for every domain error type."""
    for error_type in STATUS_BY_ERROR:
        app.add_exception_handler(error_type, handle_domain_error)
    app.add_exception_handler(ValueError, handle_value_error)
