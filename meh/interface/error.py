"""Mapping of errors to HTTP responses.

Every failure is answered with the same envelope:

    {"error": {"message": "...", "code": 404}}

The code doubles as the HTTP status code.
"""

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from meh.domain.error import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    RateLimitError,
    StoreError,
    ValidationError,
)
from meh.util.error import ConfigurationError

# Most specific first, the first matching class wins
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (RateLimitError, 503),
    (StoreError, 500),
]

GENERIC_MESSAGE = "Internal server error"


def error_response(message: str, code: int) -> JSONResponse:
    """Build the error envelope."""
    return JSONResponse(
        status_code=code,
        content={"error": {"message": message, "code": code}},
    )


def status_for(exc: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in STATUS_CODES:
        if isinstance(exc, error_type):
            return code
    return 400


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    # Store failures may carry driver details, rate limit tags must reach the client
    if isinstance(exc, StoreError):
        logfire.error(
            "Request failed",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            _exc_info=exc,
        )
        return error_response(GENERIC_MESSAGE, code)

    logfire.info(
        "Request rejected",
        path=request.url.path,
        code=code,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(str(exc), code)


async def handle_configuration_error(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    # The message names the missing setting, nothing secret
    logfire.error("Misconfiguration", path=request.url.path, error=str(exc))
    return error_response(str(exc), 500)


async def handle_store_failure(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logfire.error(
        "Database error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(GENERIC_MESSAGE, 500)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return error_response(message, 400)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(ConfigurationError, handle_configuration_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_failure)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
