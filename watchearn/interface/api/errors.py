"""Exception handlers mapping errors to JSON responses.

Every error body has an ``error`` message. Business rule violations add a
machine-readable ``reason`` and their context in camelCase.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from watchearn.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from watchearn.util.jwt import JWTError


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")


async def handle_business_rule(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    context = {to_camel(key): value for key, value in exc.context.items()}
    return _error(status.HTTP_400_BAD_REQUEST, str(exc), reason=exc.reason, **context)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_jwt_error(request: Request, exc: JWTError) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, "Unauthorized")


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors, reported as 400."""
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logfire.error(
        "Database error",
        path=request.url.path,
        error=str(exc),
        _exc_info=exc,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        _exc_info=exc,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app.

    Starlette picks the handler of the closest class in the exception's MRO.
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(BusinessRuleViolationError, handle_business_rule)
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(JWTError, handle_jwt_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
