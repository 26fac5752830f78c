"""Exception handlers translating errors to HTTP responses."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from forum.adapter.error import MediaStoreError
from forum.domain.error import (
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

# Starlette renamed the 422 constant and warns on the old name
UNPROCESSABLE_CONTENT = 422


def _error_response(
    status_code: int, detail: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"detail": detail}, headers=headers
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.warn(
        "Resource not found",
        resource=exc.resource,
        identifier=exc.identifier,
        path=request.url.path,
    )
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def not_authorized_handler(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    logfire.warn(
        "Forbidden modification attempt",
        resource=exc.resource,
        resource_id=exc.resource_id,
        path=request.url.path,
    )
    return _error_response(
        status.HTTP_403_FORBIDDEN, f"Not authorized to modify this {exc.resource}"
    )


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logfire.warn("Conflict", field=exc.field, path=request.url.path)
    return _error_response(status.HTTP_409_CONFLICT, str(exc))


async def unauthenticated_handler(
    request: Request, exc: UnauthenticatedError | InvalidCredentialsError
) -> JSONResponse:
    logfire.warn("Authentication failed", error=str(exc), path=request.url.path)
    return _error_response(
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logfire.warn("Invalid input", error=str(exc), path=request.url.path)
    return _error_response(UNPROCESSABLE_CONTENT, str(exc))


async def model_validation_handler(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'value'}: {error['msg']}"
        for error in exc.errors()
    )
    logfire.warn("Model validation failed", error=detail, path=request.url.path)
    return _error_response(UNPROCESSABLE_CONTENT, detail)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logfire.warn("Domain error", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def media_store_error_handler(
    request: Request, exc: MediaStoreError
) -> JSONResponse:
    logfire.error("Media store failure", error=str(exc), path=request.url.path)
    return _error_response(status.HTTP_502_BAD_GATEWAY, "Image service unavailable")


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Handlers are looked up along the exception's MRO, so the specific
    domain errors take precedence over the ``DomainError`` fallback.
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(NotAuthorizedError, not_authorized_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(UnauthenticatedError, unauthenticated_handler)
    app.add_exception_handler(InvalidCredentialsError, unauthenticated_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(pydantic.ValidationError, model_validation_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(MediaStoreError, media_store_error_handler)
