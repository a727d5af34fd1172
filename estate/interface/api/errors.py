"""Exception handlers translating domain errors to HTTP responses."""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from estate.adapter.error import StorageError
from estate.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message, **extra})


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain and unexpected errors."""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logfire.warn("Resource not found", path=request.url.path, error=str(exc))
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
        logfire.warn("Uniqueness conflict", path=request.url.path, field=exc.field)
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            str(exc),
            errors={exc.field: [f"The {exc.field} has already been taken."]},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logfire.warn("Validation failed", path=request.url.path, error=str(exc))
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    @app.exception_handler(pydantic.ValidationError)
    async def model_validation_handler(
        request: Request, exc: pydantic.ValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logfire.warn("Entity validation failed", path=request.url.path, errors=errors)
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation failed", errors=errors
        )

    @app.exception_handler(BusinessRuleViolationError)
    async def business_rule_handler(
        request: Request, exc: BusinessRuleViolationError
    ) -> JSONResponse:
        logfire.warn("Operation refused", path=request.url.path, error=str(exc))
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(StorageError)
    async def storage_error_handler(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        logfire.error("Storage failure", path=request.url.path, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to store file")

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.error(
            "Unexpected error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
