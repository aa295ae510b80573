"""Structured API errors and the handlers that render them."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from todogenie.config import get_settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiError(Exception):
    """An error that maps onto a structured JSON error response."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str | None = None,
        error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        self.error = error


def error_body(
    message: str,
    error_code: str | None = None,
    error: BaseException | None = None,
) -> dict[str, Any]:
    """Build the error payload shared by every failing response.

    Diagnostic details are only attached in development.
    """
    body: dict[str, Any] = {
        "success": False,
        "message": message,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if error_code:
        body["error_code"] = error_code
    if error is not None and get_settings().is_development:
        details: dict[str, Any] = {"name": type(error).__name__, "message": str(error)}
        if isinstance(error, ValidationError | RequestValidationError):
            details["errors"] = [
                {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                for err in error.errors()
            ]
        body["details"] = details
    return body


def validation_failed(message: str, error: BaseException) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, message, "VALIDATION_ERROR", error)


def validate_payload(
    schema: type[ModelT],
    data: Any,
    message: str = "Validation failed",
    **overrides: Any,
) -> ModelT:
    """Validate an untyped payload, raising a 400 VALIDATION_ERROR on failure.

    ``overrides`` are merged into object payloads; a missing body counts as
    an empty object. Non-object payloads are left as-is and fail validation.
    """
    if overrides:
        if data is None:
            data = {}
        if isinstance(data, dict):
            data = {**data, **overrides}
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise validation_failed(message, e) from e


@contextmanager
def persistence_guard(db: Session, action: str) -> Iterator[None]:
    """Turn database failures inside a handler step into a 500 response."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(f"Database error {action}")
        db.rollback()
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Internal server error {action}",
            "INTERNAL_SERVER_ERROR",
            e,
        ) from e


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.error_code, exc.error),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", "VALIDATION_ERROR", exc),
    )


UNMATCHED_ROUTE_STATUSES = (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)


def is_api_path(path: str) -> bool:
    return path == "/api" or path.startswith("/api/")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework-level HTTP errors.

    Any API request that matches no endpoint, by path or by method, is a 404.
    """
    path = request.url.path
    if exc.status_code in UNMATCHED_ROUTE_STATUSES and is_api_path(path):
        logger.info(f"404 - API endpoint not found: {request.method} {path}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body(f"API endpoint {path} not found", "ENDPOINT_NOT_FOUND"),
        )
    return JSONResponse(
        status_code=exc.status_code, content=error_body(str(exc.detail)), headers=exc.headers
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so clients always receive JSON."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", "UNHANDLED_ERROR", exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
