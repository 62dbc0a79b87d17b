"""Global exception handlers for consistent error responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from forecast_api.schemas.error import ErrorDetail, ErrorResponse

if TYPE_CHECKING:
    from fastapi.exceptions import RequestValidationError

    from forecast_api.exceptions.business import (
        BadRequestError,
        ResourceNotFoundError,
    )


def _get_logger():
    """Lazy import logger to avoid circular dependencies."""
    import logging

    return logging.getLogger(__name__)


def _error_response(status_code: int, msg: str, error_type: str) -> JSONResponse:
    error_response = ErrorResponse(detail=[ErrorDetail(msg=msg, type=error_type)])
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(mode="json"),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Returns 400 Bad Request for GET requests (path/query parameter validation),
    Returns 422 Unprocessable Entity for other methods (request body validation).
    """
    logger = _get_logger()
    logger.warning(f"Validation error on {request.url.path}: {exc}")

    details = [
        ErrorDetail(msg=error["msg"], type=error["type"]) for error in exc.errors()
    ]

    status_code = (
        status.HTTP_400_BAD_REQUEST
        if request.method == "GET"
        else status.HTTP_422_UNPROCESSABLE_CONTENT
    )

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(detail=details).model_dump(mode="json"),
    )


async def bad_request_exception_handler(
    request: Request, exc: BadRequestError
) -> JSONResponse:
    """Handle malformed or mismatched identifiers."""
    logger = _get_logger()
    logger.warning(f"Bad request on {request.url.path}: {exc}")

    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc), "bad_request_error")


async def resource_not_found_exception_handler(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:
    """Handle resource not found errors."""
    logger = _get_logger()
    logger.warning(f"Resource not found error on {request.url.path}: {exc}")

    return _error_response(status.HTTP_404_NOT_FOUND, str(exc), "not_found_error")


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with proper formatting."""
    logger = _get_logger()

    # Determine the error type based on status code
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error_type = "not_found_error"
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error_type = "method_not_allowed"
    elif 400 <= exc.status_code < 500:
        error_type = "validation_error"
    else:
        error_type = "server_error"

    logger.warning(
        f"HTTP exception on {request.url.path}: {exc.detail} (status: {exc.status_code})"
    )

    response = _error_response(exc.status_code, str(exc.detail), error_type)

    # Keep headers set by the router, e.g. Allow on 405
    if exc.headers:
        response.headers.update(exc.headers)

    return response


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions.

    This is the catch-all handler that prevents stack traces from leaking to clients.
    The full exception details are logged server-side for debugging.
    """
    logger = _get_logger()
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred",
        "internal_error",
    )
