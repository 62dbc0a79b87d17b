"""Centralized exception handler registration for FastAPI apps."""

from typing import TYPE_CHECKING, cast

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

if TYPE_CHECKING:
    from starlette.types import ExceptionHandler

from forecast_api.exceptions import BadRequestError, ResourceNotFoundError
from forecast_api.exceptions.handlers import (
    bad_request_exception_handler,
    general_exception_handler,
    http_exception_handler,
    resource_not_found_exception_handler,
    validation_exception_handler,
)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers for the application.

    Order matters: more specific handlers should be registered before general ones.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(
        HTTPException, cast("ExceptionHandler", http_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(
        BadRequestError, cast("ExceptionHandler", bad_request_exception_handler)
    )
    app.add_exception_handler(
        ResourceNotFoundError,
        cast("ExceptionHandler", resource_not_found_exception_handler),
    )
    app.add_exception_handler(
        Exception, cast("ExceptionHandler", general_exception_handler)
    )


__all__ = ["register_exception_handlers"]
