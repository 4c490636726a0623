"""
Exception handlers for the Ultrashots server.

This package contains custom exception handlers for different error types
and a setup function to register them with a FastAPI application.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ultrashots.core.logging_config import get_logger
from ultrashots.server.exceptions import AuthenticationRequired, FormValidationError

from .global_handler import global_exception_handler
from .http_handlers import (
    authentication_handler,
    form_validation_handler,
    http_exception_handler,
    request_validation_handler,
)

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with a FastAPI application.

    This function should be called during application initialization for
    every application that serves requests (root, web and api).

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AuthenticationRequired, authentication_handler)
    app.add_exception_handler(FormValidationError, form_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = [
    "authentication_handler",
    "form_validation_handler",
    "global_exception_handler",
    "http_exception_handler",
    "request_validation_handler",
    "setup_exception_handlers",
]
