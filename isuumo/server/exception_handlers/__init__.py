"""
Exception handlers for the isuumo server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from isuumo.core.errors import IsuumoError
from isuumo.core.logging_config import get_logger

from .client_errors import domain_exception_handler, validation_exception_handler
from .global_handler import global_exception_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IsuumoError, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = [
    "domain_exception_handler",
    "global_exception_handler",
    "setup_exception_handlers",
    "validation_exception_handler",
]
