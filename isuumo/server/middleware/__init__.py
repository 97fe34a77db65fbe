"""
Middleware modules for the isuumo server.

This package contains custom middleware for request logging and crawler
blocking.
"""

from .bot_guard import BotGuardMiddleware, is_bot
from .request_logging import RequestLoggingMiddleware

__all__ = ["BotGuardMiddleware", "RequestLoggingMiddleware", "is_bot"]
