"""
Crawler blocking middleware.

Requests from known crawlers are refused with 503 before they reach routing.
"""

import re
from typing import Callable, Pattern, Sequence

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from isuumo.core.logging_config import get_logger

logger = get_logger(__name__)

BOT_PATTERNS: Sequence[Pattern[str]] = (
    re.compile(r"ISUCONbot(-Mobile)?"),
    re.compile(r"ISUCONbot-Image/"),
    re.compile(r"Mediapartners-ISUCON"),
    re.compile(r"ISUCONCoffee"),
    re.compile(r"ISUCONFeedSeeker(Beta)?"),
    re.compile(r"crawler \(https://isucon\.invalid/(support/faq/|help/jp/)"),
    re.compile(r"isubot"),
    re.compile(r"Isupider"),
    re.compile(r"Isupider(-image)?\+"),
    re.compile(r"(bot|crawler|spider)(?:[-_ ./;@()]|$)", re.IGNORECASE),
)


def is_bot(user_agent: str) -> bool:
    """Whether a User-Agent header belongs to a blocked crawler."""
    return any(pattern.search(user_agent) for pattern in BOT_PATTERNS)


class BotGuardMiddleware(BaseHTTPMiddleware):
    """Answer crawler requests with 503 Service Unavailable."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        user_agent = request.headers.get("user-agent", "")
        if user_agent and is_bot(user_agent):
            logger.debug(f"Blocked crawler request: {request.method} {request.url.path} ua={user_agent!r}")
            return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
        return await call_next(request)
