"""
Client error handlers.

Every malformed request is answered with 400 Bad Request: FastAPI's request
validation errors (bad JSON, missing fields, non-integer ids or page numbers)
as well as the domain errors raised while reading search conditions or CSV
uploads.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from isuumo.core.errors import IsuumoError
from isuumo.core.logging_config import get_logger

logger = get_logger(__name__)


def _location(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ()))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turn FastAPI request validation failures into 400 responses."""
    errors = exc.errors()
    logger.info(
        f"Invalid request {request.method} {request.url.path}: "
        + "; ".join(f"{_location(e)}: {e.get('msg')}" for e in errors)
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors]},
    )


async def domain_exception_handler(request: Request, exc: IsuumoError) -> JSONResponse:
    """Turn domain errors into 400 responses."""
    logger.info(f"Rejected request {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})
