"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
crawler blocking, request timing), registers exception handlers and includes
all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from isuumo.core.database import init_db
from isuumo.core.logging_config import get_logger, setup_logging
from isuumo.core.monitoring import initialize_logfire

from .api.v1 import chairs, estates, health, initialize, recommended
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import BotGuardMiddleware, RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Makes sure the listing tables exist before the first request is served.
    """
    try:
        logger.info("Starting up isuumo server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info("Shutting down isuumo server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    isuumo API

    Chair and estate listings: search, map-area search, CSV import, chair
    purchase and estate recommendations for a chair.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)
# Added last so it runs first and crawlers never reach routing.
app.add_middleware(BotGuardMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(initialize.router, tags=["initialize"])
app.include_router(chairs.router, prefix=f"{constant.API_PREFIX}/chair", tags=["chairs"])
app.include_router(estates.router, prefix=f"{constant.API_PREFIX}/estate", tags=["estates"])
app.include_router(recommended.router, prefix=f"{constant.API_PREFIX}/recommended_estate", tags=["recommended"])
