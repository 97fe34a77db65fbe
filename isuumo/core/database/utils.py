"""
Database utility functions for engine and session management.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- reset_schema: Drops and recreates all listing tables on a session's connection
- transaction: Named unit of work that commits or rolls back a session
"""

from __future__ import annotations

import re
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from isuumo.core.logging_config import get_logger

from .base import Base

logger = get_logger(__name__)


def normalize_url(db_url: str) -> str:
    """Rewrite ``postgres://`` style URLs to the asyncpg driver."""
    return re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)


def create_engine(db_url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The helper normalizes Postgres URLs to ensure the async driver is used.
    For example, it rewrites ``postgresql://`` and other variants to
    ``postgresql+asyncpg://``.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    return create_async_engine(normalize_url(db_url), pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def reset_schema(session: AsyncSession) -> None:
    """Drop and recreate every listing table using the session's connection.

    The caller owns the transaction; nothing is committed here.
    """
    conn = await session.connection()
    await conn.run_sync(Base.metadata.drop_all)
    await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def transaction(session: AsyncSession, name: str) -> AsyncIterator[AsyncSession]:
    """Run a block as one named unit of work.

    Commits when the block finishes, otherwise logs the failure, rolls back
    and re-raises.

    Args:
        session: Session the block writes through
        name: Label used in log lines
    """
    try:
        yield session
        await session.commit()
    except Exception as e:
        logger.error(f"Failed to commit tx {name}: {e!r}")
        await session.rollback()
        raise
