"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer with
in-memory SQLite.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.pool import StaticPool

from isuumo.core.database import Base
from isuumo.core.importers import ListingBatch, parse_chairs, parse_estates
from isuumo.core.models.domain.conditions import load_chair_condition, load_estate_condition


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async_session = sessionmaker(
        bind=in_memory_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture(scope="function")
def chair_batch(chair_csv: str) -> ListingBatch:
    """Parsed sample chairs ready for bulk insert."""
    return parse_chairs(chair_csv, load_chair_condition())


@pytest.fixture(scope="function")
def estate_batch(estate_csv: str) -> ListingBatch:
    """Parsed sample estates ready for bulk insert."""
    return parse_estates(estate_csv, load_estate_condition())
