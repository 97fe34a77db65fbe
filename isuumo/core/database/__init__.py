"""
Centralized database layer for isuumo.

Structure:
- entities/: SQLModel tables for chairs and estates
- repositories/: Data access layer per listing family
- session.py: Global engine and session factory management
- utils.py: Engine, session, schema and transaction helpers
"""

from . import entities  # noqa: F401  registers tables on Base.metadata
from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    reset_schema,
    transaction,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "reset_schema",
    "transaction",
]
