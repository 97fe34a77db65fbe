"""
Database repository layer using SQLModel.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- chairs: chair listing, search, import and purchase operations
- estates: estate listing, search, import, nazotte and recommendation operations
"""

from .base import FEATURES_FILTER, AsyncBaseRepository, QueryBuilder
from .chairs import ChairRepository
from .estates import EstateRepository

__all__ = [
    "FEATURES_FILTER",
    "AsyncBaseRepository",
    "ChairRepository",
    "EstateRepository",
    "QueryBuilder",
]
