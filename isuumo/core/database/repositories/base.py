"""
Base repository interfaces and utilities.

This module provides the repository pattern shared by the chair and estate
repositories. Built with async SQLAlchemy on SQLModel entities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import distinct, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, col, select

if TYPE_CHECKING:
    from isuumo.core.importers.listings import ListingBatch

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)

FEATURES_FILTER = "features"


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface for listing tables."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities in popularity order with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Column equality filters, plus ``features`` for a list of
                feature names that must all be present

        Returns:
            List of entity instances
        """

    @abstractmethod
    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching the same filters ``list`` accepts."""

    @abstractmethod
    async def bulk_insert(self, batch: ListingBatch) -> int:
        """Insert a parsed import batch and its feature rows.

        The caller commits; see ``isuumo.core.database.utils.transaction``.

        Returns:
            Number of listing rows inserted
        """


class QueryBuilder:
    """Utility class for building SQLModel-based listing queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a select statement.

        Keys that are not columns of ``model`` and None values are ignored.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and key in model.model_fields:
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    @staticmethod
    def apply_popularity_order(stmt, model: Type[EntityType]):
        """Order by popularity, most popular first, ties broken by id."""
        return stmt.order_by(col(model.popularity).desc(), col(model.id).asc())

    @staticmethod
    def having_all_features(feature_model: Type[SQLModel], owner_column, names: Sequence[str]):
        """Select owner ids that carry every feature in ``names``.

        Args:
            feature_model: Feature table entity (``ChairFeature``/``EstateFeature``)
            owner_column: Column of ``feature_model`` pointing at the listing
            names: Requested feature names; duplicates are ignored

        Returns:
            Select statement usable inside ``in_()``
        """
        wanted = list(dict.fromkeys(names))
        return (
            select(owner_column)
            .where(col(feature_model.name).in_(wanted))
            .group_by(owner_column)
            .having(func.count(distinct(feature_model.name)) == len(wanted))
        )
