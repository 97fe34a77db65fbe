"""
Chair repository.

Data access for the ``chair`` and ``chair_features`` tables. Every read that
feeds a listing page hides chairs that are out of stock; ``get_by_id`` returns
the raw row and leaves the stock rule to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func, insert, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from isuumo.core.logging_config import get_logger

from ..entities.chairs import Chair, ChairFeature
from .base import FEATURES_FILTER, AsyncBaseRepository, QueryBuilder

logger = get_logger(__name__)


class ChairRepository(AsyncBaseRepository[Chair]):
    """Repository for chair data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Chair)

    async def get_by_id(self, chair_id: int) -> Optional[Chair]:
        stmt = select(Chair).where(Chair.id == chair_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _in_stock(self, stmt, filters: Optional[Dict[str, Any]]):
        filters = dict(filters or {})
        features = filters.pop(FEATURES_FILTER, None)
        stmt = QueryBuilder.apply_filters(stmt, Chair, filters)
        if features:
            stmt = stmt.where(
                col(Chair.id).in_(QueryBuilder.having_all_features(ChairFeature, col(ChairFeature.chair_id), features))
            )
        return stmt.where(Chair.stock > 0)

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Chair]:
        """List in-stock chairs, most popular first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Bucket and text filters (price_t, height_t, width_t,
                depth_t, kind, color) and ``features``

        Returns:
            List of Chair instances
        """
        stmt = QueryBuilder.apply_popularity_order(self._in_stock(select(Chair), filters), Chair)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        stmt = self._in_stock(select(func.count(col(Chair.id))), filters)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def low_priced(self, limit: int) -> List[Chair]:
        """Cheapest in-stock chairs, ties broken by id."""
        stmt = (
            select(Chair)
            .where(Chair.stock > 0)
            .order_by(col(Chair.price).asc(), col(Chair.id).asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def bulk_insert(self, batch) -> int:
        if not batch.listings:
            return 0
        await self.session.execute(insert(Chair), batch.listings)
        if batch.features:
            await self.session.execute(insert(ChairFeature), batch.features)
        logger.info(f"Inserted {len(batch.listings)} chairs and {len(batch.features)} chair features")
        return len(batch.listings)

    async def buy(self, chair_id: int) -> bool:
        """Take one unit of a chair out of stock.

        Returns:
            True if a unit was available and is now sold, False otherwise
        """
        stmt = (
            update(Chair)
            .where(col(Chair.id) == chair_id, col(Chair.stock) > 0)
            .values(stock=col(Chair.stock) - 1)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0
