"""
Estate repository.

Data access for the ``estate`` and ``estate_features`` tables, including the
two geometric lookups: the bounding-box prefilter behind the nazotte search
and the door-size match behind chair recommendations.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import and_, func, insert, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from isuumo.core.logging_config import get_logger
from isuumo.core.models.domain.geometry import BoundingBox, DrawnArea

from ..entities.estates import Estate, EstateFeature
from .base import FEATURES_FILTER, AsyncBaseRepository, QueryBuilder

logger = get_logger(__name__)


class EstateRepository(AsyncBaseRepository[Estate]):
    """Repository for estate data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Estate)

    async def get_by_id(self, estate_id: int) -> Optional[Estate]:
        stmt = select(Estate).where(Estate.id == estate_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _filtered(self, stmt, filters: Optional[Dict[str, Any]]):
        filters = dict(filters or {})
        features = filters.pop(FEATURES_FILTER, None)
        stmt = QueryBuilder.apply_filters(stmt, Estate, filters)
        if features:
            stmt = stmt.where(
                col(Estate.id).in_(
                    QueryBuilder.having_all_features(EstateFeature, col(EstateFeature.estate_id), features)
                )
            )
        return stmt

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Estate]:
        """List estates, most popular first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Bucket filters (rent_t, door_height_t, door_width_t) and ``features``

        Returns:
            List of Estate instances
        """
        stmt = QueryBuilder.apply_popularity_order(self._filtered(select(Estate), filters), Estate)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        stmt = self._filtered(select(func.count(col(Estate.id))), filters)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def low_priced(self, limit: int) -> List[Estate]:
        """Cheapest estates by rent, ties broken by id."""
        stmt = select(Estate).order_by(col(Estate.rent).asc(), col(Estate.id).asc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def in_bounding_box(self, box: BoundingBox) -> List[Estate]:
        """Estates inside ``box`` (edges included), most popular first."""
        stmt = select(Estate).where(
            col(Estate.latitude) <= box.max_latitude,
            col(Estate.latitude) >= box.min_latitude,
            col(Estate.longitude) <= box.max_longitude,
            col(Estate.longitude) >= box.min_longitude,
        )
        stmt = QueryBuilder.apply_popularity_order(stmt, Estate)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def within_area(self, area: DrawnArea, limit: int) -> List[Estate]:
        """Most popular estates strictly inside a drawn area.

        Args:
            area: Outline drawn on the map
            limit: Maximum records to return

        Returns:
            Up to ``limit`` estates in popularity order
        """
        candidates = await self.in_bounding_box(area.bounding_box)
        estates = area.filter(candidates, limit)
        logger.debug(f"Nazotte search kept {len(estates)} of {len(candidates)} bounding-box candidates")
        return estates

    async def fitting_dimensions(self, dimensions: Sequence[int], limit: int) -> List[Estate]:
        """Estates whose door lets an object of the given size through.

        The object passes if its two smallest sides fit the door in either
        orientation.

        Args:
            dimensions: Object sizes; only the two smallest are used
            limit: Maximum records to return
        """
        smallest, second = sorted(dimensions)[:2]
        stmt = select(Estate).where(
            or_(
                and_(col(Estate.door_width) >= smallest, col(Estate.door_height) >= second),
                and_(col(Estate.door_width) >= second, col(Estate.door_height) >= smallest),
            )
        )
        stmt = QueryBuilder.apply_popularity_order(stmt, Estate).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def bulk_insert(self, batch) -> int:
        if not batch.listings:
            return 0
        await self.session.execute(insert(Estate), batch.listings)
        if batch.features:
            await self.session.execute(insert(EstateFeature), batch.features)
        logger.info(f"Inserted {len(batch.listings)} estates and {len(batch.features)} estate features")
        return len(batch.listings)
