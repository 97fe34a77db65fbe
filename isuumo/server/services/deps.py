"""
Request-scoped dependencies.

FastAPI caches dependencies per request, so a route that asks for both a
repository and the session receives the same ``AsyncSession`` twice.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from isuumo.core.database import get_session
from isuumo.core.database.repositories import ChairRepository, EstateRepository
from isuumo.core.models.domain.conditions import (
    ChairSearchCondition,
    EstateSearchCondition,
    load_chair_condition,
    load_estate_condition,
)
from isuumo.server.core.config import settings

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_chair_repository(session: SessionDep) -> ChairRepository:
    return ChairRepository(session)


def get_estate_repository(session: SessionDep) -> EstateRepository:
    return EstateRepository(session)


def get_chair_condition() -> ChairSearchCondition:
    return load_chair_condition(settings.condition_dir)


def get_estate_condition() -> EstateSearchCondition:
    return load_estate_condition(settings.condition_dir)


ChairRepoDep = Annotated[ChairRepository, Depends(get_chair_repository)]
EstateRepoDep = Annotated[EstateRepository, Depends(get_estate_repository)]
ChairConditionDep = Annotated[ChairSearchCondition, Depends(get_chair_condition)]
EstateConditionDep = Annotated[EstateSearchCondition, Depends(get_estate_condition)]
