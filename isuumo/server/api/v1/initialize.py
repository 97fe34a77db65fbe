"""
Initialization Endpoint.

Resets the listing tables and optionally reloads them from the initial data
directory. Called before every benchmark run.
"""

import time
from pathlib import Path
from typing import Callable, Optional

from fastapi import APIRouter
from starlette.concurrency import run_in_threadpool

from isuumo.core.database import reset_schema, transaction
from isuumo.core.database.repositories import ChairRepository, EstateRepository
from isuumo.core.importers import ListingBatch, parse_chairs, parse_estates
from isuumo.core.logging_config import get_logger
from isuumo.server.core.config import settings
from isuumo.server.services.deps import ChairConditionDep, EstateConditionDep, SessionDep

logger = get_logger(__name__)
router = APIRouter()

CHAIR_DATA_FILE = "chair.csv"
ESTATE_DATA_FILE = "estate.csv"


def _load_initial_data(name: str, parse: Callable, condition) -> Optional[ListingBatch]:
    if not settings.initial_data_dir:
        return None
    path = Path(settings.initial_data_dir) / name
    if not path.is_file():
        logger.warning(f"Initial data file {path} not found, skipping")
        return None
    return parse(path.read_text(encoding="utf-8-sig"), condition)


@router.post(
    "/initialize",
    summary="Initialize",
    description="Drop and recreate all listing tables, then load the initial data set if one is configured.",
    response_description="Implementation language.",
)
async def initialize(session: SessionDep, chair_condition: ChairConditionDep, estate_condition: EstateConditionDep):
    started = time.perf_counter()
    chairs = await run_in_threadpool(_load_initial_data, CHAIR_DATA_FILE, parse_chairs, chair_condition)
    estates = await run_in_threadpool(_load_initial_data, ESTATE_DATA_FILE, parse_estates, estate_condition)

    async with transaction(session, "initialize"):
        await reset_schema(session)
        session.expunge_all()

        if chairs is not None:
            await ChairRepository(session).bulk_insert(chairs)
        if estates is not None:
            await EstateRepository(session).bulk_insert(estates)

    logger.info(f"Initialized listing tables in {time.perf_counter() - started:.3f}s")
    return {"language": "python"}
