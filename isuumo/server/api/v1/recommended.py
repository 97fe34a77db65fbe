"""
Recommendation Endpoints.

Suggests estates whose door a given chair fits through.
"""

from fastapi import APIRouter, HTTPException

from isuumo.core.logging_config import get_logger
from isuumo.core.models.io.estates import EstateListResponse, EstateRead
from isuumo.server.core.config import settings
from isuumo.server.services.deps import ChairRepoDep, EstateRepoDep

logger = get_logger(__name__)
router = APIRouter()


@router.get(
    "/{chair_id}",
    response_model=EstateListResponse,
    response_model_by_alias=True,
    summary="Recommended Estates For Chair",
    description="Most popular estates whose door the chair fits through, turned either way.",
)
async def recommended_estates(chair_id: int, chairs: ChairRepoDep, estates: EstateRepoDep):
    """
    Recommend estates for a chair.

    Only the two smallest chair dimensions matter: the chair is carried through
    the door with its largest side pointing forward. Stock is not checked.
    """
    chair = await chairs.get_by_id(chair_id)
    if chair is None:
        raise HTTPException(status_code=404, detail=f"Chair {chair_id} not found")
    matches = await estates.fitting_dimensions(chair.sorted_dimensions(), settings.limits.recommended)
    logger.debug(f"Chair {chair_id} fits {len(matches)} recommended estates")
    return EstateListResponse(estates=[EstateRead.model_validate(e) for e in matches])
