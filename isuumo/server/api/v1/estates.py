"""
Estate API Endpoints.

Listing, search, map-area ("nazotte") search, CSV import and document requests
for estates.
"""

from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from isuumo.core.database import transaction
from isuumo.core.importers import parse_estates
from isuumo.core.logging_config import get_logger
from isuumo.core.models.domain.conditions import (
    EstateSearchCondition,
    require_any_condition,
    split_features,
)
from isuumo.core.models.domain.geometry import DrawnArea
from isuumo.core.models.io.estates import (
    DocumentRequest,
    EstateListResponse,
    EstateRead,
    EstateSearchResponse,
    NazotteRequest,
    NazotteResponse,
)
from isuumo.server.core import constant
from isuumo.server.core.config import settings
from isuumo.server.services.deps import EstateConditionDep, EstateRepoDep, SessionDep

logger = get_logger(__name__)
router = APIRouter()


@router.get(
    "/low_priced",
    response_model=EstateListResponse,
    response_model_by_alias=True,
    summary="Low Priced Estates",
    description="Estates with the lowest rent.",
)
async def low_priced_estates(repo: EstateRepoDep):
    estates = await repo.low_priced(settings.limits.low_priced)
    return EstateListResponse(estates=[EstateRead.model_validate(e) for e in estates])


@router.get(
    "/search",
    response_model=EstateSearchResponse,
    response_model_by_alias=True,
    summary="Search Estates",
    description="Search estates by door size and rent ranges and by features.",
    response_description="One page of estates and the total number of matches.",
)
async def search_estates(
    repo: EstateRepoDep,
    condition: EstateConditionDep,
    page: int = Query(..., ge=0, le=constant.MAX_SEARCH_PAGE),
    per_page: int = Query(..., alias="perPage", ge=1, le=constant.MAX_SEARCH_PER_PAGE),
    door_height_range_id: Optional[str] = Query(None, alias="doorHeightRangeId"),
    door_width_range_id: Optional[str] = Query(None, alias="doorWidthRangeId"),
    rent_range_id: Optional[str] = Query(None, alias="rentRangeId"),
    features: Optional[str] = None,
):
    filters = require_any_condition(
        {
            "door_height_t": condition.door_height.resolve("doorHeightRangeId", door_height_range_id),
            "door_width_t": condition.door_width.resolve("doorWidthRangeId", door_width_range_id),
            "rent_t": condition.rent.resolve("rentRangeId", rent_range_id),
            "features": split_features(features),
        }
    )
    count = await repo.count(filters)
    estates = await repo.list(limit=per_page, offset=per_page * page, filters=filters)
    return EstateSearchResponse(count=count, estates=[EstateRead.model_validate(e) for e in estates])


@router.get(
    "/search/condition",
    response_model=EstateSearchCondition,
    response_model_by_alias=True,
    summary="Estate Search Conditions",
    description="Range buckets and allowed values offered by the estate search form.",
)
async def estate_search_condition(condition: EstateConditionDep):
    return condition


@router.post(
    "",
    status_code=201,
    summary="Import Estates",
    description="Bulk import estates from a CSV upload in the multipart field `estates`.",
)
async def import_estates(
    session: SessionDep,
    repo: EstateRepoDep,
    condition: EstateConditionDep,
    estates: Optional[UploadFile] = File(None),
):
    if estates is None:
        raise HTTPException(status_code=400, detail="multipart field 'estates' is required")
    batch = parse_estates(await estates.read(), condition)
    async with transaction(session, "post_api_estate"):
        await repo.bulk_insert(batch)
    logger.info(f"Imported {len(batch)} estates from {estates.filename}")
    return Response(status_code=201)


@router.post(
    "/nazotte",
    response_model=NazotteResponse,
    response_model_by_alias=True,
    summary="Search Estates In Area",
    description="Most popular estates strictly inside an outline drawn on the map.",
)
async def nazotte_search(body: NazotteRequest, repo: EstateRepoDep):
    """
    Area search.

    Candidates come from the outline's bounding box and are then tested for
    strict containment, so estates on the outline itself are left out.
    ``count`` is the number of estates returned, not the number of matches.
    """
    area = DrawnArea(body.coordinates)
    estates = await repo.within_area(area, settings.limits.nazotte)
    return NazotteResponse(estates=[EstateRead.model_validate(e) for e in estates], count=len(estates))


@router.post(
    "/req_doc/{estate_id}",
    summary="Request Estate Documents",
    description="Ask for the documents of an estate to be sent to an email address.",
)
async def request_document(estate_id: int, body: DocumentRequest, repo: EstateRepoDep):
    estate = await repo.get_by_id(estate_id)
    if estate is None:
        raise HTTPException(status_code=404, detail=f"Estate {estate_id} not found")
    logger.info(f"Documents of estate {estate_id} requested by {body.email}")
    return Response(status_code=200)


@router.get(
    "/{estate_id}",
    response_model=EstateRead,
    response_model_by_alias=True,
    summary="Get Estate",
)
async def get_estate(estate_id: int, repo: EstateRepoDep):
    estate = await repo.get_by_id(estate_id)
    if estate is None:
        raise HTTPException(status_code=404, detail=f"Estate {estate_id} not found")
    return EstateRead.model_validate(estate)
