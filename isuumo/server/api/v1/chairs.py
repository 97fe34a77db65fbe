"""
Chair API Endpoints.

Listing, search, CSV import and purchase of chairs. Every chair shown to a
visitor must be in stock; the detail endpoint answers 404 for sold-out chairs.
"""

from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from isuumo.core.database import transaction
from isuumo.core.importers import parse_chairs
from isuumo.core.logging_config import get_logger
from isuumo.core.models.domain.conditions import (
    ChairSearchCondition,
    require_any_condition,
    split_features,
)
from isuumo.core.models.io.chairs import (
    BuyChairRequest,
    ChairListResponse,
    ChairRead,
    ChairSearchResponse,
)
from isuumo.server.core import constant
from isuumo.server.core.config import settings
from isuumo.server.services.deps import ChairConditionDep, ChairRepoDep, SessionDep

logger = get_logger(__name__)
router = APIRouter()


@router.get(
    "/low_priced",
    response_model=ChairListResponse,
    summary="Low Priced Chairs",
    description="Cheapest chairs that are still in stock.",
)
async def low_priced_chairs(repo: ChairRepoDep):
    chairs = await repo.low_priced(settings.limits.low_priced)
    return ChairListResponse(chairs=[ChairRead.model_validate(c) for c in chairs])


@router.get(
    "/search",
    response_model=ChairSearchResponse,
    summary="Search Chairs",
    description="Search in-stock chairs by size and price ranges, kind, color and features.",
    response_description="One page of chairs and the total number of matches.",
)
async def search_chairs(
    repo: ChairRepoDep,
    condition: ChairConditionDep,
    page: int = Query(..., ge=0, le=constant.MAX_SEARCH_PAGE),
    per_page: int = Query(..., alias="perPage", ge=1, le=constant.MAX_SEARCH_PER_PAGE),
    price_range_id: Optional[str] = Query(None, alias="priceRangeId"),
    height_range_id: Optional[str] = Query(None, alias="heightRangeId"),
    width_range_id: Optional[str] = Query(None, alias="widthRangeId"),
    depth_range_id: Optional[str] = Query(None, alias="depthRangeId"),
    kind: Optional[str] = None,
    color: Optional[str] = None,
    features: Optional[str] = None,
):
    """
    Search chairs.

    Range parameters take the ids of the chair condition document. Empty
    parameters are ignored, but at least one condition must be given.
    ``features`` is a comma-separated list; a chair must carry all of them.
    """
    filters = require_any_condition(
        {
            "price_t": condition.price.resolve("priceRangeId", price_range_id),
            "height_t": condition.height.resolve("heightRangeId", height_range_id),
            "width_t": condition.width.resolve("widthRangeId", width_range_id),
            "depth_t": condition.depth.resolve("depthRangeId", depth_range_id),
            "kind": kind,
            "color": color,
            "features": split_features(features),
        }
    )
    count = await repo.count(filters)
    chairs = await repo.list(limit=per_page, offset=per_page * page, filters=filters)
    return ChairSearchResponse(count=count, chairs=[ChairRead.model_validate(c) for c in chairs])


@router.get(
    "/search/condition",
    response_model=ChairSearchCondition,
    response_model_by_alias=True,
    summary="Chair Search Conditions",
    description="Range buckets and allowed values offered by the chair search form.",
)
async def chair_search_condition(condition: ChairConditionDep):
    return condition


@router.post(
    "",
    status_code=201,
    summary="Import Chairs",
    description="Bulk import chairs from a CSV upload in the multipart field `chairs`.",
)
async def import_chairs(
    session: SessionDep,
    repo: ChairRepoDep,
    condition: ChairConditionDep,
    chairs: Optional[UploadFile] = File(None),
):
    if chairs is None:
        raise HTTPException(status_code=400, detail="multipart field 'chairs' is required")
    batch = parse_chairs(await chairs.read(), condition)
    async with transaction(session, "post_api_chair"):
        await repo.bulk_insert(batch)
    logger.info(f"Imported {len(batch)} chairs from {chairs.filename}")
    return Response(status_code=201)


@router.post(
    "/buy/{chair_id}",
    summary="Buy Chair",
    description="Take one unit of a chair out of stock.",
)
async def buy_chair(chair_id: int, body: BuyChairRequest, repo: ChairRepoDep):
    if not await repo.buy(chair_id):
        raise HTTPException(status_code=404, detail=f"Chair {chair_id} is not available")
    logger.info(f"Chair {chair_id} bought by {body.email}")
    return Response(status_code=200)


@router.get(
    "/{chair_id}",
    response_model=ChairRead,
    summary="Get Chair",
    description="Details of an in-stock chair.",
)
async def get_chair(chair_id: int, repo: ChairRepoDep):
    chair = await repo.get_by_id(chair_id)
    if chair is None:
        raise HTTPException(status_code=404, detail=f"Chair {chair_id} not found")
    if chair.stock <= 0:
        logger.info(f"Chair {chair_id} requested while sold out")
        raise HTTPException(status_code=404, detail=f"Chair {chair_id} is sold out")
    return ChairRead.model_validate(chair)
