"""
City of Oulu open data endpoints and the nearby-attractions lookup.

Upstream failures are logged and answered with a 500 and a short
``{"error": ...}`` message; the upstream detail stays in the log.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from homeharbor.core.logging_config import get_logger

from ...services.deps import OuluClientDep
from ...services.errors import OpenDataError
from ...services.oulu_data import DEFAULT_ATTRACTION_RADIUS_KM

logger = get_logger(__name__)

router = APIRouter(tags=["oulu-open-data"])
attractions_router = APIRouter(tags=["attractions"])


def _upstream_failure(message: str, error: OpenDataError) -> HTTPException:
    logger.error(f"{message}: {error}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _extra_filters(request: Request, *reserved: str) -> Dict[str, str]:
    """Query parameters other than ``reserved``, passed through as datastore filters."""
    return {key: value for key, value in request.query_params.items() if key not in reserved}


@router.get("/datasets", summary="List Datasets")
async def list_datasets(client: OuluClientDep) -> List[str]:
    try:
        return await client.list_datasets()
    except OpenDataError as e:
        raise _upstream_failure("Failed to fetch datasets", e) from e


@router.get("/datasets/{dataset_id}", summary="Get Dataset")
async def get_dataset(dataset_id: str, client: OuluClientDep) -> Dict[str, Any]:
    try:
        return await client.get_dataset(dataset_id)
    except OpenDataError as e:
        raise _upstream_failure("Failed to fetch dataset information", e) from e


@router.get(
    "/search",
    summary="Search Datasets",
    responses={400: {"description": "Query parameter q is missing"}},
)
async def search_datasets(
    client: OuluClientDep,
    q: Optional[str] = Query(default=None),
    limit: int = Query(default=10, ge=1),
) -> Dict[str, Any]:
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Query parameter "q" is required')
    try:
        return await client.search_datasets(q, limit)
    except OpenDataError as e:
        raise _upstream_failure("Failed to search datasets", e) from e


@router.get(
    "/resources/{resource_id}",
    summary="Resource Records",
    description="Datastore records of one resource. Any other query parameter is used as a field filter.",
)
async def resource_data(
    resource_id: str,
    request: Request,
    client: OuluClientDep,
    limit: int = Query(default=100, ge=1),
    offset: int = Query(default=0, ge=0),
) -> Dict[str, Any]:
    filters = _extra_filters(request, "limit", "offset")
    try:
        return await client.get_resource_data(resource_id, limit, offset, filters)
    except OpenDataError as e:
        raise _upstream_failure("Failed to fetch resource data", e) from e


@router.get("/property-prices", summary="Property Price Data")
async def property_prices(
    request: Request,
    client: OuluClientDep,
    limit: int = Query(default=50, ge=1),
) -> Dict[str, Any]:
    """
    Property records from the Oulu real-estate dataset.

    Falls back to the household-per-district dataset when the primary one has
    no usable resource or fails to load.
    """
    try:
        return await client.get_property_prices(limit, _extra_filters(request, "limit"))
    except OpenDataError as e:
        raise _upstream_failure("Failed to fetch property price data", e) from e


@router.get("/pois/{poi_type}", summary="Points Of Interest")
async def points_of_interest(
    poi_type: str,
    client: OuluClientDep,
    limit: int = Query(default=100, ge=1),
) -> Dict[str, Any]:
    try:
        return await client.get_points_of_interest(poi_type, limit)
    except OpenDataError as e:
        raise _upstream_failure("Failed to fetch points of interest data", e) from e


@attractions_router.get(
    "/nearby",
    summary="Nearby Attractions",
    description="Oulu attractions within `radius` km (default 10) of the given point.",
)
async def nearby_attractions(
    client: OuluClientDep,
    lat: Optional[float] = Query(default=None),
    lng: Optional[float] = Query(default=None),
    radius: float = Query(default=DEFAULT_ATTRACTION_RADIUS_KM, gt=0),
) -> List[Dict[str, Any]]:
    if lat is None or lng is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing or invalid lat/lng")
    try:
        return await client.nearby_attractions(lat, lng, radius)
    except OpenDataError as e:
        raise _upstream_failure("Failed to fetch nearby attractions", e) from e
