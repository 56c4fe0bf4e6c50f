"""Google Places proxy, so the browser never needs the Maps key."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query, status

from homeharbor.core.logging_config import get_logger

from ...services.deps import PlacesClientDep
from ...services.errors import OpenDataError, PlacesConfigurationError

logger = get_logger(__name__)

router = APIRouter(tags=["places"])


@router.get(
    "/nearby",
    summary="Nearby Places",
    description="Proxy for the Google Places nearby search (1500 m radius). The response is passed through unchanged.",
    responses={
        400: {"description": "lat, lng or type is missing"},
        500: {"description": "Maps key not configured or the upstream call failed"},
    },
)
async def nearby_places(
    client: PlacesClientDep,
    lat: Optional[str] = Query(default=None),
    lng: Optional[str] = Query(default=None),
    place_type: Optional[str] = Query(default=None, alias="type"),
) -> Any:
    if not lat or not lng or not place_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required parameters: lat, lng, type"
        )
    try:
        return await client.nearby(lat, lng, place_type)
    except PlacesConfigurationError as e:
        logger.error(str(e))
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    except OpenDataError as e:
        logger.error(f"Error fetching nearby places: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch nearby places"
        ) from e
