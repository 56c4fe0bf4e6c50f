"""
Location endpoints.

``propertyCount`` is always computed from the properties table; the stored
column is never trusted.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from homeharbor.core.database.entities.locations import Location
from homeharbor.core.database.repositories.bundle import RepositoryBundle
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.locations import LocationCreate, LocationRead, LocationUpdate
from homeharbor.core.municipalities import get_municipality_code

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["locations"])


def location_read(location: Location, property_count: int) -> LocationRead:
    return LocationRead.model_validate(location).model_copy(update={"property_count": property_count})


async def create_location(repos: RepositoryBundle, body: LocationCreate) -> LocationRead:
    data = body.model_dump()
    if not data.get("municipality_code"):
        data["municipality_code"] = get_municipality_code(body.city)
    location = await repos.locations.create(Location(**data, property_count=0))
    logger.info(f"Created location {location.name} (municipality {location.municipality_code or '-'})")
    return location_read(location, 0)


async def update_location(repos: RepositoryBundle, location_id: int, body: LocationUpdate) -> LocationRead:
    location = await repos.locations.get_by_id(location_id)
    if location is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    location = await repos.locations.apply_changes(location, body.model_dump(exclude_unset=True))
    return location_read(location, await repos.locations.property_count_for(location.city))


async def delete_location(repos: RepositoryBundle, location_id: int) -> None:
    if not await repos.locations.delete(location_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")


@router.get(
    "",
    response_model=List[LocationRead],
    summary="List Locations",
    description="All locations with live property counts, busiest first.",
)
async def list_locations(repos: RepositoriesDep) -> List[LocationRead]:
    rows = await repos.locations.with_property_counts()
    return [location_read(location, count) for location, count in rows]


@router.get("/{location_id}", response_model=LocationRead, summary="Get Location")
async def get_location(location_id: int, repos: RepositoriesDep) -> LocationRead:
    location = await repos.locations.get_by_id(location_id)
    if location is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return location_read(location, await repos.locations.property_count_for(location.name))


@router.post("", response_model=LocationRead, status_code=status.HTTP_201_CREATED, summary="Create Location")
async def post_location(body: LocationCreate, repos: RepositoriesDep) -> LocationRead:
    """
    Create a location.

    When ``municipalityCode`` is omitted it is looked up from the city name
    in the table of Finnish municipalities (empty for unknown cities).
    """
    return await create_location(repos, body)


@router.put("/{location_id}", response_model=LocationRead, summary="Update Location")
async def put_location(location_id: int, body: LocationUpdate, repos: RepositoriesDep) -> LocationRead:
    return await update_location(repos, location_id, body)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Location")
async def remove_location(location_id: int, repos: RepositoriesDep) -> Response:
    await delete_location(repos, location_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
