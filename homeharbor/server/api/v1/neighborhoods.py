"""
Neighborhood guide endpoints.

Public reads only see active neighborhoods; ``/all`` lists every row for
the admin console.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response, status

from homeharbor.core.database.entities.neighborhoods import Neighborhood
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.neighborhoods import NeighborhoodCreate, NeighborhoodRead, NeighborhoodUpdate

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["neighborhoods"])

NOT_FOUND = "Neighborhood not found"
DUPLICATE = "A neighborhood with this name already exists in this city"


@router.get("", response_model=List[NeighborhoodRead], summary="List Active Neighborhoods")
async def list_neighborhoods(
    repos: RepositoriesDep, city: Optional[str] = None, search: Optional[str] = None
) -> List[NeighborhoodRead]:
    rows = await repos.neighborhoods.active(city=city, search=search)
    return [NeighborhoodRead.model_validate(n) for n in rows]


@router.get("/all", response_model=List[NeighborhoodRead], summary="List All Neighborhoods")
async def list_all_neighborhoods(repos: RepositoriesDep) -> List[NeighborhoodRead]:
    return [NeighborhoodRead.model_validate(n) for n in await repos.neighborhoods.list()]


@router.get("/{neighborhood_id}", response_model=NeighborhoodRead, summary="Get Neighborhood")
async def get_neighborhood(neighborhood_id: int, repos: RepositoriesDep) -> NeighborhoodRead:
    neighborhood = await repos.neighborhoods.get_active(neighborhood_id)
    if neighborhood is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return NeighborhoodRead.model_validate(neighborhood)


@router.post(
    "",
    response_model=NeighborhoodRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Neighborhood",
    responses={409: {"description": "Name already used in this city"}},
)
async def create_neighborhood(body: NeighborhoodCreate, repos: RepositoriesDep) -> NeighborhoodRead:
    if await repos.neighborhoods.name_taken(body.name, body.city):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE)
    neighborhood = await repos.neighborhoods.create(Neighborhood(**body.model_dump()))
    logger.info(f"Created neighborhood {neighborhood.name} in {neighborhood.city}")
    return NeighborhoodRead.model_validate(neighborhood)


@router.put("/{neighborhood_id}", response_model=NeighborhoodRead, summary="Update Neighborhood")
async def update_neighborhood(
    neighborhood_id: int, body: NeighborhoodUpdate, repos: RepositoriesDep
) -> NeighborhoodRead:
    neighborhood = await repos.neighborhoods.get_by_id(neighborhood_id)
    if neighborhood is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    changes = body.model_dump(exclude_unset=True)
    name = changes.get("name", neighborhood.name)
    city = changes.get("city", neighborhood.city)
    if (name, city) != (neighborhood.name, neighborhood.city) and await repos.neighborhoods.name_taken(
        name, city, exclude_id=neighborhood_id
    ):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE)

    neighborhood = await repos.neighborhoods.apply_changes(neighborhood, changes)
    return NeighborhoodRead.model_validate(neighborhood)


@router.delete("/{neighborhood_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Neighborhood")
async def delete_neighborhood(neighborhood_id: int, repos: RepositoriesDep) -> Response:
    if not await repos.neighborhoods.delete(neighborhood_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
