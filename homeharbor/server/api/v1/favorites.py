"""Favorite (bookmark) endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from homeharbor.core.database.entities.favorites import Favorite
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.common import MessageResponse
from homeharbor.core.models.io.favorites import FavoriteCheck, FavoriteCreate, FavoriteRead, FavoriteWithProperty
from homeharbor.core.models.io.properties import PropertyRead

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["favorites"])


@router.get("", response_model=List[FavoriteWithProperty], summary="List Favorites")
async def list_favorites(
    repos: RepositoriesDep, user_id: Optional[int] = Query(default=None, alias="userId")
) -> List[FavoriteWithProperty]:
    """A user's favorites with the favorited property embedded, newest first."""
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")
    rows = await repos.favorites.with_properties(user_id)
    return [
        FavoriteWithProperty.model_validate(favorite).model_copy(
            update={"property": PropertyRead.model_validate(prop) if prop is not None else None}
        )
        for favorite, prop in rows
    ]


@router.post(
    "",
    response_model=FavoriteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Favorite",
    responses={409: {"description": "Property is already a favorite"}},
)
async def add_favorite(body: FavoriteCreate, repos: RepositoriesDep) -> FavoriteRead:
    if await repos.favorites.find(body.user_id, body.property_id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Property is already in favorites")
    favorite = await repos.favorites.create(Favorite(user_id=body.user_id, property_id=body.property_id))
    return FavoriteRead.model_validate(favorite)


@router.delete("/{user_id}/{property_id}", response_model=MessageResponse, summary="Remove Favorite")
async def remove_favorite(user_id: int, property_id: int, repos: RepositoriesDep) -> MessageResponse:
    if not await repos.favorites.remove(user_id, property_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found")
    return MessageResponse(message="Favorite removed successfully")


@router.get("/check/{user_id}/{property_id}", response_model=FavoriteCheck, summary="Is Favorite")
async def check_favorite(user_id: int, property_id: int, repos: RepositoriesDep) -> FavoriteCheck:
    return FavoriteCheck(is_favorite=await repos.favorites.find(user_id, property_id) is not None)


@router.get("/user/{user_id}", response_model=List[PropertyRead], summary="Favorited Properties")
async def favorite_properties(user_id: int, repos: RepositoriesDep) -> List[PropertyRead]:
    return [PropertyRead.model_validate(p) for p in await repos.favorites.favorite_properties(user_id)]
