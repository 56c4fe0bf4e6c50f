"""Footer content endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from homeharbor.core.database.entities.footer_contents import FooterContent
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.common import SuccessResponse
from homeharbor.core.models.io.content import (
    FooterContentCreate,
    FooterContentRead,
    FooterContentUpdate,
    FooterReorderRequest,
)

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["footer"])

NOT_FOUND = "Footer content not found"


@router.get("", response_model=List[FooterContentRead], summary="List Footer Content")
async def list_footer(repos: RepositoriesDep) -> List[FooterContentRead]:
    """Every footer entry, grouped by section and ordered by position."""
    return [FooterContentRead.model_validate(f) for f in await repos.footer.list()]


@router.get("/section/{section}", response_model=List[FooterContentRead], summary="Footer Section")
async def footer_section(section: str, repos: RepositoriesDep) -> List[FooterContentRead]:
    return [FooterContentRead.model_validate(f) for f in await repos.footer.by_section(section)]


@router.get("/{item_id}", response_model=FooterContentRead, summary="Get Footer Entry")
async def get_footer_item(item_id: int, repos: RepositoriesDep) -> FooterContentRead:
    item = await repos.footer.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return FooterContentRead.model_validate(item)


@router.post("", response_model=FooterContentRead, status_code=status.HTTP_201_CREATED, summary="Create Footer Entry")
async def create_footer_item(body: FooterContentCreate, repos: RepositoriesDep) -> FooterContentRead:
    item = await repos.footer.create(FooterContent(**body.model_dump()))
    return FooterContentRead.model_validate(item)


@router.patch("/{item_id}", response_model=FooterContentRead, summary="Update Footer Entry")
async def update_footer_item(item_id: int, body: FooterContentUpdate, repos: RepositoriesDep) -> FooterContentRead:
    item = await repos.footer.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    item = await repos.footer.apply_changes(item, body.model_dump(exclude_unset=True))
    return FooterContentRead.model_validate(item)


@router.delete("/{item_id}", response_model=SuccessResponse, summary="Delete Footer Entry")
async def delete_footer_item(item_id: int, repos: RepositoriesDep) -> SuccessResponse:
    if not await repos.footer.delete(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return SuccessResponse()


@router.post("/{item_id}/reorder", response_model=SuccessResponse, summary="Move Footer Entry")
async def reorder_footer_item(item_id: int, body: FooterReorderRequest, repos: RepositoriesDep) -> SuccessResponse:
    """Move the entry to ``newPosition`` inside its section; the section is renumbered from 0."""
    if not await repos.footer.reorder(item_id, body.new_position):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return SuccessResponse()
