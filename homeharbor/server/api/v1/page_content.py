"""Page content block endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from homeharbor.core.database.entities.page_contents import PageContent
from homeharbor.core.models.io.common import SuccessResponse
from homeharbor.core.models.io.content import (
    PageContentCreate,
    PageContentRead,
    PageContentUpdate,
    PagePositionRequest,
)

from ...services.deps import RepositoriesDep

router = APIRouter(tags=["page-content"])

NOT_FOUND = "Page content not found"


@router.get("", response_model=List[PageContentRead], summary="List Page Content")
async def list_page_content(repos: RepositoriesDep) -> List[PageContentRead]:
    return [PageContentRead.model_validate(p) for p in await repos.page_content.list()]


@router.get("/type/{page_type}", response_model=List[PageContentRead], summary="Blocks of a Page")
async def page_blocks(page_type: str, repos: RepositoriesDep) -> List[PageContentRead]:
    return [PageContentRead.model_validate(p) for p in await repos.page_content.by_page(page_type)]


@router.get("/type/{page_type}/section/{section}", response_model=List[PageContentRead], summary="Blocks of a Section")
async def section_blocks(page_type: str, section: str, repos: RepositoriesDep) -> List[PageContentRead]:
    return [PageContentRead.model_validate(p) for p in await repos.page_content.by_page(page_type, section)]


@router.get("/{item_id}", response_model=PageContentRead, summary="Get Page Block")
async def get_page_block(item_id: int, repos: RepositoriesDep) -> PageContentRead:
    item = await repos.page_content.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return PageContentRead.model_validate(item)


@router.post("", response_model=PageContentRead, status_code=status.HTTP_201_CREATED, summary="Create Page Block")
async def create_page_block(body: PageContentCreate, repos: RepositoriesDep) -> PageContentRead:
    item = await repos.page_content.create(PageContent(**body.model_dump()))
    return PageContentRead.model_validate(item)


@router.put("/{item_id}", response_model=PageContentRead, summary="Update Page Block")
async def update_page_block(item_id: int, body: PageContentUpdate, repos: RepositoriesDep) -> PageContentRead:
    item = await repos.page_content.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    item = await repos.page_content.apply_changes(item, body.model_dump(exclude_unset=True))
    return PageContentRead.model_validate(item)


@router.delete("/{item_id}", response_model=SuccessResponse, summary="Delete Page Block")
async def delete_page_block(item_id: int, repos: RepositoriesDep) -> SuccessResponse:
    if not await repos.page_content.delete(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return SuccessResponse()


@router.put("/{item_id}/reorder", response_model=SuccessResponse, summary="Move Page Block")
async def reorder_page_block(item_id: int, body: PagePositionRequest, repos: RepositoriesDep) -> SuccessResponse:
    if not await repos.page_content.reorder(item_id, body.position):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return SuccessResponse()
