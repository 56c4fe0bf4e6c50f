"""Static page (about, privacy policy, ...) endpoints under ``/api/admin/page-content``."""

from __future__ import annotations

from fastapi import APIRouter, Path

from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.common import SuccessResponse
from homeharbor.core.models.io.content import StaticPageBody

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["static-pages"])

SlugPath = Path(max_length=100)


@router.get("/{slug}", response_model=StaticPageBody, summary="Get Static Page")
async def get_static_page(repos: RepositoriesDep, slug: str = SlugPath) -> StaticPageBody:
    """Page body, empty when the page was never saved."""
    return StaticPageBody(content=await repos.static_pages.get_content(slug))


@router.post("/{slug}", response_model=SuccessResponse, summary="Save Static Page")
async def save_static_page(body: StaticPageBody, repos: RepositoriesDep, slug: str = SlugPath) -> SuccessResponse:
    await repos.static_pages.upsert(slug, body.content)
    logger.info(f"Saved static page {slug}")
    return SuccessResponse()
