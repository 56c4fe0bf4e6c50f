"""
Blog post endpoints.

Public reads only return published posts. Slugs are unique and, when the
client does not send one, derived from the title.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from homeharbor.core.database.base import utc_now
from homeharbor.core.database.entities.posts import Post
from homeharbor.core.database.entities.users import User
from homeharbor.core.database.repositories.bundle import RepositoryBundle
from homeharbor.core.logging_config import get_logger
from homeharbor.core.models.io.posts import PostAuthor, PostCreate, PostListResponse, PostRead, PostUpdate
from homeharbor.core.text import is_valid_slug, slugify

from ...services.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["posts"])

NOT_FOUND = "Post not found"


def post_read(post: Post, authors: Dict[int, User]) -> PostRead:
    author = authors.get(post.author_id) if post.author_id is not None else None
    return PostRead.model_validate(post).model_copy(
        update={"author": PostAuthor.model_validate(author) if author is not None else None}
    )


async def _with_authors(repos: RepositoryBundle, posts: List[Post]) -> List[PostRead]:
    authors = await repos.posts.authors_for(posts)
    return [post_read(p, authors) for p in posts]


def _slug_from_title(title: str) -> str:
    slug = slugify(title)
    if len(slug) < 3 or not is_valid_slug(slug):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not derive a valid slug from the title; please provide one",
        )
    return slug


@router.get(
    "",
    response_model=PostListResponse,
    summary="List Published Posts",
    description="Published posts, most recently published first, optionally filtered by category.",
)
async def list_posts(
    repos: RepositoriesDep,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    category: Optional[str] = None,
) -> PostListResponse:
    posts, total = await repos.posts.published(page, limit, category)
    return PostListResponse(posts=await _with_authors(repos, posts), total=total, page=page, limit=limit)


@router.get("/all", response_model=PostListResponse, summary="List All Posts")
async def list_all_posts(
    repos: RepositoriesDep,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> PostListResponse:
    posts, total = await repos.posts.all_posts(page, limit)
    return PostListResponse(posts=await _with_authors(repos, posts), total=total, page=page, limit=limit)


@router.get("/slug/{slug}", response_model=PostRead, summary="Get Published Post by Slug")
async def get_post_by_slug(slug: str, repos: RepositoriesDep) -> PostRead:
    post = await repos.posts.get_by_slug(slug, published_only=True)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return (await _with_authors(repos, [post]))[0]


@router.get("/{post_id}", response_model=PostRead, summary="Get Post")
async def get_post(post_id: int, repos: RepositoriesDep) -> PostRead:
    post = await repos.posts.get_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return (await _with_authors(repos, [post]))[0]


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
    responses={409: {"description": "Slug already in use"}},
)
async def create_post(body: PostCreate, repos: RepositoriesDep) -> PostRead:
    """
    Create a blog post.

    - **slug**: optional; generated from the title when omitted.
    - **isPublished**: when true and ``publishedAt`` is not given, the post
      is stamped as published now.
    """
    data = body.model_dump()
    data["slug"] = body.slug or _slug_from_title(body.title)
    if await repos.posts.slug_taken(data["slug"]):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A post with this slug already exists")
    if data["is_published"] and data["published_at"] is None:
        data["published_at"] = utc_now()

    post = await repos.posts.create(Post(**data))
    logger.info(f"Created post {post.slug} (published={post.is_published})")
    return (await _with_authors(repos, [post]))[0]


@router.put("/{post_id}", response_model=PostRead, summary="Update Post")
async def update_post(post_id: int, body: PostUpdate, repos: RepositoriesDep) -> PostRead:
    post = await repos.posts.get_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    changes = body.model_dump(exclude_unset=True)
    if not changes.get("slug") and body.title and body.title != post.title:
        changes["slug"] = _slug_from_title(body.title)
    elif "slug" in changes and not changes["slug"]:
        del changes["slug"]
    if "slug" in changes and await repos.posts.slug_taken(changes["slug"], exclude_id=post_id):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="A post with this slug already exists")
    if changes.get("is_published") and post.published_at is None and not changes.get("published_at"):
        changes["published_at"] = utc_now()

    post = await repos.posts.apply_changes(post, {**changes, "updated_at": utc_now()})
    return (await _with_authors(repos, [post]))[0]


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Post")
async def delete_post(post_id: int, repos: RepositoriesDep) -> Response:
    if not await repos.posts.delete(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
