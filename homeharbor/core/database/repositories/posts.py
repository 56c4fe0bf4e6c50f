"""
Blog posts repository.

Public listings only see published posts, ordered by publication date with
the creation date standing in for posts that were never stamped.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.posts import Post
from ..entities.users import User
from .base import QueryBuilder, SQLModelRepository


class PostRepository(SQLModelRepository[Post]):
    """Repository for blog posts."""

    default_order = (Post.created_at.desc(), Post.id.desc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Post)

    async def published(
        self, page: int = 1, limit: int = 10, category: Optional[str] = None
    ) -> Tuple[List[Post], int]:
        conditions = [Post.is_published == True]  # noqa: E712
        if category:
            conditions.append(Post.category == category)
        stmt = (
            select(Post)
            .where(*conditions)
            .order_by(func.coalesce(Post.published_at, Post.created_at).desc(), Post.id.desc())  # type: ignore[union-attr]
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, QueryBuilder.page_offset(page, limit))
        posts = list((await self.session.execute(stmt)).scalars().all())
        return posts, await self.count(*conditions)

    async def all_posts(self, page: int = 1, limit: int = 20) -> Tuple[List[Post], int]:
        posts = await self.list(limit=limit, offset=QueryBuilder.page_offset(page, limit))
        return posts, await self.count()

    async def get_by_slug(self, slug: str, published_only: bool = False) -> Optional[Post]:
        stmt = select(Post).where(Post.slug == slug)
        if published_only:
            stmt = stmt.where(Post.is_published == True)  # noqa: E712
        return (await self.session.execute(stmt.limit(1))).scalars().first()

    async def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Post.id).where(Post.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(Post.id != exclude_id)
        return (await self.session.execute(stmt.limit(1))).first() is not None

    async def authors_for(self, posts: List[Post]) -> Dict[int, User]:
        ids = {p.author_id for p in posts if p.author_id is not None}
        if not ids:
            return {}
        result = await self.session.execute(select(User).where(User.id.in_(ids)))  # type: ignore[union-attr]
        return {user.id: user for user in result.scalars().all()}  # type: ignore[misc]
