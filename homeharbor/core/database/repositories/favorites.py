"""Favorites repository."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.favorites import Favorite
from ..entities.properties import Property
from .base import SQLModelRepository


class FavoriteRepository(SQLModelRepository[Favorite]):
    """Repository for user bookmarks."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Favorite)

    async def find(self, user_id: int, property_id: int) -> Optional[Favorite]:
        result = await self.session.execute(
            select(Favorite).where(and_(Favorite.user_id == user_id, Favorite.property_id == property_id)).limit(1)
        )
        return result.scalars().first()

    async def with_properties(self, user_id: int) -> List[Tuple[Favorite, Optional[Property]]]:
        """A user's favorites, each paired with its property, newest favorite first."""
        stmt = (
            select(Favorite, Property)
            .outerjoin(Property, Property.id == Favorite.property_id)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())  # type: ignore[attr-defined,union-attr]
        )
        result = await self.session.execute(stmt)
        return [(favorite, prop) for favorite, prop in result.all()]

    async def favorite_properties(self, user_id: int) -> List[Property]:
        """Properties a user has favorited, oldest favorite first."""
        stmt = (
            select(Property)
            .join(Favorite, Favorite.property_id == Property.id)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.asc(), Favorite.id.asc())  # type: ignore[attr-defined,union-attr]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def remove(self, user_id: int, property_id: int) -> bool:
        result = await self.session.execute(
            delete(Favorite).where(and_(Favorite.user_id == user_id, Favorite.property_id == property_id))
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0
