"""Neighborhood guides repository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.neighborhoods import Neighborhood
from .base import SQLModelRepository


class NeighborhoodRepository(SQLModelRepository[Neighborhood]):
    """Repository for neighborhood guides."""

    default_order = (Neighborhood.created_at.desc(), Neighborhood.id.desc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Neighborhood)

    async def active(self, city: Optional[str] = None, search: Optional[str] = None) -> List[Neighborhood]:
        conditions = [Neighborhood.active == True]  # noqa: E712
        if city:
            conditions.append(Neighborhood.city.ilike(f"%{city}%"))  # type: ignore[attr-defined]
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    Neighborhood.name.ilike(pattern),  # type: ignore[attr-defined]
                    Neighborhood.city.ilike(pattern),  # type: ignore[attr-defined]
                    Neighborhood.description.ilike(pattern),  # type: ignore[union-attr]
                )
            )
        stmt = select(Neighborhood).where(*conditions).order_by(*self.default_order)
        return list((await self.session.execute(stmt)).scalars().all())

    async def get_active(self, neighborhood_id: int) -> Optional[Neighborhood]:
        neighborhood = await self.get_by_id(neighborhood_id)
        if neighborhood is None or not neighborhood.active:
            return None
        return neighborhood

    async def name_taken(self, name: str, city: str, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Neighborhood.id).where(and_(Neighborhood.name == name, Neighborhood.city == city))
        if exclude_id is not None:
            stmt = stmt.where(Neighborhood.id != exclude_id)
        return (await self.session.execute(stmt.limit(1))).first() is not None
