"""
Locations repository.

``property_count`` is never trusted from the table: reads join in a live
count of properties whose city matches the location.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.locations import Location
from ..entities.properties import Property
from .base import SQLModelRepository


class LocationRepository(SQLModelRepository[Location]):
    """Repository for curated locations."""

    default_order = (Location.name.asc(),)  # type: ignore[attr-defined]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Location)

    async def with_property_counts(self) -> List[Tuple[Location, int]]:
        """Every location with its live listing count, busiest first, then by city."""
        counts = (
            select(Property.city.label("city"), func.count(Property.id).label("cnt"))  # type: ignore[attr-defined,arg-type]
            .group_by(Property.city)
            .subquery()
        )
        count_col = func.coalesce(counts.c.cnt, 0)
        stmt = (
            select(Location, count_col)
            .outerjoin(counts, counts.c.city == Location.city)
            .order_by(count_col.desc(), Location.city.asc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return [(location, int(count)) for location, count in result.all()]

    async def property_count_for(self, city: str) -> int:
        result = await self.session.execute(select(func.count(Property.id)).where(Property.city == city))  # type: ignore[arg-type]
        return int(result.scalar_one())

    async def get_by_name(self, name: str) -> Optional[Location]:
        result = await self.session.execute(select(Location).where(Location.name == name).limit(1))
        return result.scalars().first()
