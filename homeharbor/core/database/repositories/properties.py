"""
Properties repository.

Holds the listing query builder: every ``PropertyFilters`` criterion turns
into a SQL predicate, except the radius search, which runs in Python on the
page that SQL returned. The reported total therefore counts the page before
the radius filter is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, distinct, func, or_, select, type_coerce
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession

from homeharbor.core.geo import within_radius
from homeharbor.core.models.io.properties import PropertyFilters
from homeharbor.core.recommendations import recommend

from ..entities.favorites import Favorite
from ..entities.locations import Location
from ..entities.properties import Property
from ..entities.users import User
from .base import QueryBuilder, SQLModelRepository


@dataclass
class PropertyPage:
    """One page of search results and the pre-geo-filter total."""

    properties: List[Property]
    total: int


def text_search_condition(term: str):
    pattern = f"%{term}%"
    return or_(
        Property.title.ilike(pattern),  # type: ignore[attr-defined]
        Property.city.ilike(pattern),  # type: ignore[attr-defined]
        Property.address.ilike(pattern),  # type: ignore[attr-defined]
        Property.description.ilike(pattern),  # type: ignore[attr-defined]
    )


def build_conditions(filters: PropertyFilters) -> Tuple[List[Any], bool]:
    """Translate filters into WHERE predicates.

    Returns:
        The predicates and whether the query must join ``users`` (``posted_by``).
    """
    conditions: List[Any] = []

    if filters.search:
        conditions.append(text_search_condition(filters.search))
    if filters.property_type:
        conditions.append(Property.property_type.in_(filters.property_type))  # type: ignore[attr-defined]

    exact = {
        "listing_type": filters.listing_type,
        "city": filters.city,
        "status": filters.status,
        "transaction_type": filters.transaction_type,
        "bedrooms": filters.bedrooms,
        "bathrooms": filters.bathrooms,
        "featured": filters.featured,
        "verified": filters.verified,
        "heating_available": filters.heating_available,
    }
    for field_name, value in exact.items():
        if value is not None:
            conditions.append(getattr(Property, field_name) == value)

    if filters.min_price is not None:
        conditions.append(Property.price >= filters.min_price)
    if filters.max_price is not None:
        conditions.append(Property.price <= filters.max_price)
    if filters.min_area is not None:
        conditions.append(Property.area >= filters.min_area)
    if filters.max_area is not None:
        conditions.append(Property.area <= filters.max_area)

    if filters.ownership:
        conditions.append(Property.property_ownership.in_(filters.ownership))  # type: ignore[attr-defined]
    if filters.furnishing_details:
        conditions.append(Property.furnishing_details.in_(filters.furnishing_details))  # type: ignore[union-attr]
    if filters.amenities:
        conditions.append(type_coerce(Property.features, JSONB).contains(filters.amenities))
    if filters.only_with_photos:
        conditions.append(Property.images.is_not(None))  # type: ignore[union-attr]
        conditions.append(func.jsonb_array_length(type_coerce(Property.images, JSONB)) > 0)

    needs_user_join = bool(filters.posted_by)
    if needs_user_join:
        conditions.append(User.role.in_(filters.posted_by))  # type: ignore[attr-defined]

    return conditions, needs_user_join


def order_clause(filters: PropertyFilters) -> List[Any]:
    if filters.sort_by in ("price", "area"):
        column = getattr(Property, filters.sort_by)
        primary = column.asc() if filters.sort_dir == "asc" else column.desc()
    else:
        primary = Property.created_at.desc()  # type: ignore[attr-defined]
    return [primary, Property.id.desc()]  # type: ignore[union-attr]


def build_search_statements(filters: PropertyFilters):
    """Paged SELECT and matching COUNT(DISTINCT id) for ``filters``."""
    conditions, needs_user_join = build_conditions(filters)

    stmt = select(Property)
    count_stmt = select(func.count(distinct(Property.id))).select_from(Property)
    if needs_user_join:
        stmt = stmt.join(User, User.id == Property.user_id)
        count_stmt = count_stmt.join(User, User.id == Property.user_id)
    if conditions:
        stmt = stmt.where(*conditions)
        count_stmt = count_stmt.where(*conditions)

    stmt = stmt.order_by(*order_clause(filters))
    stmt = QueryBuilder.apply_pagination(stmt, filters.limit, QueryBuilder.page_offset(filters.page, filters.limit))
    return stmt, count_stmt


def apply_geo_filter(properties: List[Property], filters: PropertyFilters) -> List[Property]:
    """Keep listings within ``radius`` km of (lat, lng); listings without coordinates drop out."""
    if not filters.has_geo_filter:
        return properties
    return [
        p
        for p in properties
        if within_radius(filters.lat, filters.lng, p.latitude, p.longitude, filters.radius)  # type: ignore[arg-type]
    ]


class PropertyRepository(SQLModelRepository[Property]):
    """Repository for property listings."""

    default_order = (Property.created_at.desc(), Property.id.desc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Property)

    async def search(self, filters: PropertyFilters) -> PropertyPage:
        stmt, count_stmt = build_search_statements(filters)
        total = int((await self.session.execute(count_stmt)).scalar_one())
        result = await self.session.execute(stmt)
        properties = apply_geo_filter(list(result.scalars().all()), filters)
        return PropertyPage(properties=properties, total=total)

    async def featured(self, limit: int = 16) -> List[Property]:
        stmt = select(Property).where(Property.featured == True).order_by(*self.default_order).limit(limit)  # noqa: E712
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def text_search(self, term: str) -> List[Property]:
        stmt = select(Property).where(text_search_condition(term)).order_by(*self.default_order)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def by_user(self, user_id: int) -> List[Property]:
        stmt = select(Property).where(Property.user_id == user_id).order_by(*self.default_order)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def recent(self, limit: int = 5) -> List[Property]:
        return await self.list(limit=limit)

    async def owner_and_municipality(self, prop: Property) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        """Owner contact block and municipality code of the location named like the city."""
        owner = await self.session.get(User, prop.user_id)
        owner_details = None
        if owner is not None:
            owner_details = {"name": owner.name, "email": owner.email, "phone": owner.phone, "userId": owner.id}
        result = await self.session.execute(
            select(Location.municipality_code).where(Location.name == prop.city).limit(1)
        )
        return owner_details, result.scalar_one_or_none()

    async def recommendations(self, property_id: int, limit: int = 5) -> List[Property]:
        source = await self.get_by_id(property_id)
        if source is None:
            return []
        result = await self.session.execute(select(Property).order_by(Property.id.asc()))  # type: ignore[union-attr]
        return recommend(source, result.scalars().all(), limit=limit)  # type: ignore[return-value]

    async def set_flag(self, property_id: int, flag: str, value: bool) -> Optional[Property]:
        """Set ``featured`` or ``verified``."""
        if flag not in ("featured", "verified"):
            raise ValueError(f"Unknown property flag: {flag}")
        prop = await self.get_by_id(property_id)
        if prop is None:
            return None
        return await self.apply_changes(prop, {flag: value})

    async def delete(self, entity_id: str | int) -> bool:
        prop = await self.get_by_id(entity_id)
        if prop is None:
            return False
        await self.session.execute(delete(Favorite).where(Favorite.property_id == prop.id))
        await self.session.delete(prop)
        await self.session.commit()
        return True

    async def count_by(self, column_name: str) -> Dict[str, int]:
        """Listing counts grouped by ``property_type``, ``listing_type`` or ``city``."""
        column = getattr(Property, column_name)
        result = await self.session.execute(select(column, func.count()).group_by(column))
        return {str(key): int(count) for key, count in result.all()}

    async def count_by_city(self) -> Dict[str, int]:
        return await self.count_by("city")
