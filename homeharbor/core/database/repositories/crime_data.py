"""
Crime statistics repository.

Writes are idempotent: rows are upserted on (month, municipality_code,
crime_group_code) so repeated synchronisations only refresh the counts.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.crime_data import CrimeData
from .base import SQLModelRepository, dialect_insert


class CrimeDataRepository(SQLModelRepository[CrimeData]):
    """Repository for monthly offence counts."""

    default_order = (CrimeData.month.desc(), CrimeData.municipality_name.asc(), CrimeData.crime_group_code.asc())  # type: ignore[attr-defined]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CrimeData)

    async def upsert_batch(self, rows: Sequence[Dict[str, Any]]) -> int:
        """Insert or refresh ``rows`` in one transaction and return how many were written."""
        if not rows:
            return 0
        now = datetime.now(timezone.utc)
        values = [{**row, "created_at": now, "updated_at": now} for row in rows]
        stmt = dialect_insert(self.session, CrimeData).values(values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[CrimeData.month, CrimeData.municipality_code, CrimeData.crime_group_code],
            set_={"crime_count": stmt.excluded.crime_count, "updated_at": now},
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return len(values)

    async def for_months(self, months: Sequence[str], city: Optional[str] = None) -> List[CrimeData]:
        stmt = select(CrimeData).where(CrimeData.month.in_(months))  # type: ignore[attr-defined]
        if city:
            stmt = stmt.where(CrimeData.municipality_name.ilike(f"%{city}%"))  # type: ignore[attr-defined]
        stmt = stmt.order_by(*self.default_order)
        return list((await self.session.execute(stmt)).scalars().all())

    async def monthly_totals(self, months: Sequence[str], city: str) -> List[Tuple[str, int]]:
        stmt = (
            select(CrimeData.month, func.sum(CrimeData.crime_count))
            .where(CrimeData.month.in_(months))  # type: ignore[attr-defined]
            .where(CrimeData.municipality_name.ilike(f"%{city}%"))  # type: ignore[attr-defined]
            .group_by(CrimeData.month)
            .order_by(CrimeData.month.asc())  # type: ignore[attr-defined]
        )
        return [(month, int(total or 0)) for month, total in (await self.session.execute(stmt)).all()]

    async def sample_for_municipality(self, municipality_code: str, limit: int = 5) -> Tuple[int, List[CrimeData]]:
        """Row count and a few latest rows for one municipality."""
        count = await self.count(CrimeData.municipality_code == municipality_code)
        stmt = (
            select(CrimeData)
            .where(CrimeData.municipality_code == municipality_code)
            .order_by(*self.default_order)
            .limit(limit)
        )
        return count, list((await self.session.execute(stmt)).scalars().all())
