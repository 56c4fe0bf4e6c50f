"""
Settings and static pages repository.

Both tables are key/value stores written with an upsert so concurrent saves
of the same key never produce a duplicate row.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.settings import Setting
from ..entities.static_pages import StaticPage
from .base import SQLModelRepository, dialect_insert


class SettingRepository(SQLModelRepository[Setting]):
    """Repository for JSON settings stored under a key."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Setting)

    async def get_raw(self, key: str) -> Optional[str]:
        result = await self.session.execute(select(Setting.value).where(Setting.key == key).limit(1))
        return result.scalar_one_or_none()

    async def get_json(self, key: str) -> Optional[Any]:
        """Decoded value, ``None`` when unset. Corrupt JSON raises ``json.JSONDecodeError``."""
        raw = await self.get_raw(key)
        return None if raw is None else json.loads(raw)

    async def put_json(self, key: str, value: Dict[str, Any]) -> None:
        now = utc_now()
        stmt = dialect_insert(self.session, Setting).values(
            key=key, value=json.dumps(value), created_at=now, updated_at=now
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Setting.key], set_={"value": stmt.excluded.value, "updated_at": now}
        )
        await self.session.execute(stmt)
        await self.session.commit()


class StaticPageRepository(SQLModelRepository[StaticPage]):
    """Repository for static page bodies keyed by slug."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, StaticPage)

    async def get_content(self, slug: str) -> str:
        result = await self.session.execute(select(StaticPage.content).where(StaticPage.slug == slug).limit(1))
        return result.scalar_one_or_none() or ""

    async def upsert(self, slug: str, content: str) -> None:
        stmt = dialect_insert(self.session, StaticPage).values(slug=slug, content=content)
        stmt = stmt.on_conflict_do_update(index_elements=[StaticPage.slug], set_={"content": stmt.excluded.content})
        await self.session.execute(stmt)
        await self.session.commit()
