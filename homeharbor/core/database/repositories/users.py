"""
Users repository.

Lookups by username, email and Firebase UID plus the username allocation
used when a Google account signs in for the first time.
"""

from __future__ import annotations

import re
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.users import User
from .base import SQLModelRepository


def username_base(name: str, email: str) -> str:
    """Candidate username: the name without non-alphanumerics, else the email local part."""
    base = re.sub(r"[^a-z0-9]", "", name.lower())
    return base or email.split("@", 1)[0]


class UserRepository(SQLModelRepository[User]):
    """Repository for user data access operations."""

    default_order = (User.id.asc(),)  # type: ignore[union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def _first(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def get_by_username_or_email(self, identifier: str) -> Optional[User]:
        return await self._first(select(User).where(or_(User.username == identifier, User.email == identifier)))

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._first(select(User).where(User.email == email))

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._first(select(User).where(User.username == username))

    async def get_by_firebase_uid(self, uid: str) -> Optional[User]:
        return await self._first(select(User).where(User.firebase_uid == uid))

    async def exists_with(self, username: str, email: str, exclude_id: Optional[int] = None) -> bool:
        """Whether another user already holds ``username`` or ``email``."""
        stmt = select(User.id).where(or_(User.username == username, User.email == email))
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def unique_username(self, base: str) -> str:
        """``base`` if free, else ``base1``, ``base2``, ... whichever is free first."""
        candidate = base
        suffix = 0
        while await self.get_by_username(candidate) is not None:
            suffix += 1
            candidate = f"{base}{suffix}"
        return candidate

    async def list_by_role(self, role: str) -> List[User]:
        result = await self.session.execute(select(User).where(User.role == role).order_by(User.name.asc()))  # type: ignore[union-attr]
        return list(result.scalars().all())

    async def recent(self, limit: int = 5) -> List[User]:
        result = await self.session.execute(
            select(User).order_by(User.created_at.desc()).limit(limit)  # type: ignore[union-attr]
        )
        return list(result.scalars().all())
