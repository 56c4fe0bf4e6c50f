"""Contact messages repository."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.messages import Message
from .base import QueryBuilder, SQLModelRepository


class MessageRepository(SQLModelRepository[Message]):
    """Repository for contact messages."""

    default_order = (Message.created_at.desc(), Message.id.desc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Message)

    async def search(
        self,
        status: Optional[str] = None,
        property_id: Optional[int] = None,
        user_id: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Message], int]:
        """Filtered, paginated messages, newest first, with the unpaginated total."""
        conditions = []
        if status:
            conditions.append(Message.status == status)
        if property_id is not None:
            conditions.append(Message.property_id == property_id)
        if user_id is not None:
            conditions.append(Message.user_id == user_id)
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    Message.subject.ilike(pattern),  # type: ignore[attr-defined]
                    Message.message.ilike(pattern),  # type: ignore[attr-defined]
                    Message.name.ilike(pattern),  # type: ignore[attr-defined]
                    Message.email.ilike(pattern),  # type: ignore[attr-defined]
                )
            )

        stmt = select(Message).where(*conditions).order_by(*self.default_order)
        stmt = QueryBuilder.apply_pagination(stmt, limit, QueryBuilder.page_offset(page, limit))
        messages = list((await self.session.execute(stmt)).scalars().all())
        total = await self.count(*conditions)
        return messages, total

    async def for_user(self, user_id: int) -> List[Message]:
        """Messages a user received or sent."""
        stmt = (
            select(Message)
            .where(or_(Message.user_id == user_id, Message.sender_user_id == user_id))
            .order_by(*self.default_order)
        )
        return list((await self.session.execute(stmt)).scalars().all())

    async def for_property(self, property_id: int) -> List[Message]:
        stmt = select(Message).where(Message.property_id == property_id).order_by(*self.default_order)
        return list((await self.session.execute(stmt)).scalars().all())

    async def set_status(self, message_id: int, status: str) -> Optional[Message]:
        message = await self.get_by_id(message_id)
        if message is None:
            return None
        return await self.apply_changes(message, {"status": status})
