"""
Footer and page content repositories.

Items inside a group (a footer section, or a page type + section pair) are
kept densely numbered. Moving an item re-sorts the group by position, moves
the item to the requested index and renumbers the group 0..n-1, writing only
rows whose position changed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, List, Optional, Sequence, TypeVar

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.footer_contents import FooterContent
from ..entities.page_contents import PageContent
from .base import SQLModelRepository

Positioned = TypeVar("Positioned", FooterContent, PageContent)


def move_item(items: Sequence[Positioned], item_id: int, new_position: int) -> List[Positioned]:
    """Reorder ``items`` in memory and return the ones whose ``position`` changed.

    ``new_position`` past the end moves the item to the end.

    Raises:
        LookupError: ``item_id`` is not in ``items``.
    """
    ordered = sorted(items, key=lambda i: (i.position, i.id or 0))
    index = next((n for n, item in enumerate(ordered) if item.id == item_id), None)
    if index is None:
        raise LookupError(item_id)
    moving = ordered.pop(index)
    ordered.insert(min(new_position, len(ordered)), moving)

    changed = []
    for position, item in enumerate(ordered):
        if item.position != position:
            item.position = position
            changed.append(item)
    return changed


class _OrderedContentRepository(SQLModelRepository[Positioned]):
    @abstractmethod
    async def _group_of(self, item: Positioned) -> List[Positioned]:
        """All rows sharing ``item``'s group, the item included."""

    async def reorder(self, item_id: int, new_position: int) -> bool:
        """Move an item inside its group. False when the item does not exist."""
        item = await self.get_by_id(item_id)
        if item is None:
            return False
        changed = move_item(await self._group_of(item), item_id, new_position)
        now = utc_now()
        for row in changed:
            row.updated_at = now
            self.session.add(row)
        await self.session.commit()
        return True

    async def apply_changes(self, entity: Positioned, changes: dict[str, Any]) -> Positioned:
        changes = {**changes, "updated_at": utc_now()}
        return await super().apply_changes(entity, changes)


class FooterContentRepository(_OrderedContentRepository[FooterContent]):
    """Repository for footer entries."""

    default_order = (FooterContent.section.asc(), FooterContent.position.asc(), FooterContent.id.asc())  # type: ignore[attr-defined,union-attr]

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, FooterContent)

    async def by_section(self, section: str) -> List[FooterContent]:
        return await self.list(filters={"section": section})

    async def _group_of(self, item: FooterContent) -> List[FooterContent]:
        return await self.by_section(item.section)


class PageContentRepository(_OrderedContentRepository[PageContent]):
    """Repository for page content blocks."""

    default_order = (
        PageContent.page_type.asc(),  # type: ignore[attr-defined]
        PageContent.section.asc(),  # type: ignore[attr-defined]
        PageContent.position.asc(),  # type: ignore[attr-defined]
        PageContent.id.asc(),  # type: ignore[union-attr]
    )

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PageContent)

    async def by_page(self, page_type: str, section: Optional[str] = None) -> List[PageContent]:
        return await self.list(filters={"page_type": page_type, "section": section})

    async def _group_of(self, item: PageContent) -> List[PageContent]:
        stmt = (
            select(PageContent)
            .where(and_(PageContent.page_type == item.page_type, PageContent.section == item.section))
            .order_by(*self.default_order)
        )
        return list((await self.session.execute(stmt)).scalars().all())
