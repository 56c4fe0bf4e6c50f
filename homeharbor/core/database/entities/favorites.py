"""Favorite entity model: a user bookmarking a property."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class Favorite(Base, table=True):
    """User to property bookmark.

    Table: favorites
    """

    __tablename__ = "favorites"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    property_id: int = Field(foreign_key="properties.id", index=True)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Favorite(user_id={self.user_id}, property_id={self.property_id})"
