"""Footer link entity model, grouped by section and ordered by position."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base, utc_now


class FooterContent(Base, table=True):
    """Footer entry.

    Table: footer_contents
    """

    __tablename__ = "footer_contents"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    section: str = Field(max_length=50, index=True)
    title: str = Field(max_length=255)
    content: str = Field(sa_type=Text)
    link: Optional[str] = Field(default=None)
    icon: Optional[str] = Field(default=None, max_length=100)
    position: int = Field(default=0)
    active: bool = Field(default=True)
    open_in_new_tab: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"FooterContent(id={self.id}, section={self.section}, position={self.position})"
