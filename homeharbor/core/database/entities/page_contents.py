"""Page content blocks, grouped by page type and section."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, Text

from ..base import Base, utc_now


class PageContent(Base, table=True):
    """Editable block on a public page.

    Table: page_contents
    """

    __tablename__ = "page_contents"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    page_type: str = Field(max_length=50, index=True)
    section: str = Field(max_length=50)
    title: Optional[str] = Field(default=None, max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = Field(default=None, sa_type=Text)
    image: Optional[str] = Field(default=None)
    link: Optional[str] = Field(default=None)
    link_text: Optional[str] = Field(default=None, max_length=100)
    button_text: Optional[str] = Field(default=None, max_length=100)
    position: int = Field(default=0)
    active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"PageContent(id={self.id}, page_type={self.page_type}, section={self.section})"
