"""Free-form static pages (about, privacy policy) addressed by slug."""

from __future__ import annotations

from sqlmodel import Field, Text

from ..base import Base


class StaticPage(Base, table=True):
    """Static page body.

    Table: static_pages
    """

    __tablename__ = "static_pages"
    __table_args__ = ({"extend_existing": True},)

    slug: str = Field(primary_key=True, max_length=100)
    content: str = Field(default="", sa_type=Text)

    def __repr__(self) -> str:
        return f"StaticPage(slug={self.slug})"
