"""
Blog post entity model.

Posts are addressed publicly by ``slug``. Deleting the author keeps the post
and clears ``author_id``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, Text

from ..base import Base, utc_now


class Post(Base, table=True):
    """Blog article.

    Table: posts
    """

    __tablename__ = "posts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True, index=True)
    excerpt: Optional[str] = Field(default=None, sa_type=Text)
    content: str = Field(sa_type=Text)
    author_id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    )
    author_name: Optional[str] = Field(default=None, max_length=100)
    category: Optional[str] = Field(default=None, max_length=50, index=True)
    tags: Optional[str] = Field(default=None, sa_type=Text)
    image_url: Optional[str] = Field(default=None, max_length=512)
    read_time_minutes: Optional[int] = Field(default=None)
    is_published: bool = Field(default=False, index=True)
    published_at: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Post(id={self.id}, slug={self.slug}, published={self.is_published})"
