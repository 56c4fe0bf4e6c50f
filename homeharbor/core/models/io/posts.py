"""Blog post I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import IOModel

SLUG_REGEX = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class PostAuthor(IOModel):
    id: int
    name: str
    email: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")


class PostRead(IOModel):
    id: int
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: str
    author_id: Optional[int] = None
    author_name: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[str] = None
    image_url: Optional[str] = None
    read_time_minutes: Optional[int] = None
    is_published: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    author: Optional[PostAuthor] = None


class PostCreate(IOModel):
    """New post. ``slug`` is derived from the title when omitted."""

    title: str = Field(min_length=5, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=3, max_length=255, pattern=SLUG_REGEX)
    excerpt: Optional[str] = None
    content: str = Field(min_length=50)
    author_id: Optional[int] = None
    author_name: Optional[str] = Field(default=None, max_length=100)
    category: Optional[str] = Field(default=None, max_length=50)
    tags: Optional[str] = None
    image_url: Optional[str] = Field(default=None, max_length=512)
    read_time_minutes: Optional[int] = Field(default=None, ge=0)
    is_published: bool = False
    published_at: Optional[datetime] = None


class PostUpdate(IOModel):
    title: Optional[str] = Field(default=None, min_length=5, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=3, max_length=255, pattern=SLUG_REGEX)
    excerpt: Optional[str] = None
    content: Optional[str] = Field(default=None, min_length=50)
    author_id: Optional[int] = None
    author_name: Optional[str] = Field(default=None, max_length=100)
    category: Optional[str] = Field(default=None, max_length=50)
    tags: Optional[str] = None
    image_url: Optional[str] = Field(default=None, max_length=512)
    read_time_minutes: Optional[int] = Field(default=None, ge=0)
    is_published: Optional[bool] = None
    published_at: Optional[datetime] = None


class PostListResponse(IOModel):
    posts: List[PostRead]
    total: int
    page: int
    limit: int
