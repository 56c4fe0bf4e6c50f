"""
Footer, page-content and static-page I/O models.

Both footer entries and page blocks carry an explicit ``position`` within
their group; the reorder bodies move one item to a new index.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import IOModel


class FooterContentRead(IOModel):
    id: int
    section: str
    title: str
    content: str
    link: Optional[str] = None
    icon: Optional[str] = None
    position: int
    active: bool
    open_in_new_tab: bool
    created_at: datetime
    updated_at: datetime


class FooterContentCreate(IOModel):
    section: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=255)
    content: str
    link: Optional[str] = None
    icon: Optional[str] = None
    position: int = Field(default=0, ge=0)
    active: bool = True
    open_in_new_tab: bool = False


class FooterContentUpdate(IOModel):
    section: Optional[str] = Field(default=None, min_length=1, max_length=50)
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    link: Optional[str] = None
    icon: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)
    active: Optional[bool] = None
    open_in_new_tab: Optional[bool] = None


class FooterReorderRequest(IOModel):
    new_position: int = Field(ge=0)


class PageContentRead(IOModel):
    id: int
    page_type: str
    section: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    link_text: Optional[str] = None
    button_text: Optional[str] = None
    position: int
    active: bool
    created_at: datetime
    updated_at: datetime


class PageContentCreate(IOModel):
    page_type: str = Field(min_length=1, max_length=50)
    section: str = Field(min_length=1, max_length=50)
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    link_text: Optional[str] = None
    button_text: Optional[str] = None
    position: int = Field(ge=0)
    active: bool = True


class PageContentUpdate(IOModel):
    page_type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    section: Optional[str] = Field(default=None, min_length=1, max_length=50)
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None
    link: Optional[str] = None
    link_text: Optional[str] = None
    button_text: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)
    active: Optional[bool] = None


class PagePositionRequest(IOModel):
    position: int = Field(ge=0)


class StaticPageBody(IOModel):
    content: str = ""
