"""Favorite I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .common import IOModel
from .properties import PropertyRead


class FavoriteCreate(IOModel):
    user_id: int
    property_id: int


class FavoriteRead(IOModel):
    id: int
    user_id: int
    property_id: int
    created_at: datetime


class FavoriteWithProperty(FavoriteRead):
    property: Optional[PropertyRead] = None


class FavoriteCheck(IOModel):
    is_favorite: bool
