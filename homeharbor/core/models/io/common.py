"""
Shared building blocks for the API I/O models.

The frontend speaks camelCase JSON. Every I/O model derives from ``IOModel``
so fields are declared snake_case in Python and serialised with camelCase
aliases; requests accept either spelling.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class IOModel(BaseModel):
    """Base class for API request and response bodies."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageResponse(IOModel):
    """Plain confirmation body: ``{"message": "..."}``."""

    message: str


class SuccessResponse(IOModel):
    """Plain success body: ``{"success": true}``."""

    success: bool = True


class Pagination(IOModel):
    page: int
    limit: int
    total: int
    pages: int
