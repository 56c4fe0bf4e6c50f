"""
Location entity model.

Locations are the curated cities shown on the landing page. The stored
``property_count`` is informational only; the API recomputes it from the
properties table on every read.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, Text

from ..base import Base


class Location(Base, table=True):
    """Curated city or area.

    Table: locations
    """

    __tablename__ = "locations"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, unique=True)
    city: str = Field(max_length=100)
    country: str = Field(default="Finland", max_length=100)
    image: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None, sa_type=Text)
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)
    property_count: int = Field(default=0)
    municipality_code: Optional[str] = Field(default=None, max_length=10)

    def __repr__(self) -> str:
        return f"Location(id={self.id}, name={self.name})"
