"""
Neighborhood guide entity model.

A neighborhood is unique per (name, city). Inactive neighborhoods are hidden
from the public endpoints but stay visible to administrators.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, Numeric, UniqueConstraint
from sqlmodel import Field, Text

from ..base import Base, utc_now


class Neighborhood(Base, table=True):
    """Neighborhood guide entry.

    Table: neighborhoods
    """

    __tablename__ = "neighborhoods"
    __table_args__ = (
        UniqueConstraint("name", "city", name="uq_neighborhoods_name_city"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    city: str = Field(max_length=100, index=True)
    description: Optional[str] = Field(default=None, sa_type=Text)
    image: Optional[str] = Field(default=None, max_length=512)
    average_price: Optional[float] = Field(default=None, sa_column=Column(Numeric(12, 2, asdecimal=False)))
    population_density: Optional[int] = Field(default=None)
    walk_score: Optional[int] = Field(default=None)
    transit_score: Optional[int] = Field(default=None)
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)
    active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"Neighborhood(id={self.id}, name={self.name}, city={self.city})"
