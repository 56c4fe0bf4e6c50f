"""
Property listing entity model.

A property belongs to the user who listed it. ``features`` and ``images`` are
JSON arrays of strings; ``owner_details`` is a free-form JSON object with the
contact block shown on the listing page.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Column
from sqlmodel import Field, Text

from ..base import Base, JSONVariant, utc_now

PROPERTY_TYPES = [
    "Apartment",
    "Villa",
    "House",
    "Condo",
    "Penthouse",
    "Studio",
    "Townhouse",
    "Office",
    "Shop",
    "Land",
]

LISTING_TYPES = ["sell", "rent", "buy", "commercial", "pg"]


class Property(Base, table=True):
    """Real-estate listing.

    Table: properties
    """

    __tablename__ = "properties"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    # Listing basics
    title: str = Field(max_length=255)
    description: str = Field(sa_type=Text)
    price: float
    address: str = Field(max_length=255)
    city: str = Field(max_length=100, index=True)
    postal_code: Optional[str] = Field(default=None, max_length=20)
    area: float
    bedrooms: int
    bathrooms: int
    property_type: str = Field(max_length=50, index=True)
    listing_type: str = Field(max_length=50, index=True)
    features: Optional[List[str]] = Field(default=None, sa_column=Column(JSONVariant))
    images: Optional[List[str]] = Field(default=None, sa_column=Column(JSONVariant))

    # Ownership
    user_id: int = Field(foreign_key="users.id", index=True)

    # Location
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)

    # Moderation flags
    featured: bool = Field(default=False)
    verified: bool = Field(default=False)
    status: str = Field(default="active", max_length=20)

    # Detailed attributes
    transaction_type: str = Field(default="new", max_length=20)
    property_ownership: str = Field(default="freehold", max_length=50)
    flooring_details: Optional[str] = Field(default=None, sa_type=Text)
    furnishing_details: Optional[str] = Field(default=None, max_length=50)
    heating_available: bool = Field(default=False)
    water_details: Optional[str] = Field(default=None, sa_type=Text)
    gas_details: Optional[str] = Field(default=None, sa_type=Text)
    owner_details: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSONVariant))
    average_nearby_prices: Optional[float] = Field(default=None)
    registration_details: Optional[str] = Field(default=None, sa_type=Text)

    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"Property(id={self.id}, title={self.title!r}, city={self.city})"
