"""
Property I/O models for API requests and responses.

``PropertyFilters`` is not a request body: the listing routes assemble it
from query parameters and hand it to the repository's query builder.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .common import IOModel, Pagination


class PropertyRead(IOModel):
    """Schema for reading a property from the API."""

    id: int
    title: str
    description: str
    price: float
    address: str
    city: str
    postal_code: Optional[str] = None
    area: float
    bedrooms: int
    bathrooms: int
    property_type: str
    listing_type: str
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    user_id: int
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    featured: bool
    verified: bool
    status: str
    transaction_type: str
    property_ownership: str
    flooring_details: Optional[str] = None
    furnishing_details: Optional[str] = None
    heating_available: bool
    water_details: Optional[str] = None
    gas_details: Optional[str] = None
    owner_details: Optional[Dict[str, Any]] = None
    average_nearby_prices: Optional[float] = None
    registration_details: Optional[str] = None
    created_at: datetime


class PropertyDetail(PropertyRead):
    """Single property with the owner's contact block and municipality code."""

    municipality_code: Optional[str] = None


class PropertyCreate(IOModel):
    """Schema for creating a property. Moderation flags always start false."""

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    postal_code: Optional[str] = None
    area: float = Field(ge=0)
    bedrooms: int = Field(ge=0)
    bathrooms: int = Field(ge=0)
    property_type: str = Field(min_length=1)
    listing_type: str = Field(min_length=1)
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    user_id: int
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    status: str = "active"
    transaction_type: str = "new"
    property_ownership: str = "freehold"
    flooring_details: Optional[str] = None
    furnishing_details: Optional[str] = None
    heating_available: bool = False
    water_details: Optional[str] = None
    gas_details: Optional[str] = None
    owner_details: Optional[Dict[str, Any]] = None
    average_nearby_prices: Optional[float] = None
    registration_details: Optional[str] = None


class PropertyUpdate(IOModel):
    """Schema for partially updating a property."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    area: Optional[float] = Field(default=None, ge=0)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    property_type: Optional[str] = None
    listing_type: Optional[str] = None
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    featured: Optional[bool] = None
    verified: Optional[bool] = None
    status: Optional[str] = None
    transaction_type: Optional[str] = None
    property_ownership: Optional[str] = None
    flooring_details: Optional[str] = None
    furnishing_details: Optional[str] = None
    heating_available: Optional[bool] = None
    water_details: Optional[str] = None
    gas_details: Optional[str] = None
    owner_details: Optional[Dict[str, Any]] = None
    average_nearby_prices: Optional[float] = None
    registration_details: Optional[str] = None


class PropertyListResponse(IOModel):
    properties: List[PropertyRead]
    total: int


class AdminPropertyListResponse(IOModel):
    properties: List[PropertyRead]
    pagination: Pagination


class PropertyTypeOption(IOModel):
    label: str
    value: str


class PropertyFilters(BaseModel):
    """Search criteria for the property listing."""

    search: Optional[str] = None
    property_type: Optional[List[str]] = None
    listing_type: Optional[str] = None
    city: Optional[str] = None
    status: Optional[str] = None
    transaction_type: Optional[str] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    featured: Optional[bool] = None
    verified: Optional[bool] = None
    heating_available: Optional[bool] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_area: Optional[float] = None
    max_area: Optional[float] = None
    ownership: Optional[List[str]] = None
    furnishing_details: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    only_with_photos: bool = False
    posted_by: Optional[List[str]] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    radius: Optional[float] = None
    sort_by: Optional[Literal["price", "area"]] = None
    sort_dir: Literal["asc", "desc"] = "desc"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=500)

    @property
    def has_geo_filter(self) -> bool:
        return self.lat is not None and self.lng is not None and bool(self.radius) and self.radius > 0
