"""Location I/O models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import IOModel


class LocationRead(IOModel):
    id: int
    name: str
    city: str
    country: str
    image: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    property_count: int = 0
    municipality_code: Optional[str] = None


class LocationCreate(IOModel):
    name: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    country: str = "Finland"
    image: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    municipality_code: Optional[str] = None


class LocationUpdate(IOModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    country: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    municipality_code: Optional[str] = None
