"""Neighborhood I/O models with the guide's validation rules."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, Field

from .common import IOModel


def _check_image(value: str) -> str:
    if value and not value.startswith(("http://", "https://")):
        raise ValueError("image must be a URL or empty")
    return value


ImageURL = Annotated[str, AfterValidator(_check_image)]


class NeighborhoodRead(IOModel):
    id: int
    name: str
    city: str
    description: Optional[str] = None
    image: Optional[str] = None
    average_price: Optional[float] = None
    population_density: Optional[int] = None
    walk_score: Optional[int] = None
    transit_score: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    active: bool
    created_at: datetime
    updated_at: datetime


class NeighborhoodCreate(IOModel):
    name: str = Field(min_length=2, max_length=255)
    city: str = Field(min_length=2, max_length=100)
    description: Optional[str] = None
    image: Optional[ImageURL] = Field(default=None, max_length=512)
    average_price: Optional[float] = Field(default=None, gt=0)
    population_density: Optional[int] = Field(default=None, gt=0)
    walk_score: Optional[int] = Field(default=None, ge=0, le=100)
    transit_score: Optional[int] = Field(default=None, ge=0, le=100)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    active: bool = True


class NeighborhoodUpdate(IOModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    city: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = None
    image: Optional[ImageURL] = Field(default=None, max_length=512)
    average_price: Optional[float] = Field(default=None, gt=0)
    population_density: Optional[int] = Field(default=None, gt=0)
    walk_score: Optional[int] = Field(default=None, ge=0, le=100)
    transit_score: Optional[int] = Field(default=None, ge=0, le=100)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    active: Optional[bool] = None
