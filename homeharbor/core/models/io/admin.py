"""Admin dashboard I/O models."""

from __future__ import annotations

from typing import Dict, List

from .common import IOModel
from .properties import PropertyRead
from .users import UserSummary


class DashboardCounts(IOModel):
    properties: int
    users: int
    active_users: int
    agents: int
    locations: int
    favorites: int
    featured_properties: int
    verified_properties: int


class DashboardCharts(IOModel):
    properties_by_type: Dict[str, int]
    properties_by_listing_type: Dict[str, int]
    properties_by_city: Dict[str, int]


class DashboardResponse(IOModel):
    counts: DashboardCounts
    charts: DashboardCharts
    recent_properties: List[PropertyRead]
    recent_users: List[UserSummary]


class GenerateDataRequest(IOModel):
    clear_existing: bool = False


class OperationResult(IOModel):
    success: bool = True
    message: str
