"""Crime statistics I/O models."""

from __future__ import annotations

from typing import List

from .common import IOModel


class CrimeDataRead(IOModel):
    month: str
    municipality_code: str
    municipality_name: str
    crime_group_code: str
    crime_group_name: str
    crime_count: int


class CrimeRateResponse(IOModel):
    city: str
    total_crimes: int
    months: int
    data_points: int
    data: List[CrimeDataRead]


class MonthlyCrimeTotal(IOModel):
    month: str
    total: int


class CrimeMonthlyResponse(IOModel):
    city: str
    total_crimes: int
    months: int
    monthly_data: List[MonthlyCrimeTotal]
