"""
Crime statistics read API.

Both endpoints look at the twelve calendar months ending with the current
one. Months are stored as ``YYYY-MM`` strings.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from homeharbor.core.database.base import utc_now
from homeharbor.core.models.io.crime import (
    CrimeDataRead,
    CrimeMonthlyResponse,
    CrimeRateResponse,
    MonthlyCrimeTotal,
)

from ...services.deps import RepositoriesDep

router = APIRouter(tags=["crime"])

WINDOW_MONTHS = 12


def last_months(today: date, count: int = WINDOW_MONTHS) -> List[str]:
    """``count`` month keys, newest first, starting with the month of ``today``."""
    months = []
    year, month = today.year, today.month
    for _ in range(count):
        months.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return months


@router.get(
    "",
    response_model=CrimeRateResponse,
    summary="Crime Rate",
    description="All crime rows of the last twelve months, optionally for municipalities matching `city`.",
)
async def crime_rate(repos: RepositoriesDep, city: Optional[str] = Query(default=None)) -> CrimeRateResponse:
    months = last_months(utc_now().date())
    rows = await repos.crime_data.for_months(months, city)
    return CrimeRateResponse(
        city=city or "all",
        total_crimes=sum(row.crime_count for row in rows),
        months=len(months),
        data_points=len(rows),
        data=[CrimeDataRead.model_validate(row) for row in rows],
    )


@router.get("/monthly", response_model=CrimeMonthlyResponse, summary="Monthly Crime Totals")
async def monthly_crime(repos: RepositoriesDep, city: Optional[str] = Query(default=None)) -> CrimeMonthlyResponse:
    if not city:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="City parameter is required")
    totals = await repos.crime_data.monthly_totals(last_months(utc_now().date()), city)
    return CrimeMonthlyResponse(
        city=city,
        total_crimes=sum(total for _, total in totals),
        months=len(totals),
        monthly_data=[MonthlyCrimeTotal(month=month, total=total) for month, total in totals],
    )
