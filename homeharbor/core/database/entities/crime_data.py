"""
Crime statistics entity model.

Monthly offence counts per municipality and crime group, synchronised from
Statistics Finland. A row is identified by (month, municipality_code,
crime_group_code); re-imports overwrite ``crime_count``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base


def _aware_now() -> datetime:
    return datetime.now(timezone.utc)


class CrimeData(Base, table=True):
    """Monthly offence count.

    Table: crime_data
    """

    __tablename__ = "crime_data"
    __table_args__ = (
        UniqueConstraint("month", "municipality_code", "crime_group_code", name="uq_crime_data_month_muni_group"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    month: str = Field(max_length=10, index=True)
    municipality_code: str = Field(max_length=10, index=True)
    municipality_name: str = Field(max_length=100)
    crime_group_code: str = Field(max_length=20, index=True)
    crime_group_name: str = Field(max_length=200)
    crime_count: int = Field(default=0)
    created_at: datetime = Field(
        default_factory=_aware_now, sa_column=Column(DateTime(timezone=True), nullable=False, default=_aware_now)
    )
    updated_at: datetime = Field(
        default_factory=_aware_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, default=_aware_now, onupdate=_aware_now),
    )

    def __repr__(self) -> str:
        return (
            f"CrimeData(month={self.month}, municipality={self.municipality_code}, "
            f"group={self.crime_group_code}, count={self.crime_count})"
        )
