"""Unit tests for the crime statistics repository."""

from __future__ import annotations

import pytest

from homeharbor.core.database.repositories.crime_data import CrimeDataRepository


def _row(month: str, code: str, name: str, group: str, count: int):
    return {
        "month": month,
        "municipality_code": code,
        "municipality_name": name,
        "crime_group_code": group,
        "crime_group_name": f"Group {group}",
        "crime_count": count,
    }


@pytest.fixture
def repository(session):
    return CrimeDataRepository(session)


@pytest.fixture
async def seeded(repository):
    await repository.upsert_batch(
        [
            _row("2025-01", "KU564", "Oulu", "101", 4),
            _row("2025-01", "KU564", "Oulu", "102", 6),
            _row("2025-02", "KU564", "Oulu", "101", 3),
            _row("2025-02", "KU091", "Helsinki", "101", 50),
        ]
    )


async def test_empty_batch(repository):
    assert await repository.upsert_batch([]) == 0


async def test_upsert_refreshes_counts(repository, seeded):
    written = await repository.upsert_batch([_row("2025-01", "KU564", "Oulu", "101", 40)])

    assert written == 1
    assert await repository.count() == 4
    rows = await repository.for_months(["2025-01"], city="oulu")
    assert sorted(r.crime_count for r in rows) == [6, 40]


async def test_for_months_filters_by_month(repository, seeded):
    rows = await repository.for_months(["2025-02"])

    assert {r.municipality_name for r in rows} == {"Oulu", "Helsinki"}


async def test_monthly_totals(repository, seeded):
    totals = await repository.monthly_totals(["2025-01", "2025-02", "2025-03"], "Oulu")

    assert totals == [("2025-01", 10), ("2025-02", 3)]


async def test_sample_for_municipality(repository, seeded):
    count, rows = await repository.sample_for_municipality("KU564", limit=2)

    assert count == 3
    assert [r.month for r in rows] == ["2025-02", "2025-01"]
