"""Unit tests for the crime statistics synchronisation."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import httpx
import pytest

from homeharbor.core.database.entities import CrimeData
from homeharbor.core.database.repositories.crime_data import CrimeDataRepository
from homeharbor.server.services import crime_data
from homeharbor.server.services.crime_data import (
    CRIME_GROUP_DIMENSION,
    MONTH_DIMENSION,
    MUNICIPALITY_DIMENSION,
    CrimeDataService,
    SyncReport,
    flatten_jsonstat,
    format_month,
    parse_count,
)
from homeharbor.server.services.errors import OpenDataError

API_URL = "http://mock-statfin/rikokset.px"


def jsonstat(values: List[Any]) -> Dict[str, Any]:
    """Two months x one municipality x two crime groups."""
    return {
        "value": values,
        "dimension": {
            MONTH_DIMENSION: {"category": {"index": {"2025M01": 0, "2025M02": 1}, "label": {"2025M01": "2025M01", "2025M02": "2025M02"}}},
            MUNICIPALITY_DIMENSION: {"category": {"index": ["KU564"], "label": {"KU564": "Oulu"}}},
            CRIME_GROUP_DIMENSION: {
                "category": {"index": {"101": 0, "102": 1}, "label": {"101": "Theft", "102": "Fraud"}}
            },
        },
    }


@pytest.fixture(autouse=True)
def _no_waiting(monkeypatch):
    monkeypatch.setattr(CrimeDataService, "RETRY_DELAY", 0.0)
    monkeypatch.setattr(CrimeDataService, "RATE_LIMIT_DELAY", 0.0)


class TestParsing:
    @pytest.mark.parametrize("label,expected", [("2025M01", "2025-01"), ("2024M12", "2024-12")])
    def test_format_month(self, label, expected):
        assert format_month(label) == expected

    @pytest.mark.parametrize("raw,expected", [(5, 5), ("12", 12), ("3.0", 3), ("..", None), (None, None)])
    def test_parse_count(self, raw, expected):
        assert parse_count(raw) == expected

    def test_flatten_walks_cube_in_order(self):
        rows = list(flatten_jsonstat(jsonstat([1, 2, 3, 4])))

        assert [(r["month"], r["crime_group_code"], r["crime_count"]) for r in rows] == [
            ("2025-01", "101", 1),
            ("2025-01", "102", 2),
            ("2025-02", "101", 3),
            ("2025-02", "102", 4),
        ]
        assert rows[0]["municipality_name"] == "Oulu"
        assert rows[1]["crime_group_name"] == "Fraud"

    def test_flatten_skips_missing_cells(self):
        rows = list(flatten_jsonstat(jsonstat([1, None, "..", 4])))

        assert [r["crime_count"] for r in rows] == [1, 4]

    def test_flatten_requires_value_array(self):
        with pytest.raises(OpenDataError):
            list(flatten_jsonstat({"dimension": {}}))


class TestSync:
    async def test_sync_stores_every_query(self, session_factory, session):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json=jsonstat([1, 2, 3, 4]))

        service = CrimeDataService(
            session_factory, API_URL, transport=httpx.MockTransport(handler), queries=[{"query": 1}, {"query": 2}]
        )

        report = await service.sync()

        assert bodies == [{"query": 1}, {"query": 2}]
        assert report.queries == 2
        assert report.records == 8
        assert report.failed_queries == 0
        assert await CrimeDataRepository(session).count() == 4

    async def test_retries_then_succeeds(self, session_factory):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) <= CrimeDataService.RETRY_RETRIES:
                return httpx.Response(503)
            return httpx.Response(200, json=jsonstat([1, 2, 3, 4]))

        service = CrimeDataService(session_factory, API_URL, transport=httpx.MockTransport(handler), queries=[{}])

        report = await service.sync()

        assert len(calls) == CrimeDataService.RETRY_RETRIES + 1
        assert report.records == 4
        assert report.failed_queries == 0

    async def test_backoff_doubles_between_retries(self, session_factory, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr(CrimeDataService, "RETRY_DELAY", 1.0)
        monkeypatch.setattr(crime_data.asyncio, "sleep", fake_sleep)
        service = CrimeDataService(
            session_factory, API_URL, transport=httpx.MockTransport(lambda request: httpx.Response(503)), queries=[{}]
        )

        report = await service.sync()

        assert delays == [1.0, 2.0, 4.0]
        assert report.failed_queries == 1

    async def test_backoff_is_capped(self, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr(CrimeDataService, "RETRY_DELAY", 3.0)
        monkeypatch.setattr(crime_data.asyncio, "sleep", fake_sleep)
        service = CrimeDataService(None, API_URL)  # type: ignore[arg-type]

        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(503))) as client:
            with pytest.raises(httpx.HTTPStatusError):
                await service._post_with_retry(client, {})

        assert delays == [3.0, 5.0, 5.0]

    async def test_failed_query_does_not_stop_the_rest(self, session_factory):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(json.loads(request.content))
            if calls[-1] == {"query": "bad"}:
                return httpx.Response(500)
            return httpx.Response(200, json=jsonstat([1, 2, 3, 4]))

        service = CrimeDataService(
            session_factory,
            API_URL,
            transport=httpx.MockTransport(handler),
            queries=[{"query": "bad"}, {"query": "good"}],
        )

        report = await service.sync()

        assert calls.count({"query": "bad"}) == CrimeDataService.RETRY_RETRIES + 1
        assert report.failed_queries == 1
        assert report.records == 4
        assert report.errors[0].startswith("query 1:")

    async def test_resync_overwrites_counts(self, session_factory, session):
        values = iter([[1, 2, 3, 4], [10, 20, 30, 40]])

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=jsonstat(next(values)))

        service = CrimeDataService(session_factory, API_URL, transport=httpx.MockTransport(handler), queries=[{}])
        await service.sync()
        await service.sync()

        rows = await CrimeDataRepository(session).list()
        assert len(rows) == 4
        assert sorted(r.crime_count for r in rows) == [10, 20, 30, 40]

    async def test_batches_split_large_payloads(self, session_factory, monkeypatch):
        monkeypatch.setattr(CrimeDataService, "BATCH_SIZE", 3)
        service = CrimeDataService(session_factory, API_URL, queries=[])
        stored = []

        async def fake_store(rows):
            stored.append(len(rows))

        monkeypatch.setattr(service, "_store", fake_store)

        written = await service.process_payload(jsonstat([1, 2, 3, 4]), SyncReport())

        assert written == 4
        assert stored == [3, 1]

    async def test_failed_batch_is_counted(self, session_factory, monkeypatch):
        service = CrimeDataService(session_factory, API_URL, queries=[])

        async def broken_store(rows):
            raise RuntimeError("disk full")

        monkeypatch.setattr(service, "_store", broken_store)
        report = SyncReport()

        assert await service.process_payload(jsonstat([1, 2, 3, 4]), report) == 0
        assert report.failed_batches == 1


async def test_verify_municipality_counts_rows(session_factory, session):
    session.add(
        CrimeData(
            month="2025-01",
            municipality_code="KU564",
            municipality_name="Oulu",
            crime_group_code="101",
            crime_group_name="Theft",
            crime_count=3,
        )
    )
    await session.commit()
    service = CrimeDataService(session_factory, API_URL, queries=[])

    assert await service.verify_municipality("KU564") == 1
    assert await service.verify_municipality("KU091") == 0
