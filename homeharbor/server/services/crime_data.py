"""
Crime statistics synchronisation from Statistics Finland.

``CrimeDataService.sync`` posts each fixed PxWeb query in turn, flattens the
json-stat2 answer into rows and upserts them in batches. A query that keeps
failing after its retries is logged and skipped so one bad slice never
blocks the others.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from homeharbor.core.database.repositories.crime_data import CrimeDataRepository
from homeharbor.core.logging_config import get_logger
from homeharbor.core.monitoring import log_sync_result

from .crime_queries import QUERIES
from .errors import OpenDataError

logger = get_logger(__name__)

MONTH_DIMENSION = "Kuukausi"
MUNICIPALITY_DIMENSION = "Kunta"
CRIME_GROUP_DIMENSION = "Rikosryhmä ja teonkuvauksen tarkenne"

OULU_MUNICIPALITY_KEY = "KU564"

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": "RealEstateSync/1.0",
}


@dataclass
class SyncReport:
    """Outcome of one synchronisation run."""

    queries: int = 0
    failed_queries: int = 0
    records: int = 0
    failed_batches: int = 0
    errors: List[str] = field(default_factory=list)


def _ordered_keys(index: Any) -> List[str]:
    """Category keys in cube order. json-stat2 allows a key->position map or a plain list."""
    if isinstance(index, Mapping):
        return [key for key, _ in sorted(index.items(), key=lambda item: item[1])]
    return list(index)


def format_month(label: str) -> str:
    """``2025M01`` -> ``2025-01``."""
    return label.replace("M", "-")[:7]


def parse_count(value: Any) -> Optional[int]:
    """Numeric cell value, ``None`` for missing or non-numeric cells (``".."``)."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return int(float(value))
        except ValueError:
            return None
    return int(value)


def flatten_jsonstat(payload: Mapping[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield one row per non-null cell of a month x municipality x crime-group cube."""
    values = payload.get("value")
    if not isinstance(values, list):
        raise OpenDataError("json-stat2 payload has no value array")

    dimensions = payload["dimension"]
    months = dimensions[MONTH_DIMENSION]["category"]
    municipalities = dimensions[MUNICIPALITY_DIMENSION]["category"]
    groups = dimensions[CRIME_GROUP_DIMENSION]["category"]

    month_keys = _ordered_keys(months["index"])
    municipality_keys = _ordered_keys(municipalities["index"])
    group_keys = _ordered_keys(groups["index"])

    position = 0
    for month_key in month_keys:
        month = format_month(months.get("label", {}).get(month_key, month_key))
        for municipality_key in municipality_keys:
            municipality_name = municipalities.get("label", {}).get(municipality_key, municipality_key)
            for group_key in group_keys:
                raw = values[position] if position < len(values) else None
                position += 1
                count = parse_count(raw)
                if count is None:
                    continue
                yield {
                    "month": month,
                    "municipality_code": municipality_key,
                    "municipality_name": municipality_name,
                    "crime_group_code": group_key,
                    "crime_group_name": groups.get("label", {}).get(group_key, group_key),
                    "crime_count": count,
                }


class CrimeDataService:
    """Fetches the PxWeb offence table and stores it in ``crime_data``."""

    BATCH_SIZE = 500
    RETRY_RETRIES = 3
    RETRY_DELAY = 1.0
    RETRY_FACTOR = 2.0
    RETRY_MAX_DELAY = 5.0
    RATE_LIMIT_DELAY = 0.1

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        api_url: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        queries: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> None:
        self.session_factory = session_factory
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport
        self.queries = list(queries) if queries is not None else QUERIES
        self._lock = asyncio.Lock()

    async def _post_with_retry(self, client: httpx.AsyncClient, query: Mapping[str, Any]) -> Dict[str, Any]:
        retries = 0
        while True:
            try:
                response = await client.post(self.api_url, json=query, headers=REQUEST_HEADERS)
                response.raise_for_status()
                data = response.json()
                if not isinstance(data, dict):
                    raise OpenDataError("Invalid response from PxWeb API")
                return data
            except (httpx.HTTPError, ValueError, OpenDataError) as e:
                retries += 1
                if retries > self.RETRY_RETRIES:
                    raise
                sleep_s = min(self.RETRY_DELAY * (self.RETRY_FACTOR ** (retries - 1)), self.RETRY_MAX_DELAY)
                logger.warning(
                    f"PxWeb request failed (retry {retries}/{self.RETRY_RETRIES}), retrying in {sleep_s}s: {e}"
                )
                await asyncio.sleep(sleep_s)

    async def _store(self, rows: List[Dict[str, Any]]) -> None:
        async with self.session_factory() as session:
            await CrimeDataRepository(session).upsert_batch(rows)

    async def process_payload(self, payload: Mapping[str, Any], report: SyncReport) -> int:
        """Flatten and upsert one json-stat2 payload; return the number of rows written."""
        written = 0
        batch: List[Dict[str, Any]] = []
        for row in flatten_jsonstat(payload):
            batch.append(row)
            if len(batch) >= self.BATCH_SIZE:
                written += await self._store_batch(batch, report)
                batch = []
        if batch:
            written += await self._store_batch(batch, report)
        return written

    async def _store_batch(self, batch: List[Dict[str, Any]], report: SyncReport) -> int:
        try:
            await self._store(batch)
        except Exception as e:
            report.failed_batches += 1
            report.errors.append(f"batch: {e}")
            logger.error(f"Failed to store crime data batch of {len(batch)} rows: {e}", exc_info=True)
            return 0
        return len(batch)

    async def sync(self) -> SyncReport:
        """Run every query once. Concurrent calls wait for the running one."""
        async with self._lock:
            report = SyncReport()
            started = time.perf_counter()
            logger.info(f"Starting crime data synchronisation ({len(self.queries)} queries)")

            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                for number, query in enumerate(self.queries, start=1):
                    report.queries += 1
                    try:
                        payload = await self._post_with_retry(client, query)
                        written = await self.process_payload(payload, report)
                    except Exception as e:
                        report.failed_queries += 1
                        report.errors.append(f"query {number}: {e}")
                        logger.error(f"Crime data query {number} failed: {e}", exc_info=True)
                        continue
                    report.records += written
                    logger.info(f"Crime data query {number} stored {written} records")
                    await asyncio.sleep(self.RATE_LIMIT_DELAY)

            await self.verify_municipality(OULU_MUNICIPALITY_KEY)

            duration_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"Crime data synchronisation finished: {report.records} records, "
                f"{report.failed_queries} failed queries, {report.failed_batches} failed batches "
                f"in {duration_ms:.0f}ms"
            )
            log_sync_result(
                source="statfin_crime",
                records=report.records,
                errors=report.failed_queries + report.failed_batches,
                duration_ms=duration_ms,
            )
            return report

    async def verify_municipality(self, municipality_key: str) -> int:
        """Log how many rows one municipality has; returns the count."""
        try:
            async with self.session_factory() as session:
                count, sample = await CrimeDataRepository(session).sample_for_municipality(municipality_key)
        except Exception as e:
            logger.error(f"Could not verify crime data for {municipality_key}: {e}", exc_info=True)
            return 0
        logger.info(f"Crime data rows for {municipality_key}: {count}; sample: {sample}")
        return count
