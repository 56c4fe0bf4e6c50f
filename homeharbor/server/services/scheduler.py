"""Background scheduling of the crime data synchronisation."""

from __future__ import annotations

import asyncio
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from homeharbor.core.logging_config import get_logger

from .crime_data import CrimeDataService

logger = get_logger(__name__)

JOB_ID = "crime_data_sync"


class CrimeSyncScheduler:
    """Runs ``CrimeDataService.sync`` once at startup and then daily."""

    def __init__(self, service: CrimeDataService, *, cron_hour: int = 0, run_on_startup: bool = True) -> None:
        self.service = service
        self.cron_hour = cron_hour
        self.run_on_startup = run_on_startup
        self._scheduler: Optional[AsyncIOScheduler] = None
        self._startup_task: Optional[asyncio.Task] = None

    async def _run(self) -> None:
        try:
            await self.service.sync()
        except Exception as e:
            logger.error(f"Scheduled crime data sync failed: {e}", exc_info=True)

    def start(self) -> None:
        if self._scheduler is not None:
            return
        self._scheduler = AsyncIOScheduler()
        self._scheduler.add_job(
            self._run,
            CronTrigger(hour=self.cron_hour, minute=0),
            id=JOB_ID,
            name="Crime data synchronisation",
            replace_existing=True,
        )
        self._scheduler.start()
        logger.info(f"Crime data scheduler started (daily at {self.cron_hour:02d}:00)")

        if self.run_on_startup:
            self._startup_task = asyncio.create_task(self._run())

    async def shutdown(self) -> None:
        if self._startup_task is not None and not self._startup_task.done():
            self._startup_task.cancel()
            try:
                await self._startup_task
            except asyncio.CancelledError:
                logger.debug("Startup crime data sync cancelled")
        self._startup_task = None
        if self._scheduler is not None:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("Crime data scheduler stopped")

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running
