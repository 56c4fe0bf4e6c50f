"""System log viewer I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from .common import IOModel


class LogEntryRead(IOModel):
    id: str
    timestamp: datetime
    level: str
    message: str
    source: str
    details: Dict[str, Any] = {}


class LogPagination(IOModel):
    page: int
    limit: int
    total_logs: int
    total_pages: int


class LogFilters(IOModel):
    level: Optional[str] = None
    source: Optional[str] = None
    search: Optional[str] = None


class LogListResponse(IOModel):
    logs: List[LogEntryRead]
    pagination: LogPagination
    filters: LogFilters
