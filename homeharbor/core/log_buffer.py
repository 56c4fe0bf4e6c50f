"""
In-memory buffer of recent log records.

The admin console shows the most recent application log lines. Rather than
shipping a log database, the root logger gets a ``LogBuffer`` handler that
keeps a bounded window of records which the ``/api/admin/logs`` endpoints
query, filter and prune.
"""

from __future__ import annotations

import itertools
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

LOG_LEVELS = ["info", "warning", "error", "debug"]

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


@dataclass
class LogEntry:
    """One captured log record as shown in the admin log viewer."""

    id: str
    timestamp: datetime
    level: str
    message: str
    source: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "level": self.level,
            "message": self.message,
            "source": self.source,
            "details": self.details,
        }


def _source_of(logger_name: str) -> str:
    """Map a logger name to a short source label.

    ``homeharbor.server.api.v1.users`` becomes ``users``; third-party loggers
    keep their top-level package name (``sqlalchemy.engine`` -> ``sqlalchemy``).
    """
    if logger_name.startswith("homeharbor."):
        return logger_name.rsplit(".", 1)[-1]
    return logger_name.split(".", 1)[0] or "root"


class LogBuffer(logging.Handler):
    """Logging handler keeping the last ``capacity`` records in memory."""

    def __init__(self, capacity: int = 1000, level: int = logging.INFO) -> None:
        super().__init__(level=level)
        self.capacity = capacity
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self._ids = itertools.count(1)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            details: Dict[str, Any] = {
                "logger": record.name,
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            }
            if record.exc_info and record.exc_info[1] is not None:
                details["exception"] = repr(record.exc_info[1])
            entry = LogEntry(
                id=str(next(self._ids)),
                timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
                level=_LEVEL_NAMES.get(record.levelno, record.levelname.lower()),
                message=record.getMessage(),
                source=_source_of(record.name),
                details=details,
            )
            self._entries.append(entry)
        except Exception:
            self.handleError(record)

    def _snapshot(self) -> List[LogEntry]:
        with self.lock:  # type: ignore[union-attr]
            return list(self._entries)

    def query(
        self,
        level: Optional[str] = None,
        source: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[LogEntry]:
        """Return matching entries, newest first."""
        entries: Iterable[LogEntry] = reversed(self._snapshot())
        if level:
            entries = (e for e in entries if e.level == level.lower())
        if source:
            entries = (e for e in entries if e.source == source)
        if search:
            needle = search.lower()
            entries = (e for e in entries if needle in e.message.lower() or needle in e.source.lower())
        return list(entries)

    def sources(self) -> List[str]:
        return sorted({entry.source for entry in self._snapshot()})

    def remove(self, entry_id: str) -> bool:
        with self.lock:  # type: ignore[union-attr]
            for entry in self._entries:
                if entry.id == entry_id:
                    self._entries.remove(entry)
                    return True
        return False

    def clear(self) -> int:
        with self.lock:  # type: ignore[union-attr]
            removed = len(self._entries)
            self._entries.clear()
        return removed


log_buffer = LogBuffer()
