"""
System log endpoints under ``/api/admin/logs``.

Backed by the in-memory ``LogBuffer`` attached to the root logger, so the
viewer shows the server's own recent log records.
"""

from __future__ import annotations

import math
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from homeharbor.core.log_buffer import LOG_LEVELS, LogBuffer, log_buffer
from homeharbor.core.models.io.common import SuccessResponse
from homeharbor.core.models.io.logs import LogEntryRead, LogFilters, LogListResponse, LogPagination

router = APIRouter(tags=["logs"])


def get_log_buffer() -> LogBuffer:
    return log_buffer


@router.get("", response_model=LogListResponse, summary="Query Logs")
async def list_logs(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=500),
    level: Optional[str] = None,
    source: Optional[str] = None,
    search: Optional[str] = None,
    buffer: LogBuffer = Depends(get_log_buffer),
) -> LogListResponse:
    """Newest first, filtered by level, source and a case-insensitive text search."""
    entries = buffer.query(level=level, source=source, search=search)
    start = (page - 1) * limit
    return LogListResponse(
        logs=[LogEntryRead.model_validate(e.to_dict()) for e in entries[start : start + limit]],
        pagination=LogPagination(
            page=page,
            limit=limit,
            total_logs=len(entries),
            total_pages=math.ceil(len(entries) / limit),
        ),
        filters=LogFilters(level=level, source=source, search=search),
    )


@router.get("/levels", response_model=List[str], summary="Log Levels")
async def log_levels() -> List[str]:
    return LOG_LEVELS


@router.get("/sources", response_model=List[str], summary="Log Sources")
async def log_sources(buffer: LogBuffer = Depends(get_log_buffer)) -> List[str]:
    return buffer.sources()


@router.delete("/clear", response_model=SuccessResponse, summary="Clear Logs")
async def clear_logs(buffer: LogBuffer = Depends(get_log_buffer)) -> SuccessResponse:
    buffer.clear()
    return SuccessResponse()


@router.delete("/{entry_id}", response_model=SuccessResponse, summary="Delete Log Entry")
async def delete_log(entry_id: str, buffer: LogBuffer = Depends(get_log_buffer)) -> SuccessResponse:
    if not buffer.remove(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Log not found")
    return SuccessResponse()
