"""Errors raised by the open-data clients."""

from __future__ import annotations

from typing import Any, Optional


class OpenDataError(Exception):
    """An external data source failed or answered with an error payload."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message


class PlacesConfigurationError(Exception):
    """The Google Maps API key is not configured."""
