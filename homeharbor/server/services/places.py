"""Google Places nearby-search proxy."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from homeharbor.core.logging_config import get_logger
from homeharbor.server.core.config import settings

from .errors import OpenDataError, PlacesConfigurationError

logger = get_logger(__name__)

SEARCH_RADIUS_M = 1500


class PlacesClient:
    def __init__(
        self,
        api_key: Optional[str],
        url: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def nearby(self, lat: str, lng: str, place_type: str) -> Any:
        """Return the Places API answer unchanged."""
        if not self.api_key:
            raise PlacesConfigurationError("Google Maps API key not configured")
        params = {"location": f"{lat},{lng}", "radius": SEARCH_RADIUS_M, "type": place_type, "key": self.api_key}
        masked = {**params, "key": "API_KEY_HIDDEN"}
        logger.info(f"Fetching places from {self.url} {masked}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.url, params=params)
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise OpenDataError(f"Places request failed: {str(e).replace(self.api_key, 'API_KEY_HIDDEN')}") from e


def get_places_client() -> PlacesClient:
    """FastAPI dependency."""
    return PlacesClient(
        settings.google_maps_api_key,
        settings.google_places_url,
        timeout=settings.open_data_http_timeout,
    )
