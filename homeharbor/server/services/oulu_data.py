"""
Client for the City of Oulu open data portal.

Wraps the CKAN action API (dataset listing, dataset metadata, datastore
queries and dataset search) and the ZoneAtlas attraction feed. Every
failure surfaces as ``OpenDataError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from homeharbor.core.geo import haversine_distance
from homeharbor.core.logging_config import get_logger
from homeharbor.server.core.config import settings

from .errors import OpenDataError

logger = get_logger(__name__)

PROPERTY_DATASET_ID = "oulun-kaupungin-kiinteistojen-perustiedot"
FALLBACK_PROPERTY_DATASET_ID = "asuntokunnat-kaupunginosittain"
TABULAR_FORMATS = ("CSV", "JSON", "XLSX")
DEFAULT_ATTRACTION_RADIUS_KM = 10.0


def _first_tabular_resource(dataset: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    for resource in dataset.get("resources") or []:
        if resource.get("format") in TABULAR_FORMATS and resource.get("id"):
            return resource
    return None


def to_attraction(item: Mapping[str, Any]) -> Dict[str, Any]:
    """Shape one ZoneAtlas object for the client."""
    latitude, longitude = item["geo"]["coordinates"]
    categories = item.get("Categories") or []
    media = item.get("Media") or []
    buttons = item.get("buttons") or []
    return {
        "id": item.get("id"),
        "title": item.get("title"),
        "type": categories[0].get("title") if categories else "Attraction",
        "latitude": latitude,
        "longitude": longitude,
        "content": item.get("content") or "",
        "image": media[0].get("path") if media else None,
        "url": buttons[0].get("url") if buttons else None,
        "category": categories[0].get("slug") if categories else None,
        "tags": [tag.get("title") for tag in item.get("Tags") or []],
        "i18n": item.get("i18n") or {},
    }


def _coordinates(item: Mapping[str, Any]) -> Optional[List[float]]:
    coords = (item.get("geo") or {}).get("coordinates")
    if not isinstance(coords, list) or len(coords) != 2:
        return None
    return coords


class OuluDataClient:
    """Async client for data.ouka.fi and the ZoneAtlas feed."""

    def __init__(
        self,
        base_url: str,
        attractions_url: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.attractions_url = attractions_url
        self.timeout = timeout
        self.transport = transport

    async def _get_json(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            raise OpenDataError(f"Request to {url} failed: {e}") from e
        if response.status_code >= 400:
            raise OpenDataError(
                f"Request to {url} failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise OpenDataError(f"Invalid JSON from {url}") from e

    async def _action(self, action: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Call a CKAN action and unwrap its ``result``."""
        logger.debug(f"Oulu open data: {action} {dict(params or {})}")
        data = await self._get_json(f"{self.base_url}/{action}", params)
        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else None
            message = (error or {}).get("message", "Unknown error")
            raise OpenDataError(f"API Error: {message}", details=error)
        return data["result"]

    async def list_datasets(self) -> List[str]:
        result = await self._action("package_list")
        logger.info(f"Oulu open data: {len(result)} datasets")
        return result

    async def get_dataset(self, dataset_id: str) -> Dict[str, Any]:
        return await self._action("package_show", {"id": dataset_id})

    async def get_resource_data(
        self, resource_id: str, limit: int = 100, offset: int = 0, filters: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"id": resource_id, "limit": limit, "offset": offset}
        for key, value in (filters or {}).items():
            params[key] = str(value)
        result = await self._action("datastore_search", params)
        logger.info(f"Oulu open data: resource {resource_id} returned {len(result.get('records', []))} records")
        return result

    async def search_datasets(self, query: str, limit: int = 10) -> Dict[str, Any]:
        return await self._action("package_search", {"q": query, "rows": limit})

    async def _dataset_records(
        self, dataset_id: str, limit: int, filters: Optional[Mapping[str, Any]]
    ) -> Dict[str, Any]:
        dataset = await self.get_dataset(dataset_id)
        resource = _first_tabular_resource(dataset)
        if resource is None:
            raise OpenDataError(f"No suitable resource found in the {dataset_id} dataset")
        logger.info(f"Oulu open data: using resource {resource['id']} of {dataset_id}")
        return await self.get_resource_data(resource["id"], limit, 0, filters)

    async def get_property_prices(self, limit: int = 50, filters: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Records of the property dataset, or of the housing fallback dataset when it fails."""
        try:
            return await self._dataset_records(PROPERTY_DATASET_ID, limit, filters)
        except OpenDataError as primary_error:
            logger.warning(f"Property dataset failed, trying {FALLBACK_PROPERTY_DATASET_ID}: {primary_error}")
            try:
                return await self._dataset_records(FALLBACK_PROPERTY_DATASET_ID, limit, filters)
            except OpenDataError as fallback_error:
                logger.error(f"Fallback property dataset also failed: {fallback_error}")
                raise primary_error

    async def get_points_of_interest(self, poi_type: str, limit: int = 100) -> Dict[str, Any]:
        """Datastore records of the first dataset found for ``poi_type``."""
        found = await self.search_datasets(poi_type, limit=1)
        results = found.get("results") or []
        if not results:
            raise OpenDataError(f"No dataset found for points of interest of type {poi_type}")
        for resource in results[0].get("resources") or []:
            if resource.get("datastore_active") and resource.get("id"):
                return await self.get_resource_data(resource["id"], limit)
        raise OpenDataError(f"Dataset {results[0].get('name')} has no datastore resource")

    async def nearby_attractions(
        self, lat: float, lng: float, radius: float = DEFAULT_ATTRACTION_RADIUS_KM
    ) -> List[Dict[str, Any]]:
        items = await self._get_json(self.attractions_url)
        if not isinstance(items, list):
            raise OpenDataError("Unexpected attraction feed format")
        nearby = []
        for item in items:
            coords = _coordinates(item)
            if coords is None:
                continue
            if haversine_distance(lat, lng, coords[0], coords[1]) <= radius:
                nearby.append(to_attraction(item))
        logger.info(f"Found {len(nearby)} attractions within {radius} km of ({lat}, {lng})")
        return nearby


def get_oulu_client() -> OuluDataClient:
    """FastAPI dependency."""
    return OuluDataClient(
        settings.oulu_api_url,
        settings.zoneatlas_objects_url,
        timeout=settings.open_data_http_timeout,
    )
