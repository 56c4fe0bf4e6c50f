"""Unit tests for the Google Places proxy client."""

from __future__ import annotations

import httpx
import pytest

from homeharbor.server.services.errors import OpenDataError, PlacesConfigurationError
from homeharbor.server.services.places import SEARCH_RADIUS_M, PlacesClient

PLACES_URL = "http://mock-google/maps/api/place/nearbysearch/json"


async def test_requires_api_key():
    client = PlacesClient(None, PLACES_URL)

    with pytest.raises(PlacesConfigurationError, match="not configured"):
        await client.nearby("65.0", "25.4", "school")


async def test_passes_answer_through():
    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        assert params["location"] == "65.0,25.4"
        assert params["radius"] == str(SEARCH_RADIUS_M)
        assert params["type"] == "school"
        assert params["key"] == "secret"
        return httpx.Response(200, json={"status": "OK", "results": [{"name": "Koulu"}]})

    client = PlacesClient("secret", PLACES_URL, transport=httpx.MockTransport(handler))

    assert await client.nearby("65.0", "25.4", "school") == {"status": "OK", "results": [{"name": "Koulu"}]}


async def test_transport_error_hides_key():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(f"cannot reach {request.url}")

    client = PlacesClient("secret", PLACES_URL, transport=httpx.MockTransport(handler))

    with pytest.raises(OpenDataError) as exc_info:
        await client.nearby("65.0", "25.4", "school")
    assert "secret" not in str(exc_info.value)
    assert "API_KEY_HIDDEN" in str(exc_info.value)
