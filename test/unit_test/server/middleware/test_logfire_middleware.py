"""
Unit tests for Logfire middleware.

This test suite covers:
- Request timing and the X-Process-Time header
- Reporting through log_api_request
- Failed requests
- Slow request warnings
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.responses import Response

from homeharbor.server.middleware import LogfireMiddleware
from homeharbor.server.middleware import logfire_middleware


def _request(method: str = "GET", path: str = "/api/properties") -> Request:
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.state = MagicMock()
    return request


class TestLogfireMiddlewareDispatch:
    async def test_reports_successful_request(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch.object(logfire_middleware, "log_api_request") as mock_log:
            response = await middleware.dispatch(_request(), call_next)

        assert response.status_code == 200
        assert "X-Process-Time" in response.headers
        kwargs = mock_log.call_args[1]
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/properties"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0

    async def test_failed_request_reported_as_500_and_reraised(self):
        async def call_next(request):
            raise RuntimeError("handler crashed")

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch.object(logfire_middleware, "log_api_request") as mock_log:
            with pytest.raises(RuntimeError):
                await middleware.dispatch(_request("POST"), call_next)

        assert mock_log.call_args[1]["status_code"] == 500

    async def test_slow_request_warns(self, monkeypatch):
        monkeypatch.setattr(logfire_middleware, "SLOW_REQUEST_MS", -1)

        async def call_next(request):
            return Response(status_code=204)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch.object(logfire_middleware, "log_api_request"), patch.object(logfire_middleware, "logger") as mock_logger:
            await middleware.dispatch(_request(), call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]


async def test_header_on_real_app():
    app = FastAPI()
    app.add_middleware(LogfireMiddleware)

    @app.get("/api/ping")
    async def ping():
        return {"pong": True}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/ping")

    assert response.status_code == 200
    assert float(response.headers["X-Process-Time"]) >= 0
