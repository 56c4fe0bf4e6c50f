"""
Unit tests for server exception handlers.

The handlers are registered on a small app so each error type can be raised
on demand.
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from homeharbor.server.exception_handlers import setup_exception_handlers


class Payload(BaseModel):
    name: str


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/string-detail")
    async def string_detail():
        raise HTTPException(status_code=404, detail="Property not found")

    @app.get("/dict-detail")
    async def dict_detail():
        raise HTTPException(status_code=500, detail={"message": "Failed to reseed database", "error": "boom"})

    @app.post("/validated")
    async def validated(payload: Payload):
        return payload

    @app.get("/conflict")
    async def conflict():
        raise IntegrityError("INSERT INTO users", {}, Exception("duplicate key"))

    @app.get("/crash")
    async def crash():
        raise RuntimeError("Test error")

    return app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestHTTPExceptionHandler:
    async def test_string_detail_becomes_error_key(self, client):
        response = await client.get("/string-detail")

        assert response.status_code == 404
        assert response.json() == {"error": "Property not found"}

    async def test_dict_detail_is_sent_as_is(self, client):
        response = await client.get("/dict-detail")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to reseed database", "error": "boom"}

    async def test_unknown_route(self, client):
        response = await client.get("/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestValidationHandler:
    async def test_returns_400_with_details(self, client):
        response = await client.post("/validated", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["details"][0]["loc"] == ["body", "name"]


class TestIntegrityErrorHandler:
    async def test_returns_409(self, client):
        response = await client.get("/conflict")

        assert response.status_code == 409
        assert "error" in response.json()


class TestGlobalExceptionHandler:
    async def test_returns_500_with_error_id(self, client):
        with patch("homeharbor.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await client.get("/crash")

        assert response.status_code == 500
        body = response.json()
        assert body["detail"] == "Internal server error"
        assert body["error_type"] == "RuntimeError"
        assert isinstance(body["error_id"], int)
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["extra"]["error_type"] == "RuntimeError"

    async def test_reports_to_monitoring(self, client):
        with patch("homeharbor.server.exception_handlers.global_handler.log_error") as mock_log_error:
            await client.get("/crash")

        mock_log_error.assert_called_once()
        assert mock_log_error.call_args[0][:2] == ("RuntimeError", "Test error")
