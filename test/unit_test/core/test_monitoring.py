"""
Unit tests for the Logfire monitoring module.

This test suite covers:
- Initialization with monitoring disabled or missing a token
- Successful configuration and instrumentation
- Logging helpers degrading gracefully when Logfire is not configured
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from homeharbor.core import monitoring


@pytest.fixture(autouse=True)
def _reset_initialized():
    original = monitoring._initialized
    yield
    monitoring._initialized = original


class TestInitializeLogfire:
    def test_disabled_returns_false(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", False), patch.object(monitoring, "logfire") as mock_logfire:
            assert monitoring.initialize_logfire() is False
            mock_logfire.configure.assert_not_called()

    def test_enabled_without_token_returns_false(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", ""
        ), patch.object(monitoring, "logfire") as mock_logfire:
            assert monitoring.initialize_logfire() is False
            mock_logfire.configure.assert_not_called()

    def test_configures_and_instruments(self):
        app = MagicMock()
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", "token-123"
        ), patch.object(monitoring, "logfire") as mock_logfire:
            assert monitoring.initialize_logfire(app) is True

            mock_logfire.configure.assert_called_once()
            assert mock_logfire.configure.call_args.kwargs["token"] == "token-123"
            mock_logfire.instrument_sqlalchemy.assert_called_once()
            mock_logfire.instrument_httpx.assert_called_once()
            mock_logfire.instrument_fastapi.assert_called_once_with(app=app)
            assert monitoring._initialized is True

    def test_configure_failure_returns_false(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", "token-123"
        ), patch.object(monitoring, "logfire") as mock_logfire:
            mock_logfire.configure.side_effect = RuntimeError("bad token")

            assert monitoring.initialize_logfire() is False

    def test_instrumentation_failure_does_not_abort(self):
        with patch.object(monitoring, "LOGFIRE_ENABLED", True), patch.object(
            monitoring, "LOGFIRE_TOKEN", "token-123"
        ), patch.object(monitoring, "logfire") as mock_logfire:
            mock_logfire.instrument_sqlalchemy.side_effect = RuntimeError("no engine")

            assert monitoring.initialize_logfire() is True
            mock_logfire.instrument_httpx.assert_called_once()


class TestLoggingHelpers:
    def test_log_api_request_writes_app_log(self, caplog):
        monitoring._initialized = False
        with caplog.at_level(logging.INFO, logger="homeharbor.core.monitoring"):
            monitoring.log_api_request("GET", "/api/properties", 200, 12.4)

        assert "GET /api/properties 200 in 12ms" in caplog.text

    def test_log_api_request_skips_non_api_paths(self, caplog):
        monitoring._initialized = False
        with caplog.at_level(logging.INFO, logger="homeharbor.core.monitoring"):
            monitoring.log_api_request("GET", "/health", 200, 1.0)

        assert "/health" not in caplog.text

    def test_helpers_send_to_logfire_when_initialized(self):
        monitoring._initialized = True
        with patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.log_api_request("POST", "/api/users/login", 401, 5.0)
            monitoring.log_sync_result("statfin_crime", 1000, 1, 2500.0)
            monitoring.log_error("ValueError", "boom", {"path": "/api/x"})

        mock_logfire.info.assert_any_call(
            "API request", method="POST", path="/api/users/login", status_code=401, duration_ms=5.0
        )
        assert mock_logfire.info.call_count == 2
        mock_logfire.error.assert_called_once_with(
            "Error occurred", error_type="ValueError", message="boom", path="/api/x"
        )

    def test_helpers_are_noops_when_not_initialized(self):
        monitoring._initialized = False
        with patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.log_sync_result("statfin_crime", 10, 0, 1.0)
            monitoring.log_error("KeyError", "missing")

        mock_logfire.info.assert_not_called()
        mock_logfire.error.assert_not_called()

    def test_logfire_failures_are_contained(self):
        monitoring._initialized = True
        with patch.object(monitoring, "logfire") as mock_logfire:
            mock_logfire.error.side_effect = RuntimeError("exporter down")
            monitoring.log_error("ValueError", "boom")
