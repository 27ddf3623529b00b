"""
Unit tests for server exception handlers.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from deep_agent.server.exception_handlers import setup_exception_handlers
from deep_agent.server.exception_handlers.global_handler import global_exception_handler

MODULE = "deep_agent.server.exception_handlers.global_handler"


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.fixture
    def mock_request(self):
        request = Mock(spec=Request)
        request.method = "POST"
        request.url.path = "/api/agent/execute"
        request.query_params = {}
        request.client = Mock()
        request.client.host = "127.0.0.1"
        return request

    @pytest.mark.asyncio
    async def test_logs_error_with_context(self, mock_request):
        exc = ValueError("Test error")

        with patch(f"{MODULE}.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert "Unhandled exception" in call_args[0][0]
        assert call_args[1]["extra"]["error_type"] == "ValueError"
        assert call_args[1]["extra"]["path"] == "/api/agent/execute"
        assert call_args[1]["extra"]["client"] == "127.0.0.1"

    @pytest.mark.asyncio
    async def test_returns_500_json_body(self, mock_request):
        exc = RuntimeError("Test error")

        with patch(f"{MODULE}.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body == {"detail": "Internal server error", "error_id": id(exc), "error_type": "RuntimeError"}

    @pytest.mark.asyncio
    async def test_reports_to_monitoring(self, mock_request):
        exc = KeyError("missing")

        with patch(f"{MODULE}.logger"), patch(f"{MODULE}.log_error") as mock_log_error:
            await global_exception_handler(mock_request, exc)

        kwargs = mock_log_error.call_args.kwargs
        assert kwargs["error_type"] == "KeyError"
        assert kwargs["context"]["error_id"] == id(exc)

    @pytest.mark.asyncio
    async def test_handles_request_without_client(self, mock_request):
        mock_request.client = None

        with patch(f"{MODULE}.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


def test_setup_exception_handlers_registers_global_handler():
    app = FastAPI()

    setup_exception_handlers(app)

    assert app.exception_handlers[Exception] is global_exception_handler
