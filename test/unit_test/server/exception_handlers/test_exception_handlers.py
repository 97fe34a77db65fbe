"""
Unit tests for server exception handlers.

Tests cover the 400 mapping of client mistakes and the global 500 handler.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from isuumo.core.errors import CsvImportError, InvalidSearchConditionError, IsuumoError
from isuumo.server.exception_handlers import setup_exception_handlers
from isuumo.server.exception_handlers.client_errors import (
    domain_exception_handler,
    validation_exception_handler,
)
from isuumo.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/chair/search"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("isuumo.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_500_with_error_id(self, mock_request):
        exc = RuntimeError("Test error")

        with patch("isuumo.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_id"] == id(exc)
        assert body["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        mock_request.client = None

        with patch("isuumo.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, KeyError("k"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestClientErrorHandlers:
    @pytest.mark.asyncio
    async def test_validation_error_becomes_400(self, mock_request):
        exc = RequestValidationError([{"loc": ("query", "page"), "msg": "Field required", "type": "missing"}])

        response = await validation_exception_handler(mock_request, exc)

        assert response.status_code == 400
        assert json.loads(response.body) == {"detail": [{"loc": ["query", "page"], "msg": "Field required"}]}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [InvalidSearchConditionError("priceRangeId", "unknown range id 9"), CsvImportError(3, "bad")],
    )
    async def test_domain_error_becomes_400(self, mock_request, exc: IsuumoError):
        response = await domain_exception_handler(mock_request, exc)

        assert response.status_code == 400
        assert json.loads(response.body) == {"detail": str(exc)}


class TestSetupExceptionHandlers:
    def test_registers_handlers(self):
        app = FastAPI()
        setup_exception_handlers(app)

        assert app.exception_handlers[RequestValidationError] is validation_exception_handler
        assert app.exception_handlers[IsuumoError] is domain_exception_handler
        assert app.exception_handlers[Exception] is global_exception_handler

    @pytest.mark.asyncio
    async def test_unhandled_error_is_answered_with_500(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://localhost") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"
