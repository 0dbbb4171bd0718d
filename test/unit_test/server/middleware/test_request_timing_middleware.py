"""
Unit tests for the request timing middleware.

This test suite covers:
- Request/response processing
- Duration reporting and the X-Process-Time header
- Slow request detection
- Error logging and re-raising
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.responses import Response

from memopyk.server.middleware import RequestTimingMiddleware

MIDDLEWARE_MODULE = "memopyk.server.middleware.logfire_middleware"


def _mock_request(method: str = "GET", path: str = "/api/faqs") -> Request:
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.state = MagicMock()
    return request


class TestRequestTimingDispatch:
    """Test RequestTimingMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_reports_successful_request(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = RequestTimingMiddleware(app=AsyncMock())

        with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(_mock_request(), call_next)

        assert response.status_code == 200
        mock_log.assert_called_once()
        kwargs = mock_log.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/faqs"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_adds_process_time_header(self):
        async def call_next(request):
            return Response(content="ok", status_code=201)

        middleware = RequestTimingMiddleware(app=AsyncMock())

        with patch(f"{MIDDLEWARE_MODULE}.log_api_request"):
            response = await middleware.dispatch(_mock_request("POST"), call_next)

        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_warns_about_slow_requests(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = RequestTimingMiddleware(app=AsyncMock())

        with (
            patch(f"{MIDDLEWARE_MODULE}.log_api_request"),
            patch(f"{MIDDLEWARE_MODULE}.time.perf_counter", side_effect=[0.0, 1.5]),
            patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
        ):
            await middleware.dispatch(_mock_request(path="/api/sitemap.xml"), call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args.args[0]
        assert mock_logger.warning.call_args.kwargs["extra"]["duration_ms"] == 1500.0

    @pytest.mark.asyncio
    async def test_fast_request_is_not_flagged(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = RequestTimingMiddleware(app=AsyncMock())

        with (
            patch(f"{MIDDLEWARE_MODULE}.log_api_request"),
            patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
        ):
            await middleware.dispatch(_mock_request(), call_next)

        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_logs_and_reraises_errors(self):
        async def call_next(request):
            raise ValueError("boom")

        middleware = RequestTimingMiddleware(app=AsyncMock())

        with (
            patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log,
            patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger,
        ):
            with pytest.raises(ValueError, match="boom"):
                await middleware.dispatch(_mock_request("DELETE"), call_next)

        assert mock_log.call_args.kwargs["status_code"] == 500
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["extra"]["error"] == "boom"


class TestRequestTimingInApp:
    @pytest.mark.asyncio
    async def test_header_on_real_app(self):
        app = FastAPI()
        app.add_middleware(RequestTimingMiddleware)

        @app.get("/ping")
        async def ping():
            return {"pong": True}

        with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log:
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
                response = await client.get("/ping")

        assert response.status_code == 200
        assert "X-Process-Time" in response.headers
        assert mock_log.call_args.kwargs["path"] == "/ping"
