"""
Unit tests for social card image validation.

Images are generated with Pillow and served by an ``httpx.MockTransport``.
"""

import io
from typing import Callable, Optional

import httpx
import pytest
from PIL import Image

from memopyk.media.image_validator import read_image_size, validate_image_url
from memopyk.server.core.config import settings

pytestmark = pytest.mark.asyncio

IMAGE_URL = "https://mock-cdn.test/card.png"


def _png(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color=(200, 30, 60)).save(buffer, format="PNG")
    return buffer.getvalue()


def _client(
    body: bytes,
    content_type: Optional[str] = "image/png",
    status_code: int = 200,
    declare_length: bool = True,
    head_handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "HEAD":
            if head_handler is not None:
                return head_handler(request)
            headers = {"content-length": str(len(body))} if declare_length else {}
            if content_type:
                headers["content-type"] = content_type
            return httpx.Response(status_code, headers=headers)
        return httpx.Response(status_code, content=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestUrlChecks:
    async def test_malformed_url(self):
        result = await validate_image_url("not a url")

        assert result.is_valid is False
        assert result.errors == ["Malformed URL format"]

    async def test_http_is_rejected(self):
        result = await validate_image_url("http://mock-cdn.test/card.png")

        assert result.is_valid is False
        assert "HTTPS" in result.errors[0]


class TestOpenGraph:
    async def test_optimal_image(self):
        body = _png(1200, 630)
        async with _client(body) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is True
        assert result.is_reachable is True
        assert (result.width, result.height) == (1200, 630)
        assert result.format == "image/png"
        assert result.file_size == len(body)
        assert result.errors == []
        assert result.warnings == []
        assert result.suggestions == ["Ensure image includes descriptive alt text for accessibility"]

    async def test_too_small(self):
        async with _client(_png(300, 200)) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is False
        assert any("too small" in error for error in result.errors)
        assert any("Aspect ratio" in warning for warning in result.warnings)
        assert "Use 1200x630px for optimal Open Graph display" in result.suggestions

    async def test_not_found(self):
        async with _client(b"", status_code=404) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_reachable is False
        assert result.errors == ["Image not accessible: HTTP 404 Not Found"]

    async def test_unsupported_format(self):
        async with _client(b"GIF89a", content_type="image/gif") as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is False
        assert result.errors[0].startswith("Unsupported image format: image/gif")

    async def test_missing_content_type_and_unreadable_body(self):
        async with _client(b"definitely not an image", content_type=None) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is True
        assert "Content-Type header missing" in result.warnings
        assert "Could not determine image dimensions" in result.warnings

    async def test_timeout(self):
        def head_handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with _client(b"", head_handler=head_handler) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is False
        assert result.errors[0].startswith("Request timeout after")

    async def test_network_error(self):
        def head_handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(b"", head_handler=head_handler) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.errors == ["Network error: connection refused"]


class TestFileSizeLimit:
    @pytest.fixture(autouse=True)
    def _small_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "image_max_file_size", 1000)

    async def test_declared_size_over_limit(self):
        async with _client(_png(1200, 630)) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is False
        assert result.errors[0].startswith("File size too large")

    async def test_downloaded_size_over_limit_without_content_length(self):
        body = _png(1200, 630)
        assert len(body) > 1000

        async with _client(body, declare_length=False) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is False
        assert result.file_size > 1000
        assert result.errors[0].startswith("File size too large")
        assert result.width is None

    async def test_download_stops_past_limit(self):
        sent = []

        async def body():
            for _ in range(100):
                sent.append(1)
                yield b"x" * 500

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "HEAD":
                return httpx.Response(200, headers={"content-type": "image/png"})
            return httpx.Response(200, content=body())

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.is_valid is False
        assert result.file_size == 1500
        assert len(sent) == 3

    async def test_small_image_within_limit(self):
        body = _png(60, 30)
        assert len(body) <= 1000

        async with _client(body, declare_length=False) as client:
            result = await validate_image_url(IMAGE_URL, "og", client=client)

        assert result.file_size == len(body)
        assert (result.width, result.height) == (60, 30)
        assert not any("File size" in error for error in result.errors)


class TestTwitterCard:
    async def test_optimal_twitter_image(self):
        async with _client(_png(1200, 600)) as client:
            result = await validate_image_url(IMAGE_URL, "twitter", client=client)

        assert result.is_valid is True
        assert result.type == "twitter"
        assert result.warnings == []

    async def test_og_size_is_not_optimal_for_twitter(self):
        async with _client(_png(1200, 630)) as client:
            result = await validate_image_url(IMAGE_URL, "twitter", client=client)

        assert result.is_valid is True
        assert any("Non-optimal dimensions" in warning for warning in result.warnings)


def test_read_image_size():
    assert read_image_size(_png(64, 32)) == (64, 32)
    assert read_image_size(b"garbage") is None
