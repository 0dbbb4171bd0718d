"""
Social card image validation.

Checks that an Open Graph or Twitter Card image URL is reachable over HTTPS,
is an accepted format and size, and has dimensions the platforms render
well. The outcome is reported as errors (the image will not work), warnings
(it works but looks worse than it could) and suggestions.
"""

from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Literal, Optional
from urllib.parse import urlparse

import httpx
from PIL import Image, UnidentifiedImageError

from memopyk.server.core.config import settings

logger = logging.getLogger(__name__)

ImageKind = Literal["og", "twitter"]

USER_AGENT = "MEMOPYK-SEO-Validator/1.0"
ALLOWED_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp")


@dataclass(frozen=True)
class CardRules:
    label: str
    optimal: tuple[int, int]
    minimum: tuple[int, int]
    ideal_ratio_label: str
    warn_when_larger_than: Optional[tuple[int, int]] = None


CARD_RULES: dict[str, CardRules] = {
    "og": CardRules(
        label="Open Graph",
        optimal=(1200, 630),
        minimum=(600, 315),
        ideal_ratio_label="1.91:1",
        warn_when_larger_than=(2400, 1260),
    ),
    "twitter": CardRules(
        label="Twitter Card",
        optimal=(1200, 600),
        minimum=(600, 300),
        ideal_ratio_label="2:1",
    ),
}

ASPECT_RATIO_TOLERANCE = 0.1


@dataclass
class ImageValidationResult:
    url: str
    type: str
    is_valid: bool = False
    is_reachable: bool = False
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    format: Optional[str] = None
    load_time_ms: float = 0.0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


def _check_dimensions(result: ImageValidationResult, rules: CardRules) -> None:
    width, height = result.width or 0, result.height or 0
    if not width or not height:
        return
    optimal_w, optimal_h = rules.optimal
    min_w, min_h = rules.minimum

    if width < min_w or height < min_h:
        result.errors.append(
            f"{rules.label} image too small: {width}x{height}px. Minimum: {min_w}x{min_h}px"
        )
    if (width, height) != rules.optimal:
        result.warnings.append(
            f"Non-optimal dimensions: {width}x{height}px. Recommended: {optimal_w}x{optimal_h}px"
        )

    ratio = width / height
    if abs(ratio - optimal_w / optimal_h) > ASPECT_RATIO_TOLERANCE:
        result.warnings.append(
            f"Aspect ratio {ratio:.2f}:1 may be cropped. "
            f"Ideal: {rules.ideal_ratio_label} ({optimal_w}x{optimal_h}px)"
        )

    if rules.warn_when_larger_than is not None:
        max_w, max_h = rules.warn_when_larger_than
        if width > max_w or height > max_h:
            result.warnings.append("Image larger than necessary, consider optimizing for faster loading")


def _add_suggestions(result: ImageValidationResult, rules: CardRules) -> None:
    suggestions = result.suggestions
    if result.file_size and result.file_size > 1024 * 1024:
        suggestions.append("Consider compressing image to reduce file size and improve loading speed")
    if result.format == "image/png" and result.file_size and result.file_size > 500 * 1024:
        suggestions.append("Consider using JPEG format for photos to reduce file size")
    if result.width and result.height and (result.width, result.height) != rules.optimal:
        optimal_w, optimal_h = rules.optimal
        suggestions.append(f"Use {optimal_w}x{optimal_h}px for optimal {rules.label} display")
    if result.load_time_ms > 2000:
        suggestions.append("Consider using a CDN to improve image loading performance")
    suggestions.append("Ensure image includes descriptive alt text for accessibility")


def read_image_size(content: bytes) -> Optional[tuple[int, int]]:
    """Width and height of an encoded image, or None when Pillow cannot read it."""
    try:
        with Image.open(io.BytesIO(content)) as image:
            return image.size
    except (UnidentifiedImageError, OSError) as e:
        logger.debug(f"Could not read image dimensions: {e}")
        return None


def _check_file_size(result: ImageValidationResult, max_bytes: int) -> None:
    if result.file_size is not None and result.file_size > max_bytes:
        result.errors.append(
            f"File size too large: {round(result.file_size / 1024 / 1024)}MB. "
            f"Maximum: {round(max_bytes / 1024 / 1024)}MB"
        )


async def _download(
    client: httpx.AsyncClient, url: str, max_bytes: int, request_options: dict[str, Any]
) -> Optional[bytes]:
    """Body of ``url``, or None on a non-2xx answer.

    Reading stops as soon as more than ``max_bytes`` have arrived, so an
    oversized body comes back truncated but still longer than the limit.
    """
    chunks: list[bytes] = []
    received = 0
    async with client.stream("GET", url, **request_options) as response:
        if not response.is_success:
            return None
        async for chunk in response.aiter_bytes():
            chunks.append(chunk)
            received += len(chunk)
            if received > max_bytes:
                break
    return b"".join(chunks)


async def validate_image_url(
    url: str,
    kind: ImageKind = "og",
    client: Optional[httpx.AsyncClient] = None,
) -> ImageValidationResult:
    """
    Validate a social card image URL.

    A HEAD request checks reachability, content type and declared size; when
    that passes, the image is downloaded (reading stops once past the
    size limit) and decoded with Pillow to check its dimensions against the rules
    for ``kind``. The downloaded size is held to the same limit as the
    declared one.

    Args:
        url: Absolute HTTPS URL of the image
        kind: ``og`` for Open Graph, ``twitter`` for Twitter Cards
        client: Optional HTTP client to reuse (one is created otherwise)

    Returns:
        ImageValidationResult; ``is_valid`` is true when there are no errors
    """
    rules = CARD_RULES[kind]
    result = ImageValidationResult(url=url, type=kind)
    started = time.perf_counter()

    def elapsed_ms() -> float:
        return round((time.perf_counter() - started) * 1000, 1)

    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        result.errors.append("Malformed URL format")
        return result
    if parsed.scheme != "https":
        result.errors.append("Images must be served over HTTPS for social sharing")
        return result

    media = settings.media
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(follow_redirects=True)
    request_options = {
        "headers": {"User-Agent": USER_AGENT},
        "timeout": media.image_validation_timeout_seconds,
    }

    try:
        try:
            head = await client.head(url, **request_options)
        except httpx.TimeoutException:
            result.load_time_ms = elapsed_ms()
            result.errors.append(f"Request timeout after {media.image_validation_timeout_seconds:g}s")
            return result
        except httpx.HTTPError as e:
            result.load_time_ms = elapsed_ms()
            result.errors.append(f"Network error: {e}")
            return result

        result.load_time_ms = elapsed_ms()
        if head.status_code >= 400:
            result.errors.append(f"Image not accessible: HTTP {head.status_code} {head.reason_phrase}")
            return result
        result.is_reachable = True

        content_type = head.headers.get("content-type")
        if content_type:
            result.format = content_type.split(";")[0].strip().lower()
            if result.format not in ALLOWED_CONTENT_TYPES:
                result.errors.append(
                    f"Unsupported image format: {result.format}. Supported: {', '.join(ALLOWED_CONTENT_TYPES)}"
                )
        else:
            result.warnings.append("Content-Type header missing")

        content_length = head.headers.get("content-length")
        if content_length and content_length.isdigit():
            result.file_size = int(content_length)
            _check_file_size(result, media.image_max_file_size)

        if not result.errors:
            try:
                content = await _download(client, url, media.image_max_file_size, request_options)
            except httpx.HTTPError as e:
                logger.info(f"Image download failed for {url}: {e}")
                content = None

            if content is not None and (result.file_size is None or len(content) > result.file_size):
                result.file_size = len(content)
                _check_file_size(result, media.image_max_file_size)

            if not result.errors:
                size = read_image_size(content) if content is not None else None
                if size is None:
                    result.warnings.append("Could not determine image dimensions")
                else:
                    result.width, result.height = size
                    _check_dimensions(result, rules)
    finally:
        if owns_client:
            await client.aclose()

    _add_suggestions(result, rules)
    result.is_valid = not result.errors
    logger.info(
        f"Validated {kind} image {url}: valid={result.is_valid}, "
        f"errors={len(result.errors)}, warnings={len(result.warnings)}"
    )
    return result
