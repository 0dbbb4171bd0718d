"""
FFmpeg media helper.

Thin async wrappers around the ``ffprobe`` and ``ffmpeg`` binaries used to
turn gallery videos into cover images:

- get_video_info: width, height, aspect ratio and duration of a video
- probe_image_dimensions: width and height of an image (or any media)
- extract_video_frame: grab a single frame as JPEG
- resize_image: scale an image into a target box, letterboxing with black
- create_video_thumbnail: frame grab and letterbox in one pass

Commands are built as argument lists and run with
``asyncio.create_subprocess_exec``; nothing goes through a shell. Every
failure is logged and re-raised as ``MediaProcessingError``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from memopyk.server.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_FRAME_TIMESTAMP = 5
DEFAULT_JPEG_QUALITY = 85
THUMBNAIL_WIDTH = 640
THUMBNAIL_HEIGHT = 360


class MediaProcessingError(RuntimeError):
    """Raised when ffprobe/ffmpeg cannot be run or reports a failure."""


@dataclass(frozen=True)
class VideoInfo:
    width: int
    height: int
    aspect_ratio: float
    duration: float


@dataclass(frozen=True)
class ImageResizeOptions:
    input_path: str
    output_path: str
    target_width: int
    target_height: int
    quality: int = DEFAULT_JPEG_QUALITY


def _letterbox_filter(width: int, height: int) -> str:
    return (
        f"scale={width}:{height}:force_original_aspect_ratio=decrease,"
        f"pad={width}:{height}:(ow-iw)/2:(oh-ih)/2:color=black"
    )


def _ensure_parent_dir(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


async def _run_command(args: Sequence[str]) -> str:
    """Run a command and return its stdout.

    Raises:
        MediaProcessingError: when the binary is missing or exits non-zero
    """
    logger.debug(f"Running media command: {' '.join(args)}")
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        logger.error(f"Could not start {args[0]}: {e}")
        raise MediaProcessingError(f"Could not start {args[0]}: {e}") from e

    stdout_bytes, stderr_bytes = await process.communicate()
    stdout = stdout_bytes.decode("utf-8", errors="replace") if stdout_bytes else ""
    stderr = stderr_bytes.decode("utf-8", errors="replace") if stderr_bytes else ""

    if process.returncode != 0:
        message = (stderr or stdout or f"{args[0]} failed").strip()
        logger.error(f"{args[0]} exited with code {process.returncode}: {message}")
        raise MediaProcessingError(message)
    return stdout


async def _probe(source: str) -> dict[str, Any]:
    args = [
        settings.media.ffprobe_binary,
        "-v",
        "quiet",
        "-print_format",
        "json",
        "-show_format",
        "-show_streams",
        source,
    ]
    output = await _run_command(args)
    try:
        return json.loads(output or "{}")
    except json.JSONDecodeError as e:
        logger.error(f"Unparsable ffprobe output for {source}: {e}")
        raise MediaProcessingError(f"Unparsable ffprobe output: {e}") from e


async def get_video_info(source: str) -> VideoInfo:
    """
    Read the dimensions and duration of a video.

    Args:
        source: Local path or URL understood by ffprobe

    Returns:
        VideoInfo for the first video stream

    Raises:
        MediaProcessingError: when probing fails or there is no video stream
    """
    data = await _probe(source)
    streams = data.get("streams") or []
    video_stream = next((s for s in streams if s.get("codec_type") == "video"), None)
    if video_stream is None:
        logger.error(f"No video stream found in {source}")
        raise MediaProcessingError("No video stream found")

    try:
        width = int(video_stream["width"])
        height = int(video_stream["height"])
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Video stream of {source} has no usable dimensions: {e}")
        raise MediaProcessingError("Video stream has no usable dimensions") from e

    try:
        duration = float((data.get("format") or {}).get("duration") or 0)
    except (TypeError, ValueError):
        duration = 0.0

    info = VideoInfo(
        width=width,
        height=height,
        aspect_ratio=width / height if height else 0.0,
        duration=duration,
    )
    logger.info(f"Video info for {source}: {info.width}x{info.height}, {info.duration:.2f}s")
    return info


async def probe_image_dimensions(source: str) -> tuple[int, int]:
    """Width and height of the first stream of ``source``."""
    data = await _probe(source)
    streams = data.get("streams") or []
    if not streams:
        logger.error(f"No streams found in {source}")
        raise MediaProcessingError("No streams found")
    try:
        return int(streams[0]["width"]), int(streams[0]["height"])
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"First stream of {source} has no usable dimensions: {e}")
        raise MediaProcessingError("First stream has no usable dimensions") from e


async def extract_video_frame(source: str, output_path: str, timestamp: float = DEFAULT_FRAME_TIMESTAMP) -> str:
    """Save the frame at ``timestamp`` seconds to ``output_path``."""
    _ensure_parent_dir(output_path)
    args = [
        settings.media.ffmpeg_binary,
        "-ss",
        str(timestamp),
        "-i",
        source,
        "-vframes",
        "1",
        "-q:v",
        "2",
        output_path,
        "-y",
    ]
    await _run_command(args)
    logger.info(f"Extracted frame at {timestamp}s from {source} to {output_path}")
    return output_path


async def resize_image(options: ImageResizeOptions) -> str:
    """
    Scale an image to fit the target box and pad the rest with black.

    The aspect ratio of the source is preserved; the output is exactly
    ``target_width`` x ``target_height``.
    """
    _ensure_parent_dir(options.output_path)
    args = [
        settings.media.ffmpeg_binary,
        "-i",
        options.input_path,
        "-vf",
        _letterbox_filter(options.target_width, options.target_height),
        "-q:v",
        str(options.quality),
        options.output_path,
        "-y",
    ]
    await _run_command(args)
    logger.info(
        f"Resized {options.input_path} to {options.target_width}x{options.target_height} at {options.output_path}"
    )
    return options.output_path


async def create_video_thumbnail(
    source: str,
    output_path: str,
    timestamp: float = DEFAULT_FRAME_TIMESTAMP,
    width: int = THUMBNAIL_WIDTH,
    height: int = THUMBNAIL_HEIGHT,
) -> str:
    """Grab the frame at ``timestamp`` and letterbox it to ``width`` x ``height``."""
    _ensure_parent_dir(output_path)
    args = [
        settings.media.ffmpeg_binary,
        "-ss",
        str(timestamp),
        "-i",
        source,
        "-vf",
        _letterbox_filter(width, height),
        "-vframes",
        "1",
        "-q:v",
        "2",
        output_path,
        "-y",
    ]
    await _run_command(args)
    logger.info(f"Created {width}x{height} thumbnail for {source} at {output_path}")
    return output_path
