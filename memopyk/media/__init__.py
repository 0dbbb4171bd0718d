"""
Media helpers for gallery items.

Modules:
- ffmpeg: ffprobe/ffmpeg shell-outs (probe, frame extraction, resize, thumbnails)
- temp_files: Per-item generated files and recorded original image URLs
- image_validator: Reachability and dimension checks for social card images
"""

from .ffmpeg import (
    ImageResizeOptions,
    MediaProcessingError,
    VideoInfo,
    create_video_thumbnail,
    extract_video_frame,
    get_video_info,
    probe_image_dimensions,
    resize_image,
)
from .temp_files import GalleryTempStore, TempFileInfo

__all__ = [
    "GalleryTempStore",
    "ImageResizeOptions",
    "MediaProcessingError",
    "TempFileInfo",
    "VideoInfo",
    "create_video_thumbnail",
    "extract_video_frame",
    "get_video_info",
    "probe_image_dimensions",
    "resize_image",
]
