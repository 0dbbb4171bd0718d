"""
Gallery Endpoints.

CRUD for portfolio items plus the media workflow around them: extracting a
cover frame from an item's video, letterboxing an external cover image to the
video's size, and serving or cleaning up the generated files.
"""

import time
from typing import List

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from memopyk.core.database.entities.gallery_items import GalleryItem
from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import (
    CleanupResult,
    GalleryItemCreate,
    GalleryItemRead,
    GalleryItemResponse,
    GalleryItemUpdate,
    GalleryReorder,
    MessageResponse,
    ProcessRequest,
    ProcessResult,
    ResizeRequest,
    ResizeResult,
    VideoInfoRead,
)
from memopyk.core.models.io.gallery import Dimensions, VideoDimensions
from memopyk.core.monitoring import log_media_job
from memopyk.media.ffmpeg import (
    ImageResizeOptions,
    MediaProcessingError,
    create_video_thumbnail,
    get_video_info,
    probe_image_dimensions,
    resize_image,
)
from memopyk.server.services.deps import AdminDep, GalleryRepoDep, TempStoreDep

logger = get_logger(__name__)

router = APIRouter(tags=["gallery"])

IMAGE_CACHE_HEADERS = {"Cache-Control": "public, max-age=31536000"}
NULLABLE_FIELDS = {"price_en", "price_fr", "video_url_en", "video_url_fr"}


def _now_ms() -> int:
    return int(time.time() * 1000)


def _is_external(url: str | None) -> bool:
    return bool(url) and url.startswith("http")


async def _get_item_or_404(gallery: GalleryRepoDep, item_id: str) -> GalleryItem:
    item = await gallery.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery item not found")
    return item


@router.get(
    "",
    response_model=List[GalleryItemRead],
    summary="List Gallery Items",
    description="Active gallery items in display order.",
)
async def list_gallery_items(gallery: GalleryRepoDep, include_inactive: bool = False) -> List[GalleryItemRead]:
    """
    List gallery items ordered by ``order``.

    - **include_inactive**: Also return hidden items (for the admin panel).
    """
    filters = None if include_inactive else {"is_active": True}
    return [GalleryItemRead.model_validate(i) for i in await gallery.list(filters=filters)]


@router.post(
    "",
    response_model=GalleryItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Gallery Item",
)
async def create_gallery_item(payload: GalleryItemCreate, _: AdminDep, gallery: GalleryRepoDep) -> GalleryItemResponse:
    item = await gallery.create(GalleryItem(**payload.model_dump()))
    logger.info(f"Created gallery item {item.id}")
    return GalleryItemResponse(item=GalleryItemRead.model_validate(item))


@router.post(
    "/reorder",
    response_model=MessageResponse,
    summary="Reorder Gallery Items",
    description="Apply a list of {id, order} pairs.",
)
async def reorder_gallery_items(payload: GalleryReorder, _: AdminDep, gallery: GalleryRepoDep) -> MessageResponse:
    updated = await gallery.reorder((entry.id, entry.order) for entry in payload.item_orders)
    return MessageResponse(message=f"Reordered {updated} gallery item(s)")


@router.post(
    "/cleanup",
    response_model=CleanupResult,
    summary="Clean Up Generated Files",
    description="Delete every generated thumbnail and resized image.",
)
async def cleanup_all_files(_: AdminDep, temp_store: TempStoreDep) -> CleanupResult:
    removed = temp_store.cleanup_all()
    return CleanupResult(removed=removed, message=f"Removed {removed} temporary file(s)")


@router.get(
    "/{item_id}",
    response_model=GalleryItemRead,
    summary="Get Gallery Item",
    responses={404: {"description": "Gallery item not found"}},
)
async def get_gallery_item(item_id: str, gallery: GalleryRepoDep) -> GalleryItemRead:
    return GalleryItemRead.model_validate(await _get_item_or_404(gallery, item_id))


@router.put(
    "/{item_id}",
    response_model=GalleryItemResponse,
    summary="Update Gallery Item",
    description="Partially update a gallery item.",
    responses={404: {"description": "Gallery item not found"}},
)
async def update_gallery_item(
    item_id: str,
    payload: GalleryItemUpdate,
    _: AdminDep,
    gallery: GalleryRepoDep,
    temp_store: TempStoreDep,
) -> GalleryItemResponse:
    """
    Update a gallery item.

    A new external (``http...``) image URL is also recorded as the item's
    original image so the compare view can show it after resizing.
    """
    item = await _get_item_or_404(gallery, item_id)
    changes = payload.model_dump(exclude_unset=True)

    for lang in ("en", "fr"):
        url = changes.get(f"image_url_{lang}")
        if _is_external(url):
            temp_store.record_original_url(item_id, lang, url)

    for key, value in changes.items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        setattr(item, key, value)
    item = await gallery.update(item)
    return GalleryItemResponse(item=GalleryItemRead.model_validate(item))


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    summary="Delete Gallery Item",
    description="Delete a gallery item and its temporary files.",
    responses={404: {"description": "Gallery item not found"}},
)
async def delete_gallery_item(
    item_id: str, _: AdminDep, gallery: GalleryRepoDep, temp_store: TempStoreDep
) -> MessageResponse:
    await _get_item_or_404(gallery, item_id)
    temp_store.cleanup_item(item_id)
    await gallery.delete(item_id)
    logger.info(f"Deleted gallery item {item_id}")
    return MessageResponse(message="Gallery item deleted")


@router.post(
    "/{item_id}/process",
    response_model=ProcessResult,
    summary="Extract Cover From Video",
    description="Grab a frame of the item's video and use it as the cover image.",
    responses={
        400: {"description": "Item has no video"},
        404: {"description": "Gallery item not found"},
        500: {"description": "FFmpeg failed"},
    },
)
async def process_gallery_item(
    item_id: str,
    _: AdminDep,
    gallery: GalleryRepoDep,
    temp_store: TempStoreDep,
    payload: ProcessRequest | None = None,
) -> ProcessResult:
    """
    Extract a 640x360 letterboxed thumbnail from the item's video.

    Both image URLs are pointed at the served thumbnail afterwards.

    - **timestamp**: Seconds into the video (default 5).
    """
    item = await _get_item_or_404(gallery, item_id)
    video_url = item.video_url
    if not video_url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Gallery item must have a video URL to process"
        )
    timestamp = (payload or ProcessRequest()).timestamp

    temp_store.ensure_dir()
    temp_store.cleanup_generated(item_id)
    output_path = str(temp_store.thumbnail_path(item_id))

    try:
        await create_video_thumbnail(video_url, output_path, timestamp)
        info = await get_video_info(video_url)
    except MediaProcessingError as e:
        log_media_job("thumbnail", item_id, success=False, details={"error": str(e)})
        raise

    thumbnail_url = f"/api/gallery/{item_id}/thumbnail?t={_now_ms()}"
    item.image_url_en = thumbnail_url
    item.image_url_fr = thumbnail_url
    await gallery.update(item)
    log_media_job("thumbnail", item_id, success=True, details={"width": info.width, "height": info.height})

    return ProcessResult(
        thumbnail_path=output_path,
        thumbnail_url=thumbnail_url,
        video_dimensions=VideoDimensions(width=info.width, height=info.height, aspect_ratio=info.aspect_ratio),
        message="Video thumbnail extracted and saved successfully",
    )


@router.post(
    "/{item_id}/resize-image",
    response_model=ResizeResult,
    summary="Resize Cover Image",
    description="Letterbox the item's external cover image to the given size.",
    responses={
        400: {"description": "Cover image is not an external URL"},
        404: {"description": "Gallery item not found"},
        500: {"description": "FFmpeg failed"},
    },
)
async def resize_gallery_image(
    item_id: str,
    payload: ResizeRequest,
    _: AdminDep,
    gallery: GalleryRepoDep,
    temp_store: TempStoreDep,
) -> ResizeResult:
    """
    Resize an external cover image to match the video.

    Only ``http(s)`` images can be resized; generated thumbnails must be
    re-extracted instead.

    - **targetWidth**: Output width in pixels.
    - **targetHeight**: Output height in pixels.
    """
    item = await _get_item_or_404(gallery, item_id)
    image_url = item.image_url_en or item.image_url_fr
    if not image_url:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Gallery item must have an image URL to resize"
        )
    if image_url.startswith("/api/gallery/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot resize extracted thumbnails. Extract a new thumbnail at the desired timestamp instead.",
        )
    if not _is_external(image_url):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Resize only works with external image URLs (http/https).",
        )

    temp_store.ensure_dir()
    temp_store.cleanup_generated(item_id)

    try:
        original_width, original_height = await probe_image_dimensions(image_url)
    except MediaProcessingError as e:
        logger.warning(f"Could not detect dimensions of {image_url}: {e}")
        original_width, original_height = 0, 0

    output_path = str(temp_store.resized_path(item_id))
    options = ImageResizeOptions(
        input_path=image_url,
        output_path=output_path,
        target_width=payload.target_width,
        target_height=payload.target_height,
    )
    try:
        await resize_image(options)
    except MediaProcessingError as e:
        log_media_job("resize", item_id, success=False, details={"error": str(e)})
        raise

    resized_url = f"/api/gallery/{item_id}/resized-image?t={_now_ms()}"
    item.image_url_en = resized_url
    item.image_url_fr = resized_url
    await gallery.update(item)
    log_media_job(
        "resize",
        item_id,
        success=True,
        details={"width": payload.target_width, "height": payload.target_height},
    )

    source = f"{original_width}x{original_height}px" if original_width > 0 else "original size"
    return ResizeResult(
        original_dimensions=Dimensions(width=original_width, height=original_height),
        target_dimensions=Dimensions(width=payload.target_width, height=payload.target_height),
        resized_url=resized_url,
        message=f"Image resized from {source} to {payload.target_width}x{payload.target_height}px",
    )


@router.get(
    "/{item_id}/thumbnail",
    summary="Serve Thumbnail",
    response_class=FileResponse,
    responses={404: {"description": "Thumbnail not found"}},
)
async def serve_thumbnail(item_id: str, temp_store: TempStoreDep):
    path = temp_store.thumbnail_path(item_id)
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Thumbnail not found")
    return FileResponse(path, media_type="image/jpeg", headers=IMAGE_CACHE_HEADERS)


@router.get(
    "/{item_id}/resized-image",
    summary="Serve Resized Image",
    response_class=FileResponse,
    responses={404: {"description": "Resized image not found"}},
)
async def serve_resized_image(item_id: str, temp_store: TempStoreDep):
    path = temp_store.resized_path(item_id)
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resized image not found")
    return FileResponse(path, media_type="image/jpeg", headers=IMAGE_CACHE_HEADERS)


@router.get(
    "/{item_id}/compare",
    summary="Before/After Comparison",
    description="The original external image next to the resized result.",
    responses={404: {"description": "Gallery item not found"}},
)
async def compare_images(item_id: str, gallery: GalleryRepoDep, temp_store: TempStoreDep):
    item = await _get_item_or_404(gallery, item_id)

    original_url = temp_store.read_original_url(item_id)
    if original_url is None:
        current = item.image_url_en or item.image_url_fr
        if current and "/api/gallery/" not in current:
            original_url = current

    resized = temp_store.file_info(temp_store.resized_path(item_id))
    return {
        "before": {
            "url": original_url,
            "note": "External image URL" if _is_external(original_url) else "Original external URL not available",
        },
        "after": {
            "exists": resized.exists,
            "url": f"/api/gallery/{item_id}/resized-image",
            "size": resized.size or 0,
            "note": "Resized to match video dimensions",
        },
    }


@router.get(
    "/{item_id}/debug",
    summary="Debug Gallery Item",
    description="The stored item and the state of its temporary files.",
    responses={404: {"description": "Gallery item not found"}},
)
async def debug_gallery_item(item_id: str, _: AdminDep, gallery: GalleryRepoDep, temp_store: TempStoreDep):
    item = await _get_item_or_404(gallery, item_id)
    thumbnail = temp_store.file_info(temp_store.thumbnail_path(item_id))
    resized = temp_store.file_info(temp_store.resized_path(item_id))
    return {
        "galleryItem": GalleryItemRead.model_validate(item).model_dump(mode="json", by_alias=True),
        "files": {
            "thumbnail": {
                "path": thumbnail.path,
                "exists": thumbnail.exists,
                "size": thumbnail.size,
                "modified": thumbnail.modified_at.isoformat() if thumbnail.modified_at else None,
            },
            "resized": {
                "path": resized.path,
                "exists": resized.exists,
                "size": resized.size,
                "modified": resized.modified_at.isoformat() if resized.modified_at else None,
            },
            "originalUrl": temp_store.read_original_url(item_id),
        },
    }


@router.get(
    "/{item_id}/video-info",
    response_model=VideoInfoRead,
    summary="Video Information",
    description="Dimensions and duration of the item's video.",
    responses={404: {"description": "Gallery item with video not found"}},
)
async def gallery_video_info(item_id: str, gallery: GalleryRepoDep) -> VideoInfoRead:
    item = await gallery.get_by_id(item_id)
    if item is None or not item.video_url:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery item with video not found")
    info = await get_video_info(item.video_url)
    return VideoInfoRead(
        width=info.width,
        height=info.height,
        aspect_ratio=info.aspect_ratio,
        duration=info.duration,
    )


@router.delete(
    "/{item_id}/cleanup",
    response_model=CleanupResult,
    summary="Clean Up Item Files",
    description="Remove the generated thumbnail and resized image of one item.",
)
async def cleanup_item_files(item_id: str, _: AdminDep, temp_store: TempStoreDep) -> CleanupResult:
    removed = temp_store.cleanup_generated(item_id)
    return CleanupResult(removed=removed, message="Temporary files cleaned up")
