"""
Hero Video Endpoints.

Manage the background videos rotating on the landing page.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from memopyk.core.database.entities.hero_videos import HeroVideo
from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import HeroVideoCreate, HeroVideoRead, HeroVideoReorder, HeroVideoUpdate
from memopyk.server.services.deps import AdminDep, HeroVideoRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["hero-videos"])


@router.get(
    "",
    response_model=List[HeroVideoRead],
    summary="List Hero Videos",
    description="Hero videos in rotation order.",
)
async def list_hero_videos(videos: HeroVideoRepoDep, active_only: bool = False) -> List[HeroVideoRead]:
    """
    List hero videos ordered by ``orderIndex``.

    - **active_only**: Only return videos that are switched on.
    """
    filters = {"is_active": True} if active_only else None
    return [HeroVideoRead.model_validate(v) for v in await videos.list(filters=filters)]


@router.post(
    "",
    response_model=HeroVideoRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Hero Video",
    description="Add a hero video. Without an explicit orderIndex it is appended to the rotation.",
)
async def create_hero_video(payload: HeroVideoCreate, _: AdminDep, videos: HeroVideoRepoDep) -> HeroVideoRead:
    data = payload.model_dump()
    if data["order_index"] is None:
        data["order_index"] = await videos.next_order_index()
    video = await videos.create(HeroVideo(**data))
    logger.info(f"Created hero video {video.id} at position {video.order_index}")
    return HeroVideoRead.model_validate(video)


@router.post(
    "/reorder",
    response_model=List[HeroVideoRead],
    summary="Reorder Hero Videos",
    description="Set the rotation order from a list of video ids.",
    responses={404: {"description": "One of the ids does not exist"}},
)
async def reorder_hero_videos(payload: HeroVideoReorder, _: AdminDep, videos: HeroVideoRepoDep) -> List[HeroVideoRead]:
    """
    Reorder hero videos.

    Each listed video takes its list position as ``orderIndex``. If any id is
    unknown nothing is changed.

    - **videoIds**: Video ids in their new order.
    """
    reordered = await videos.reorder(payload.video_ids)
    if reordered is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="One or more hero videos not found")
    return [HeroVideoRead.model_validate(v) for v in reordered]


@router.put(
    "/{video_id}",
    response_model=HeroVideoRead,
    summary="Update Hero Video",
    description="Partially update a hero video.",
    responses={404: {"description": "Hero video not found"}},
)
async def update_hero_video(
    video_id: int, payload: HeroVideoUpdate, _: AdminDep, videos: HeroVideoRepoDep
) -> HeroVideoRead:
    video = await videos.get_by_id(video_id)
    if video is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Hero video {video_id} not found")

    for key, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(video, key, value)
    return HeroVideoRead.model_validate(await videos.update(video))


@router.delete(
    "/{video_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Hero Video",
    responses={404: {"description": "Hero video not found"}},
)
async def delete_hero_video(video_id: int, _: AdminDep, videos: HeroVideoRepoDep) -> None:
    if not await videos.delete(video_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Hero video {video_id} not found")
    logger.info(f"Deleted hero video {video_id}")
