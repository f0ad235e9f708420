import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from app.application.video_catalog import (
    get_unique_video_tags_with_count,
    get_videos_by_tag,
    sort_videos_by_date,
)
from app.infrastructure.video_catalog import get_video_catalog_use_case

router = APIRouter()
log = logging.getLogger("app.videos")


async def _load_videos():
    try:
        use_case = get_video_catalog_use_case()
        return await use_case.execute()
    except Exception:
        log.exception("Failed to load video catalog")
        raise HTTPException(status_code=503, detail="Video catalog unavailable")


@router.get("/api/videos")
async def list_videos(tag: Optional[str] = None, sort: Optional[str] = None) -> JSONResponse:
    videos = await _load_videos()
    if tag:
        videos = get_videos_by_tag(videos, tag)
    if sort == "date":
        videos = sort_videos_by_date(videos)

    return JSONResponse(
        status_code=200,
        content={
            "ok": True,
            "videos": [v.to_dict() for v in videos],
        },
    )


@router.get("/api/videos/tags")
async def list_video_tags() -> JSONResponse:
    videos = await _load_videos()
    tags = get_unique_video_tags_with_count(videos)
    log.info("Video tags listed videos=%d tags=%d", len(videos), len(tags))
    return JSONResponse(
        status_code=200,
        content={
            "ok": True,
            "tags": [{"tag": tag, "count": count} for tag, count in tags],
        },
    )
