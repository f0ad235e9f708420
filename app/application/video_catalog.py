import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from app.application.ports.video_catalog_repository import VideoCatalogRepository
from app.core.models import Video

log = logging.getLogger("app.video_catalog")


class ListVideosUseCase:
    def __init__(self, repository: VideoCatalogRepository, production: bool = False) -> None:
        self._repository = repository
        self._production = production

    async def execute(self) -> List[Video]:
        videos = self._repository.list_videos()
        if not self._production:
            return list(videos)
        published = [v for v in videos if not v.draft]
        log.debug("Filtered drafts total=%d published=%d", len(videos), len(published))
        return published


async def get_all_videos(production: Optional[bool] = None) -> List[Video]:
    """Catalog entries, without drafts when running in production."""
    # infrastructure imports this module
    from app import config
    from app.infrastructure.video_catalog import get_video_catalog_use_case

    if production is None:
        production = config.PRODUCTION
    return await get_video_catalog_use_case(production=production).execute()


# The tag helpers don't filter drafts; pass them the result of get_all_videos.

def get_all_video_tags(videos: Iterable[Video]) -> List[str]:
    """Every tag of every video, duplicates included, in catalog order."""
    return [tag for video in videos for tag in (video.tags or ())]


def get_unique_video_tags(videos: Iterable[Video]) -> List[str]:
    return list(dict.fromkeys(get_all_video_tags(videos)))


def get_unique_video_tags_with_count(videos: Iterable[Video]) -> List[Tuple[str, int]]:
    """``[(tag, count), ...]`` by count descending.

    Equal counts keep the order in which the tags first appeared.
    """
    counts = {}
    for tag in get_all_video_tags(videos):
        counts[tag] = counts.get(tag, 0) + 1
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def get_videos_by_tag(videos: Iterable[Video], tag: str) -> List[Video]:
    return [v for v in videos if tag in (v.tags or ())]


def sort_videos_by_date(videos: Sequence[Video]) -> List[Video]:
    return sorted(videos, key=lambda v: v.publish_date, reverse=True)
