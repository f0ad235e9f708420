from typing import Iterable, Mapping, Optional, Tuple, Any

from app.application.ports.video_catalog_repository import VideoCatalogRepository
from app.application.video_catalog import ListVideosUseCase
from app.config import PRODUCTION
from app.core.models import Video
from app.data.videos import VIDEOS


def load_catalog(raw_videos: Iterable[Mapping[str, Any]]) -> Tuple[Video, ...]:
    return tuple(Video.from_dict(raw) for raw in raw_videos)


CATALOG: Tuple[Video, ...] = load_catalog(VIDEOS)


class StaticVideoCatalogRepository(VideoCatalogRepository):
    def __init__(self, videos: Tuple[Video, ...]) -> None:
        self._videos = videos

    def list_videos(self) -> Tuple[Video, ...]:
        return self._videos


def get_video_catalog_use_case(production: Optional[bool] = None) -> ListVideosUseCase:
    repository = StaticVideoCatalogRepository(CATALOG)
    if production is None:
        production = PRODUCTION
    return ListVideosUseCase(repository, production=production)
