from typing import Protocol, Sequence

from app.core.models import Video


class VideoCatalogRepository(Protocol):
    def list_videos(self) -> Sequence[Video]:
        ...
