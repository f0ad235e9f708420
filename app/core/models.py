from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from app.core.exceptions import InvalidVideoError


class VideoType(str, Enum):
    TALK = "talk"
    INTERVIEW = "interview"


@dataclass(frozen=True)
class Video:
    """A talk or interview listed on the site.

    ``publish_date`` is kept as the ``YYYY-MM-DD`` string it was written as.
    """

    title: str
    type: VideoType
    publish_date: str
    url: str
    conference: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    draft: bool = False

    def __post_init__(self) -> None:
        if not self.title:
            raise InvalidVideoError("title", self.title)
        if not self.url:
            raise InvalidVideoError("url", self.url)
        try:
            video_type = VideoType(self.type)
        except ValueError:
            raise InvalidVideoError("type", self.type)
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "type", video_type)
        object.__setattr__(self, "tags", tuple(self.tags or ()))
        object.__setattr__(self, "draft", bool(self.draft))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Video":
        return cls(
            title=raw.get("title", ""),
            type=raw.get("type", ""),
            publish_date=raw.get("publishDate", ""),
            url=raw.get("url", ""),
            conference=raw.get("conference"),
            tags=tuple(raw.get("tags") or ()),
            draft=bool(raw.get("draft", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "title": self.title,
            "type": self.type.value,
            "publishDate": self.publish_date,
            "url": self.url,
            "tags": list(self.tags),
        }
        if self.conference is not None:
            data["conference"] = self.conference
        if self.draft:
            data["draft"] = True
        return data
