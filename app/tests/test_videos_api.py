from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core.models import Video
from app.main import app

client = TestClient(app)

DRAFT_CATALOG = (
    Video(title="Published", type="talk", publish_date="2020-01-01", url="https://x/1", tags=["web", "ruby"]),
    Video(title="Draft", type="interview", publish_date="2021-01-01", url="https://x/2", tags=["web"], draft=True),
)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["service"] == "video_catalog"


def test_list_videos_returns_catalog():
    response = client.get("/api/videos")
    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["videos"][0]["publishDate"] == "2024-05-16"


def test_list_videos_filters_by_tag():
    response = client.get("/api/videos", params={"tag": "rails"})
    titles = [v["title"] for v in response.json()["videos"]]
    assert titles == ["Rails is the new Rails"]


def test_list_videos_hides_drafts_in_production():
    with patch("app.infrastructure.video_catalog.CATALOG", DRAFT_CATALOG), \
            patch("app.infrastructure.video_catalog.PRODUCTION", True):
        response = client.get("/api/videos")
    assert [v["title"] for v in response.json()["videos"]] == ["Published"]


def test_list_video_tags_counts_published_videos():
    with patch("app.infrastructure.video_catalog.CATALOG", DRAFT_CATALOG), \
            patch("app.infrastructure.video_catalog.PRODUCTION", False):
        response = client.get("/api/videos/tags")
    assert response.json()["tags"] == [{"tag": "web", "count": 2}, {"tag": "ruby", "count": 1}]

    with patch("app.infrastructure.video_catalog.CATALOG", DRAFT_CATALOG), \
            patch("app.infrastructure.video_catalog.PRODUCTION", True):
        response = client.get("/api/videos/tags")
    assert response.json()["tags"] == [{"tag": "web", "count": 1}, {"tag": "ruby", "count": 1}]


def test_list_videos_maps_failures_to_503():
    with patch("app.api.videos.get_video_catalog_use_case", side_effect=RuntimeError("boom")):
        response = client.get("/api/videos")
    assert response.status_code == 503


def test_list_videos_sorted_by_date():
    response = client.get("/api/videos", params={"sort": "date"})
    dates = [v["publishDate"] for v in response.json()["videos"]]
    assert dates == sorted(dates, reverse=True)
