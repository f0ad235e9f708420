from fastapi import FastAPI

from app.api.videos import router as videos_router
from app.config import PRODUCTION, SITE_CONFIG

app = FastAPI(title=SITE_CONFIG.title)

app.include_router(videos_router)

@app.get("/health")
def health():
    return {
        "ok": True,
        "service": "video_catalog",
        "production": PRODUCTION,
        "site": {
            "title": SITE_CONFIG.title,
            "author": SITE_CONFIG.author,
            "url": SITE_CONFIG.url,
        },
    }
