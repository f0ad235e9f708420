import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent  # .../app


@dataclass(frozen=True)
class SiteConfig:
    title: str
    author: str
    url: str


PRODUCTION = os.getenv("PROD", "false").lower() == "true"

SITE_CONFIG = SiteConfig(
    title=os.getenv("SITE_TITLE", "Talks & Interviews"),
    author=os.getenv("SITE_AUTHOR", ""),
    url=os.getenv("SITE_URL", "http://localhost:4321"),
)
