"""Site configuration read from the environment (.env supported)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
from urllib.parse import urlparse

from dotenv import load_dotenv


Link = Tuple[str, str]  # (href, label)

NAV_LINKS: List[Link] = [
    ("/articles", "articles"),
    ("/tags", "tags"),
]

SOCIAL_LINKS: List[Link] = [
    ("https://github.com/bdestrempes", "GitHub"),
    ("https://twitter.com/bdestrempes", "Twitter"),
    ("mailto:b.destrempes@gmail.com", "Email"),
    ("https://www.linkedin.com/in/benjamin-destrempes/", "LinkedIn"),
    ("/rss.xml", "RSS"),
]


@dataclass(frozen=True)
class SiteConfig:
    title: str = "Benjamin Destrempes"
    description: str = "Benjamin Destrempes' technical blog."
    email: str = "b.destrempes@gmail.com"
    site_url: str = "https://bdestrempes.dev"
    num_posts_on_homepage: int = 4
    posts_per_page: int = 8
    content_dir: Path = Path("content/articles")
    output_dir: Path = Path("dist")
    static_dir: Path = Path("public")
    authors_file: Optional[Path] = Path("content/authors.yml")
    nav_links: List[Link] = field(default_factory=lambda: list(NAV_LINKS))
    social_links: List[Link] = field(default_factory=lambda: list(SOCIAL_LINKS))

    @property
    def site_host(self) -> str:
        return (urlparse(self.site_url).hostname or "").lower()

    def absolute_url(self, path: str) -> str:
        return self.site_url.rstrip("/") + "/" + path.lstrip("/")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.environ.get(name, "").strip()
    return Path(raw) if raw else default


def load_site_config() -> SiteConfig:
    load_dotenv()
    base = SiteConfig()
    authors_raw = os.environ.get("AUTHORS_FILE")
    return SiteConfig(
        title=os.environ.get("SITE_TITLE", base.title),
        description=os.environ.get("SITE_DESCRIPTION", base.description),
        email=os.environ.get("SITE_EMAIL", base.email),
        site_url=(os.environ.get("SITE_URL") or base.site_url).rstrip("/"),
        num_posts_on_homepage=_env_int("NUM_POSTS_ON_HOMEPAGE", base.num_posts_on_homepage),
        posts_per_page=_env_int("POSTS_PER_PAGE", base.posts_per_page),
        content_dir=_env_path("CONTENT_DIR", base.content_dir),
        output_dir=_env_path("OUTPUT_DIR", base.output_dir),
        static_dir=_env_path("STATIC_DIR", base.static_dir),
        authors_file=Path(authors_raw) if authors_raw else base.authors_file,
    )
