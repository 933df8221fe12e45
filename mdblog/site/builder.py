"""Static site build: content collection -> dist/.

Pages:
- /                       latest articles
- /articles/, /articles/page/N/
- /articles/{id}/         article with TOC, reading time, tags, series, diagrams
- /tags/, /tags/{tag}/
- /rss.xml, /sitemap.xml
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import requests
from jinja2 import Environment, FileSystemLoader, select_autoescape

from mdblog.content.collection import (
    by_tag,
    load_authors,
    load_collection,
    published,
    series_siblings,
    tag_counts,
)
from mdblog.content.models import Article, Author
from mdblog.diagrams.svg_postprocess import DiagramSession
from mdblog.feeds.rss import build_rss
from mdblog.feeds.sitemap import build_sitemap
from mdblog.rendering.formatting import class_names, format_date
from mdblog.rendering.markdown_pipeline import render_markdown
from mdblog.rendering.navigation import breadcrumbs, page_url, paginate
from mdblog.rendering.reading_time import reading_time
from mdblog.rendering.tags import get_tag_color
from mdblog.rendering.toc import build_toc
from mdblog.site.config import SiteConfig


logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass
class BuildReport:
    pages: int = 0
    articles: int = 0
    drafts_skipped: int = 0
    diagram_failures: int = 0
    written: List[str] = field(default_factory=list)


def template_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_date"] = format_date
    env.filters["tag_color"] = get_tag_color
    env.globals["cn"] = class_names
    return env


def output_path(output_dir: Path, url_path: str) -> Path:
    """'/articles/foo/' -> dist/articles/foo/index.html; '/rss.xml' stays a file."""
    rel = url_path.strip("/")
    if not rel:
        return output_dir / "index.html"
    if url_path.endswith("/"):
        return output_dir / rel / "index.html"
    return output_dir / rel


class SiteBuilder:
    def __init__(self, config: SiteConfig, *, http: Optional[requests.Session] = None):
        self.config = config
        self._owns_http = http is None
        self.http = http or requests.Session()
        self.env = template_env()
        self.report = BuildReport()
        self._sitemap: List[Tuple[str, Optional[datetime]]] = []

    def __enter__(self) -> "SiteBuilder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    # -----------------------------
    # output helpers
    # -----------------------------
    def _write(self, url_path: str, content: str, *, in_sitemap: bool = True, lastmod: Optional[datetime] = None) -> None:
        out = output_path(self.config.output_dir, url_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(content, encoding="utf-8")
        self.report.pages += 1
        self.report.written.append(url_path)
        if in_sitemap:
            self._sitemap.append((url_path, lastmod))

    def _render(self, template: str, url_path: str, *, crumb_label: Optional[str] = None, **ctx: Any) -> str:
        return self.env.get_template(template).render(
            site=self.config,
            current_path=url_path,
            crumbs=breadcrumbs(url_path, last_label=crumb_label),
            **ctx,
        )

    def _prepare_output(self) -> None:
        out = self.config.output_dir
        if out.exists():
            shutil.rmtree(out)
        out.mkdir(parents=True, exist_ok=True)
        static = self.config.static_dir
        if static and static.exists():
            shutil.copytree(static, out, dirs_exist_ok=True)

    # -----------------------------
    # pages
    # -----------------------------
    def render_article(self, article: Article, articles: List[Article], authors: Dict[str, Author]) -> str:
        doc = render_markdown(article.body, site_host=self.config.site_host)
        with DiagramSession(static_dir=self.config.static_dir, http=self.http) as diagrams:
            body = diagrams.process(doc.html)
            self.report.diagram_failures += diagrams.failures
        return self._render(
            "article.html",
            article.url_path,
            title=article.title,
            description=article.description,
            article=article,
            body=body,
            toc=build_toc(doc.headings),
            reading_time=reading_time(doc.html),
            authors=[authors.get(a) or Author(id=a, name=a) for a in article.authors],
            series=series_siblings(articles, article),
            crumb_label=article.title,
        )

    def build_articles(self, articles: List[Article], authors: Dict[str, Author]) -> None:
        for a in published(articles):
            self._write(a.url_path, self.render_article(a, articles, authors), lastmod=a.date)
            self.report.articles += 1

    def build_index_pages(self, articles: List[Article]) -> None:
        items = published(articles)
        latest = items[: self.config.num_posts_on_homepage]
        self._write("/", self._render("home.html", "/", title=self.config.title, articles=latest))

        first = paginate(items, self.config.posts_per_page, 1)
        for number in range(1, first.total_pages + 1):
            page = paginate(items, self.config.posts_per_page, number)
            url = page_url("/articles", number)
            self._write(
                url,
                self._render("articles.html", url, title="articles", page=page, crumb_label="articles"),
                in_sitemap=number == 1,
            )

    def build_tag_pages(self, articles: List[Article]) -> None:
        counts = tag_counts(articles)
        self._write("/tags/", self._render("tags.html", "/tags/", title="tags", tags=counts))
        for tag, _ in counts:
            url = f"/tags/{tag}/"
            self._write(
                url,
                self._render("tag.html", url, title=f"#{tag}", tag=tag, articles=by_tag(articles, tag)),
            )

    def build_feeds(self, articles: List[Article]) -> None:
        self._write("/rss.xml", build_rss(articles, self.config), in_sitemap=False)
        self._write("/sitemap.xml", build_sitemap(self._sitemap, self.config), in_sitemap=False)

    def build(self) -> BuildReport:
        self.report = BuildReport()
        self._sitemap = []
        articles = load_collection(self.config.content_dir)
        authors = load_authors(self.config.authors_file)
        self.report.drafts_skipped = sum(1 for a in articles if a.draft)

        self._prepare_output()
        self.build_index_pages(articles)
        self.build_articles(articles, authors)
        self.build_tag_pages(articles)
        self.build_feeds(articles)

        logger.info(
            "built %d page(s), %d article(s), %d draft(s) skipped, %d diagram failure(s) -> %s",
            self.report.pages,
            self.report.articles,
            self.report.drafts_skipped,
            self.report.diagram_failures,
            self.config.output_dir,
        )
        return self.report
