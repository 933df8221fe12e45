"""Articles content collection: loading, validation and the published views."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import yaml

from mdblog.content.frontmatter import coerce_date, split_front_matter, validate_front_matter
from mdblog.content.models import Article, Author


logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".md", ".mdx")


class ContentError(Exception):
    """Raised when a content file does not match the front matter schema"""

    def __init__(self, path: Path, errors: Sequence[str]):
        self.path = path
        self.errors = list(errors)
        super().__init__(f"{path}: " + "; ".join(self.errors))


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for v in values:
        v = str(v).strip()
        if v and v not in seen:
            seen.append(v)
    return tuple(seen)


def article_id(path: Path, root: Path) -> str:
    rel = path.relative_to(root).with_suffix("")
    return rel.as_posix().lower()


def load_article(path: Path, root: Path) -> Article:
    text = path.read_text(encoding="utf-8")
    try:
        meta, body = split_front_matter(text)
    except (yaml.YAMLError, ValueError) as err:
        raise ContentError(path, [f"<root>: {err}"]) from err

    errors = validate_front_matter(meta)
    if errors:
        raise ContentError(path, errors)

    return Article(
        id=article_id(path, root),
        title=meta["title"].strip(),
        description=(meta.get("description") or "").strip(),
        date=coerce_date(meta["date"]),
        body=body,
        tags=_unique(meta.get("tags") or []),
        series=(meta.get("series") or None),
        authors=_unique(meta.get("authors") or []),
        draft=bool(meta.get("draft", False)),
        source_path=path,
    )


def load_collection(root: Path) -> List[Article]:
    root = Path(root)
    if not root.exists():
        logger.warning("content directory %s does not exist", root)
        return []
    files = sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in CONTENT_SUFFIXES)
    articles = [load_article(p, root) for p in files]
    logger.info("loaded %d article(s) from %s", len(articles), root)
    return articles


def load_authors(path: Optional[Path]) -> Dict[str, Author]:
    """Read the optional authors file: {id: {name, url}}."""
    if not path or not Path(path).exists():
        return {}
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    out: Dict[str, Author] = {}
    for author_id, info in data.items():
        info = info if isinstance(info, dict) else {"name": str(info)}
        out[str(author_id)] = Author(
            id=str(author_id),
            name=str(info.get("name") or author_id),
            url=info.get("url") or None,
        )
    return out


def published(articles: Iterable[Article]) -> List[Article]:
    """Non-draft articles, newest first."""
    items = [a for a in articles if not a.draft]
    # sort is stable: same-date articles keep collection order
    items.sort(key=lambda a: a.date, reverse=True)
    return items


def tag_counts(articles: Iterable[Article]) -> List[Tuple[str, int]]:
    counts: Dict[str, int] = {}
    for a in published(articles):
        for t in a.tags:
            counts[t] = counts.get(t, 0) + 1
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def by_tag(articles: Iterable[Article], tag: str) -> List[Article]:
    return [a for a in published(articles) if tag in a.tags]


def series_siblings(articles: Iterable[Article], article: Article) -> List[Article]:
    if not article.series:
        return []
    items = [a for a in published(articles) if a.series == article.series]
    items.reverse()
    return items
