"""Breadcrumbs and pagination."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Crumb:
    label: str
    href: Optional[str] = None


def breadcrumbs(path: str, *, last_label: Optional[str] = None) -> List[Crumb]:
    """'/articles/foo/' -> home / articles / foo. The current page has no href."""
    parts = [p for p in (path or "").split("/") if p]
    crumbs = [Crumb(label="home", href="/")]
    for i, part in enumerate(parts):
        href = "/" + "/".join(parts[: i + 1]) + "/"
        crumbs.append(Crumb(label=part, href=href))
    last = crumbs[-1]
    label = last_label if (last_label and parts) else last.label
    crumbs[-1] = Crumb(label=label, href=None)
    return crumbs


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    number: int
    total_pages: int
    prev_url: Optional[str]
    next_url: Optional[str]


def page_url(base: str, number: int) -> str:
    base = base.rstrip("/")
    if number <= 1:
        return f"{base}/"
    return f"{base}/page/{number}/"


def paginate(items: Sequence[T], per_page: int, page: int, *, base: str = "/articles") -> Page[T]:
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    total = max(1, math.ceil(len(items) / per_page))
    if page < 1 or page > total:
        raise ValueError(f"page {page} out of range 1..{total}")
    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        number=page,
        total_pages=total,
        prev_url=page_url(base, page - 1) if page > 1 else None,
        next_url=page_url(base, page + 1) if page < total else None,
    )
