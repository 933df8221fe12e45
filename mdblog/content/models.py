"""Shared content data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Article:
    """One entry of the articles collection.

    Read at build time, never mutated afterwards.
    """

    id: str
    title: str
    description: str
    date: datetime
    body: str
    tags: Tuple[str, ...] = ()
    series: Optional[str] = None
    authors: Tuple[str, ...] = ()
    draft: bool = False
    collection: str = "articles"
    source_path: Optional[Path] = None

    @property
    def url_path(self) -> str:
        return f"/{self.collection}/{self.id}/"


@dataclass(frozen=True)
class Author:
    id: str
    name: str
    url: Optional[str] = None


@dataclass(frozen=True)
class Heading:
    depth: int
    slug: str
    text: str


@dataclass
class TocNode:
    heading: Heading
    children: List["TocNode"] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return self.heading.depth
