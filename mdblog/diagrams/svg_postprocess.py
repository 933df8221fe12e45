"""Diagram SVG inlining.

Containers look like:

    <div class="diagram" data-diagram-src="/diagrams/flow.svg"></div>

Each container gets the referenced SVG fetched, its hardcoded fill/stroke
replaced by theme classes, and inlined. Policy:
- One DiagramSession per rendered page; discard it afterwards.
- A container is processed at most once (marked with data-diagram-processed).
- An asset is fetched at most once per session.
- Fetch/parse failures inline ERROR_SVG and are not retried.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Set
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup
from lxml import etree


logger = logging.getLogger(__name__)

PROCESSED_ATTR = "data-diagram-processed"

THEME_CLASSES = {
    "text": "diagram-text",
    "rect": "diagram-node",
    "path": "diagram-edge",
}

STRIPPED_PROPERTIES = ("fill", "stroke")

ERROR_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="diagram-error" viewBox="0 0 240 60" '
    'role="img" aria-label="Diagram failed to load">'
    '<rect class="diagram-node" x="1" y="1" width="238" height="58" rx="6" />'
    '<text class="diagram-text" x="120" y="35" text-anchor="middle">Diagram unavailable</text>'
    "</svg>"
)

# Namespace prefixes stay on the parsed tree, so nothing is registered globally
_SVG_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def _strip_style(style: str) -> str:
    kept = []
    for decl in style.split(";"):
        if not decl.strip():
            continue
        prop = decl.split(":", 1)[0].strip().lower()
        if prop in STRIPPED_PROPERTIES:
            continue
        kept.append(decl.strip())
    return "; ".join(kept)


def restyle_svg(svg_text: str) -> str:
    """Replace hardcoded colours on text/rect/path with theme classes."""
    if not svg_text or not svg_text.strip():
        raise ValueError("empty svg")
    root = etree.fromstring(svg_text.strip().encode("utf-8"), _SVG_PARSER)
    if etree.QName(root).localname != "svg":
        raise ValueError(f"not an svg document: <{etree.QName(root).localname}>")

    for el in root.iter(etree.Element):
        theme_class = THEME_CLASSES.get(etree.QName(el).localname)
        if not theme_class:
            continue
        for attr in STRIPPED_PROPERTIES:
            el.attrib.pop(attr, None)
        if "style" in el.attrib:
            style = _strip_style(el.attrib["style"])
            if style:
                el.set("style", style)
            else:
                del el.attrib["style"]
        classes = el.get("class", "").split()
        if theme_class not in classes:
            classes.append(theme_class)
        el.set("class", " ".join(classes))

    return etree.tostring(root, encoding="unicode")


class DiagramSession:
    """Per-page diagram processing state."""

    def __init__(
        self,
        *,
        static_dir: Optional[Path] = None,
        http: Optional[requests.Session] = None,
        timeout: int = 15,
    ):
        self.static_dir = Path(static_dir) if static_dir else None
        self._owns_http = http is None
        self.http = http or requests.Session()
        self.timeout = timeout
        self.processed: Set[str] = set()
        self.failures = 0
        self.fetches = 0
        self._assets: Dict[str, str] = {}
        self._busy = False

    def __enter__(self) -> "DiagramSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.processed.clear()
        self._assets.clear()
        if self._owns_http:
            self.http.close()

    def fetch(self, src: str) -> str:
        self.fetches += 1
        p = urlparse(src)
        if not p.scheme and src.startswith("/"):
            if not self.static_dir:
                raise ValueError(f"no static dir to resolve {src}")
            path = (self.static_dir / src.lstrip("/")).resolve()
            if self.static_dir.resolve() not in path.parents:
                raise ValueError(f"path escapes static dir: {src}")
            return path.read_text(encoding="utf-8")
        if p.scheme not in ("http", "https"):
            raise ValueError(f"bad_scheme: {src}")
        resp = self.http.get(src, headers={"User-Agent": "mdblog/1.0"}, timeout=self.timeout)
        resp.raise_for_status()
        return resp.text

    def inline(self, src: str) -> str:
        if src in self._assets:
            return self._assets[src]
        try:
            svg = restyle_svg(self.fetch(src))
        except (requests.RequestException, OSError, etree.XMLSyntaxError, ValueError) as err:
            logger.warning("diagram %s failed: %s", src, err)
            self.failures += 1
            svg = ERROR_SVG
        self._assets[src] = svg
        return svg

    def process(self, html: str) -> str:
        if self._busy:
            raise RuntimeError("diagram processing already in progress")
        self._busy = True
        try:
            soup = BeautifulSoup(html or "", "html.parser")
            seen: Dict[str, int] = {}
            changed = False
            for container in soup.select("div[data-diagram-src]"):
                src = container["data-diagram-src"]
                key = container.get("id")
                if not key:
                    seen[src] = seen.get(src, 0) + 1
                    key = f"{src}#{seen[src]}"
                if container.has_attr(PROCESSED_ATTR) or key in self.processed:
                    continue
                svg = BeautifulSoup(self.inline(src), "html.parser").find("svg")
                container.clear()
                if svg is not None:
                    container.append(svg)
                container[PROCESSED_ATTR] = "true"
                self.processed.add(key)
                changed = True
            return str(soup) if changed else (html or "")
        finally:
            self._busy = False
