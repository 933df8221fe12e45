"""sitemaps.org urlset."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Iterable, Optional, Tuple

from mdblog.site.config import SiteConfig


SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def build_sitemap(urls: Iterable[Tuple[str, Optional[datetime]]], site: SiteConfig) -> str:
    """urls: (site-relative path, last modified or None)."""
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})
    seen = set()
    for path, lastmod in urls:
        loc = site.absolute_url(path)
        if loc in seen:
            continue
        seen.add(loc)
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = loc
        if lastmod is not None:
            ET.SubElement(url, "lastmod").text = lastmod.date().isoformat()
    return XML_DECLARATION + ET.tostring(urlset, encoding="unicode")
