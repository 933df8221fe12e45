"""RSS 2.0 feed for the articles collection."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from email.utils import format_datetime
from typing import Iterable

from mdblog.content.collection import published
from mdblog.content.models import Article
from mdblog.site.config import SiteConfig


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _text(parent: ET.Element, tag: str, value: str) -> ET.Element:
    el = ET.SubElement(parent, tag)
    el.text = value
    return el


def build_rss(articles: Iterable[Article], site: SiteConfig) -> str:
    """Non-draft articles, newest first."""
    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _text(channel, "title", site.title)
    _text(channel, "description", site.description)
    _text(channel, "link", site.absolute_url("/"))

    for a in published(articles):
        link = site.absolute_url(a.url_path)
        item = ET.SubElement(channel, "item")
        _text(item, "title", a.title)
        _text(item, "link", link)
        _text(item, "guid", link).set("isPermaLink", "true")
        if a.description:
            _text(item, "description", a.description)
        _text(item, "pubDate", format_datetime(a.date))
        for tag in a.tags:
            _text(item, "category", tag)

    return XML_DECLARATION + ET.tostring(rss, encoding="unicode")
