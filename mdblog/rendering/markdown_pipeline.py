"""Markdown/MDX -> HTML with a fixed extension chain.

Extension order matters:
heading ids, GFM extras (superfences included), emoji, math, callouts, highlighting, external links.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import markdown
import pymdownx.emoji
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

from mdblog.content.models import Heading


DEFAULT_CODE_LANG = "typescript"
EXTERNAL_LINK_REL = "nofollow noreferrer noopener"

_CODE_FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})(.*)$")
_MDX_ESM_RE = re.compile(
    r"^(?:import\s+(?:.+\s+from\s+)?['\"][^'\"]+['\"];?|export\s+(?:const|let|default|function)\b.*)\s*$"
)
# first line of a multi-line `import {` or `export {` and the line that closes it
_MDX_ESM_OPEN_RE = re.compile(r"^(?:import\s+(?:type\s+)?(?:[\w$]+\s*,\s*)?|export\s+(?:type\s+)?)\{[^}]*$")
_MDX_ESM_CLOSE_RE = re.compile(r"^\s*\}(?:\s*from\s+['\"][^'\"]+['\"])?\s*;?\s*$")


class MdxSourcePreprocessor(Preprocessor):
    """Drop MDX import/export lines and give bare fences the default language."""

    def run(self, lines: List[str]) -> List[str]:
        out, in_code, in_esm, fence = [], False, False, ""
        for ln in lines:
            m_f = _CODE_FENCE_RE.match(ln)
            if m_f:
                tok, info = m_f.group(1), m_f.group(2).strip()
                if not in_code:
                    in_code, fence = True, tok
                    if not info:
                        ln = ln.rstrip() + DEFAULT_CODE_LANG
                elif tok == fence and not info:
                    in_code, fence = False, ""
                out.append(ln)
                continue

            if in_code:
                out.append(ln)
                continue

            if in_esm:
                if _MDX_ESM_CLOSE_RE.match(ln):
                    in_esm = False
                continue
            if _MDX_ESM_RE.match(ln):
                continue
            if _MDX_ESM_OPEN_RE.match(ln):
                in_esm = True
                continue
            out.append(ln)
        return out


class ExternalLinksTreeprocessor(Treeprocessor):
    def __init__(self, md, site_host: Optional[str] = None):
        super().__init__(md)
        self.site_host = (site_host or "").lower()

    def run(self, root):
        for el in root.iter("a"):
            if is_external(el.get("href", ""), self.site_host):
                el.set("target", "_blank")
                el.set("rel", EXTERNAL_LINK_REL)
        return None


class BlogExtension(Extension):
    def __init__(self, **kwargs):
        self.config = {"site_host": ["", "Host treated as internal for links"]}
        super().__init__(**kwargs)

    def extendMarkdown(self, md_inst):
        md_inst.preprocessors.register(MdxSourcePreprocessor(md_inst), "mdx_source", 35)
        # below the inline processor (20) so links exist, above prettify
        md_inst.treeprocessors.register(
            ExternalLinksTreeprocessor(md_inst, self.getConfig("site_host")), "external_links", 15
        )


def is_external(href: str, site_host: str = "") -> bool:
    p = urlparse(href or "")
    if p.scheme not in ("http", "https") or not p.netloc:
        return False
    host = (p.hostname or "").lower()
    return not site_host or host != site_host


MD_EXTENSIONS = [
    "toc",
    "pymdownx.extra",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.emoji",
    "pymdownx.arithmatex",
    "admonition",
    "pymdownx.highlight",
]

MD_EXTENSION_CONFIGS: Dict[str, Dict[str, Any]] = {
    "toc": {"permalink": False},
    "pymdownx.emoji": {"emoji_generator": pymdownx.emoji.to_alt},
    "pymdownx.arithmatex": {"generic": True},
    "pymdownx.highlight": {"guess_lang": False, "css_class": "highlight"},
    "pymdownx.tasklist": {"custom_checkbox": False},
}


@dataclass(frozen=True)
class RenderedDocument:
    html: str
    headings: List[Heading]


def _markdown_renderer(site_host: Optional[str] = None) -> markdown.Markdown:
    return markdown.Markdown(
        extensions=[*MD_EXTENSIONS, BlogExtension(site_host=site_host or "")],
        extension_configs=MD_EXTENSION_CONFIGS,
        output_format="html",
    )


def _flatten_toc_tokens(tokens: List[Dict[str, Any]]) -> List[Heading]:
    out: List[Heading] = []
    for t in tokens:
        out.append(Heading(depth=int(t["level"]), slug=t["id"], text=html.unescape(t["name"])))
        out.extend(_flatten_toc_tokens(t.get("children") or []))
    return out


def render_markdown(source: str, *, site_host: Optional[str] = None) -> RenderedDocument:
    # a fresh instance per document keeps heading-id dedup per document
    md = _markdown_renderer(site_host)
    body = md.convert(source or "")
    headings = _flatten_toc_tokens(getattr(md, "toc_tokens", []) or [])
    return RenderedDocument(html=body, headings=headings)
