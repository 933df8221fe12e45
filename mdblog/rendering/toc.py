"""Table-of-contents tree from a flat heading list."""

from __future__ import annotations

from typing import Iterable, List

from mdblog.content.models import Heading, TocNode


def build_toc(headings: Iterable[Heading]) -> List[TocNode]:
    """Nest headings under the nearest preceding heading of smaller depth.

    A heading with no shallower ancestor becomes a root, whatever its depth.
    """
    roots: List[TocNode] = []
    stack: List[TocNode] = []
    for h in headings:
        node = TocNode(heading=h)
        while stack and stack[-1].depth >= h.depth:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots


def flatten_toc(nodes: Iterable[TocNode]) -> List[Heading]:
    """Pre-order walk back to headings."""
    out: List[Heading] = []
    for n in nodes:
        out.append(n.heading)
        out.extend(flatten_toc(n.children))
    return out
