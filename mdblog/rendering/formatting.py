"""Small presentation helpers exposed to templates."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List


MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_date(dt: datetime) -> str:
    """en-US long date, e.g. 'March 5, 2024'. Locale independent."""
    return f"{MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def class_names(*inputs: Any) -> str:
    """Join truthy class tokens; a repeated token keeps its last position."""
    tokens: List[str] = []
    for item in inputs:
        if not item:
            continue
        if isinstance(item, (list, tuple)):
            parts = class_names(*item).split()
        elif isinstance(item, dict):
            parts = [str(k) for k, v in item.items() if v]
        else:
            parts = str(item).split()
        for p in parts:
            if p in tokens:
                tokens.remove(p)
            tokens.append(p)
    return " ".join(tokens)
