"""Reading-time estimate for rendered article HTML."""

from __future__ import annotations

import logging
import math
import re
from typing import Any


logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
FALLBACK = "10 min read"

_TAG_RE = re.compile(r"<[^>]+>")


def word_count(html: Any) -> int:
    text = html if isinstance(html, str) else ""
    text = _TAG_RE.sub("", text).strip()
    return len([w for w in text.split() if w])


def reading_time(html: Any) -> str:
    try:
        minutes = max(1, math.ceil(word_count(html) / WORDS_PER_MINUTE))
        return f"{minutes} min read"
    except Exception:
        logger.exception("reading time estimate failed")
        return FALLBACK
