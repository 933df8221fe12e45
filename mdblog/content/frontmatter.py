"""Front matter contract utilities.

Front matter is the YAML block at the top of every article file. This module defines:
- A JSON Schema (for validation)
- Helpers to split the block off the body and to normalize dates
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Tuple

import yaml
from jsonschema import Draft202012Validator


FRONT_MATTER_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["title", "description", "date"],
    "properties": {
        "title": {"type": "string", "minLength": 1, "pattern": "\\S"},
        "description": {"type": "string"},
        # YAML turns bare dates into date objects; those are checked by coerce_date
        "date": {},
        "tags": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "series": {"type": ["string", "null"]},
        "authors": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "draft": {"type": "boolean"},
    },
    "additionalProperties": True,
}


_VALIDATOR = Draft202012Validator(FRONT_MATTER_SCHEMA)


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Return (metadata, body). Files without a leading --- block have no metadata."""
    clean = (text or "").lstrip("\ufeff")
    lines = clean.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, clean

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end = i
            break
    if end is None:
        return {}, clean

    meta = yaml.safe_load("\n".join(lines[1:end])) or {}
    if not isinstance(meta, dict):
        raise ValueError("front matter must be a mapping")
    body = "\n".join(lines[end + 1 :]).lstrip("\n")
    return meta, body


def coerce_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        dt = datetime.fromisoformat(s)
    else:
        raise ValueError(f"not a date: {value!r}")
    # Normalize naive to UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def validate_front_matter(meta: Dict[str, Any]) -> List[str]:
    """Return a list of human-readable validation errors (empty means valid)."""
    errors = []
    for e in sorted(_VALIDATOR.iter_errors(meta), key=lambda x: [str(p) for p in x.path]):
        path = ".".join(str(p) for p in e.path) if e.path else "<root>"
        errors.append(f"{path}: {e.message}")
    if isinstance(meta, dict) and "date" in meta:
        try:
            coerce_date(meta["date"])
        except (TypeError, ValueError) as err:
            errors.append(f"date: {err}")
    return errors
