"""Value helpers shared by the element builders and the serializer."""
from __future__ import annotations

import datetime as dt
import math
from typing import Mapping

NULL_TEXT = "null"


def lookup(mapping: Mapping[str, object] | None, key: str) -> tuple[bool, object]:
    """Return ``(found, value)`` so absent keys differ from ``None`` values."""

    if mapping is None or key not in mapping:
        return False, None
    return True, mapping[key]


def display_text(value: object) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (dt.date, dt.datetime, dt.time)):
        return value.isoformat()
    return str(value)


def normalize_long_text(value: object, threshold: int) -> object:
    """Space out commas in strings longer than ``threshold`` characters."""

    if isinstance(value, str) and len(value) > threshold:
        return value.replace(",", ", ")
    return value


__all__ = [
    "NULL_TEXT",
    "display_text",
    "lookup",
    "normalize_long_text",
]
