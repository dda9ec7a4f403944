"""Column inference for record sequences."""
from __future__ import annotations

from typing import Callable, Mapping, Sequence

ColumnResolver = Callable[[Sequence[Mapping[str, object]]], Sequence[str]]


def resolve_columns(rows: Sequence[Mapping[str, object]]) -> list[str]:
    """Return every key found in ``rows`` in first-seen order."""

    columns: list[str] = []
    seen: set[str] = set()
    for row in rows:
        for key in row:
            if key in seen:
                continue
            seen.add(key)
            columns.append(key)
    return columns


__all__ = ["ColumnResolver", "resolve_columns"]
