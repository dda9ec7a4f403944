"""Arrow helpers for the element builders."""
from __future__ import annotations

import pyarrow as pa


def table_to_records(table: pa.Table) -> list[dict[str, object]]:
    """Convert an Arrow table into row records, one mapping per row."""

    return [dict(row) for row in table.to_pylist()]


__all__ = ["table_to_records"]
