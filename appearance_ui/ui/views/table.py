"""Table element builder."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

import pyarrow as pa

from ...columns import ColumnResolver, resolve_columns
from ...config import DEFAULT_CONFIG, Config
from ...dom import Element
from ...naming import attribute_name, class_token, sanitize_name
from ...values import NULL_TEXT, display_text, lookup, normalize_long_text
from ..utils import table_to_records

logger = logging.getLogger(__name__)

KEY_VALUE_COLUMNS: tuple[str, ...] = ("key", "value")
STANDARD_TABLE = "standard"
KEY_VALUE_TABLE = "key-value"
ROW_NUMBER_KEY = "row_number"
ROW_NUMBER_ATTRIBUTE = "data-" + ROW_NUMBER_KEY


@dataclass(frozen=True)
class ResolvedTable:
    """Rows and settings after every default has been applied."""

    rows: list[Mapping[str, object]]
    columns: list[str]
    titles: Mapping[str, str] | None
    include_header: bool
    table_type: str


@dataclass(frozen=True)
class TableOptions:
    """Optional table settings and the rules that fill in their defaults.

    ===================  ==============  ====================  ==============
    ``rows`` shape       table type      ``columns``           header unset
    ===================  ==============  ====================  ==============
    sequence / Arrow     standard        given, else resolver  shown
    mapping              key-value       ``["key", "value"]``  hidden
    ===================  ==============  ====================  ==============

    An explicit ``include_header`` always wins.
    """

    columns: Sequence[str] | None = None
    titles: Mapping[str, str] | None = None
    include_header: bool | None = None

    def resolve(
        self,
        rows: object,
        column_resolver: ColumnResolver = resolve_columns,
    ) -> ResolvedTable:
        if isinstance(rows, pa.Table):
            rows = table_to_records(rows)

        if isinstance(rows, Mapping):
            table_type = KEY_VALUE_TABLE
            records: list[Mapping[str, object]] = [
                {"key": key, "value": value}
                for key, value in rows.items()
                if not callable(value)
            ]
            columns = list(KEY_VALUE_COLUMNS)
            include_header = False if self.include_header is None else self.include_header
        elif isinstance(rows, Sequence) and not isinstance(rows, (str, bytes)):
            table_type = STANDARD_TABLE
            records = _coerce_records(rows)
            if self.columns:
                columns = list(self.columns)
            else:
                columns = list(column_resolver(records))
            include_header = True if self.include_header is None else self.include_header
        else:
            raise TypeError(
                f"rows must be a sequence of mappings or a mapping, not {type(rows).__name__}"
            )

        return ResolvedTable(
            rows=records,
            columns=columns,
            titles=self.titles,
            include_header=include_header,
            table_type=table_type,
        )


def create_table(
    element_id: str,
    name: str,
    rows: object,
    columns: Sequence[str] | None = None,
    titles: Mapping[str, str] | None = None,
    include_header: bool | None = None,
    *,
    column_resolver: ColumnResolver | None = None,
    config: Config | None = None,
) -> Element:
    """Build a ``table`` element from records or a single mapping.

    ``rows`` may be a sequence of mappings, a :class:`pyarrow.Table`, or one
    mapping rendered as a two column key/value table. See
    :class:`TableOptions` for how the optional arguments are defaulted.

    Raises :class:`TypeError` for unsupported row shapes and :class:`ValueError`
    when two columns, or a column and the row number, share a row attribute
    name.
    """

    cfg = config or DEFAULT_CONFIG
    options = TableOptions(columns=columns, titles=titles, include_header=include_header)
    resolved = options.resolve(rows, column_resolver or resolve_columns)
    return _build_table(element_id, name, resolved, cfg)


def _build_table(element_id: str, name: str, resolved: ResolvedTable, cfg: Config) -> Element:
    prefix = cfg.naming.class_prefix
    clean_id = sanitize_name(element_id)
    clean_name = sanitize_name(name)

    table = Element("table", id=clean_id)
    table.classes = [
        class_token("table", prefix=prefix),
        class_token(clean_name, "table", prefix=prefix),
        class_token(resolved.table_type, "table", prefix=prefix),
    ]

    logger.debug(
        "Building %s table %s: %d row(s), columns=%s, header=%s",
        resolved.table_type,
        clean_id,
        len(resolved.rows),
        resolved.columns,
        resolved.include_header,
    )

    if resolved.include_header:
        table.append(_build_head(clean_id, clean_name, resolved, prefix))
    table.append(_build_body(clean_id, clean_name, resolved, cfg))
    return table


def _column_label(column: str, titles: Mapping[str, str] | None) -> str:
    found, title = lookup(titles, column)
    return str(title) if found else column


def _build_head(clean_id: str, clean_name: str, resolved: ResolvedTable, prefix: str) -> Element:
    head = Element("thead")
    head.classes = [
        class_token("table", "head", prefix=prefix),
        class_token(clean_name, "table", "head", prefix=prefix),
    ]

    header_row = Element("tr", id=f"{clean_id}-header")
    header_row.classes = [
        class_token("table", "row", prefix=prefix),
        class_token("header", "row", prefix=prefix),
        class_token(clean_name, "header", "row", prefix=prefix),
    ]

    for column in resolved.columns:
        cell = Element("th", text=_column_label(column, resolved.titles))
        cell.classes = [
            class_token("header", "cell", prefix=prefix),
            class_token(sanitize_name(column), "header", "cell", prefix=prefix),
        ]
        cell.dataset["column"] = column
        header_row.append(cell)

    head.append(header_row)
    return head


def _build_body(clean_id: str, clean_name: str, resolved: ResolvedTable, cfg: Config) -> Element:
    prefix = cfg.naming.class_prefix
    threshold = cfg.table.long_text_threshold

    body = Element("tbody")
    body.classes = [
        class_token("table", "body", prefix=prefix),
        class_token(clean_name, "table", "body", prefix=prefix),
    ]

    base_row_classes = [
        class_token("table", "row", prefix=prefix),
        class_token(clean_name, "row", prefix=prefix),
    ]
    # Column dependent naming is identical for every row.
    column_meta = [
        (
            column,
            attr_name,
            _column_label(column, resolved.titles),
            [
                class_token("table", "cell", prefix=prefix),
                class_token(sanitize_name(column), "table", "cell", prefix=prefix),
            ],
        )
        for column, attr_name in zip(resolved.columns, _row_attribute_names(resolved.columns))
    ]

    for row_id, record in enumerate(resolved.rows):
        # Row 0 is "odd".
        parity = "odd" if row_id % 2 == 0 else "even"
        row = Element("tr", id=f"{clean_id}-{row_id}")
        row.classes = base_row_classes + [class_token(parity, "table", "row", prefix=prefix)]
        row.dataset[ROW_NUMBER_KEY] = row_id

        for column, attr_name, label, cell_classes in column_meta:
            cell = Element("td", classes=list(cell_classes))
            cell.dataset["column"] = column

            found, value = lookup(record, column)
            if found:
                value = normalize_long_text(value, threshold)
                text = display_text(value)
                cell.text = text
                cell.attributes["title"] = f"{label}: {text}"
                row.attributes[attr_name] = value
            else:
                cell.attributes["title"] = f"{label}: {NULL_TEXT}"
                row.attributes[attr_name] = None

            row.append(cell)

        body.append(row)

    return body


def _row_attribute_names(columns: Sequence[str]) -> list[str]:
    """Return the row attribute name of each column, rejecting clashes."""

    names: list[str] = []
    owners: dict[str, str] = {ROW_NUMBER_ATTRIBUTE: "the row number"}
    for column in columns:
        name = "data-" + attribute_name(column)
        if name in owners:
            raise ValueError(
                f"column {column!r} maps to row attribute {name!r}, already used by {owners[name]}"
            )
        owners[name] = f"column {column!r}"
        names.append(name)
    return names


def _coerce_records(rows: Sequence[object]) -> list[Mapping[str, object]]:
    records: list[Mapping[str, object]] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise TypeError(f"row {index} must be a mapping, not {type(row).__name__}")
        records.append(row)
    return records


__all__ = [
    "KEY_VALUE_COLUMNS",
    "ResolvedTable",
    "TableOptions",
    "create_table",
]
