"""Command line interface for appearance_ui."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Mapping, Sequence

import duckdb
import pyarrow as pa

from .config import Config, ConfigError, load_config
from .ui.elements import create_simple_list
from .ui.views.table import create_table

logger = logging.getLogger(__name__)

_DUCKDB_READERS: Mapping[str, str] = {
    ".csv": "read_csv_auto",
    ".parquet": "read_parquet",
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="appearance-ui", description="Render data as styled HTML fragments")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    table_parser = subparsers.add_parser("table", help="Render records or a mapping as a table")
    _add_common_arguments(table_parser)
    table_parser.add_argument("--column", action="append", default=[], help="Column to include, in order (repeatable)")
    table_parser.add_argument("--title", action="append", default=[], help="Header label in the form column=label")
    table_parser.add_argument(
        "--header",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force the header row on or off",
    )

    list_parser = subparsers.add_parser("list", help="Render a JSON array as a list")
    _add_common_arguments(list_parser)
    list_parser.add_argument("--ordered", action="store_true", help="Render an ordered list")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "table":
        return _cmd_table(args)
    if args.command == "list":
        return _cmd_list(args)

    parser.print_help()
    return 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", nargs="?", default=None, help="JSON, CSV or Parquet file to render")
    parser.add_argument("--sql", default=None, help="DuckDB query to render instead of an input file")
    parser.add_argument("--id", dest="element_id", required=True, help="Element id")
    parser.add_argument("--name", required=True, help="Data name used in class tokens")
    parser.add_argument("--config", default="config.toml", help="Path to configuration file")
    parser.add_argument("--output", default=None, help="Write HTML here instead of stdout")


def _cmd_table(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    rows = _load_rows(args.input, args.sql)
    try:
        table = create_table(
            args.element_id,
            args.name,
            rows,
            columns=args.column or None,
            titles=_parse_title_assignments(args.title) or None,
            include_header=args.header,
            config=config,
        )
    except (TypeError, ValueError) as exc:
        raise SystemExit(f"Cannot render table: {exc}") from exc
    _emit(table.to_html(), args.output)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    entries = _load_rows(args.input, args.sql)
    if not isinstance(entries, (list, pa.Table)):
        raise SystemExit("List input must be a JSON array")
    if isinstance(entries, pa.Table):
        if entries.num_columns != 1:
            raise SystemExit("List queries must return exactly one column")
        entries = entries.column(0).to_pylist()
    listing = create_simple_list(args.element_id, args.name, entries, ordered=args.ordered, config=config)
    _emit(listing.to_html(), args.output)
    return 0


def _load_config(path: str) -> Config:
    try:
        return load_config(path)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc


def _load_rows(source: str | None, sql: str | None) -> object:
    if sql is not None:
        return _execute_sql(sql)
    if source is None:
        raise SystemExit("Provide an input file or --sql")

    path = Path(source)
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc
    reader = _DUCKDB_READERS.get(suffix)
    if reader is None:
        raise SystemExit(f"Unsupported input type: {path.suffix or path.name}")
    literal = path.as_posix().replace("'", "''")
    return _execute_sql(f"SELECT * FROM {reader}('{literal}')")


def _execute_sql(sql: str) -> pa.Table:
    logger.debug("Executing query: %s", sql)
    con = duckdb.connect()
    try:
        cursor = con.execute(sql)
        return cursor.fetch_arrow_table()
    except duckdb.Error as exc:
        raise SystemExit(f"Query failed: {exc}") from exc
    finally:
        con.close()


def _parse_title_assignments(pairs: Sequence[str]) -> Mapping[str, str]:
    titles: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise SystemExit(f"Invalid title assignment: {pair}")
        column, label = pair.split("=", 1)
        titles[column] = label
    return titles


def _emit(markup: str, output: str | None) -> None:
    if output is None:
        sys.stdout.write(markup + "\n")
        return
    Path(output).write_text(markup + "\n", encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
