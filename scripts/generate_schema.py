#!/usr/bin/env python3
"""Generate the SQLite database schema from the OpenAPI domain description."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from video_rental.config import get_codegen_config, get_openapi_path, get_schema_output_path
from video_rental.db.codegen import generate_sql_schema, generate_sql_schema_file
from video_rental.domain.openapi import LoadError, load_components_schemas


def _parse_table_map(pairs: Sequence[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for pair in pairs:
        schema, sep, table = pair.partition("=")
        if not sep or not schema or not table:
            raise argparse.ArgumentTypeError(f"Expected SCHEMA=TABLE, got {pair!r}")
        mapping[schema] = table
    return mapping


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate SQLite schema from OpenAPI schemas")
    parser.add_argument("--openapi", type=str, help="OpenAPI document (JSON or YAML)")
    parser.add_argument("--output", type=str, help="Where to write schema.sql")
    parser.add_argument("--no-strict", action="store_true", help="INTEGER ids, keep rowid")
    parser.add_argument("--no-indexes", action="store_true", help="Skip index generation")
    parser.add_argument("--no-timestamps", action="store_true", help="Skip created_at/updated_at")
    parser.add_argument("--no-pragmas", action="store_true", help="Skip the PRAGMA block")
    parser.add_argument("--include", nargs="*", default=[], metavar="NAME", help="Only these schemas")
    parser.add_argument("--exclude", nargs="*", default=[], metavar="NAME", help="Skip these schemas")
    parser.add_argument("--table", nargs="*", default=[], metavar="SCHEMA=TABLE",
                        help="Override table names")
    parser.add_argument("--stdout", action="store_true", help="Print instead of writing a file")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        table_map = _parse_table_map(args.table)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    config = get_codegen_config()
    options = replace(
        config.to_options(),
        use_strict_mode=config.use_strict_mode and not args.no_strict,
        include_indexes=config.include_indexes and not args.no_indexes,
        include_timestamps=config.include_timestamps and not args.no_timestamps,
        include_file_pragmas=config.include_file_pragmas and not args.no_pragmas,
        include_schemas=tuple(args.include),
        exclude_schemas=config.exclude_schemas + tuple(args.exclude),
        table_name_map=table_map,
    )

    openapi_path = Path(args.openapi) if args.openapi else get_openapi_path()
    output_path = Path(args.output) if args.output else get_schema_output_path()

    try:
        schemas = load_components_schemas(openapi_path)
    except LoadError as e:
        print(f"Failed to generate database schema: {e}", file=sys.stderr)
        return 1

    if args.stdout:
        print(generate_sql_schema(schemas, options))
        return 0

    print(f"Reading OpenAPI spec from: {openapi_path}")
    print(f"Found {len(schemas)} schemas: {', '.join(schemas)}")
    try:
        generate_sql_schema_file(schemas, output_path, options)
    except OSError as e:
        print(f"Failed to write {output_path}: {e}", file=sys.stderr)
        return 1
    print(f"Schema written to: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
