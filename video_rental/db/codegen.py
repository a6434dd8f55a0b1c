"""Generate SQLite DDL from OpenAPI component schemas.

``generate_sql_schema`` is a pure function: it reads a mapping of named object
schemas and returns the full schema script (pragmas, ``CREATE TABLE``
statements and index statements). ``generate_sql_schema_file`` writes that
script to disk.

Malformed or partial schemas never raise: unknown property types degrade to
``TEXT`` and unknown names in the include/exclude lists are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from video_rental.db.naming import (
    default_clause,
    foreign_key_target,
    has_enum,
    is_id_suffixed_integer,
    sqlite_type,
    to_snake_case,
)

logger = logging.getLogger(__name__)

TIMESTAMP_COLUMNS = ("created_at", "updated_at")

PRAGMAS: tuple[tuple[str, str, str], ...] = (
    ("journal_mode", "WAL", "Write-Ahead Logging for better concurrency"),
    ("synchronous", "NORMAL", "Balance between safety and performance"),
    ("cache_size", "-64000", "64MB cache size (negative = KB)"),
    ("foreign_keys", "ON", "Enable foreign key constraints"),
    ("temp_store", "MEMORY", "Store temporary tables in memory"),
    ("mmap_size", "268435456", "256MB memory-mapped I/O"),
    ("page_size", "4096", "Optimal page size for most systems"),
    ("auto_vacuum", "INCREMENTAL", "Prevent database bloat over time"),
    ("busy_timeout", "5000", "5 second timeout for lock conflicts"),
)

SEARCHABLE_FIELDS = (
    "title", "name", "description", "subject", "content",
    "label", "caption", "summary", "text",
)

FILTERABLE_FIELDS = (
    "type", "category", "genre", "method", "mode", "kind",
    "class", "group", "level", "priority", "rating",
)

STATUS_FIELDS = ("status", "condition", "state")

BUSINESS_DATE_FIELDS = (
    "due", "start", "end", "created", "updated", "modified", "published",
    "scheduled", "expires", "effective", "valid", "birth", "hire",
    "member", "joined", "registered",
)

# Value objects and request/response envelopes are not queried directly
DEFAULT_SKIP_INDEX_PATTERNS = (
    "value_objects.",
    "_create",
    "_update",
    "health_response",
    "api_documentation",
)


@dataclass(frozen=True)
class SqlSchemaOptions:
    include_file_pragmas: bool = True
    include_timestamps: bool = True
    include_indexes: bool = True
    use_strict_mode: bool = False
    table_name_map: Mapping[str, str] = field(default_factory=dict)
    exclude_schemas: tuple[str, ...] = ()
    include_schemas: tuple[str, ...] = ()
    skip_index_patterns: tuple[str, ...] = DEFAULT_SKIP_INDEX_PATTERNS


@dataclass
class _Table:
    name: str
    schema: Mapping[str, Any]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_sql_schema(
    components_schemas: Mapping[str, Any],
    options: Optional[SqlSchemaOptions] = None,
) -> str:
    """Return the SQLite schema script for ``components_schemas``."""
    options = options or SqlSchemaOptions()
    schemas = filter_schemas(
        components_schemas, options.include_schemas, options.exclude_schemas
    )
    blocks: list[str] = []

    if options.include_file_pragmas:
        blocks.append(generate_pragmas())

    tables: list[_Table] = []
    for schema_name, schema in schemas.items():
        table_name = options.table_name_map.get(schema_name) or to_snake_case(schema_name)
        schema = schema if isinstance(schema, Mapping) else {}
        tables.append(_Table(table_name, schema))
        blocks.append(generate_table(
            table_name,
            schema,
            include_timestamps=options.include_timestamps,
            use_strict_mode=options.use_strict_mode,
        ))

    index_count = 0
    if options.include_indexes:
        for table in tables:
            if any(p in table.name for p in options.skip_index_patterns):
                continue
            indexes = generate_indexes(
                table.name, table.schema, include_timestamps=options.include_timestamps
            )
            if indexes:
                index_count += len(indexes)
                blocks.append("\n".join(indexes))

    logger.debug("Generated %d tables and %d indexes", len(tables), index_count)
    return "\n\n".join(blocks)


def generate_sql_schema_file(
    components_schemas: Mapping[str, Any],
    output_path: Union[str, Path],
    options: Optional[SqlSchemaOptions] = None,
) -> None:
    """Generate the schema script and write it to ``output_path``.

    Parent directories are created as needed; an existing file is replaced.
    """
    sql = generate_sql_schema(components_schemas, options)
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(sql, encoding="utf-8")
    logger.info("Wrote SQL schema to %s", path)


def filter_schemas(
    schemas: Mapping[str, Any],
    include_schemas: tuple[str, ...] = (),
    exclude_schemas: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Apply the allow-list, then the deny-list. Exclusion wins."""
    filtered = dict(schemas)
    if include_schemas:
        filtered = {k: v for k, v in filtered.items() if k in include_schemas}
    if exclude_schemas:
        filtered = {k: v for k, v in filtered.items() if k not in exclude_schemas}
    return filtered


# ---------------------------------------------------------------------------
# Statement builders
# ---------------------------------------------------------------------------

def generate_pragmas() -> str:
    lines = ["-- SQLite performance and reliability pragmas"]
    for name, value, comment in PRAGMAS:
        statement = f"PRAGMA {name} = {value};"
        lines.append(f"{statement:<37}-- {comment}")
    return "\n".join(lines)


def _properties(schema: Mapping[str, Any]) -> dict[str, Mapping[str, Any]]:
    props = schema.get("properties")
    if not isinstance(props, Mapping):
        return {}
    return {
        name: (prop if isinstance(prop, Mapping) else {})
        for name, prop in props.items()
    }


def _required(schema: Mapping[str, Any]) -> frozenset[str]:
    required = schema.get("required")
    if not isinstance(required, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(r for r in required if isinstance(r, str))


def generate_column(prop_name: str, prop: Mapping[str, Any], required: frozenset[str]) -> str:
    column = to_snake_case(prop_name)
    not_null = " NOT NULL" if prop_name in required or column in required else ""
    return f"{column} {sqlite_type(prop)}{not_null}{default_clause(prop)}"


def generate_table(
    table_name: str,
    schema: Mapping[str, Any],
    include_timestamps: bool = True,
    use_strict_mode: bool = False,
) -> str:
    # WITHOUT ROWID tables need an explicit, non-rowid primary key
    columns = ["id TEXT PRIMARY KEY" if use_strict_mode else "id INTEGER PRIMARY KEY"]
    foreign_keys: list[str] = []
    required = _required(schema)

    for prop_name, prop in _properties(schema).items():
        if prop_name == "id":
            continue
        column = to_snake_case(prop_name)
        if column in TIMESTAMP_COLUMNS:
            continue
        columns.append(generate_column(prop_name, prop, required))
        target = foreign_key_target(prop_name, prop)
        if target:
            foreign_keys.append(f"FOREIGN KEY ({column}) REFERENCES {target}(id)")

    if include_timestamps:
        for column in TIMESTAMP_COLUMNS:
            columns.append(f"{column} TEXT NOT NULL DEFAULT (datetime('now'))")

    body = ",\n".join(f"  {line}" for line in columns + foreign_keys)
    suffix = " WITHOUT ROWID" if use_strict_mode else ""
    return f"CREATE TABLE {table_name} (\n{body}\n){suffix};"


# ---------------------------------------------------------------------------
# Index heuristics
# ---------------------------------------------------------------------------

def _contains_any(name: str, patterns: tuple[str, ...]) -> bool:
    lowered = name.lower()
    return any(p in lowered for p in patterns)


def is_foreign_key_field(prop_name: str, prop: Mapping[str, Any]) -> bool:
    return bool(prop.get("$ref")) or is_id_suffixed_integer(prop_name, prop)


def is_status_field(prop_name: str, prop: Mapping[str, Any]) -> bool:
    """Enum-constrained status/state fields; free-text status is not indexed."""
    return _contains_any(prop_name, STATUS_FIELDS) and has_enum(prop)


def is_email_field(prop_name: str, prop: Mapping[str, Any]) -> bool:
    return prop.get("format") == "email" or prop_name.lower() == "email"


def is_searchable_field(prop_name: str, prop: Mapping[str, Any]) -> bool:
    return prop.get("type") == "string" and _contains_any(prop_name, SEARCHABLE_FIELDS)


def is_filter_field(prop_name: str, prop: Mapping[str, Any]) -> bool:
    return _contains_any(prop_name, FILTERABLE_FIELDS) and (
        has_enum(prop) or prop.get("type") == "string"
    )


def is_business_date_field(prop_name: str, prop: Mapping[str, Any]) -> bool:
    is_date = prop.get("type") == "string" and prop.get("format") in ("date", "date-time")
    return is_date and _contains_any(prop_name, BUSINESS_DATE_FIELDS)


def generate_indexes(
    table_name: str,
    schema: Mapping[str, Any],
    include_timestamps: bool = True,
) -> list[str]:
    """Return the index statements for one table, in property order."""
    indexes: list[str] = []

    for prop_name, prop in _properties(schema).items():
        column = to_snake_case(prop_name)
        if prop_name == "id":
            continue
        if column in TIMESTAMP_COLUMNS and not include_timestamps:
            continue

        plain = (
            f"CREATE INDEX IF NOT EXISTS idx_{table_name}_{column} "
            f"ON {table_name}({column});"
        )
        if is_foreign_key_field(prop_name, prop):
            indexes.append(plain)
        if is_status_field(prop_name, prop):
            indexes.append(plain)
        if is_email_field(prop_name, prop):
            indexes.append(
                f"CREATE UNIQUE INDEX IF NOT EXISTS idx_{table_name}_{column}_unique "
                f"ON {table_name}({column});"
            )
        if is_searchable_field(prop_name, prop):
            indexes.append(plain)
        if is_filter_field(prop_name, prop):
            indexes.append(plain)
        if is_business_date_field(prop_name, prop):
            indexes.append(plain)

    return indexes
