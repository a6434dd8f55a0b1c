"""Database layer: SQLite schema generation, connection wrapper and repositories."""

from video_rental.db.codegen import (
    SqlSchemaOptions,
    generate_sql_schema,
    generate_sql_schema_file,
)
from video_rental.db.container import RepositoryContainer
from video_rental.db.database import Database, get_db, reset_db
from video_rental.db.naming import to_snake_case
from video_rental.db.schema import SCHEMA_DDL

__all__ = [
    "SqlSchemaOptions", "generate_sql_schema", "generate_sql_schema_file",
    "Database", "get_db", "reset_db", "SCHEMA_DDL",
    "RepositoryContainer", "to_snake_case",
]
