"""SQLite connection wrapper used by the repositories and scripts."""

from __future__ import annotations

import logging
import re
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generator, Optional, Union

from video_rental.db.schema import SCHEMA_DDL

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

_PRAGMA_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class DatabaseInfo:
    memory: bool
    name: str


class Database:
    """
    One lazily opened SQLite connection plus query and maintenance helpers.

    Repositories write through ``transaction()``, which commits when the
    block exits normally and rolls back when it raises.
    Pass ``":memory:"`` for a throwaway in-memory database.
    """

    def __init__(self, path: Optional[Union[Path, str]] = None):
        from video_rental.config import get_db_path
        if path is None:
            path = get_db_path()
        self.memory: bool = str(path) == MEMORY
        self.path: Path = Path(path)
        self._conn: Optional[sqlite3.Connection] = None

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        if not self.memory:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            target = MEMORY if self.memory else str(self.path)
            self._conn = sqlite3.connect(target, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
            # in-memory databases only support the "memory" journal
            if not self.memory:
                self._conn.execute("PRAGMA journal_mode = WAL")
            logger.debug("Opened database %s", target)
        return self._conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def init(self, schema_sql: str = SCHEMA_DDL) -> None:
        """Run ``schema_sql``; the bundled DDL only uses IF NOT EXISTS."""
        self.executescript(schema_sql)

    def info(self) -> DatabaseInfo:
        return DatabaseInfo(memory=self.memory, name="" if self.memory else str(self.path))

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Commit on success, roll back and re-raise on any exception."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    # -- low-level query helpers -----------------------------------------------

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.connection().execute(sql, params)

    def executescript(self, sql: str) -> None:
        conn = self.connection()
        conn.executescript(sql)
        conn.commit()

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        row = self.connection().execute(sql, params).fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        rows = self.connection().execute(sql, params).fetchall()
        return [dict(r) for r in rows]

    def pragma(self, name: str, value: Optional[Union[str, int, bool]] = None) -> Any:
        """Read a pragma (returns its scalar value) or set it when ``value`` is given."""
        if not _PRAGMA_NAME.match(name):
            raise ValueError(f"Invalid pragma name: {name!r}")
        if value is not None:
            if isinstance(value, bool):
                value = "ON" if value else "OFF"
            row = self.connection().execute(f"PRAGMA {name} = {value}").fetchone()
            return row[0] if row else None
        row = self.connection().execute(f"PRAGMA {name}").fetchone()
        if row is None:
            raise ValueError(f"Unknown pragma: {name}")
        return row[0]

    def backup(self, destination: Union[Path, str]) -> Path:
        """Copy the whole database into ``destination`` (online backup API)."""
        dest_path = Path(destination)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest = sqlite3.connect(str(dest_path))
        try:
            self.connection().backup(dest)
        finally:
            dest.close()
        logger.info("Backed up database to %s", dest_path)
        return dest_path


# -- module singleton ----------------------------------------------------------

_default_db: Optional[Database] = None


def get_db(path: Optional[Path] = None) -> Database:
    """Shared Database, created and initialised on first use."""
    global _default_db
    if _default_db is None:
        _default_db = Database(path)
        _default_db.init()
    return _default_db


def reset_db() -> None:
    """Close the shared Database so the next get_db() opens a new one."""
    global _default_db
    if _default_db is not None:
        _default_db.close()
        _default_db = None
