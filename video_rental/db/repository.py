"""Repository capability and the statement helpers every repository shares.

Each entity gets its own repository class that composes these helpers; there
is no repository base class. The write helpers open their own transaction,
or run on ``conn`` when the caller already holds one, so several writes can
commit or roll back together.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generator, Iterable, Optional, Protocol, TypeVar

from video_rental.db.database import Database

T = TypeVar("T")


class Repository(Protocol[T]):
    def get_by_id(self, entity_id: str) -> Optional[T]: ...

    def list_all(self) -> list[T]: ...

    def create(self, entity: T) -> T: ...

    def update(self, entity_id: str, **fields: Any) -> Optional[T]: ...

    def delete(self, entity_id: str) -> bool: ...


def utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _sql_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@contextmanager
def _writer(
    db: Database, conn: Optional[sqlite3.Connection]
) -> Generator[sqlite3.Connection, None, None]:
    if conn is not None:
        yield conn
    else:
        with db.transaction() as own:
            yield own


def insert_row(
    db: Database,
    table: str,
    row: dict[str, Any],
    conn: Optional[sqlite3.Connection] = None,
) -> None:
    columns = ", ".join(row)
    placeholders = ", ".join("?" for _ in row)
    with _writer(db, conn) as c:
        c.execute(
            f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
            tuple(_sql_value(v) for v in row.values()),
        )


def update_row(
    db: Database,
    table: str,
    entity_id: str,
    fields: dict[str, Any],
    allowed: Iterable[str],
    conn: Optional[sqlite3.Connection] = None,
) -> bool:
    """Update whitelisted ``fields`` and stamp ``updated_at``.

    Returns False when no allowed field was given or no row matched.
    """
    allowed = set(allowed)
    filtered = {k: _sql_value(v) for k, v in fields.items() if k in allowed}
    if not filtered:
        return False

    set_parts = [f"{k} = ?" for k in filtered]
    set_parts.append("updated_at = ?")
    values = list(filtered.values())
    values.append(utc_now())
    values.append(entity_id)

    with _writer(db, conn) as c:
        cursor = c.execute(
            f"UPDATE {table} SET {', '.join(set_parts)} WHERE id = ?",
            tuple(values),
        )
    return cursor.rowcount > 0


def delete_row(db: Database, table: str, entity_id: str) -> bool:
    with db.transaction() as conn:
        cursor = conn.execute(f"DELETE FROM {table} WHERE id = ?", (entity_id,))
    return cursor.rowcount > 0
