"""Repository for the ``videos`` table."""

from __future__ import annotations

import sqlite3
from typing import Any, Optional

from video_rental.db.database import Database
from video_rental.db.repository import delete_row, insert_row, update_row
from video_rental.models.video import Genre, Video


class VideoRepository:

    _UPDATABLE = {
        "title", "genre", "rating", "release_year", "duration", "description",
        "director", "rental_price", "available_copies", "total_copies",
    }

    def __init__(self, db: Database):
        self._db = db

    def create(self, video: Video, conn: Optional[sqlite3.Connection] = None) -> Video:
        insert_row(self._db, "videos", video.to_dict(), conn=conn)
        return video

    def get_by_id(self, video_id: str) -> Optional[Video]:
        row = self._db.fetchone("SELECT * FROM videos WHERE id = ?", (video_id,))
        return Video.from_row(row) if row else None

    def list_all(self) -> list[Video]:
        rows = self._db.fetchall("SELECT * FROM videos ORDER BY title ASC")
        return [Video.from_row(r) for r in rows]

    def find_by_title(self, title: str) -> list[Video]:
        """Case-insensitive partial match on title."""
        rows = self._db.fetchall(
            "SELECT * FROM videos WHERE LOWER(title) LIKE ? ORDER BY title ASC",
            (f"%{title.lower()}%",),
        )
        return [Video.from_row(r) for r in rows]

    def list_by_genre(self, genre: Genre) -> list[Video]:
        rows = self._db.fetchall(
            "SELECT * FROM videos WHERE genre = ? ORDER BY title ASC", (genre.value,)
        )
        return [Video.from_row(r) for r in rows]

    def list_available(self) -> list[Video]:
        rows = self._db.fetchall(
            "SELECT * FROM videos WHERE available_copies > 0 ORDER BY title ASC"
        )
        return [Video.from_row(r) for r in rows]

    def update(self, video_id: str, **fields: Any) -> Optional[Video]:
        update_row(self._db, "videos", video_id, fields, self._UPDATABLE)
        return self.get_by_id(video_id)

    def delete(self, video_id: str) -> bool:
        return delete_row(self._db, "videos", video_id)
