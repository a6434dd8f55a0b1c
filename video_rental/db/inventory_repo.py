"""Repository for the ``inventory`` table."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Any, Optional

from video_rental.db.database import Database
from video_rental.db.repository import delete_row, insert_row, update_row
from video_rental.models.inventory import InventoryItem, ItemCondition, ItemStatus


class InventoryRepository:

    _UPDATABLE = {"copy_id", "condition", "status", "date_acquired", "last_rented_date"}

    def __init__(self, db: Database):
        self._db = db

    def create(
        self, item: InventoryItem, conn: Optional[sqlite3.Connection] = None
    ) -> InventoryItem:
        insert_row(self._db, "inventory", item.to_dict(), conn=conn)
        return item

    def get_by_id(self, item_id: str) -> Optional[InventoryItem]:
        row = self._db.fetchone("SELECT * FROM inventory WHERE id = ?", (item_id,))
        return InventoryItem.from_row(row) if row else None

    def list_all(self) -> list[InventoryItem]:
        rows = self._db.fetchall("SELECT * FROM inventory ORDER BY video_id, copy_id")
        return [InventoryItem.from_row(r) for r in rows]

    def list_by_video(self, video_id: str) -> list[InventoryItem]:
        rows = self._db.fetchall(
            "SELECT * FROM inventory WHERE video_id = ? ORDER BY copy_id", (video_id,)
        )
        return [InventoryItem.from_row(r) for r in rows]

    def list_available(self, video_id: Optional[str] = None) -> list[InventoryItem]:
        if video_id:
            rows = self._db.fetchall(
                "SELECT * FROM inventory WHERE status = ? AND video_id = ? ORDER BY copy_id",
                (ItemStatus.AVAILABLE.value, video_id),
            )
        else:
            rows = self._db.fetchall(
                "SELECT * FROM inventory WHERE status = ? ORDER BY video_id, copy_id",
                (ItemStatus.AVAILABLE.value,),
            )
        return [InventoryItem.from_row(r) for r in rows]

    def update(self, item_id: str, **fields: Any) -> Optional[InventoryItem]:
        update_row(self._db, "inventory", item_id, fields, self._UPDATABLE)
        return self.get_by_id(item_id)

    def mark_rented(self, item_id: str, rented_on: Optional[str] = None) -> bool:
        return update_row(
            self._db, "inventory", item_id,
            {
                "status": ItemStatus.RENTED,
                "last_rented_date": rented_on or date.today().isoformat(),
            },
            self._UPDATABLE,
        )

    def mark_available(self, item_id: str) -> bool:
        return update_row(
            self._db, "inventory", item_id, {"status": ItemStatus.AVAILABLE}, self._UPDATABLE
        )

    def update_condition(self, item_id: str, condition: ItemCondition) -> bool:
        return update_row(
            self._db, "inventory", item_id, {"condition": condition}, self._UPDATABLE
        )

    def delete(self, item_id: str) -> bool:
        return delete_row(self._db, "inventory", item_id)
