"""Inventory model: one physical copy of a video."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional


class ItemCondition(str, Enum):
    NEW = "New"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    DAMAGED = "Damaged"


class ItemStatus(str, Enum):
    AVAILABLE = "Available"
    RENTED = "Rented"
    MAINTENANCE = "Maintenance"
    LOST = "Lost"


@dataclass
class InventoryItem:
    video_id: str
    copy_id: str
    condition: ItemCondition = ItemCondition.GOOD
    status: ItemStatus = ItemStatus.AVAILABLE
    date_acquired: str = field(default_factory=lambda: date.today().isoformat())
    last_rented_date: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )
    updated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "video_id": self.video_id,
            "copy_id": self.copy_id,
            "condition": self.condition.value,
            "status": self.status.value,
            "date_acquired": self.date_acquired,
            "last_rented_date": self.last_rented_date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "InventoryItem":
        return cls(
            id=row["id"],
            video_id=row["video_id"],
            copy_id=row["copy_id"],
            condition=ItemCondition(row.get("condition", "Good")),
            status=ItemStatus(row.get("status", "Available")),
            date_acquired=row.get("date_acquired", ""),
            last_rented_date=row.get("last_rented_date"),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
