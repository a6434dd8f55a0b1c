"""Rental model: a customer borrowing one inventory copy."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional


class RentalStatus(str, Enum):
    ACTIVE = "Active"
    RETURNED = "Returned"
    OVERDUE = "Overdue"
    CANCELLED = "Cancelled"


@dataclass
class Rental:
    customer_id: str
    video_id: str
    inventory_id: str
    due_date: str
    rental_fee: float
    rental_date: str = field(default_factory=lambda: date.today().isoformat())
    return_date: Optional[str] = None
    late_fee: float = 0.0
    currency: str = "USD"
    status: RentalStatus = RentalStatus.ACTIVE
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )
    updated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )

    def is_overdue(self, as_of: Optional[str] = None) -> bool:
        as_of = as_of or date.today().isoformat()
        return self.status == RentalStatus.ACTIVE and self.due_date < as_of

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "video_id": self.video_id,
            "inventory_id": self.inventory_id,
            "rental_date": self.rental_date,
            "due_date": self.due_date,
            "return_date": self.return_date,
            "rental_fee": self.rental_fee,
            "late_fee": self.late_fee,
            "currency": self.currency,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Rental":
        return cls(
            id=row["id"],
            customer_id=row["customer_id"],
            video_id=row["video_id"],
            inventory_id=row["inventory_id"],
            rental_date=row["rental_date"],
            due_date=row["due_date"],
            return_date=row.get("return_date"),
            rental_fee=row["rental_fee"],
            late_fee=row.get("late_fee") or 0.0,
            currency=row.get("currency", "USD"),
            status=RentalStatus(row.get("status", "Active")),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
