"""Customer domain model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any


class CustomerStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Customer:
    """A registered store customer."""

    name: str
    email: str
    address: str = ""
    phone_number: str = ""
    discount_percentage: float = 0.0
    member_since: str = field(default_factory=lambda: date.today().isoformat())
    status: CustomerStatus = CustomerStatus.ACTIVE
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )
    updated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )

    @property
    def is_active(self) -> bool:
        return self.status == CustomerStatus.ACTIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "address": self.address,
            "phone_number": self.phone_number,
            "discount_percentage": self.discount_percentage,
            "member_since": self.member_since,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Customer":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            address=row.get("address") or "",
            phone_number=row.get("phone_number") or "",
            discount_percentage=row.get("discount_percentage") or 0.0,
            member_since=row.get("member_since", ""),
            status=CustomerStatus(row.get("status", "Active")),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
