"""Payment model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Optional


class PaymentType(str, Enum):
    RENTAL = "Rental"
    LATE_FEE = "LateFee"
    DEPOSIT = "Deposit"
    REFUND = "Refund"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    CREDIT_CARD = "CreditCard"
    DEBIT_CARD = "DebitCard"
    ONLINE = "Online"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"


@dataclass
class Payment:
    customer_id: str
    amount: float
    payment_type: PaymentType
    payment_method: PaymentMethod
    rental_id: Optional[str] = None
    currency: str = "USD"
    payment_date: str = field(default_factory=lambda: date.today().isoformat())
    reference_number: Optional[str] = None
    status: PaymentStatus = PaymentStatus.PENDING
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
            "customer_id": self.customer_id,
            "rental_id": self.rental_id,
            "amount": self.amount,
            "currency": self.currency,
            "payment_type": self.payment_type.value,
            "payment_method": self.payment_method.value,
            "payment_date": self.payment_date,
            "reference_number": self.reference_number,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Payment":
        return cls(
            id=row["id"],
            customer_id=row["customer_id"],
            rental_id=row.get("rental_id"),
            amount=row["amount"],
            currency=row.get("currency", "USD"),
            payment_type=PaymentType(row["payment_type"]),
            payment_method=PaymentMethod(row["payment_method"]),
            payment_date=row["payment_date"],
            reference_number=row.get("reference_number"),
            status=PaymentStatus(row.get("status", "Pending")),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
