"""Repository for the ``payments`` table."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from video_rental.db.database import Database
from video_rental.db.repository import delete_row, insert_row, update_row
from video_rental.models.payment import Payment, PaymentStatus, PaymentType

logger = logging.getLogger(__name__)


class PaymentRepository:

    _UPDATABLE = {
        "amount", "currency", "payment_type", "payment_method",
        "payment_date", "reference_number", "status",
    }

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, payment: Payment) -> Payment:
        insert_row(self._db, "payments", payment.to_dict())
        return payment

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        row = self._db.fetchone("SELECT * FROM payments WHERE id = ?", (payment_id,))
        return Payment.from_row(row) if row else None

    def list_all(self) -> list[Payment]:
        rows = self._db.fetchall("SELECT * FROM payments ORDER BY payment_date DESC")
        return [Payment.from_row(r) for r in rows]

    def list_by_rental(self, rental_id: str) -> list[Payment]:
        rows = self._db.fetchall(
            "SELECT * FROM payments WHERE rental_id = ? ORDER BY payment_date DESC",
            (rental_id,),
        )
        return [Payment.from_row(r) for r in rows]

    def list_by_customer(self, customer_id: str) -> list[Payment]:
        rows = self._db.fetchall(
            "SELECT * FROM payments WHERE customer_id = ? ORDER BY payment_date DESC",
            (customer_id,),
        )
        return [Payment.from_row(r) for r in rows]

    def list_by_status(self, status: PaymentStatus) -> list[Payment]:
        rows = self._db.fetchall(
            "SELECT * FROM payments WHERE status = ? ORDER BY payment_date DESC",
            (status.value,),
        )
        return [Payment.from_row(r) for r in rows]

    def list_by_type(self, payment_type: PaymentType) -> list[Payment]:
        rows = self._db.fetchall(
            "SELECT * FROM payments WHERE payment_type = ? ORDER BY payment_date DESC",
            (payment_type.value,),
        )
        return [Payment.from_row(r) for r in rows]

    def list_by_date_range(self, start_date: str, end_date: str) -> list[Payment]:
        """Payments dated within ``[start_date, end_date]`` (inclusive)."""
        rows = self._db.fetchall(
            """SELECT * FROM payments
               WHERE payment_date >= ? AND payment_date <= ?
               ORDER BY payment_date ASC""",
            (start_date, end_date),
        )
        return [Payment.from_row(r) for r in rows]

    def total_for_customer(self, customer_id: str) -> float:
        """Sum of completed payments, net of refunds."""
        row = self._db.fetchone(
            """SELECT COALESCE(SUM(CASE WHEN payment_type = ? THEN -amount ELSE amount END), 0)
                      AS total
               FROM payments
               WHERE customer_id = ? AND status IN (?, ?)""",
            (
                PaymentType.REFUND.value, customer_id,
                PaymentStatus.COMPLETED.value, PaymentStatus.REFUNDED.value,
            ),
        )
        return float(row["total"]) if row else 0.0

    # -- Update ----------------------------------------------------------------

    def update(self, payment_id: str, **fields: Any) -> Optional[Payment]:
        update_row(self._db, "payments", payment_id, fields, self._UPDATABLE)
        return self.get_by_id(payment_id)

    def update_status(self, payment_id: str, status: PaymentStatus) -> Optional[Payment]:
        return self.update(payment_id, status=status)

    def process_refund(self, payment_id: str, amount: Optional[float] = None) -> Optional[Payment]:
        """Issue a refund against a completed payment.

        Returns the new Refund payment, or None if the original is missing
        or not refundable.
        """
        original = self.get_by_id(payment_id)
        if original is None or original.status != PaymentStatus.COMPLETED:
            return None
        refund_amount = original.amount if amount is None else amount
        if refund_amount <= 0 or refund_amount > original.amount:
            logger.warning("Rejected refund of %s against payment %s", refund_amount, payment_id)
            return None

        refund = Payment(
            customer_id=original.customer_id,
            rental_id=original.rental_id,
            amount=refund_amount,
            currency=original.currency,
            payment_type=PaymentType.REFUND,
            payment_method=original.payment_method,
            payment_date=date.today().isoformat(),
            reference_number=original.id,
            status=PaymentStatus.COMPLETED,
        )
        # the refund row and the Refunded flag commit together or not at all
        with self._db.transaction() as conn:
            insert_row(self._db, "payments", refund.to_dict(), conn=conn)
            update_row(
                self._db, "payments", payment_id,
                {"status": PaymentStatus.REFUNDED}, self._UPDATABLE, conn=conn,
            )
        logger.info("Refunded %s %s against payment %s", refund_amount, original.currency, payment_id)
        return refund

    # -- Delete ----------------------------------------------------------------

    def delete(self, payment_id: str) -> bool:
        return delete_row(self._db, "payments", payment_id)
