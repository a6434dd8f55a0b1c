"""Repository for the ``rentals`` table."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from video_rental.db.database import Database
from video_rental.db.repository import delete_row, insert_row, update_row
from video_rental.models.rental import Rental, RentalStatus


class RentalRepository:

    _UPDATABLE = {
        "rental_date", "due_date", "return_date", "rental_fee",
        "late_fee", "currency", "status",
    }

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, rental: Rental) -> Rental:
        """Insert a rental. Raises on unknown customer, video or copy."""
        insert_row(self._db, "rentals", rental.to_dict())
        return rental

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, rental_id: str) -> Optional[Rental]:
        row = self._db.fetchone("SELECT * FROM rentals WHERE id = ?", (rental_id,))
        return Rental.from_row(row) if row else None

    def list_all(self) -> list[Rental]:
        rows = self._db.fetchall("SELECT * FROM rentals ORDER BY rental_date DESC")
        return [Rental.from_row(r) for r in rows]

    def list_by_customer(self, customer_id: str) -> list[Rental]:
        rows = self._db.fetchall(
            "SELECT * FROM rentals WHERE customer_id = ? ORDER BY rental_date DESC",
            (customer_id,),
        )
        return [Rental.from_row(r) for r in rows]

    def list_by_video(self, video_id: str) -> list[Rental]:
        rows = self._db.fetchall(
            "SELECT * FROM rentals WHERE video_id = ? ORDER BY rental_date DESC",
            (video_id,),
        )
        return [Rental.from_row(r) for r in rows]

    def list_active(self) -> list[Rental]:
        rows = self._db.fetchall(
            "SELECT * FROM rentals WHERE status = ? ORDER BY due_date ASC",
            (RentalStatus.ACTIVE.value,),
        )
        return [Rental.from_row(r) for r in rows]

    def list_overdue(self, as_of: Optional[str] = None) -> list[Rental]:
        """Active or already-flagged rentals whose due date is before ``as_of``."""
        as_of = as_of or date.today().isoformat()
        rows = self._db.fetchall(
            """SELECT * FROM rentals
               WHERE status IN (?, ?) AND due_date < ?
               ORDER BY due_date ASC""",
            (RentalStatus.ACTIVE.value, RentalStatus.OVERDUE.value, as_of),
        )
        return [Rental.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(self, rental_id: str, **fields: Any) -> Optional[Rental]:
        update_row(self._db, "rentals", rental_id, fields, self._UPDATABLE)
        return self.get_by_id(rental_id)

    def return_rental(self, rental_id: str, return_date: Optional[str] = None) -> Optional[Rental]:
        existing = self.get_by_id(rental_id)
        if existing is None or existing.status == RentalStatus.RETURNED:
            return None
        return self.update(
            rental_id,
            status=RentalStatus.RETURNED,
            return_date=return_date or date.today().isoformat(),
        )

    # -- Delete ----------------------------------------------------------------

    def delete(self, rental_id: str) -> bool:
        return delete_row(self._db, "rentals", rental_id)
