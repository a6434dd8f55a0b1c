"""Repository for the ``customers`` table."""

from __future__ import annotations

from typing import Any, Optional

from video_rental.db.database import Database
from video_rental.db.repository import insert_row, update_row
from video_rental.models.customer import Customer, CustomerStatus


class CustomerRepository:
    """Customers are never hard-deleted; ``delete`` deactivates them."""

    _UPDATABLE = {
        "name", "email", "address", "phone_number",
        "discount_percentage", "member_since", "status",
    }

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, customer: Customer) -> Customer:
        """Insert a new customer. Raises on duplicate email."""
        insert_row(self._db, "customers", customer.to_dict())
        return customer

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        row = self._db.fetchone("SELECT * FROM customers WHERE id = ?", (customer_id,))
        return Customer.from_row(row) if row else None

    def get_by_email(self, email: str) -> Optional[Customer]:
        row = self._db.fetchone("SELECT * FROM customers WHERE email = ?", (email,))
        return Customer.from_row(row) if row else None

    def list_all(self, status: Optional[CustomerStatus] = None) -> list[Customer]:
        if status:
            rows = self._db.fetchall(
                "SELECT * FROM customers WHERE status = ? ORDER BY name ASC",
                (status.value,),
            )
        else:
            rows = self._db.fetchall("SELECT * FROM customers ORDER BY name ASC")
        return [Customer.from_row(r) for r in rows]

    def list_active(self) -> list[Customer]:
        return self.list_all(status=CustomerStatus.ACTIVE)

    # -- Update ----------------------------------------------------------------

    def update(self, customer_id: str, **fields: Any) -> Optional[Customer]:
        update_row(self._db, "customers", customer_id, fields, self._UPDATABLE)
        return self.get_by_id(customer_id)

    def deactivate(self, customer_id: str) -> bool:
        return update_row(
            self._db, "customers", customer_id,
            {"status": CustomerStatus.INACTIVE}, self._UPDATABLE,
        )

    def activate(self, customer_id: str) -> bool:
        return update_row(
            self._db, "customers", customer_id,
            {"status": CustomerStatus.ACTIVE}, self._UPDATABLE,
        )

    # -- Delete ----------------------------------------------------------------

    def delete(self, customer_id: str) -> bool:
        # rentals and payments keep referencing the customer
        return self.deactivate(customer_id)
