"""Wires every repository to one Database."""

from __future__ import annotations

from video_rental.db.customer_repo import CustomerRepository
from video_rental.db.database import Database
from video_rental.db.inventory_repo import InventoryRepository
from video_rental.db.payment_repo import PaymentRepository
from video_rental.db.rental_repo import RentalRepository
from video_rental.db.video_repo import VideoRepository


class RepositoryContainer:

    def __init__(self, db: Database):
        self._db = db
        self.customers = CustomerRepository(db)
        self.videos = VideoRepository(db)
        self.inventory = InventoryRepository(db)
        self.rentals = RentalRepository(db)
        self.payments = PaymentRepository(db)

    @property
    def db(self) -> Database:
        return self._db

    def close(self) -> None:
        self._db.close()
