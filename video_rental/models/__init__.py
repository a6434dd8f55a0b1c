"""Domain models for the video rental store."""

from video_rental.models.customer import Customer, CustomerStatus
from video_rental.models.video import Genre, Rating, Video
from video_rental.models.inventory import InventoryItem, ItemCondition, ItemStatus
from video_rental.models.rental import Rental, RentalStatus
from video_rental.models.payment import Payment, PaymentMethod, PaymentStatus, PaymentType

__all__ = [
    "Customer", "CustomerStatus",
    "Video", "Genre", "Rating",
    "InventoryItem", "ItemCondition", "ItemStatus",
    "Rental", "RentalStatus",
    "Payment", "PaymentType", "PaymentMethod", "PaymentStatus",
]
