"""Video catalogue model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class Genre(str, Enum):
    ACTION = "Action"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    HORROR = "Horror"
    SCIFI = "SciFi"
    ROMANCE = "Romance"
    DOCUMENTARY = "Documentary"
    ANIMATION = "Animation"


class Rating(str, Enum):
    G = "G"
    PG = "PG"
    PG13 = "PG-13"
    R = "R"
    NC17 = "NC-17"


@dataclass
class Video:
    """A title in the catalogue. Physical copies live in ``inventory``."""

    title: str
    genre: Genre
    rating: Rating
    release_year: int
    duration: int
    description: Optional[str] = None
    director: Optional[str] = None
    rental_price: float = 3.99
    available_copies: int = 0
    total_copies: int = 0
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
            "title": self.title,
            "genre": self.genre.value,
            "rating": self.rating.value,
            "release_year": self.release_year,
            "duration": self.duration,
            "description": self.description,
            "director": self.director,
            "rental_price": self.rental_price,
            "available_copies": self.available_copies,
            "total_copies": self.total_copies,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Video":
        return cls(
            id=row["id"],
            title=row["title"],
            genre=Genre(row["genre"]),
            rating=Rating(row["rating"]),
            release_year=row["release_year"],
            duration=row["duration"],
            description=row.get("description"),
            director=row.get("director"),
            rental_price=row.get("rental_price", 3.99),
            available_copies=row.get("available_copies", 0),
            total_copies=row.get("total_copies", 0),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
