#!/usr/bin/env python3
"""Initialize the database and optionally seed it with data from a YAML file."""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from video_rental.db.container import RepositoryContainer
from video_rental.db.database import Database
from video_rental.models.customer import Customer
from video_rental.models.inventory import InventoryItem, ItemCondition
from video_rental.models.video import Genre, Rating, Video


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the video rental database")
    parser.add_argument("--db-path", type=str, help="Override database path")
    parser.add_argument("--seed", type=str, help="YAML file with customers/videos to insert")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    db = Database(path=Path(args.db_path) if args.db_path else None)
    try:
        db.init()
        print(f"Database initialized at: {db.path}")

        if args.seed:
            try:
                seed(RepositoryContainer(db), Path(args.seed))
            except (OSError, yaml.YAMLError) as e:
                print(f"Failed to read seed file {args.seed}: {e}", file=sys.stderr)
                return 1

        tables = db.fetchall("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        print(f"Tables: {', '.join(t['name'] for t in tables)}")
    finally:
        db.close()
    print("Done.")
    return 0


def seed(repos: RepositoryContainer, path: Path) -> None:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    for c in data.get("customers", []):
        try:
            customer = Customer(
                name=c["name"],
                email=c["email"],
                address=c.get("address", ""),
                phone_number=c.get("phone_number", ""),
                discount_percentage=c.get("discount_percentage", 0.0),
            )
            repos.customers.create(customer)
            print(f"  Created customer: {customer.name} ({customer.email})")
        except (KeyError, TypeError, ValueError, sqlite3.IntegrityError) as e:
            print(f"  Skipping customer {c.get('name', '?')}: {e}")

    for v in data.get("videos", []):
        try:
            copies = int(v.get("copies", 0))
            video = Video(
                title=v["title"],
                genre=Genre(v["genre"]),
                rating=Rating(v["rating"]),
                release_year=int(v["release_year"]),
                duration=int(v["duration"]),
                description=v.get("description"),
                director=v.get("director"),
                rental_price=float(v.get("rental_price", 3.99)),
                available_copies=copies,
                total_copies=copies,
            )
            condition = ItemCondition(v.get("condition", "Good"))
            items = [
                InventoryItem(
                    video_id=video.id,
                    copy_id=f"{video.id[:8]}-{n:03d}",
                    condition=condition,
                )
                for n in range(1, copies + 1)
            ]
            with repos.db.transaction() as conn:
                repos.videos.create(video, conn=conn)
                for item in items:
                    repos.inventory.create(item, conn=conn)
            print(f"  Created video: {video.title} ({copies} copies)")
        except (KeyError, TypeError, ValueError, sqlite3.IntegrityError) as e:
            print(f"  Skipping video {v.get('title', '?')}: {e}")


if __name__ == "__main__":
    sys.exit(main())
