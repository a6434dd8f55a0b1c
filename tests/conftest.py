"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()


@pytest.fixture(autouse=True)
def _reset_db_singleton():
    """Never let one test's ``get_db()`` singleton leak into the next."""
    yield
    from video_rental.db.database import reset_db
    reset_db()
