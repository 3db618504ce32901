from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when tests run from a checkout.
sys.path.append(str(Path(__file__).resolve().parents[1]))

from invoice_dashboard.app.core.cache import view_cache
from invoice_dashboard.app.core.config import settings
from invoice_dashboard.app.core.db import get_connection, init_db
from invoice_dashboard.app.core.security import create_access_token
from invoice_dashboard.app.core.seed import seed_database

SEED_EMAIL = "user@nextmail.com"
SEED_PASSWORD = "123456"


class RecordingCache:
    """Stands in for the view cache and records each invalidation."""

    def __init__(self) -> None:
        self.invalidated: list[str] = []
        # Number of invoices stored at the moment of each invalidation.
        self.invoice_counts: list[int] = []

    def invalidate(self, path: str) -> None:
        self.invalidated.append(path)
        self.invoice_counts.append(count_invoices())


def count_invoices() -> int:
    conn = get_connection()
    try:
        return conn.execute("SELECT COUNT(*) AS count FROM invoices").fetchone()["count"]
    finally:
        conn.close()


@pytest.fixture
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A migrated and seeded SQLite database in a temporary directory."""
    db_file = tmp_path / "dashboard.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    init_db()
    seed_database()
    view_cache.clear()
    yield db_file
    view_cache.clear()


@pytest.fixture
def recording_cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def client(database: Path):
    from fastapi.testclient import TestClient

    from invoice_dashboard.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client):
    token = create_access_token({"sub": SEED_EMAIL})
    client.headers["Authorization"] = f"Bearer {token}"
    return client
