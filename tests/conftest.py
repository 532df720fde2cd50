import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import database
from store import client as store_client


@pytest.fixture(autouse=True)
def clear_fallback(monkeypatch):
    """Wipe the in-memory store fallback before and after each test and make
    sure no test ever reaches for a real redis server.
    """
    store_client._fallback.clear()
    monkeypatch.setattr(store_client, "_redis_client", None)
    monkeypatch.setattr("config.settings.redis_url", None)

    yield

    store_client._fallback.clear()


@pytest.fixture
def sqlite_db(tmp_path):
    """A fresh file-backed SQLite database with all tables created."""
    database.dispose_database()
    database.init_database(f"sqlite:///{tmp_path / 'insights.db'}")
    database.init_db()
    yield database
    database.dispose_database()
