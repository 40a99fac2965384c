"""Integration tests run against the Postgres in ``DATABASE__URL``.

The schema must be migrated first (``python scripts/run_migrations.py``).
Tests under this directory are skipped when the database does not accept
connections.
"""

import socket
from pathlib import Path

import pytest
from sqlalchemy.engine import make_url

from empire.config import Settings

INTEGRATION_DIR = Path(__file__).parent


def _database_reachable() -> bool:
    url = make_url(Settings().database_url)
    try:
        with socket.create_connection((url.host or "localhost", url.port or 5432), timeout=1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    integration_items = [item for item in items if INTEGRATION_DIR in item.path.parents]
    if not integration_items or _database_reachable():
        return
    skip = pytest.mark.skip(reason="Postgres is not reachable")
    for item in integration_items:
        item.add_marker(skip)
