"""Pytest configuration and fixtures for integration tests.

These tests need a running MongoDB reachable through MONGODB_URI and are
skipped otherwise. Each test gets its own throwaway database.
"""

import os
import uuid

import pytest

from mongomigrate.core.config import MigrateConfig
from mongomigrate.store import connect


@pytest.fixture
def mongo_config() -> MigrateConfig:
    """Provide a config pointing at a unique database, or skip."""
    if not os.environ.get("MONGODB_URI"):
        pytest.skip("MONGODB_URI not set")
    config = MigrateConfig.from_env()
    config.database = f"mongomigrate_test_{uuid.uuid4().hex[:12]}"
    return config


@pytest.fixture
def mongo_db(mongo_config: MigrateConfig):
    """Provide a database handle, dropped after the test."""
    db = connect(mongo_config)
    yield db
    db.client.drop_database(mongo_config.database)
    db.client.close()
