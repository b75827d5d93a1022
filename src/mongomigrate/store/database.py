"""MongoDB connection helper for mongomigrate."""

from __future__ import annotations

from pymongo import MongoClient
from pymongo.database import Database

from ..core.config import MigrateConfig


def connect(config: MigrateConfig) -> Database:
    """Open a client and return the configured database handle.

    The client is owned by the returned handle; close it with
    ``db.client.close()``.

    Args:
        config: Configuration providing uri and database name.

    Returns:
        pymongo Database for config.database.
    """
    client: MongoClient = MongoClient(config.uri, tz_aware=True)
    return client[config.database]
