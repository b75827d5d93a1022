"""Configuration management for mongomigrate."""

import os
from dataclasses import dataclass

from .exceptions import ConfigError

DEFAULT_MIGRATIONS_COLLECTION = "migrations"


@dataclass
class MigrateConfig:
    """Migration orchestrator configuration."""

    # Collection holding the version history
    migrations_collection: str = DEFAULT_MIGRATIONS_COLLECTION
    # Client-side deadline in seconds for each public operation (None = no limit)
    timeout: float | None = None
    uri: str = "mongodb://localhost:27017"
    database: str = "app"

    @classmethod
    def from_env(cls) -> "MigrateConfig":
        """Load configuration from environment variables."""
        config = cls()

        if collection := os.environ.get("MONGOMIGRATE_COLLECTION"):
            config.migrations_collection = collection

        if timeout := os.environ.get("MONGOMIGRATE_TIMEOUT"):
            try:
                config.timeout = float(timeout)
            except ValueError as e:
                raise ConfigError(f"Invalid MONGOMIGRATE_TIMEOUT: {timeout!r}") from e
            if config.timeout <= 0:
                config.timeout = None

        if uri := os.environ.get("MONGODB_URI"):
            config.uri = uri

        if database := os.environ.get("MONGODB_DATABASE"):
            config.database = database

        return config
