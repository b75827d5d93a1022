"""mongomigrate: versioned, reversible migrations for MongoDB.

Example:
    from mongomigrate import ALL_AVAILABLE, Migrate, Migration, connect
    from mongomigrate.core import MigrateConfig

    config = MigrateConfig.from_env()
    db = connect(config)
    migrate = Migrate(db, *MIGRATIONS, config=config)
    migrate.up(ALL_AVAILABLE)
"""

from .core.config import MigrateConfig
from .core.exceptions import (
    ConfigError,
    DuplicateMigrationError,
    InvalidVersionError,
    MigrateError,
    MigrationDefinitionError,
)
from .core.types import ALL_AVAILABLE, Migration, VersionRecord
from .logger import LoguruLogger, NullLogger
from .migrate import Migrate
from .protocols import HistoryStoreProtocol, MigrationLogger
from .registry import MigrationRegistry
from .store import MongoHistoryStore, connect

__version__ = "0.1.0"

__all__ = [
    "ALL_AVAILABLE",
    "Migrate",
    "Migration",
    "MigrationRegistry",
    "VersionRecord",
    "MigrateConfig",
    "MongoHistoryStore",
    "HistoryStoreProtocol",
    "MigrationLogger",
    "LoguruLogger",
    "NullLogger",
    "connect",
    "MigrateError",
    "MigrationDefinitionError",
    "DuplicateMigrationError",
    "InvalidVersionError",
    "ConfigError",
]
