"""Core types, configuration and errors for mongomigrate."""

from .config import DEFAULT_MIGRATIONS_COLLECTION, MigrateConfig
from .exceptions import (
    ConfigError,
    DuplicateMigrationError,
    InvalidVersionError,
    MigrateError,
    MigrationDefinitionError,
)
from .types import (
    ALL_AVAILABLE,
    MAX_VERSION,
    CollectionSpecification,
    Migration,
    MigrationAction,
    VersionRecord,
)

__all__ = [
    "MigrateConfig",
    "DEFAULT_MIGRATIONS_COLLECTION",
    "MigrateError",
    "MigrationDefinitionError",
    "DuplicateMigrationError",
    "InvalidVersionError",
    "ConfigError",
    "ALL_AVAILABLE",
    "MAX_VERSION",
    "Migration",
    "MigrationAction",
    "VersionRecord",
    "CollectionSpecification",
]
