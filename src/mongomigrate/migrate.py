"""Versioned migrations for MongoDB.

The database version is tracked in a dedicated collection. Every applied
step, up or down, appends one document holding the version, the migration
description and a timestamp. The current version is the version of the
most recently inserted document (greatest ``_id``), not the greatest
version value.

Example:
    from mongomigrate import Migrate, Migration

    def add_email_index(db):
        db.users.create_index("email", unique=True)

    def drop_email_index(db):
        db.users.drop_index("email_1")

    migrate = Migrate(db, Migration(1, "Index user email", add_email_index, drop_email_index))
    migrate.up()
    print(migrate.version())
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any

import pymongo
from loguru import logger

from .core.config import MigrateConfig
from .core.exceptions import ConfigError, InvalidVersionError
from .core.types import ALL_AVAILABLE, MAX_VERSION, Migration, VersionRecord
from .logger import NullLogger
from .registry import MigrationRegistry
from .store.history import MongoHistoryStore

if TYPE_CHECKING:
    from pymongo.database import Database

    from .protocols import HistoryStoreProtocol, MigrationLogger


class Migrate:
    """Applies migrations to a database and records its version history.

    Not safe for concurrent use: one call should finish before the next
    starts, and separate processes migrating the same database must be
    serialized by the caller. A failed step is never rolled back; steps
    completed before it stay recorded.
    """

    def __init__(
        self,
        db: Database,
        *migrations: Migration,
        store: HistoryStoreProtocol | None = None,
        log: MigrationLogger | None = None,
        config: MigrateConfig | None = None,
    ):
        """Initialize with database and migrations.

        Args:
            db: Database handed to every migration action.
            *migrations: Migrations to manage, in any order.
            store: History storage, defaults to a MongoHistoryStore on db.
            log: Receiver of "Migrated UP/DOWN" messages, defaults to none.
            config: Collection name and timeout, defaults to MigrateConfig().

        Raises:
            DuplicateMigrationError: If two migrations share a version.
        """
        config = config or MigrateConfig()
        self.db = db
        self.registry = MigrationRegistry(migrations)
        self.timeout = config.timeout
        self._store = store if store is not None else MongoHistoryStore(db)
        self._log: MigrationLogger = log or NullLogger()
        self.migrations_collection = config.migrations_collection

    def set_migrations_collection(self, name: str) -> None:
        """Replace the name of the history collection ("migrations" by default)."""
        if not name:
            raise ConfigError("Migrations collection name must not be empty")
        self.migrations_collection = name

    def set_logger(self, log: MigrationLogger | None) -> None:
        """Set the logger for migration progress; None disables it."""
        self._log = log or NullLogger()

    def version(self) -> tuple[int, str]:
        """Get current database version and description.

        Creates the history collection on first use.

        Returns:
            (version, description) of the latest record, or (0, "") if
            nothing has been recorded.
        """
        with self._deadline():
            return self._version()

    def set_version(self, version: int, description: str = "") -> None:
        """Force the database version without running any migration.

        Args:
            version: Version to record. Not checked against registered migrations.
            description: Description stored with the record.

        Raises:
            InvalidVersionError: If version is negative or too large for MongoDB.
        """
        if isinstance(version, bool) or not isinstance(version, int):
            raise InvalidVersionError(f"Version must be an int, got {version!r}")
        if not 0 <= version <= MAX_VERSION:
            raise InvalidVersionError(f"Version out of range: {version}")
        with self._deadline():
            self._set_version(version, description)

    def up(self, n: int = ALL_AVAILABLE) -> int:
        """Apply "up" migrations newer than the current version.

        Args:
            n: Maximum number of migrations to apply. Zero or negative
                (ALL_AVAILABLE) applies all of them.

        Returns:
            Number of migrations applied.

        Raises:
            Exception: Whatever the failing action or the driver raised.
        """
        with self._deadline():
            current, _ = self._version()
            migrations = self.registry.sorted()
            n = self._clamp(n, len(migrations))

            applied = 0
            reached = current
            for migration in migrations:
                if applied >= n:
                    break
                if migration.version <= current or migration.up is None:
                    continue

                logger.info(
                    f"Applying migration {migration.version}: {migration.description}"
                )
                try:
                    migration.up(self.db)
                    self._set_version(migration.version, migration.description)
                except Exception as e:
                    logger.error(f"Migration {migration.version} up failed: {e}")
                    raise

                applied += 1
                reached = migration.version
                self._printf("Migrated UP: %d %s", migration.version, migration.description)

        if applied:
            logger.info(f"Applied {applied} migration(s), now at version {reached}")
        else:
            logger.debug(f"Database at version {current}, no migrations to apply")
        return applied

    def down(self, n: int = ALL_AVAILABLE) -> int:
        """Undo migrations not newer than the current version, newest first.

        Undoing a migration records the version and description of the
        migration before it, or (0, "") for the first one.

        Args:
            n: Maximum number of migrations to undo. Zero or negative
                (ALL_AVAILABLE) undoes all of them.

        Returns:
            Number of migrations undone.

        Raises:
            Exception: Whatever the failing action or the driver raised.
        """
        with self._deadline():
            current, _ = self._version()
            migrations = self.registry.sorted()
            n = self._clamp(n, len(migrations))

            undone = 0
            target = current
            for index in range(len(migrations) - 1, -1, -1):
                if undone >= n:
                    break
                migration = migrations[index]
                if migration.version > current or migration.down is None:
                    continue

                if index > 0:
                    previous = migrations[index - 1]
                    target, description = previous.version, previous.description
                else:
                    target, description = 0, ""

                logger.info(
                    f"Reverting migration {migration.version}: {migration.description}"
                )
                try:
                    migration.down(self.db)
                    self._set_version(target, description)
                except Exception as e:
                    logger.error(f"Migration {migration.version} down failed: {e}")
                    raise

                undone += 1
                self._printf("Migrated DOWN: %d %s", migration.version, migration.description)

        if undone:
            logger.info(f"Reverted {undone} migration(s), now at version {target}")
        else:
            logger.debug(f"Database at version {current}, no migrations to revert")
        return undone

    def get_migrations(self) -> list[Migration]:
        """Get registered migrations sorted by version."""
        return self.registry.sorted()

    def get_pending_migrations(self) -> list[Migration]:
        """Get migrations up() would apply from the current version."""
        current, _ = self.version()
        return [
            m for m in self.registry.sorted() if m.version > current and m.up is not None
        ]

    def get_latest_version(self) -> int:
        """Get the highest version reachable with up().

        Returns:
            Highest version among migrations with an "up" action, or 0.
        """
        return max((m.version for m in self.registry if m.up is not None), default=0)

    def is_up_to_date(self) -> bool:
        """Check if no "up" migration is newer than the current version."""
        current, _ = self.version()
        return current >= self.get_latest_version()

    def history(self) -> list[VersionRecord]:
        """Get every recorded version, oldest first."""
        with self._deadline():
            return self._store.records(self.migrations_collection)

    def _version(self) -> tuple[int, str]:
        self._store.create_collection_if_absent(self.migrations_collection)
        record = self._store.most_recent_record(self.migrations_collection)
        if record is None:
            return 0, ""
        return record.version, record.description

    def _set_version(self, version: int, description: str) -> None:
        record = VersionRecord(version=version, description=description)
        self._store.append_record(self.migrations_collection, record)

    def _deadline(self) -> AbstractContextManager[Any]:
        """Client-side deadline shared by every driver call in the block."""
        if self.timeout is None:
            return nullcontext()
        return pymongo.timeout(self.timeout)

    def _printf(self, msg: str, *args: Any) -> None:
        self._log.printf(msg, *args)

    @staticmethod
    def _clamp(n: int, total: int) -> int:
        if n <= 0 or n > total:
            return total
        return n
