"""Ordered collection of migrations."""

from __future__ import annotations

from typing import Iterable, Iterator

from loguru import logger

from .core.exceptions import DuplicateMigrationError, MigrationDefinitionError
from .core.types import Migration


class MigrationRegistry:
    """Holds migrations keyed by version.

    Versions must be unique; a repeated version is rejected when it is
    registered. Iteration yields migrations in ascending version order.
    """

    def __init__(self, migrations: Iterable[Migration] = ()):
        self._migrations: dict[int, Migration] = {}
        self.extend(migrations)

    def register(self, migration: Migration) -> None:
        """Add a migration.

        Raises:
            MigrationDefinitionError: If the object is not a Migration.
            DuplicateMigrationError: If the version is already registered.
        """
        if not isinstance(migration, Migration):
            raise MigrationDefinitionError(
                f"Expected Migration, got {type(migration).__name__}"
            )
        if migration.version in self._migrations:
            raise DuplicateMigrationError(migration.version, migration.description)
        self._migrations[migration.version] = migration
        logger.debug(f"Registered {migration!r}")

    def extend(self, migrations: Iterable[Migration]) -> None:
        for migration in migrations:
            self.register(migration)

    def get(self, version: int) -> Migration | None:
        return self._migrations.get(version)

    def sorted(self) -> list[Migration]:
        """Return migrations sorted by ascending version."""
        return sorted(self._migrations.values(), key=lambda m: m.version)

    def latest_version(self) -> int:
        """Highest registered version, or 0 if empty."""
        return max(self._migrations, default=0)

    def __iter__(self) -> Iterator[Migration]:
        return iter(self.sorted())

    def __len__(self) -> int:
        return len(self._migrations)

    def __contains__(self, version: object) -> bool:
        return version in self._migrations
