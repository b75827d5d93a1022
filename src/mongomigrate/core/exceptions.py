"""Custom exceptions for mongomigrate.

Errors raised by the MongoDB driver and by migration actions are never
wrapped; they reach the caller unchanged. The classes below only cover
misuse detected before the database is touched.
"""


class MigrateError(Exception):
    """Base exception for all mongomigrate errors."""

    pass


class MigrationDefinitionError(MigrateError):
    """Migration definition is invalid."""

    pass


class DuplicateMigrationError(MigrationDefinitionError):
    """Two migrations share the same version."""

    def __init__(self, version: int, description: str = ""):
        """Initialize exception with the repeated version.

        Args:
            version: Version number registered more than once.
            description: Description of the rejected migration.
        """
        self.version = version
        self.description = description
        super().__init__(f"Duplicate migration version: {version}")


class InvalidVersionError(MigrateError):
    """Version number cannot be stored in the history collection."""

    pass


class ConfigError(MigrateError):
    """Configuration value could not be parsed."""

    pass
