"""Protocol definitions for mongomigrate.

The orchestrator depends on these interfaces rather than on pymongo
directly, so tests can substitute in-memory fakes.

Example:
    class MyStore:
        def collection_exists(self, name: str) -> bool: ...
        def create_collection_if_absent(self, name: str) -> None: ...
        def append_record(self, name: str, record: VersionRecord) -> None: ...
        def most_recent_record(self, name: str) -> VersionRecord | None: ...
        def records(self, name: str) -> list[VersionRecord]: ...

    migrate = Migrate(db, *migrations, store=MyStore())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .core.types import VersionRecord


@runtime_checkable
class HistoryStoreProtocol(Protocol):
    """Storage for the append-only version history."""

    def collection_exists(self, name: str) -> bool:
        """Return True if a plain collection with this name exists."""
        ...

    def create_collection_if_absent(self, name: str) -> None:
        """Create the collection unless it already exists."""
        ...

    def append_record(self, name: str, record: VersionRecord) -> None:
        """Insert one version record."""
        ...

    def most_recent_record(self, name: str) -> VersionRecord | None:
        """Return the last inserted record, or None if there is none."""
        ...

    def records(self, name: str) -> list[VersionRecord]:
        """Return every record in insertion order."""
        ...


@runtime_checkable
class MigrationLogger(Protocol):
    """Receives progress messages from the orchestrator."""

    def printf(self, msg: str, *args: Any) -> None:
        """Format msg with args (printf style) and emit it."""
        ...
