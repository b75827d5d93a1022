"""Type definitions for mongomigrate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Optional

from bson.int64 import Int64

from .exceptions import MigrationDefinitionError

if TYPE_CHECKING:
    from pymongo.database import Database

ALL_AVAILABLE = -1
"""Step count meaning "every eligible migration" for up() and down()."""

MAX_VERSION = 2**63 - 1
"""Largest version a BSON long can hold."""

MigrationAction = Callable[["Database"], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Migration:
    """A reversible database migration.

    Attributes:
        version: Strictly positive version number, unique per registry.
        description: Human-readable description.
        up: Forward action, or None when there is nothing to apply.
        down: Backward action, or None when the step cannot be undone.
    """

    version: int
    description: str = ""
    up: Optional[MigrationAction] = field(default=None, compare=False)
    down: Optional[MigrationAction] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.version, bool) or not isinstance(self.version, int):
            raise MigrationDefinitionError(
                f"Migration version must be an int, got {type(self.version).__name__}"
            )
        if not 0 < self.version <= MAX_VERSION:
            raise MigrationDefinitionError(
                f"Migration version out of range: {self.version}"
            )
        for name in ("up", "down"):
            action = getattr(self, name)
            if action is not None and not callable(action):
                raise MigrationDefinitionError(
                    f"Migration {self.version} {name} action is not callable"
                )

    def __repr__(self) -> str:
        return f"Migration({self.version}, {self.description!r})"


@dataclass(frozen=True)
class VersionRecord:
    """One entry of the append-only version history.

    Attributes:
        version: Database version after the step.
        description: Description of the migration the version belongs to.
        timestamp: UTC time the record was written.
    """

    version: int
    description: str = ""
    timestamp: datetime = field(default_factory=_utcnow)

    def to_document(self) -> dict[str, Any]:
        """Convert to a BSON-ready document.

        The description key is omitted when empty.
        """
        document: dict[str, Any] = {"version": Int64(self.version)}
        if self.description:
            document["description"] = self.description
        document["timestamp"] = self.timestamp
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> VersionRecord:
        """Build a record from a stored document."""
        timestamp = document.get("timestamp")
        if timestamp is None:
            timestamp = _utcnow()
        elif timestamp.tzinfo is None:
            # pymongo decodes naive UTC datetimes unless tz_aware is set
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return cls(
            version=int(document.get("version", 0)),
            description=document.get("description") or "",
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class CollectionSpecification:
    """Entry returned by listCollections."""

    name: str
    type: str = ""

    @property
    def is_collection(self) -> bool:
        """True for plain collections; views and time-series are excluded."""
        return not self.type or self.type == "collection"
