"""MongoDB-backed version history for mongomigrate."""

from __future__ import annotations

from loguru import logger
from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.errors import OperationFailure

from ..core.types import CollectionSpecification, VersionRecord

# Server error code for "create" on an existing namespace
NAMESPACE_EXISTS = 48


class MongoHistoryStore:
    """Reads and appends version records in a MongoDB collection.

    Driver errors are not caught or wrapped; they propagate to the caller
    as raised by pymongo.
    """

    def __init__(self, db: Database):
        """Initialize with database handle.

        Args:
            db: pymongo Database holding the history collection.
        """
        self.db = db

    def list_collections(self) -> list[CollectionSpecification]:
        """Get plain collections of the database.

        Returns:
            CollectionSpecification for every collection; views and
            time-series collections are skipped.
        """
        collections = []
        with self.db.list_collections(filter={}) as cursor:
            for document in cursor:
                spec = CollectionSpecification(
                    name=document.get("name", ""),
                    type=document.get("type") or "",
                )
                if spec.is_collection:
                    collections.append(spec)
        return collections

    def collection_exists(self, name: str) -> bool:
        return any(spec.name == name for spec in self.list_collections())

    def create_collection_if_absent(self, name: str) -> None:
        """Create the collection unless it already exists.

        Safe to call repeatedly. Losing a creation race to another client
        counts as success.
        """
        if self.collection_exists(name):
            return

        logger.debug(f"Creating history collection {name!r}")
        try:
            self.db.command({"create": name})
        except OperationFailure as e:
            if e.code != NAMESPACE_EXISTS:
                raise
            logger.debug(f"History collection {name!r} created concurrently")

    def append_record(self, name: str, record: VersionRecord) -> None:
        self.db[name].insert_one(record.to_document())
        logger.debug(f"Recorded version {record.version} in {name!r}")

    def most_recent_record(self, name: str) -> VersionRecord | None:
        """Get the record with the greatest _id.

        Returns:
            The latest inserted VersionRecord, None if the collection is empty.
        """
        document = self.db[name].find_one({}, sort=[("_id", DESCENDING)])
        if document is None:
            return None
        return VersionRecord.from_document(document)

    def records(self, name: str) -> list[VersionRecord]:
        """Get the full history, oldest first."""
        cursor = self.db[name].find({}).sort("_id", ASCENDING)
        return [VersionRecord.from_document(document) for document in cursor]
