"""Test fakes for testing without a MongoDB server.

Example:
    from tests.fakes import InMemoryHistoryStore, RecordingLogger

    store = InMemoryHistoryStore()
    migrate = Migrate(db, *migrations, store=store, log=RecordingLogger())
"""

from .history import (
    ActionSpy,
    InMemoryHistoryStore,
    RecordingLogger,
    StoreFailure,
)

__all__ = [
    "ActionSpy",
    "InMemoryHistoryStore",
    "RecordingLogger",
    "StoreFailure",
]
