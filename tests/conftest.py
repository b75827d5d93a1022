"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from mongomigrate import Migrate, Migration
from tests.fakes import ActionSpy, InMemoryHistoryStore, RecordingLogger


@pytest.fixture
def db() -> MagicMock:
    """Provide a stand-in database handle passed to migration actions."""
    return MagicMock(name="db")


@pytest.fixture
def store() -> InMemoryHistoryStore:
    """Provide an empty in-memory history store."""
    return InMemoryHistoryStore()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a logger that keeps every message."""
    return RecordingLogger()


@pytest.fixture
def actions() -> dict[str, ActionSpy]:
    """Provide spies A/B/C for up and a/b/c for down."""
    return {name: ActionSpy(name) for name in ("A", "B", "C", "a", "b", "c")}


@pytest.fixture
def two_migrations(actions: dict[str, ActionSpy]) -> list[Migration]:
    """Provide migrations 1 and 2, each with both actions."""
    return [
        Migration(1, "first", actions["A"], actions["a"]),
        Migration(2, "second", actions["B"], actions["b"]),
    ]


@pytest.fixture
def migrate(
    db: MagicMock,
    store: InMemoryHistoryStore,
    recording_logger: RecordingLogger,
    two_migrations: list[Migration],
) -> Migrate:
    """Provide a Migrate over two_migrations backed by the in-memory store."""
    return Migrate(db, *two_migrations, store=store, log=recording_logger)
