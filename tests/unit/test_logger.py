"""Tests for orchestrator progress loggers."""

import pytest
from loguru import logger

from mongomigrate.logger import LoguruLogger, NullLogger
from mongomigrate.protocols import MigrationLogger


@pytest.fixture
def captured():
    """Capture loguru messages emitted during the test."""
    messages: list = []
    handler_id = logger.add(messages.append, format="{level} {message}")
    yield messages
    logger.remove(handler_id)


def test_loggers_satisfy_protocol():
    assert isinstance(NullLogger(), MigrationLogger)
    assert isinstance(LoguruLogger(), MigrationLogger)


def test_null_logger_discards():
    assert NullLogger().printf("Migrated UP: %d %s", 1, "x") is None


def test_loguru_logger_formats_printf_style(captured):
    LoguruLogger().printf("Migrated UP: %d %s", 3, "add index")

    assert [m.strip() for m in captured] == ["INFO Migrated UP: 3 add index"]


def test_loguru_logger_level(captured):
    LoguruLogger(level="WARNING").printf("Migrated DOWN: %d %s", 2, "{braces}")

    assert [m.strip() for m in captured] == ["WARNING Migrated DOWN: 2 {braces}"]
