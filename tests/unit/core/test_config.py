"""Tests for MigrateConfig environment loading."""

import pytest

from mongomigrate.core.config import MigrateConfig
from mongomigrate.core.exceptions import ConfigError


def test_defaults():
    config = MigrateConfig()

    assert config.migrations_collection == "migrations"
    assert config.timeout is None


def test_from_env_overrides(monkeypatch):
    """Environment variables should override defaults."""
    monkeypatch.setenv("MONGOMIGRATE_COLLECTION", "schema_versions")
    monkeypatch.setenv("MONGOMIGRATE_TIMEOUT", "12.5")
    monkeypatch.setenv("MONGODB_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("MONGODB_DATABASE", "orders")

    config = MigrateConfig.from_env()

    assert config.migrations_collection == "schema_versions"
    assert config.timeout == 12.5
    assert config.uri == "mongodb://db.internal:27017"
    assert config.database == "orders"


def test_from_env_without_variables(monkeypatch):
    for name in (
        "MONGOMIGRATE_COLLECTION",
        "MONGOMIGRATE_TIMEOUT",
        "MONGODB_URI",
        "MONGODB_DATABASE",
    ):
        monkeypatch.delenv(name, raising=False)

    assert MigrateConfig.from_env() == MigrateConfig()


def test_non_positive_timeout_disables_deadline(monkeypatch):
    monkeypatch.setenv("MONGOMIGRATE_TIMEOUT", "0")

    assert MigrateConfig.from_env().timeout is None


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("MONGOMIGRATE_TIMEOUT", "soon")

    with pytest.raises(ConfigError, match="MONGOMIGRATE_TIMEOUT"):
        MigrateConfig.from_env()
