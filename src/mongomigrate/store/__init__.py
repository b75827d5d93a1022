"""MongoDB storage for mongomigrate."""

from .database import connect
from .history import MongoHistoryStore

__all__ = [
    "MongoHistoryStore",
    "connect",
]
