"""Progress loggers for the migration orchestrator."""

from __future__ import annotations

from typing import Any

from loguru import logger


class NullLogger:
    """Discards every message."""

    def printf(self, msg: str, *args: Any) -> None:
        pass


class LoguruLogger:
    """Forwards progress messages to loguru.

    Example:
        migrate.set_logger(LoguruLogger())
    """

    def __init__(self, level: str = "INFO"):
        """Initialize with the loguru level used for every message.

        Args:
            level: Loguru level name, e.g. "INFO" or "SUCCESS".
        """
        self.level = level

    def printf(self, msg: str, *args: Any) -> None:
        text = msg % args if args else msg
        # depth=1 attributes the record to the orchestrator, not this adapter
        logger.opt(depth=1).log(self.level, text)
