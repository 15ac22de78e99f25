"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-12

Cached logger factory.

Keeps one patched logger per module name so hot paths (one call per scene
node) never rebuild or re-patch loggers.
"""

import logging
import threading

from autolayername.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe cache of patched loggers keyed by name."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create the cached logger for name."""
        name = name or "autolayername"

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def get_cached_names(cls) -> list[str]:
        return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        with cls._lock:
            cls._loggers.clear()


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience wrapper around LoggerFactory.get_logger."""
    return LoggerFactory.get_logger(name)
