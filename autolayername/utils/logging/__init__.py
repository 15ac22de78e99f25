"""Logging utilities package.

Logger factory, Unicode-safe helpers and handler setup.
"""

from autolayername.utils.logging.logger_factory import get_cached_logger

__all__ = [
    "get_cached_logger",
]
