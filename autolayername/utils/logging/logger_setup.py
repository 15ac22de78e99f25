"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-12

Root logger configuration for command-line and embedded use.

INFO and higher go to the console (dev-only records filtered out); when file
logging is enabled, a rotating file under the logs directory receives
everything at LOG_FILE_LEVEL and above.
"""

import contextlib
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from autolayername.config import (
    LOG_CONSOLE_FORMAT,
    LOG_CONSOLE_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from autolayername.utils.logging.logger_factory import get_cached_logger
from autolayername.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Attach console and optional rotating file handlers to the root logger."""

    def __init__(
        self,
        log_name: str = "autolayername",
        log_dir: str | Path | None = None,
        console_level: str | int = LOG_CONSOLE_LEVEL,
        to_file: bool = LOG_TO_FILE,
    ):
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels

        if self.logger.hasHandlers():
            return

        if LOG_TO_CONSOLE:
            self._setup_console_handler(_level(console_level))

        if to_file:
            if log_dir is None:
                from autolayername.utils.paths import AppPaths

                log_dir = AppPaths.get_logs_dir()
            log_path = Path(log_dir) / f"{log_name}.log"
            self._setup_file_handler(log_path, _level(LOG_FILE_LEVEL))

    def _setup_console_handler(self, level: int) -> None:
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(LOG_CONSOLE_FORMAT))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(self, log_path: Path, level: int) -> None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(file_handler)


def _level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, value.upper(), logging.INFO)


def init_logging(app_name: str = "autolayername", verbose: bool = False, to_file: bool = LOG_TO_FILE) -> logging.Logger:
    """Single entry point for configuring logging.

    Args:
        app_name (str): Base name for log files.
        verbose (bool): Lower the console level to DEBUG.
        to_file (bool): Also write a rotating log file.

    Returns:
        logging.Logger: The application logger.
    """
    ConfigureLogger(
        log_name=app_name,
        console_level=logging.DEBUG if verbose else LOG_CONSOLE_LEVEL,
        to_file=to_file,
    )
    return get_cached_logger(app_name)
