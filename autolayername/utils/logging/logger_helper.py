"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-10-12

Helpers for named loggers that never fail on console encoding.

Functions:
get_logger(name): Returns a logger whose methods are wrapped by safe_log.
safe_text(text): Replaces symbols some consoles cannot encode.
safe_log(logger_func, message): Logs a message, retrying with ASCII on failure.
DevOnlyFilter:
Hides records flagged with extra={"dev_only": True} from the console.
"""

import logging
import re
from functools import partial

from autolayername.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "→": "->",
    "—": "--",
    "–": "-",
    "…": "...",
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode symbols with ASCII equivalents.

    Layer names are user content, so anything else that cannot be encoded
    is escaped rather than dropped.
    """
    replaced = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return replaced.encode("ascii", "backslashreplace").decode("ascii")


def safe_log(logger_func, message: str, *args, **kwargs):
    """Log through logger_func, falling back to ASCII on UnicodeEncodeError."""
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        safe_args = tuple(safe_text(str(arg)) for arg in args)
        logger_func(safe_text(message), *safe_args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Wrap the level methods of logger with safe_log."""
    for method_name in ("debug", "info", "warning", "error", "critical", "exception"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a patched logger that propagates to the root handlers.

    Args:
        name (str): Logger name, usually the caller's __name__

    Returns:
        logging.Logger: Logger with Unicode-safe methods
    """
    logger = logging.getLogger(name or __name__)
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
