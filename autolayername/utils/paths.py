"""Module: paths.py

Author: Michael Economou
Date: 2026-10-12

Per-user data locations (settings file, logs).

Platform-specific behavior:
- Windows: %LOCALAPPDATA%/autolayername/
- Linux: $XDG_CONFIG_HOME/autolayername/ or ~/.config/autolayername/
- macOS: ~/Library/Application Support/autolayername/

The AUTOLAYERNAME_CONFIG_DIR environment variable overrides all of the above.
"""

import os
import platform
from pathlib import Path

from autolayername.config import APP_NAME, CONFIG_DIR_ENV_VAR
from autolayername.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AppPaths:
    """Static accessors for application directories, created on first use."""

    _user_data_dir: Path | None = None

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        override = os.environ.get(CONFIG_DIR_ENV_VAR)
        if override:
            return Path(override)

        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local"
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / APP_NAME
        return Path.home() / ".config" / APP_NAME

    @classmethod
    def get_user_data_dir(cls) -> Path:
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()
            logger.debug(
                "[AppPaths] User data directory: %s", cls._user_data_dir, extra={"dev_only": True}
            )

        cls._user_data_dir.mkdir(parents=True, exist_ok=True)
        return cls._user_data_dir

    @classmethod
    def get_logs_dir(cls) -> Path:
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    @classmethod
    def reset(cls) -> None:
        """Forget the cached directory (tests, env var changes)."""
        cls._user_data_dir = None
