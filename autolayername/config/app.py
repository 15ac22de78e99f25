"""Module: autolayername.config.app

Author: Michael Economou
Date: 2026-10-12

Application-level configuration: app info, paths and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "autolayername"
APP_VERSION = "0.4.0"
APP_AUTHOR = "Michael Economou"

# Overrides the per-user data directory (settings.json, logs/)
CONFIG_DIR_ENV_VAR = "AUTOLAYERNAME_CONFIG_DIR"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = False
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 5_000_000  # 5MB per file
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
