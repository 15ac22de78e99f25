"""Module: autolayername.config

Author: Michael Economou
Date: 2026-10-12

Configuration package for the autolayername engine.

Settings are split by concern:
- app: Application info, logging
- rename: Batch size, settings slot, default rename options
- ui: Panel dimensions and notification messages

All settings are re-exported from this module:
    from autolayername.config import APP_NAME, RENAME_BATCH_SIZE
"""

from autolayername.config.app import *  # noqa: F401, F403
from autolayername.config.rename import *  # noqa: F401, F403
from autolayername.config.ui import *  # noqa: F401, F403
