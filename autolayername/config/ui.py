"""Module: autolayername.config.ui

Author: Michael Economou
Date: 2026-10-12

Command-surface settings: panel size and user-facing notifications.
"""

# =====================================
# PANEL DIMENSIONS
# =====================================

UI_WIDTH = 240
UI_HEIGHT_SETTINGS_OPEN = 262
UI_HEIGHT_SETTINGS_CLOSED = 408

# =====================================
# EVENTS
# =====================================

EVENT_SELECTION_CHANGED = "SELECTION_CHANGED"
EVENT_SETTING_OPEN = "SETTING_OPEN"
EVENT_RENAME = "RENAME"

# =====================================
# NOTIFICATIONS
# =====================================

NOTIFY_RENAME_DONE = "Rename complete"
NOTIFY_NOTHING_TO_RENAME = "No layers to rename"
NOTIFY_RENAME_FAILED = "Something went wrong while renaming"
NOTIFY_LAYER_FAILED = "Failed to rename: {name}"
