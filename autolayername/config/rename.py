"""Module: autolayername.config.rename

Author: Michael Economou
Date: 2026-10-12

Rename run settings: batching, persisted settings slot and option defaults.
"""

# =====================================
# ORCHESTRATION
# =====================================

# Selection roots processed before yielding back to the event loop
RENAME_BATCH_SIZE = 50

# =====================================
# PERSISTED OPTIONS
# =====================================

SETTINGS_SLOT = "allOptions"
SETTINGS_FILENAME = "settings.json"

# Keys match the record exchanged with the UI layer
DEFAULT_RENAME_OPTIONS = {
    "locked": False,
    "hidden": False,
    "instance": False,
    "showSpacing": False,
    "renameCustomNames": False,
    "usePascalCase": False,
}
