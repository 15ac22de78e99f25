"""Module: settings_store.py

Author: Michael Economou
Date: 2026-10-15

Async JSON settings store.

Each slot holds one flat record (the rename options live under
"allOptions"). All slots share a single settings.json file:

    {
      "allOptions": {"locked": false, ...},
      "_metadata": {"last_saved": "...", "version": "v0.4.0", "app_name": "autolayername"}
    }

File access goes through aiofiles so loading and saving never block the
event loop the rename run shares with the host.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any

import aiofiles

from autolayername.config import APP_NAME, APP_VERSION, SETTINGS_FILENAME
from autolayername.domain.errors import SettingsError
from autolayername.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_METADATA_KEY = "_metadata"


class SettingsStore:
    """Loads and saves flat option records by slot name."""

    def __init__(self, config_dir: str | Path | None = None, app_name: str = APP_NAME):
        if config_dir is None:
            from autolayername.utils.paths import AppPaths

            config_dir = AppPaths.get_user_data_dir()

        self.app_name = app_name
        self.config_dir = Path(config_dir)
        self.settings_file = self.config_dir / SETTINGS_FILENAME
        self.backup_file = self.config_dir / f"{SETTINGS_FILENAME}.bak"
        self._lock = asyncio.Lock()

    async def _read_all(self) -> dict[str, Any]:
        if not self.settings_file.exists():
            return {}

        try:
            async with aiofiles.open(self.settings_file, encoding="utf-8") as f:
                raw = await f.read()
            data = json.loads(raw)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("[SettingsStore] Ignoring unreadable settings file %s: %s", self.settings_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("[SettingsStore] Settings file %s is not a JSON object", self.settings_file)
            return {}
        return data

    async def load(self, defaults: dict[str, Any], slot: str) -> dict[str, Any]:
        """Return defaults overlaid with the stored record for slot.

        Missing or unreadable files and missing slots give a copy of defaults.
        """
        async with self._lock:
            data = await self._read_all()

        record = dict(defaults)
        stored = data.get(slot)
        if isinstance(stored, dict):
            record.update(stored)
            logger.debug("[SettingsStore] Loaded slot '%s'", slot, extra={"dev_only": True})
        else:
            logger.debug("[SettingsStore] No stored slot '%s', using defaults", slot, extra={"dev_only": True})
        return record

    async def save(self, record: dict[str, Any], slot: str) -> None:
        """Store record under slot, keeping the other slots.

        Raises:
            SettingsError: The file could not be written
        """
        async with self._lock:
            data = await self._read_all()
            data[slot] = dict(record)
            data[_METADATA_KEY] = {
                "last_saved": datetime.now().isoformat(),
                "version": f"v{APP_VERSION}",
                "app_name": self.app_name,
            }

            try:
                payload = json.dumps(data, indent=2, ensure_ascii=False)
                self.config_dir.mkdir(parents=True, exist_ok=True)
                if self.settings_file.exists():
                    shutil.copy2(self.settings_file, self.backup_file)
                async with aiofiles.open(self.settings_file, "w", encoding="utf-8") as f:
                    await f.write(payload)
            except (OSError, TypeError) as e:
                raise SettingsError(
                    f"Failed to save settings: {e}", {"slot": slot, "path": str(self.settings_file)}
                ) from e

        logger.debug("[SettingsStore] Saved slot '%s'", slot)
