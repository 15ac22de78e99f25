"""Module: plugin_controller.py

Author: Michael Economou
Date: 2026-10-15

PluginController: Connects host events to the rename engine.

Handles the three commands exchanged with the UI panel:
- SELECTION_CHANGED: tell the panel whether anything is selected
- SETTING_OPEN: resize the panel when the settings section toggles
- RENAME: persist the options, run one rename over the selection and
  report the outcome

A RENAME run never raises into the host: any failure outside the per-node
boundary is logged and reported as a single error notification.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from autolayername.config import (
    DEFAULT_RENAME_OPTIONS,
    EVENT_RENAME,
    EVENT_SELECTION_CHANGED,
    EVENT_SETTING_OPEN,
    NOTIFY_NOTHING_TO_RENAME,
    NOTIFY_RENAME_DONE,
    NOTIFY_RENAME_FAILED,
    SETTINGS_SLOT,
    UI_HEIGHT_SETTINGS_CLOSED,
    UI_HEIGHT_SETTINGS_OPEN,
    UI_WIDTH,
)
from autolayername.core.rename.orchestrator import RenameOrchestrator
from autolayername.models.rename_options import RenameOptions, sanitize_options_record
from autolayername.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from autolayername.app.ports.host import HostPort
    from autolayername.infra.settings_store import SettingsStore

logger = get_cached_logger(__name__)


class PluginController:
    """Controller for the plugin command surface.

    Attributes:
        host: Editor-side port (selection, notifications, panel)
        settings_store: Persists the options record between sessions
        orchestrator: Rename engine, notifying per-node failures via the host
    """

    def __init__(
        self,
        host: HostPort,
        settings_store: SettingsStore,
        orchestrator: RenameOrchestrator | None = None,
    ) -> None:
        self.host = host
        self.settings_store = settings_store
        self.orchestrator = orchestrator or RenameOrchestrator(notify=host.notify)
        self._handlers = {
            EVENT_SETTING_OPEN: self.on_setting_open,
            EVENT_RENAME: self.on_rename,
        }

    # -------------------------------------------------------------------------
    # Startup
    # -------------------------------------------------------------------------

    async def start(self) -> dict[str, Any]:
        """Load saved options and open the panel.

        Returns:
            dict: The initial data handed to the panel
        """
        saved_options = await self.load_saved_options()
        data = {
            "savedOptions": saved_options,
            "initialSelection": len(self.host.selection) > 0,
        }
        self.host.show_ui((UI_WIDTH, UI_HEIGHT_SETTINGS_OPEN), data)
        logger.debug("[PluginController] UI shown with %s", data, extra={"dev_only": True})
        return data

    async def load_saved_options(self) -> dict[str, Any]:
        """Saved options record, with invalid values reset to their defaults."""
        saved = await self.settings_store.load(dict(DEFAULT_RENAME_OPTIONS), SETTINGS_SLOT)
        return sanitize_options_record(saved)

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def on_selection_change(self) -> None:
        self.host.emit(EVENT_SELECTION_CHANGED, len(self.host.selection) > 0)

    def on_setting_open(self, setting_open: bool) -> None:
        height = UI_HEIGHT_SETTINGS_OPEN if setting_open else UI_HEIGHT_SETTINGS_CLOSED
        self.host.resize(UI_WIDTH, height)

    async def on_rename(self, received_options: dict[str, Any], persist: bool = True) -> bool:
        """Run one rename over the current selection.

        Args:
            received_options: Options record sent by the panel
            persist: Save the options for the next session

        Returns:
            bool: True if any layer was renamed; False when nothing changed or
            the run failed
        """
        try:
            options = RenameOptions.from_dict(received_options)

            self.host.skip_invisible_instance_children = not (options.instance and options.hidden)

            if persist:
                await self.settings_store.save(options.to_dict(), SETTINGS_SLOT)

            has_renamed = await self.orchestrator.rename_selection(list(self.host.selection), options)

            if has_renamed:
                self.host.notify(NOTIFY_RENAME_DONE)
            else:
                self.host.notify(NOTIFY_NOTHING_TO_RENAME)
            return has_renamed

        except Exception:
            logger.exception("[PluginController] Rename run failed")
            self.host.notify(NOTIFY_RENAME_FAILED, error=True)
            return False

    async def dispatch(self, event: str, payload: Any = None) -> Any:
        """Route a command received from the panel to its handler.

        Raises:
            KeyError: event is not a known command
        """
        handler = self._handlers.get(event)
        if handler is None:
            raise KeyError(f"Unknown event: {event}")

        result = handler(payload)
        if inspect.isawaitable(result):
            return await result
        return result
