"""Controllers wiring host events to the rename engine."""

from autolayername.controllers.plugin_controller import PluginController

__all__ = ["PluginController"]
