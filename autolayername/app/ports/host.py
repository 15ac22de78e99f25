"""Host environment port.

Protocol for the editor hosting the engine: selection access, notifications,
events to the UI panel and panel sizing. Implementations live with the host
integration (a plugin bridge, the CLI's file-backed host, test doubles).

Author: Michael Economou
Date: 2026-10-15
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostPort(Protocol):
    """Protocol for the editor side of the command surface."""

    # When True the host leaves invisible children of instances out of the tree
    skip_invisible_instance_children: bool

    @property
    def selection(self) -> Sequence[Any]:
        """Currently selected top-level nodes, in selection order."""
        ...

    def notify(self, message: str, error: bool = False) -> None:
        """Show a short non-blocking message to the user."""
        ...

    def emit(self, event: str, payload: Any) -> None:
        """Send an event to the UI panel."""
        ...

    def show_ui(self, size: tuple[int, int], data: dict[str, Any]) -> None:
        """Open the UI panel with its initial data."""
        ...

    def resize(self, width: int, height: int) -> None:
        """Resize the UI panel."""
        ...
