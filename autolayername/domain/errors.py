"""Module: errors.py

Author: Michael Economou
Date: 2026-10-12

Exception hierarchy for autolayername.

None of these are fatal: per-node failures are contained by the rename
orchestrator and run-level failures by the RENAME command handler.
"""

from typing import Any


class AutoLayerNameError(Exception):
    """Base class for all autolayername errors.

    Args:
        message: Human-readable error message
        details: Optional context (node id, slot name, path...)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class UnknownNodeKindError(AutoLayerNameError):
    """Raised by strict parsing paths when a type tag is outside the closed set."""

    def __init__(self, tag: Any):
        super().__init__(f"Unknown node kind: {tag!r}", {"tag": tag})
        self.tag = tag


class NamingStrategyError(AutoLayerNameError):
    """Raised when a naming strategy cannot produce a name for a node."""

    def __init__(self, message: str, node_id: str | None = None):
        super().__init__(message, {"node_id": node_id} if node_id is not None else None)
        self.node_id = node_id


class SettingsError(AutoLayerNameError):
    """Raised when persisted options cannot be written."""


class InvalidDocumentError(AutoLayerNameError):
    """Raised when a scene document file is missing, malformed or not a tree."""
