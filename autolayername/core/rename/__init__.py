"""Rename workflow: tree walking, batching and per-node rename attempts."""

from autolayername.core.rename.data_classes import RenameRunStats, SkipReason
from autolayername.core.rename.orchestrator import NamingCollaborator, RenameOrchestrator

__all__ = ["NamingCollaborator", "RenameOrchestrator", "RenameRunStats", "SkipReason"]
