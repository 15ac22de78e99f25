"""autolayername.core.rename.data_classes.

Bookkeeping for a single rename run.

Author: Michael Economou
Date: 2026-10-14
"""

import time
from dataclasses import dataclass, field
from enum import Enum


class SkipReason(Enum):
    """Why a visited node was left alone."""

    LOCKED = "locked"
    HIDDEN = "hidden"
    INSTANCE = "instance"
    CUSTOM_NAME = "custom_name"


@dataclass
class RenameRunStats:
    """Counters collected while walking a selection.

    Attributes:
        roots: Number of selection roots handed to the run.
        batches: Number of root batches processed.
        visited: Nodes that reached a rename attempt.
        renamed: Nodes whose name actually changed.
        unchanged: Eligible nodes whose proposed name equalled the current one.
        failed: Nodes whose rename attempt raised.
        skipped: Per-reason skip counters.
        failed_ids: Identifiers of failed nodes, in completion order.
        started_at / finished_at: Unix timestamps.
    """

    roots: int = 0
    batches: int = 0
    visited: int = 0
    renamed: int = 0
    unchanged: int = 0
    failed: int = 0
    skipped: dict[SkipReason, int] = field(default_factory=dict)
    failed_ids: list[str] = field(default_factory=list)
    started_at: float = field(default_factory=time.time)
    finished_at: float | None = None

    def record_skip(self, reason: SkipReason) -> None:
        self.skipped[reason] = self.skipped.get(reason, 0) + 1

    def record_failure(self, node_id: str) -> None:
        self.failed += 1
        self.failed_ids.append(node_id)

    @property
    def skipped_count(self) -> int:
        return sum(self.skipped.values())

    @property
    def elapsed(self) -> float:
        end = self.finished_at if self.finished_at is not None else time.time()
        return end - self.started_at

    def finish(self) -> None:
        self.finished_at = time.time()

    def summary(self) -> str:
        skipped = ", ".join(f"{r.value}={n}" for r, n in sorted(self.skipped.items(), key=lambda i: i[0].value))
        return (
            f"roots={self.roots} batches={self.batches} visited={self.visited} "
            f"renamed={self.renamed} unchanged={self.unchanged} failed={self.failed} "
            f"skipped={self.skipped_count}" + (f" ({skipped})" if skipped else "") + f" in {self.elapsed:.3f}s"
        )
