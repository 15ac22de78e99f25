"""autolayername.core.rename.orchestrator.

Walks a selection and renames every eligible layer.

Roots are processed in batches: all roots of a batch run concurrently on the
event loop and the orchestrator yields once between batches so the host can
handle pending UI events. Below each root, children are renamed concurrently
as well, so no ordering between siblings is guaranteed.

A failure on one node is logged, reported through the notifier and counted as
"not renamed"; it never stops siblings or later batches.

Author: Michael Economou
Date: 2026-10-14
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from autolayername.config import NOTIFY_LAYER_FAILED, RENAME_BATCH_SIZE
from autolayername.core.rename.data_classes import RenameRunStats, SkipReason
from autolayername.domain.name_classifier import is_host_or_plugin_generated_name
from autolayername.domain.node_types import NodeKind
from autolayername.models.rename_options import RenameOptions
from autolayername.models.scene_node import has_children, iter_children
from autolayername.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

Notifier = Callable[..., Any]


class NamingCollaborator(Protocol):
    """Anything that proposes a name for a node without modifying it."""

    async def generate_name(self, node: Any, options: RenameOptions) -> str: ...


class RenameOrchestrator:
    """Applies a naming collaborator across a selection of scene nodes.

    Args:
        naming_manager: Proposes names (defaults to the bundled strategies)
        notify: Called as notify(message, error=True) for per-node failures
        batch_size: Selection roots processed between two yields
        classifier: Predicate deciding whether a node's name is generated
    """

    def __init__(
        self,
        naming_manager: NamingCollaborator | None = None,
        notify: Notifier | None = None,
        batch_size: int = RENAME_BATCH_SIZE,
        classifier: Callable[[Any], bool] = is_host_or_plugin_generated_name,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")

        if naming_manager is None:
            from autolayername.modules.manager import NamingStrategyManager

            naming_manager = NamingStrategyManager()

        self.naming_manager = naming_manager
        self.notify = notify
        self.batch_size = batch_size
        self.classifier = classifier
        self.last_stats: RenameRunStats | None = None

    async def rename_selection(self, roots: Sequence[Any], options: RenameOptions) -> bool:
        """Rename the selection roots and their descendants.

        Returns:
            bool: True if at least one layer name changed
        """
        stats = RenameRunStats(roots=len(roots))
        has_renamed = False

        logger.debug(
            "[RenameOrchestrator] Starting run: %d roots, batch size %d, options=%s",
            len(roots),
            self.batch_size,
            options,
        )

        for start in range(0, len(roots), self.batch_size):
            batch = roots[start : start + self.batch_size]
            results = await asyncio.gather(
                *(self._rename_node_and_children(node, options, stats) for node in batch)
            )
            stats.batches += 1
            has_renamed = has_renamed or any(results)

            # Let the host process pending events before the next batch
            if start + self.batch_size < len(roots):
                await asyncio.sleep(0)

        stats.finish()
        self.last_stats = stats
        logger.info("[RenameOrchestrator] Run finished: %s", stats.summary())
        return has_renamed

    async def _rename_node_and_children(
        self, node: Any, options: RenameOptions, stats: RenameRunStats
    ) -> bool:
        # Instances are skipped together with their whole subtree
        if node.type == NodeKind.INSTANCE and not options.instance:
            stats.record_skip(SkipReason.INSTANCE)
            return False

        has_renamed = await self.rename_layer(node, options, stats)

        if has_children(node) and (node.type != NodeKind.INSTANCE or options.instance):
            child_results = await asyncio.gather(
                *(self._rename_node_and_children(child, options, stats) for child in iter_children(node))
            )
            has_renamed = has_renamed or any(child_results)

        return has_renamed

    async def rename_layer(
        self, node: Any, options: RenameOptions, stats: RenameRunStats | None = None
    ) -> bool:
        """Rename a single layer if the options and its current name allow it.

        Args:
            stats: Counters of the run this call belongs to

        Returns:
            bool: True if the name was changed
        """
        if stats is None:
            stats = RenameRunStats(roots=1)
        stats.visited += 1
        try:
            reason = self._skip_reason(node, options)
            if reason is not None:
                stats.record_skip(reason)
                return False

            new_name = await self.naming_manager.generate_name(node, options)
            if node.name != new_name:
                logger.debug(
                    "[RenameOrchestrator] %s: %r -> %r", node.id, node.name, new_name,
                    extra={"dev_only": True},
                )
                node.name = new_name
                stats.renamed += 1
                return True

            stats.unchanged += 1
            return False

        except Exception:
            node_id = getattr(node, "id", "?")
            logger.exception("[RenameOrchestrator] Rename failed for node %s", node_id)
            stats.record_failure(node_id)
            self._report_failure(node)
            return False

    def _skip_reason(self, node: Any, options: RenameOptions) -> SkipReason | None:
        if node.locked and not options.locked:
            return SkipReason.LOCKED
        if node.visible is False and not options.hidden:
            return SkipReason.HIDDEN
        if node.type == NodeKind.INSTANCE and not options.instance:
            return SkipReason.INSTANCE
        if not options.rename_custom_names and not self.classifier(node):
            return SkipReason.CUSTOM_NAME
        return None

    def _report_failure(self, node: Any) -> None:
        if self.notify is None:
            return
        try:
            self.notify(NOTIFY_LAYER_FAILED.format(name=getattr(node, "name", "?")), error=True)
        except Exception:
            logger.warning("[RenameOrchestrator] Failure notification could not be delivered", exc_info=True)
