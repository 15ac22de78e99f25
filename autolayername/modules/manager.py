"""Module: manager.py

Author: Michael Economou
Date: 2026-10-13

NamingStrategyManager - turns a node and the run options into a proposed name.

Strategies are tried in registration order and the first one that applies
produces the name. Nodes no strategy applies to keep their current name, which
the orchestrator treats as "nothing to do".
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from autolayername.domain.errors import NamingStrategyError
from autolayername.modules.auto_layout_strategy import AutoLayoutStrategy
from autolayername.modules.base_strategy import BaseNamingStrategy
from autolayername.modules.boolean_operation_strategy import BooleanOperationStrategy
from autolayername.modules.container_strategy import ContainerStrategy
from autolayername.modules.media_fill_strategy import MediaFillStrategy
from autolayername.modules.text_strategy import TextStrategy
from autolayername.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from autolayername.models.rename_options import RenameOptions

logger = get_cached_logger(__name__)


def default_strategies() -> list[BaseNamingStrategy]:
    """Bundled strategies, most specific first."""
    return [
        BooleanOperationStrategy(),
        MediaFillStrategy(),
        AutoLayoutStrategy(),
        ContainerStrategy(),
        TextStrategy(),
    ]


class NamingStrategyManager:
    """Ordered collection of naming strategies."""

    def __init__(self, strategies: list[BaseNamingStrategy] | None = None) -> None:
        self._strategies: list[BaseNamingStrategy] = (
            list(strategies) if strategies is not None else default_strategies()
        )

    @property
    def strategies(self) -> tuple[BaseNamingStrategy, ...]:
        return tuple(self._strategies)

    def register(self, strategy: BaseNamingStrategy, first: bool = False) -> None:
        """Add a strategy, ahead of the others when first is True."""
        if first:
            self._strategies.insert(0, strategy)
        else:
            self._strategies.append(strategy)
        logger.debug("[NamingStrategyManager] Registered %r (first=%s)", strategy, first)

    def find_strategy(self, node: Any) -> BaseNamingStrategy | None:
        for strategy in self._strategies:
            if strategy.applies_to(node):
                return strategy
        return None

    async def generate_name(self, node: Any, options: RenameOptions) -> str:
        """Propose a name for node.

        Returns:
            str: The proposed name, or the current name when no strategy applies

        Raises:
            NamingStrategyError: A strategy failed or returned something unusable
        """
        strategy = self.find_strategy(node)
        if strategy is None:
            return node.name

        try:
            result = strategy.generate(node, options)
            if inspect.isawaitable(result):
                result = await result
        except NamingStrategyError:
            raise
        except Exception as e:
            raise NamingStrategyError(
                f"{strategy.__class__.__name__} failed: {e}", node_id=getattr(node, "id", None)
            ) from e

        if not isinstance(result, str) or not result.strip():
            raise NamingStrategyError(
                f"{strategy.__class__.__name__} returned an empty name",
                node_id=getattr(node, "id", None),
            )

        logger.debug(
            "[NamingStrategyManager] %s: %r -> %r (%s)",
            node.id,
            node.name,
            result,
            strategy.DISPLAY_NAME,
            extra={"dev_only": True},
        )
        return result
