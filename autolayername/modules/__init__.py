"""Naming strategies for scene layers.

This package contains small, stateless name generators:
- Each strategy decides whether it applies to a node and proposes a name
- Strategies never mutate nodes; the orchestrator assigns the result
- NamingStrategyManager tries them in order, first match wins

Bundled strategies:
- boolean_operation_strategy: boolean-union, boolean-subtract, ...
- media_fill_strategy: image / video fills
- auto_layout_strategy: row, col, grid with optional spacing index
- container_strategy: frame, group
- text_strategy: text
"""

from autolayername.modules.base_strategy import BaseNamingStrategy
from autolayername.modules.manager import NamingStrategyManager, default_strategies

__all__ = ["BaseNamingStrategy", "NamingStrategyManager", "default_strategies"]
