"""Module: boolean_operation_strategy.py

Author: Michael Economou
Date: 2026-10-13

Names boolean operation layers after their operation: boolean-union,
boolean-subtract, boolean-intersect, boolean-exclude.
"""

from autolayername.domain.errors import NamingStrategyError
from autolayername.domain.node_types import NodeKind
from autolayername.modules.base_strategy import BaseNamingStrategy

_OPERATIONS = frozenset({"UNION", "SUBTRACT", "INTERSECT", "EXCLUDE"})


class BooleanOperationStrategy(BaseNamingStrategy):
    DISPLAY_NAME = "Boolean Operation"
    DESCRIPTION = "boolean-<operation> for boolean groups"

    def applies_to(self, node) -> bool:
        return node.type == NodeKind.BOOLEAN_OPERATION

    def generate(self, node, options) -> str:
        operation = str(getattr(node, "boolean_operation", "") or "").upper()
        if operation not in _OPERATIONS:
            raise NamingStrategyError(
                f"Unsupported boolean operation {operation or None!r}", node_id=node.id
            )
        return self.format(f"boolean-{operation.lower()}", options)
