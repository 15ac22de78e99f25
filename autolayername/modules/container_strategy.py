"""Module: container_strategy.py

Author: Michael Economou
Date: 2026-10-13

Plain frame and group names, used when nothing more specific applies.
"""

from autolayername.domain.node_types import NodeKind
from autolayername.modules.base_strategy import BaseNamingStrategy

_CONTAINER_TOKENS = {
    NodeKind.FRAME.value: "frame",
    NodeKind.GROUP.value: "group",
}


class ContainerStrategy(BaseNamingStrategy):
    DISPLAY_NAME = "Container"
    DESCRIPTION = "frame / group"

    def applies_to(self, node) -> bool:
        return node.type in _CONTAINER_TOKENS

    def generate(self, node, options) -> str:
        return self.format(_CONTAINER_TOKENS[node.type], options)
