"""Module: auto_layout_strategy.py

Author: Michael Economou
Date: 2026-10-13

Names auto-layout frames by direction:
- HORIZONTAL -> row
- VERTICAL -> col
- GRID, or HORIZONTAL with wrapping -> grid

With show_spacing the gap is appended: row-[8], grid-[16, 8].
"""

from autolayername.domain.node_types import NodeKind
from autolayername.modules.base_strategy import BaseNamingStrategy


class AutoLayoutStrategy(BaseNamingStrategy):
    DISPLAY_NAME = "Auto Layout"
    DESCRIPTION = "row / col / grid for auto-layout frames"

    @staticmethod
    def _token(node) -> str | None:
        mode = getattr(node, "layout_mode", None)
        if mode == "GRID":
            return "grid"
        if mode == "HORIZONTAL":
            return "grid" if getattr(node, "layout_wrap", None) == "WRAP" else "row"
        if mode == "VERTICAL":
            return "col"
        return None

    def applies_to(self, node) -> bool:
        return node.type == NodeKind.FRAME and self._token(node) is not None

    def generate(self, node, options) -> str:
        token = self._token(node)
        if not options.show_spacing:
            return self.format(token, options)

        item_spacing = getattr(node, "item_spacing", None)
        if token == "grid":
            indices = (item_spacing, getattr(node, "counter_axis_spacing", None))
        else:
            indices = (item_spacing,)
        return self.format(token, options, indices)
