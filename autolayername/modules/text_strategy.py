"""Module: text_strategy.py

Author: Michael Economou
Date: 2026-10-13

Resets text layers to the default "text" name.
"""

from autolayername.domain.name_classifier import TEXT_DEFAULT_NAME
from autolayername.domain.node_types import NodeKind
from autolayername.modules.base_strategy import BaseNamingStrategy


class TextStrategy(BaseNamingStrategy):
    DISPLAY_NAME = "Text"
    DESCRIPTION = "text"

    def applies_to(self, node) -> bool:
        return node.type == NodeKind.TEXT

    def generate(self, node, options) -> str:
        return self.format(TEXT_DEFAULT_NAME, options)
