"""Module: base_strategy.py

Author: Michael Economou
Date: 2026-10-13

Base class for naming strategies.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

from autolayername.modules.logic.token_logic import format_generated_name

if TYPE_CHECKING:
    from autolayername.models.rename_options import RenameOptions


class BaseNamingStrategy:
    """Proposes a layer name for the nodes it applies to.

    Subclasses set DISPLAY_NAME / DESCRIPTION and override applies_to() and
    generate(). generate() may return a string or an awaitable resolving to
    one; it must not modify the node.
    """

    DISPLAY_NAME = "Base"
    DESCRIPTION = ""

    def applies_to(self, node: Any) -> bool:
        raise NotImplementedError

    def generate(self, node: Any, options: RenameOptions) -> str | Awaitable[str]:
        raise NotImplementedError

    @staticmethod
    def format(token: str, options: RenameOptions, indices: tuple[float | None, ...] = ()) -> str:
        return format_generated_name(token, indices, options.use_pascal_case)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
