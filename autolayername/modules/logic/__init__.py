"""Pure formatting logic shared by the naming strategies."""

from autolayername.modules.logic.token_logic import format_generated_name, to_pascal_case

__all__ = ["format_generated_name", "to_pascal_case"]
