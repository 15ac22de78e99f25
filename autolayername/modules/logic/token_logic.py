"""Module: token_logic.py

Author: Michael Economou
Date: 2026-10-13

Builds generated layer names from a token and optional index values.

Output shape matches what the name classifier recognises as our own:
"row", "row-[8]", "grid-[16, 8]". With PascalCase the token part becomes
"Row", "BooleanUnion" and the index suffix is kept as is.
"""

import re
from collections.abc import Iterable

_WORD_SPLIT = re.compile(r"[-_\s]+")


def to_pascal_case(token: str) -> str:
    """Convert a kebab/snake/space separated token to PascalCase."""
    words = [w for w in _WORD_SPLIT.split(token) if w]
    return "".join(w.capitalize() for w in words)


def _format_index(value: float) -> str:
    # Index suffix only allows digits
    return str(max(0, int(round(value))))


def format_generated_name(
    token: str,
    indices: Iterable[float | None] = (),
    use_pascal_case: bool = False,
) -> str:
    """Return token with an optional "-[a]" / "-[a, b]" suffix.

    Args:
        token (str): Lowercase kebab-case token ("row", "boolean-union")
        indices: Up to two numbers; None entries are dropped
        use_pascal_case (bool): Emit "BooleanUnion" instead of "boolean-union"

    Returns:
        str: The generated name
    """
    values = [_format_index(v) for v in indices if v is not None][:2]
    base = to_pascal_case(token) if use_pascal_case else token
    if not values:
        return base
    return f"{base}-[{', '.join(values)}]"
