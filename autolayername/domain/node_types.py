"""Module: node_types.py

Author: Michael Economou
Date: 2026-10-12

Closed set of scene node kinds.

The kind literals are the type tags the host editor assigns to scene nodes.
Membership is case-sensitive and backed by a frozenset, since the check runs
once per node during tree walks.
"""

from enum import Enum

from autolayername.domain.errors import UnknownNodeKindError


class NodeKind(str, Enum):
    """Scene node type tags."""

    SLICE = "SLICE"
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT_SET = "COMPONENT_SET"
    COMPONENT = "COMPONENT"
    INSTANCE = "INSTANCE"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    VECTOR = "VECTOR"
    STAR = "STAR"
    LINE = "LINE"
    ELLIPSE = "ELLIPSE"
    POLYGON = "POLYGON"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    STICKY = "STICKY"
    CONNECTOR = "CONNECTOR"
    SHAPE_WITH_TEXT = "SHAPE_WITH_TEXT"
    CODE_BLOCK = "CODE_BLOCK"
    STAMP = "STAMP"
    WIDGET = "WIDGET"
    EMBED = "EMBED"
    LINK_UNFURL = "LINK_UNFURL"
    MEDIA = "MEDIA"
    SECTION = "SECTION"
    HIGHLIGHT = "HIGHLIGHT"
    WASHI_TAPE = "WASHI_TAPE"
    TABLE = "TABLE"

    @classmethod
    def parse(cls, tag: str) -> "NodeKind":
        """Strict conversion from a type tag.

        Raises:
            UnknownNodeKindError: tag is not one of the kind literals
        """
        if not is_valid_node_kind(tag):
            raise UnknownNodeKindError(tag)
        return cls(tag)


# Declaration order of the enum, kept as a tuple for pattern building
ALL_NODE_KINDS: tuple[str, ...] = tuple(kind.value for kind in NodeKind)

_VALID_NODE_KINDS: frozenset[str] = frozenset(ALL_NODE_KINDS)

# Names the host gives to boolean operation layers; not node kinds
BOOLEAN_OPERATION_LABELS: tuple[str, ...] = ("Union", "Intersect", "Subtract", "Exclude")


def is_valid_node_kind(tag: object) -> bool:
    """Return True if tag is exactly one of the node kind literals.

    Unknown or non-string tags return False so callers can log and skip.
    """
    return isinstance(tag, str) and tag in _VALID_NODE_KINDS
