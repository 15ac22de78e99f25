"""Module: name_classifier.py

Author: Michael Economou
Date: 2026-10-12

Decides whether a layer name was generated automatically.

A name counts as generated when the host editor assigned it on creation
("Rectangle", "Frame 12", "Union") or when one of our own naming strategies
produced it ("row-[8]", "boolean-union"). Generated names may be overwritten;
anything else is treated as hand-written and left alone unless the caller
opts into renaming custom names.

All patterns are compiled once at import.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from autolayername.domain.node_types import (
    ALL_NODE_KINDS,
    BOOLEAN_OPERATION_LABELS,
    NodeKind,
    is_valid_node_kind,
)
from autolayername.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from autolayername.models.scene_node import SceneNodeLike

logger = get_cached_logger(__name__)

# Tokens emitted by the bundled naming strategies
PLUGIN_GENERATED_NAMES: tuple[str, ...] = (
    "group",
    "frame",
    "grid",
    "row",
    "col",
    "video",
    "image",
    "boolean-union",
    "boolean-subtract",
    "boolean-intersect",
    "boolean-exclude",
)

TEXT_DEFAULT_NAME = "text"

_HOST_NAME_PATTERN = re.compile(
    "({})".format("|".join(map(re.escape, ALL_NODE_KINDS + BOOLEAN_OPERATION_LABELS))),
    re.IGNORECASE,
)

# "Rectangle 2", "Component 14": one token, one space, a number
_NAME_WITH_NUMBER_PATTERN = re.compile(r"\S+\s[0-9]+")

# Optional index suffix: "-[3]" or "-[2, 5]"
_PLUGIN_NAME_PATTERN = re.compile(
    r"({})(-\[[0-9]+(?:,\s*[0-9]+)?\])?".format("|".join(map(re.escape, PLUGIN_GENERATED_NAMES)))
)

_COMPONENT_KINDS = frozenset({NodeKind.COMPONENT.value, NodeKind.COMPONENT_SET.value})


def is_host_generated_name(name: str) -> bool:
    """Return True for names the host editor assigns on its own.

    Matches any node kind literal or boolean operation label regardless of
    case, and any "<token> <number>" name. The second clause is deliberately
    broad: "Sprint 3" matches too.
    """
    return bool(_HOST_NAME_PATTERN.fullmatch(name) or _NAME_WITH_NUMBER_PATTERN.fullmatch(name))


def is_plugin_generated_name(name: str) -> bool:
    """Return True for names produced by the bundled naming strategies."""
    return _PLUGIN_NAME_PATTERN.fullmatch(name) is not None


def is_host_or_plugin_generated_name(node: SceneNodeLike) -> bool:
    """Return True if the node's current name may be overwritten.

    Args:
        node: Scene node handle (only type, name and auto_rename are read)

    Returns:
        bool: False for hand-written names and for unknown node kinds
    """
    name = node.name
    kind = node.type

    if not is_valid_node_kind(kind):
        logger.warning("[NameClassifier] Unknown node type %r on node %s", kind, getattr(node, "id", "?"))
        return False

    # Text layers follow their content while auto_rename is on
    if kind == NodeKind.TEXT:
        return bool(getattr(node, "auto_rename", False)) or name == TEXT_DEFAULT_NAME

    if kind in _COMPONENT_KINDS:
        return _NAME_WITH_NUMBER_PATTERN.fullmatch(name) is not None

    if is_host_generated_name(name):
        return True

    return is_plugin_generated_name(name)
