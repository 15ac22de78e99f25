"""Module: scene_node.py

Author: Michael Economou
Date: 2026-10-12

Scene node handles.

Nodes belong to the host document. The rename engine reads them and may
reassign `name`; it never creates, reparents or deletes nodes. Host adapters
only need to satisfy SceneNodeLike; SceneNode is the concrete handle used by
the JSON document adapter and the tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SceneNodeLike(Protocol):
    """Minimal surface of a host scene node."""

    id: str
    name: str
    type: str
    locked: bool
    visible: bool


@dataclass
class Paint:
    """A single fill entry (only what naming strategies look at)."""

    type: str  # SOLID, IMAGE, VIDEO, GRADIENT_LINEAR...
    visible: bool = True


@dataclass(eq=False)
class SceneNode:
    """Mutable scene node handle.

    Attributes:
        id: Opaque stable identifier assigned by the host.
        name: Layer name, the only field the engine writes.
        type: Node kind tag (see domain.node_types).
        locked / visible: Layer panel state.
        children: Child nodes for container kinds, None for leaves.
        auto_rename: TEXT only, name follows the text content.
        characters: TEXT only, text content.
        boolean_operation: BOOLEAN_OPERATION only (UNION, INTERSECT...).
        layout_mode: Auto-layout direction (NONE, HORIZONTAL, VERTICAL, GRID).
        layout_wrap: NO_WRAP or WRAP for horizontal auto-layout.
        item_spacing / counter_axis_spacing: Auto-layout gaps.
        fills: Fill paints.
        extra: Any other host fields, carried through untouched.
    """

    id: str
    name: str
    type: str
    locked: bool = False
    visible: bool = True
    children: list[SceneNode] | None = None
    auto_rename: bool = False
    characters: str | None = None
    boolean_operation: str | None = None
    layout_mode: str | None = None
    layout_wrap: str | None = None
    item_spacing: float | None = None
    counter_axis_spacing: float | None = None
    fills: list[Paint] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def __repr__(self) -> str:
        return f"SceneNode(id={self.id!r}, type={self.type!r}, name={self.name!r})"


def has_children(node: Any) -> bool:
    """True for container nodes that carry a children sequence (possibly empty)."""
    return isinstance(getattr(node, "children", None), Sequence)


def iter_children(node: Any) -> Sequence[Any]:
    children = getattr(node, "children", None)
    return children if isinstance(children, Sequence) else ()
