"""Module: scene_document.py

Author: Michael Economou
Date: 2026-10-15

JSON adapter for scene documents.

Reads and writes node trees in the key layout of the host's REST export
(camelCase fields, nested "children"). Fields the engine does not model are
kept in SceneNode.extra and written back unchanged.

Document shape:

    {
      "name": "My file",
      "document": {"id": "0:0", "type": "DOCUMENT", "children": [...]},
      "selection": ["12:3", "12:9"]        # optional
    }

Without a "selection" list the top-level children of every page under
"document" are used as the selection.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from autolayername.domain.errors import InvalidDocumentError
from autolayername.models.scene_node import Paint, SceneNode
from autolayername.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# JSON key -> SceneNode attribute
_FIELD_MAP = {
    "autoRename": "auto_rename",
    "characters": "characters",
    "booleanOperation": "boolean_operation",
    "layoutMode": "layout_mode",
    "layoutWrap": "layout_wrap",
    "itemSpacing": "item_spacing",
    "counterAxisSpacing": "counter_axis_spacing",
}
# Raw "fills" also stay in extra and are written back as read
_CORE_KEYS = {"id", "name", "type", "locked", "visible", "children"}

# Container kinds above the scene nodes themselves
_ROOT_TYPES = frozenset({"DOCUMENT", "CANVAS", "PAGE"})


def node_from_dict(data: dict[str, Any]) -> SceneNode:
    """Build a SceneNode tree from its JSON representation.

    Raises:
        InvalidDocumentError: A node lacks id, name or type
    """
    if not isinstance(data, dict):
        raise InvalidDocumentError(f"Node must be a JSON object, got {type(data).__name__}")

    missing = [key for key in ("id", "name", "type") if key not in data]
    if missing:
        raise InvalidDocumentError(
            f"Node is missing {', '.join(missing)}", {"id": data.get("id", "?")}
        )

    children = data.get("children")
    node = SceneNode(
        id=str(data["id"]),
        name=str(data["name"]),
        type=str(data["type"]),
        locked=bool(data.get("locked", False)),
        visible=data.get("visible", True) is not False,
        children=[node_from_dict(child) for child in children] if isinstance(children, list) else None,
        fills=[
            Paint(type=str(fill.get("type", "")), visible=fill.get("visible", True) is not False)
            for fill in data.get("fills") or ()
            if isinstance(fill, dict)
        ],
    )

    for key, attr in _FIELD_MAP.items():
        if key in data:
            setattr(node, attr, data[key])

    node.extra = {k: v for k, v in data.items() if k not in _CORE_KEYS and k not in _FIELD_MAP}
    return node


def node_to_dict(node: SceneNode) -> dict[str, Any]:
    """Serialize a SceneNode tree back to its JSON representation."""
    data: dict[str, Any] = dict(node.extra)
    data.update({"id": node.id, "name": node.name, "type": node.type})
    # Defaults are omitted, as in the host export
    if node.locked:
        data["locked"] = True
    if node.visible is False:
        data["visible"] = False
    if node.fills and "fills" not in data:
        data["fills"] = [{"type": f.type, "visible": f.visible} for f in node.fills]

    for key, attr in _FIELD_MAP.items():
        value = getattr(node, attr)
        if value is not None and (attr != "auto_rename" or value):
            data[key] = value

    if node.children is not None:
        data["children"] = [node_to_dict(child) for child in node.children]
    return data


class SceneDocument:
    """A loaded scene file: the page tree plus the selection to rename."""

    def __init__(self, name: str, pages: list[SceneNode], selection_ids: list[str] | None = None, root: dict[str, Any] | None = None):
        self.name = name
        self.pages = pages
        self.selection_ids = selection_ids
        self._root = root or {"id": "0:0", "name": "Document", "type": "DOCUMENT"}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneDocument:
        if not isinstance(data, dict) or not isinstance(data.get("document"), dict):
            raise InvalidDocumentError("Scene file has no 'document' object")

        root = data["document"]
        pages = []
        for page in root.get("children") or ():
            if not isinstance(page, dict):
                raise InvalidDocumentError("Document children must be JSON objects")
            if page.get("type") in _ROOT_TYPES:
                pages.append(
                    SceneNode(
                        id=str(page.get("id", "")),
                        name=str(page.get("name", "")),
                        type=str(page["type"]),
                        children=[node_from_dict(c) for c in page.get("children") or ()],
                        extra={k: v for k, v in page.items() if k not in _CORE_KEYS},
                    )
                )
            else:
                # Flat documents: scene nodes directly under the root
                pages.append(node_from_dict(page))

        selection = data.get("selection")
        if selection is not None and not (
            isinstance(selection, list) and all(isinstance(i, str) for i in selection)
        ):
            raise InvalidDocumentError("'selection' must be a list of node ids")

        root_meta = {k: v for k, v in root.items() if k != "children"}
        return cls(str(data.get("name", "")), pages, selection, root_meta)

    def to_dict(self) -> dict[str, Any]:
        pages = []
        for page in self.pages:
            if page.type in _ROOT_TYPES:
                page_data = dict(page.extra)
                page_data.update({"id": page.id, "name": page.name, "type": page.type})
                page_data["children"] = [node_to_dict(c) for c in page.children or ()]
                pages.append(page_data)
            else:
                pages.append(node_to_dict(page))

        data: dict[str, Any] = {"name": self.name, "document": dict(self._root, children=pages)}
        if self.selection_ids is not None:
            data["selection"] = list(self.selection_ids)
        return data

    def find(self, node_id: str) -> SceneNode | None:
        for page in self.pages:
            for node in page.walk():
                if node.id == node_id:
                    return node
        return None

    def selection(self) -> list[SceneNode]:
        """Nodes to rename, in selection order."""
        if self.selection_ids is None:
            nodes: list[SceneNode] = []
            for page in self.pages:
                if page.type in _ROOT_TYPES:
                    nodes.extend(page.children or ())
                else:
                    nodes.append(page)
            return nodes

        nodes = []
        for node_id in self.selection_ids:
            node = self.find(node_id)
            if node is None:
                logger.warning("[SceneDocument] Selected node %s not found in document", node_id)
                continue
            nodes.append(node)
        return nodes


def read_document(filename: str | Path) -> SceneDocument:
    """Read a scene document from disk.

    Raises:
        InvalidDocumentError: The file is missing, not JSON or not a scene tree
    """
    try:
        with open(filename, encoding="utf-8") as file:
            raw_data = file.read()
    except OSError as e:
        raise InvalidDocumentError(f"Cannot read {filename}: {e.strerror or e}") from e

    try:
        data = json.loads(raw_data)
    except json.JSONDecodeError:
        raise InvalidDocumentError(f"{os.path.basename(filename)} is not a valid JSON file") from None

    document = SceneDocument.from_dict(data)
    logger.debug(
        "[SceneDocument] Loaded %s (%d pages)", filename, len(document.pages), extra={"dev_only": True}
    )
    return document


def write_document(document: SceneDocument, filename: str | Path) -> None:
    """Write a scene document to disk.

    Raises:
        InvalidDocumentError: The file cannot be written
    """
    payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    try:
        with open(filename, "w", encoding="utf-8") as file:
            file.write(payload)
    except OSError as e:
        raise InvalidDocumentError(f"Cannot write {filename}: {e.strerror or e}") from e
