"""
Module: test_scene_document.py

Author: Michael Economou
Date: 2026-10-17

Tests for the JSON scene document adapter.
"""

import json

import pytest

from autolayername.domain.errors import InvalidDocumentError
from autolayername.infra.scene_document import (
    SceneDocument,
    node_from_dict,
    node_to_dict,
    read_document,
    write_document,
)

SAMPLE = {
    "name": "Checkout",
    "document": {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "backgroundColor": {"r": 1, "g": 1, "b": 1, "a": 1},
                "children": [
                    {
                        "id": "1:1",
                        "name": "Frame 1",
                        "type": "FRAME",
                        "layoutMode": "VERTICAL",
                        "itemSpacing": 12,
                        "cornerRadius": 4,
                        "children": [
                            {
                                "id": "1:2",
                                "name": "Rectangle 1",
                                "type": "RECTANGLE",
                                "visible": False,
                                "fills": [{"type": "IMAGE", "visible": True}],
                            },
                            {"id": "1:3", "name": "Price", "type": "TEXT", "characters": "$9", "autoRename": True},
                        ],
                    },
                    {"id": "1:4", "name": "Vector 2", "type": "VECTOR", "locked": True},
                ],
            }
        ],
    },
}


class TestNodeFromDict:
    def test_fields(self):
        node = node_from_dict(SAMPLE["document"]["children"][0]["children"][0])

        assert (node.id, node.name, node.type) == ("1:1", "Frame 1", "FRAME")
        assert node.layout_mode == "VERTICAL"
        assert node.item_spacing == 12
        assert node.extra == {"cornerRadius": 4}

        rect, text = node.children
        assert rect.visible is False
        assert rect.fills[0].type == "IMAGE"
        assert rect.children is None
        assert text.auto_rename is True
        assert text.characters == "$9"

    @pytest.mark.parametrize("missing", ["id", "name", "type"])
    def test_missing_required_key(self, missing):
        data = {"id": "1:1", "name": "Frame 1", "type": "FRAME"}
        del data[missing]
        with pytest.raises(InvalidDocumentError):
            node_from_dict(data)

    def test_not_an_object(self):
        with pytest.raises(InvalidDocumentError):
            node_from_dict(["1:1"])

    def test_to_dict_keeps_unknown_fields(self):
        source = SAMPLE["document"]["children"][0]["children"][0]
        data = node_to_dict(node_from_dict(source))

        assert data["cornerRadius"] == 4
        assert data["layoutMode"] == "VERTICAL"
        assert "autoRename" not in data
        assert data["children"][1]["autoRename"] is True


class TestSceneDocument:
    def test_default_selection_is_page_children(self):
        document = SceneDocument.from_dict(SAMPLE)
        assert [n.id for n in document.selection()] == ["1:1", "1:4"]

    def test_explicit_selection(self):
        document = SceneDocument.from_dict(dict(SAMPLE, selection=["1:3", "1:1"]))
        assert [n.id for n in document.selection()] == ["1:3", "1:1"]

    def test_unknown_selected_id_is_dropped(self):
        document = SceneDocument.from_dict(dict(SAMPLE, selection=["9:9", "1:4"]))
        assert [n.id for n in document.selection()] == ["1:4"]

    def test_flat_document(self):
        document = SceneDocument.from_dict(
            {"document": {"id": "0:0", "type": "DOCUMENT", "children": [{"id": "1:1", "name": "Frame 1", "type": "FRAME"}]}}
        )
        assert [n.id for n in document.selection()] == ["1:1"]

    def test_find(self):
        document = SceneDocument.from_dict(SAMPLE)
        assert document.find("1:2").name == "Rectangle 1"
        assert document.find("nope") is None

    def test_missing_document(self):
        with pytest.raises(InvalidDocumentError):
            SceneDocument.from_dict({"name": "Empty"})

    def test_bad_selection(self):
        with pytest.raises(InvalidDocumentError):
            SceneDocument.from_dict(dict(SAMPLE, selection="1:1"))

    def test_round_trip_preserves_document(self):
        assert SceneDocument.from_dict(SAMPLE).to_dict() == SAMPLE


class TestFiles:
    def test_write_then_read(self, tmp_path):
        document = SceneDocument.from_dict(SAMPLE)
        document.find("1:1").name = "col-[12]"
        path = tmp_path / "scene.json"

        write_document(document, path)

        assert read_document(path).find("1:1").name == "col-[12]"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidDocumentError):
            read_document(tmp_path / "missing.json")

    def test_unwritable_target(self, tmp_path):
        with pytest.raises(InvalidDocumentError, match="Cannot write"):
            write_document(SceneDocument.from_dict(SAMPLE), tmp_path / "no-such-dir" / "scene.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(InvalidDocumentError, match="not a valid JSON file"):
            read_document(path)

    def test_non_ascii_names_survive(self, tmp_path):
        data = json.loads(json.dumps(SAMPLE))
        data["document"]["children"][0]["children"][1]["name"] = "Überschrift"
        path = tmp_path / "scene.json"
        write_document(SceneDocument.from_dict(data), path)

        assert "Überschrift" in path.read_text(encoding="utf-8")
