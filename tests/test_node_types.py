"""
Module: test_node_types.py

Author: Michael Economou
Date: 2026-10-16

Tests for the closed node kind set.
"""

import pytest

from autolayername.domain.errors import UnknownNodeKindError
from autolayername.domain.node_types import (
    ALL_NODE_KINDS,
    BOOLEAN_OPERATION_LABELS,
    NodeKind,
    is_valid_node_kind,
)


def test_there_are_27_node_kinds():
    assert len(ALL_NODE_KINDS) == 27
    assert len(set(ALL_NODE_KINDS)) == 27


@pytest.mark.parametrize("tag", ALL_NODE_KINDS)
def test_every_kind_literal_is_valid(tag):
    assert is_valid_node_kind(tag)


@pytest.mark.parametrize(
    "tag",
    ["frame", "Frame", "FRAME ", "", "DOCUMENT", "PAGE", "Union", "BOOLEAN", "TEXT_NODE"],
)
def test_unknown_or_miscased_tags_are_rejected(tag):
    assert not is_valid_node_kind(tag)


def test_non_string_tags_are_rejected_without_raising():
    assert not is_valid_node_kind(None)
    assert not is_valid_node_kind(42)
    assert not is_valid_node_kind(["FRAME"])


def test_enum_members_are_valid_tags():
    assert is_valid_node_kind(NodeKind.INSTANCE)
    assert NodeKind.TEXT == "TEXT"


def test_boolean_labels_are_not_node_kinds():
    assert BOOLEAN_OPERATION_LABELS == ("Union", "Intersect", "Subtract", "Exclude")
    for label in BOOLEAN_OPERATION_LABELS:
        assert not is_valid_node_kind(label)


def test_parse_accepts_known_kind():
    assert NodeKind.parse("WASHI_TAPE") is NodeKind.WASHI_TAPE


def test_parse_rejects_unknown_kind():
    with pytest.raises(UnknownNodeKindError) as exc_info:
        NodeKind.parse("SPACER")
    assert exc_info.value.tag == "SPACER"
    assert "SPACER" in str(exc_info.value)
