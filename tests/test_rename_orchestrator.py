"""
Module: test_rename_orchestrator.py

Author: Michael Economou
Date: 2026-10-17

Tests for RenameOrchestrator: eligibility gates, recursion, batching and
per-node failure containment.
"""

import asyncio

import pytest

from autolayername.core.rename.data_classes import SkipReason
from autolayername.core.rename.orchestrator import RenameOrchestrator
from autolayername.models.rename_options import RenameOptions
from autolayername.models.scene_node import Paint
from tests.mocks import MockHost, RecordingNamingManager, make_node


def run(orchestrator, roots, options=None):
    return asyncio.run(orchestrator.rename_selection(roots, options or RenameOptions()))


class StaticNamingManager:
    """Collaborator that answers without suspending."""

    def __init__(self, name="renamed"):
        self.name = name

    async def generate_name(self, node, options):
        return self.name


class TestEligibility:
    def test_locked_root_is_left_alone(self, naming_manager):
        node = make_node("1:1", "Frame 1", locked=True)
        orchestrator = RenameOrchestrator(naming_manager)

        assert run(orchestrator, [node]) is False
        assert node.name == "Frame 1"
        assert naming_manager.calls == []
        assert orchestrator.last_stats.skipped == {SkipReason.LOCKED: 1}

    def test_locked_option_includes_locked_nodes(self, naming_manager):
        node = make_node("1:1", "Frame 1", locked=True)
        assert run(RenameOrchestrator(naming_manager), [node], RenameOptions(locked=True)) is True
        assert node.name == "frame-name"

    def test_hidden_node_is_skipped_but_children_are_visited(self, naming_manager):
        child = make_node("1:2", "Rectangle 1", "RECTANGLE")
        parent = make_node("1:1", "Frame 1", visible=False, children=[child])

        assert run(RenameOrchestrator(naming_manager), [parent]) is True
        assert parent.name == "Frame 1"
        assert child.name == "rectangle-name"

    def test_hidden_option_includes_hidden_nodes(self, naming_manager):
        node = make_node("1:1", "Frame 1", visible=False)
        assert run(RenameOrchestrator(naming_manager), [node], RenameOptions(hidden=True)) is True

    def test_custom_names_are_kept_by_default(self, naming_manager):
        node = make_node("1:1", "Hero banner")
        orchestrator = RenameOrchestrator(naming_manager)

        assert run(orchestrator, [node]) is False
        assert node.name == "Hero banner"
        assert orchestrator.last_stats.skipped == {SkipReason.CUSTOM_NAME: 1}

    def test_custom_names_option_overwrites_them(self, naming_manager):
        node = make_node("1:1", "Hero banner")
        assert run(RenameOrchestrator(naming_manager), [node], RenameOptions(rename_custom_names=True)) is True
        assert node.name == "frame-name"

    def test_unknown_kind_is_not_renamed(self, naming_manager):
        node = make_node("1:1", "Frame", "SPACER")
        assert run(RenameOrchestrator(naming_manager), [node]) is False
        assert node.name == "Frame"


class TestInstances:
    def test_instance_subtree_is_not_visited(self, naming_manager):
        grandchild = make_node("1:3", "Rectangle 2", "RECTANGLE")
        child = make_node("1:2", "Frame 2", children=[grandchild])
        instance = make_node("1:1", "Button", "INSTANCE", children=[child])
        orchestrator = RenameOrchestrator(naming_manager)

        assert run(orchestrator, [instance]) is False
        assert naming_manager.calls == []
        assert (instance.name, child.name, grandchild.name) == ("Button", "Frame 2", "Rectangle 2")
        assert orchestrator.last_stats.visited == 0

    def test_nested_instance_is_skipped_with_its_subtree(self, naming_manager):
        inner = make_node("1:3", "Rectangle 2", "RECTANGLE")
        instance = make_node("1:2", "Instance", "INSTANCE", children=[inner])
        frame = make_node("1:1", "Frame 1", children=[instance])

        assert run(RenameOrchestrator(naming_manager), [frame]) is True
        assert frame.name == "frame-name"
        assert instance.name == "Instance"
        assert inner.name == "Rectangle 2"

    def test_instance_option_descends(self, naming_manager):
        inner = make_node("1:2", "Rectangle 2", "RECTANGLE")
        instance = make_node("1:1", "Instance", "INSTANCE", children=[inner])

        assert run(RenameOrchestrator(naming_manager), [instance], RenameOptions(instance=True)) is True
        assert instance.name == "instance-name"
        assert inner.name == "rectangle-name"


class TestRecursion:
    def test_deep_tree_any_rename_counts(self, naming_manager):
        leaf = make_node("1:4", "Ellipse 1", "ELLIPSE")
        mid = make_node("1:3", "Checkout form", children=[leaf])
        top = make_node("1:2", "Landing page", children=[mid])

        assert run(RenameOrchestrator(naming_manager), [top]) is True
        assert (top.name, mid.name, leaf.name) == ("Landing page", "Checkout form", "ellipse-name")

    def test_empty_children_list(self, naming_manager):
        node = make_node("1:1", "Frame 1", children=[])
        assert run(RenameOrchestrator(naming_manager), [node]) is True

    def test_empty_selection(self, naming_manager):
        orchestrator = RenameOrchestrator(naming_manager)
        assert run(orchestrator, []) is False
        assert orchestrator.last_stats.batches == 0


class TestFailures:
    def test_always_failing_collaborator_renames_nothing(self):
        host = MockHost()
        nodes = [make_node(f"2:{i}", f"Frame {i}") for i in range(10)]
        orchestrator = RenameOrchestrator(RecordingNamingManager(fail_all=True), notify=host.notify)

        assert run(orchestrator, nodes) is False
        assert [n.name for n in nodes] == [f"Frame {i}" for i in range(10)]
        assert len(host.errors) == 10
        assert orchestrator.last_stats.failed == 10
        assert sorted(orchestrator.last_stats.failed_ids) == sorted(n.id for n in nodes)

    def test_failure_does_not_stop_siblings(self):
        host = MockHost()
        bad = make_node("3:1", "Frame 1")
        good = make_node("3:2", "Frame 2")
        orchestrator = RenameOrchestrator(RecordingNamingManager(fail_ids={"3:1"}), notify=host.notify)

        assert run(orchestrator, [bad, good]) is True
        assert bad.name == "Frame 1"
        assert good.name == "frame-name"
        assert host.errors == ["Failed to rename: Frame 1"]

    def test_failing_notifier_is_contained(self):
        def notify(message, error=False):
            raise RuntimeError("panel closed")

        orchestrator = RenameOrchestrator(RecordingNamingManager(fail_all=True), notify=notify)
        assert run(orchestrator, [make_node("3:1", "Frame 1")]) is False

    def test_name_assignment_failure_is_contained(self, naming_manager):
        class ReadOnlyNode:
            id = "4:1"
            type = "FRAME"
            locked = False
            visible = True

            @property
            def name(self):
                return "Frame 1"

        assert run(RenameOrchestrator(naming_manager), [ReadOnlyNode()]) is False


class TestBatching:
    def test_batches_of_fifty(self, monkeypatch):
        sleeps = []
        original_sleep = asyncio.sleep

        async def recording_sleep(delay, *args, **kwargs):
            sleeps.append(delay)
            return await original_sleep(delay, *args, **kwargs)

        monkeypatch.setattr(asyncio, "sleep", recording_sleep)

        nodes = [make_node(f"5:{i}", f"Frame {i}") for i in range(120)]
        orchestrator = RenameOrchestrator(StaticNamingManager())

        assert run(orchestrator, nodes) is True
        assert orchestrator.last_stats.batches == 3
        # One yield between consecutive batches, none after the last one
        assert sleeps == [0, 0]
        assert all(n.name == "renamed" for n in nodes)

    def test_single_batch_does_not_yield(self, monkeypatch):
        sleeps = []

        async def recording_sleep(delay, *args, **kwargs):
            sleeps.append(delay)

        monkeypatch.setattr(asyncio, "sleep", recording_sleep)
        run(RenameOrchestrator(StaticNamingManager()), [make_node(f"6:{i}", "Frame") for i in range(50)])
        assert sleeps == []

    def test_custom_batch_size(self):
        orchestrator = RenameOrchestrator(StaticNamingManager(), batch_size=2)
        run(orchestrator, [make_node(f"7:{i}", "Frame") for i in range(5)])
        assert orchestrator.last_stats.batches == 3

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            RenameOrchestrator(StaticNamingManager(), batch_size=0)


class TestWithBundledStrategies:
    def build_tree(self):
        return [
            make_node(
                "8:1",
                "Frame 12",
                layout_mode="HORIZONTAL",
                item_spacing=8,
                children=[
                    make_node("8:2", "Rectangle 3", "RECTANGLE", fills=[Paint("IMAGE")]),
                    make_node("8:3", "Union", "BOOLEAN_OPERATION", children=[], boolean_operation="UNION"),
                    make_node("8:4", "Price tag", "TEXT", auto_rename=False),
                    make_node("8:5", "Label", "TEXT", auto_rename=True),
                ],
            ),
            make_node("8:6", "Group 4", "GROUP", children=[make_node("8:7", "Star 1", "STAR")]),
        ]

    def test_full_tree(self):
        roots = self.build_tree()
        options = RenameOptions(show_spacing=True)

        assert run(RenameOrchestrator(), roots, options) is True

        names = {node.id: node.name for root in roots for node in root.walk()}
        assert names == {
            "8:1": "row-[8]",
            "8:2": "image",
            "8:3": "boolean-union",
            "8:4": "Price tag",
            "8:5": "text",
            "8:6": "group",
            "8:7": "Star 1",
        }

    def test_second_run_is_a_no_op(self):
        roots = self.build_tree()
        orchestrator = RenameOrchestrator()
        options = RenameOptions(show_spacing=True, use_pascal_case=False)

        assert run(orchestrator, roots, options) is True
        first = {node.id: node.name for root in roots for node in root.walk()}

        assert run(orchestrator, roots, options) is False
        assert {node.id: node.name for root in roots for node in root.walk()} == first
        assert orchestrator.last_stats.renamed == 0


def test_run_stats_summary(naming_manager):
    roots = [make_node("9:1", "Frame 1"), make_node("9:2", "Header"), make_node("9:3", "Frame 3", locked=True)]
    orchestrator = RenameOrchestrator(naming_manager)
    run(orchestrator, roots)

    stats = orchestrator.last_stats
    assert (stats.roots, stats.visited, stats.renamed, stats.skipped_count) == (3, 3, 1, 2)
    assert stats.finished_at is not None
    assert "renamed=1" in stats.summary()
    assert "custom_name=1, locked=1" in stats.summary()


def test_overlapping_runs_keep_separate_stats():
    orchestrator = RenameOrchestrator(RecordingNamingManager())
    first = [make_node(f"10:{i}", f"Frame {i}") for i in range(3)]
    second = [make_node(f"11:{i}", f"Frame {i}") for i in range(2)]
    options = RenameOptions()

    async def run_both():
        return await asyncio.gather(
            orchestrator.rename_selection(first, options),
            orchestrator.rename_selection(second, options),
        )

    assert asyncio.run(run_both()) == [True, True]
    stats = orchestrator.last_stats
    assert stats.visited == stats.roots
    assert stats.renamed == stats.roots
